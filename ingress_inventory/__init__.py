"""Ingress inventory viewer pipeline.

Raw export → :func:`~ingress_inventory.stages.expand.expand_containers` →
:func:`~ingress_inventory.stages.filter.filter_items` →
:func:`~ingress_inventory.stages.group.group_items` →
:func:`~ingress_inventory.stages.sort.sort_groups`.

:mod:`ingress_inventory.session` wires the stages to a caller-owned session
and :mod:`ingress_inventory.view` turns the result into display sections.
"""
