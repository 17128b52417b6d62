"""Container expansion.

Capsules and key lockers list their contents as stack descriptors rather than
as top-level items. :func:`expand_containers` flattens that one level of
nesting into synthesized items tagged with a
:class:`~ingress_inventory.components.Provenance`, so the later stages can
count and group capsule contents like any other item.

Three descriptor encodings are reconciled:

* GUID list **and** template: one item per GUID, cloned from the template.
* Template only: the template entity itself.
* GUID list only: each GUID is looked up among the top-level items; GUIDs
  that do not resolve are skipped.

Expansion is single level. Synthesized items are not scanned again and have
their own ``container`` sub-record removed, so expanding them a second time
adds nothing.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterator, List, Mapping, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ingress_inventory.components import Provenance, StackDescriptor
from ingress_inventory.constants import FALLBACK_CONTAINER_TYPE
from ingress_inventory.item import InventoryItem
from ingress_inventory.types import ItemID

logger = logging.getLogger(__name__)


def container_type_of(container: InventoryItem) -> str:
    """Resource type recorded as provenance for a container's contents."""
    resource = container.metadata.resource
    return (resource.resource_type if resource else None) or FALLBACK_CONTAINER_TYPE


def synthesize(
    item_id: ItemID, source: InventoryItem, provenance: Provenance
) -> InventoryItem:
    """Clone ``source`` under ``item_id``, tagged with ``provenance``.

    Any provenance the source already carried is replaced.
    """
    return replace(
        source,
        id=item_id,
        metadata=replace(source.metadata, container=None),
        provenance=provenance,
    )


def unpack_descriptor(
    descriptor: StackDescriptor,
    by_id: Mapping[ItemID, InventoryItem],
    provenance: Provenance,
) -> Iterator[InventoryItem]:
    """Yield the items one stack descriptor stands for."""
    template = descriptor.template
    guids = descriptor.item_guids
    if guids is not None and template is not None:
        for guid in guids:
            yield synthesize(guid, template, provenance)
    elif template is not None:
        yield synthesize(template.id, template, provenance)
    elif guids is not None:
        for guid in guids:
            referenced = by_id.get(guid)
            if referenced is None:
                logger.debug(
                    "Skipping unresolved GUID %s in container %s",
                    guid,
                    provenance.container_id,
                )
                continue
            yield synthesize(referenced.id, referenced, provenance)


def expand_containers(items: Sequence[InventoryItem]) -> PVector[InventoryItem]:
    """Return ``items`` followed by the contents of every container among them.

    Args:
        items: Top-level items in export order.

    Returns:
        PVector[InventoryItem]: All original items in their original order,
        then synthesized items in the order their containers and stack
        descriptors are encountered. Never shorter than ``items``.
    """
    # Later duplicates win in the lookup only; every original is still emitted.
    by_id: Dict[ItemID, InventoryItem] = {item.id: item for item in items}
    synthesized: List[InventoryItem] = []

    for item in items:
        container = item.metadata.container
        if container is None:
            continue
        provenance = Provenance(
            container_id=item.id, container_type=container_type_of(item)
        )
        before = len(synthesized)
        for descriptor in container.stackable_items:
            synthesized.extend(unpack_descriptor(descriptor, by_id, provenance))
        logger.debug(
            "Container %s (%s) expanded to %d items",
            item.id,
            provenance.container_type,
            len(synthesized) - before,
        )

    return pvector(list(items) + synthesized)
