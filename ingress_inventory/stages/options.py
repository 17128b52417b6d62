"""Filter choices offered to the user."""

from dataclasses import dataclass
from typing import Iterable, Set

from pyrsistent import PSet, pset

from ingress_inventory.item import InventoryItem
from ingress_inventory.stages.classify import classify
from ingress_inventory.stages.filter import is_drone
from ingress_inventory.utils.variant import resolved_resource


@dataclass(frozen=True)
class FilterOptions:
    """Display categories and rarities present in an inventory."""

    categories: PSet[str]
    rarities: PSet[str]


def filter_options(items: Iterable[InventoryItem]) -> FilterOptions:
    """Scan expanded (unfiltered) items for available categories and rarities.

    Drones contribute nothing.
    """
    categories: Set[str] = set()
    rarities: Set[str] = set()
    for item in items:
        if is_drone(item):
            continue
        metadata = item.metadata
        resource = resolved_resource(metadata)
        if resource is not None and resource.resource_type:
            categories.add(classify(resource.resource_type))
        rarity = getattr(resource, "resource_rarity", None)
        if rarity:
            rarities.add(rarity)
        if metadata.mod_resource is not None and metadata.mod_resource.rarity:
            rarities.add(metadata.mod_resource.rarity)
    return FilterOptions(categories=pset(categories), rarities=pset(rarities))
