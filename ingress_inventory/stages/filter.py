"""Item filtering."""

from typing import Iterable

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ingress_inventory.config import FilterConfig
from ingress_inventory.item import InventoryItem
from ingress_inventory.types import ResourceType
from ingress_inventory.utils.variant import resolved_rarity, resolved_resource


def is_drone(item: InventoryItem) -> bool:
    resource = resolved_resource(item.metadata)
    return resource is not None and resource.resource_type == ResourceType.DRONE


def is_visible(item: InventoryItem, filters: FilterConfig) -> bool:
    """Return whether ``item`` survives ``filters``.

    Drones are always dropped. With a rarity filter active, items whose rarity
    differs (or is unknown) are dropped too.
    """
    if is_drone(item):
        return False
    if filters.rarity and resolved_rarity(item.metadata) != filters.rarity:
        return False
    return True


def filter_items(
    items: Iterable[InventoryItem], filters: FilterConfig
) -> PVector[InventoryItem]:
    return pvector(item for item in items if is_visible(item, filters))
