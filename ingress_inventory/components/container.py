"""Container (capsule) components.

A container lists its contents as *stack descriptors*. Each descriptor uses
one of three encodings: a GUID list plus a template entity (many identical
items, e.g. keys in a key locker), a template entity alone (one embedded
item), or a GUID list alone (references to items present in the main list).
See :func:`ingress_inventory.stages.expand.expand_containers`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ingress_inventory.types import ItemID

if TYPE_CHECKING:
    from ingress_inventory.item import InventoryItem


@dataclass(frozen=True)
class StackDescriptor:
    """One entry of a container's contents.

    Attributes:
        item_guids: GUID list, or ``None`` when the export omits it. An empty
            list is still a present list.
        template: Example entity the contents are cloned from, if any.
    """

    item_guids: Optional[PVector[ItemID]] = None
    template: Optional[InventoryItem] = None


@dataclass(frozen=True)
class Container:
    stackable_items: PVector[StackDescriptor] = pvector()
