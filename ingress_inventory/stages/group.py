"""Grouping of visually identical items.

Items are bucketed first by display category, then by group key. A group key
is the item's title, extended with the raw resource type for Weapons, Cubes
and Mods where different types share titles (every mod rarity is titled
``VR``/``R``/``C``; every level item ``L1``..``L8``).

Each bucket records a :class:`GroupMeta` snapshot taken from the *first* item
inserted. Later members are appended without touching it, so when members
disagree (e.g. a later item carries a level the first lacked) the snapshot
still reflects the first arrival.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ingress_inventory.constants import TYPED_GROUP_CATEGORIES
from ingress_inventory.item import InventoryItem
from ingress_inventory.stages.classify import classify
from ingress_inventory.stages.title import resolve_title
from ingress_inventory.types import (
    DisplayCategory,
    GroupKey,
    MetadataKind,
    TypeBucketMap,
)
from ingress_inventory.utils.variant import raw_resource_type


@dataclass(frozen=True)
class GroupMeta:
    """Sort-relevant attributes of a group, captured at first insertion.

    Attributes:
        display_category: Section the group belongs to.
        title: Shared title of the group's items.
        level: Level for Weapons, Cubes and Resonators (0 otherwise).
        weapon_type: Raw type for Weapons.
        cube_type: Raw type for Cubes.
        mod_type: Raw type for Mods.
        rarity: Mod rarity for Mods.
    """

    display_category: str
    title: str
    level: int = 0
    weapon_type: str = ""
    cube_type: str = ""
    mod_type: str = ""
    rarity: str = ""


@dataclass(frozen=True)
class GroupBucket:
    """Items sharing a group key, in insertion order."""

    items: PVector[InventoryItem]
    meta: GroupMeta

    @property
    def count(self) -> int:
        return len(self.items)

    def append(self, item: InventoryItem) -> "GroupBucket":
        return replace(self, items=self.items.append(item))


def group_key(title: str, raw_type: Optional[str], category: str) -> GroupKey:
    """Return ``title``, or ``title|raw_type`` for type-disambiguated categories."""
    if category in TYPED_GROUP_CATEGORIES:
        return f"{title}|{raw_type}"
    return title


def snapshot_meta(
    item: InventoryItem, category: str, title: str, raw_type: Optional[str]
) -> GroupMeta:
    """Capture the :class:`GroupMeta` of a group from its first item."""
    metadata = item.metadata
    kind = metadata.kind
    leveled = metadata.resource_with_levels
    level = (leveled.level if leveled else 0) or 0
    if category == DisplayCategory.WEAPONS:
        return GroupMeta(category, title, level=level, weapon_type=raw_type or "")
    if category == DisplayCategory.CUBES:
        return GroupMeta(category, title, level=level, cube_type=raw_type or "")
    if category == DisplayCategory.RESONATORS:
        return GroupMeta(category, title, level=level)
    if category == DisplayCategory.MODS:
        mod = metadata.mod_resource
        rarity = mod.rarity if kind == MetadataKind.MOD_RESOURCE and mod else None
        return GroupMeta(category, title, mod_type=raw_type or "", rarity=rarity or "")
    return GroupMeta(category, title)


def group_items(items: Iterable[InventoryItem]) -> TypeBucketMap:
    """Bucket filtered items by display category and group key.

    Returns:
        TypeBucketMap: ``category -> {group_key: GroupBucket}``. Both levels
        keep first-seen order. The mapping is built fresh on every call and
        belongs to the caller.
    """
    buckets: TypeBucketMap = {}
    for item in items:
        raw_type = raw_resource_type(item.metadata)
        category = classify(raw_type)
        title = resolve_title(item.id, item.metadata)
        key = group_key(title, raw_type, category)

        grouped: Dict[GroupKey, GroupBucket] = buckets.setdefault(category, {})
        bucket = grouped.get(key)
        if bucket is None:
            bucket = GroupBucket(
                items=pvector(),
                meta=snapshot_meta(item, category, title, raw_type),
            )
        grouped[key] = bucket.append(item)
    return buckets
