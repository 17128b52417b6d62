"""View model handed to the renderer.

Turns sorted groups into display sections and cards: picks a representative
item per group, applies the hide-capsuled and key search filters, and formats
the informational lines shown on key cards. Nothing here draws anything; the
streamlit app (``app/main.py``) only lays out what :func:`build_sections`
returns.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ingress_inventory.constants import (
    CAPSULE_TYPES,
    COMPACT_CATEGORIES,
    DIAMOND_AEGIS_AXA,
    DIAMONDS_BY_RARITY,
    HIDDEN_FILTER_RARITIES,
    SECTION_ORDER,
)
from ingress_inventory.item import InventoryItem
from ingress_inventory.session import Session, build_buckets
from ingress_inventory.stages.group import GroupBucket
from ingress_inventory.stages.sort import latest_timestamp, sort_groups
from ingress_inventory.types import DisplayCategory, GroupKey, ResourceType
from ingress_inventory.utils.collate import collation_key
from ingress_inventory.utils.geo import decode_location, haversine_km, km_to_miles
from ingress_inventory.utils.time import format_local_ts

OVERLAY_CATEGORIES = frozenset(
    {DisplayCategory.RESONATORS, DisplayCategory.WEAPONS, DisplayCategory.CUBES}
)


@dataclass(frozen=True)
class Diamonds:
    """Rarity strip drawn on mod cards."""

    count: int
    color: str


@dataclass(frozen=True)
class Card:
    """One rendered group.

    Attributes:
        group_key: Key of the group in its section.
        title: Group title.
        category: Display category.
        count: Number of items in the group.
        representative: Item whose artwork and metadata represent the group.
        capsuled: Whether the representative came out of a container.
        compact: Thumbnail-only card (no metadata block).
        label: Text overlaid on the thumbnail, if any.
        diamonds: Mod rarity strip, if any.
        info: Metadata lines for full-size cards.
    """

    group_key: GroupKey
    title: str
    category: str
    count: int
    representative: InventoryItem
    capsuled: bool
    compact: bool
    label: Optional[str] = None
    diamonds: Optional[Diamonds] = None
    info: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Section:
    category: str
    total: int
    cards: Tuple[Card, ...]


def is_capsuled(item: InventoryItem) -> bool:
    """Whether ``item`` was extracted from a capsule-type container."""
    return item.provenance is not None and (
        item.provenance.container_type in CAPSULE_TYPES
    )


def representative_item(bucket: GroupBucket, hide_capsuled: bool) -> InventoryItem:
    """Most recently acquired item, preferring loose items when hiding capsuled."""
    candidates = list(bucket.items)
    if hide_capsuled:
        loose = [item for item in candidates if not is_capsuled(item)]
        candidates = loose or candidates
    return max(candidates, key=lambda item: item.acquired_at)


def group_visible(bucket: GroupBucket, hide_capsuled: bool) -> bool:
    return not hide_capsuled or any(not is_capsuled(item) for item in bucket.items)


def mod_diamonds(item: InventoryItem) -> Optional[Diamonds]:
    """Diamond strip for a mod: 4 for Aegis/AXA shields, else by rarity."""
    mod = item.metadata.mod_resource
    if mod is None:
        return None
    name = (mod.display_name or "").lower()
    if mod.resource_type == ResourceType.EXTRA_SHIELD and (
        "aegis" in name or "axa" in name
    ):
        return Diamonds(*DIAMOND_AEGIS_AXA)
    config = DIAMONDS_BY_RARITY.get(mod.rarity or "")
    return Diamonds(*config) if config else None


def key_info(
    entry: Tuple[GroupKey, GroupBucket],
    representative: InventoryItem,
    session: Session,
) -> Tuple[str, ...]:
    """Informational lines of a full-size card."""
    _, bucket = entry
    coupler = representative.metadata.portal_coupler
    lines: List[str] = []
    if coupler is not None and coupler.portal_address:
        lines.append(coupler.portal_address)
    if bucket.meta.display_category != DisplayCategory.KEYS:
        return tuple(lines)

    last = latest_timestamp(entry)
    if last > 0:
        formatted = format_local_ts(last)
        if formatted:
            lines.append(f"Last Acquired: {formatted}")

    if session.location is not None and coupler is not None:
        location = decode_location(coupler.portal_location)
        if location is not None:
            km = haversine_km(
                session.location.lat, session.location.lon, location.lat, location.lon
            )
            lines.append(f"Distance: {km:.2f}km / {km_to_miles(km):.2f} miles")
    return tuple(lines)


def build_card(entry: Tuple[GroupKey, GroupBucket], session: Session) -> Card:
    key, bucket = entry
    category = bucket.meta.display_category
    title = bucket.meta.title
    representative = representative_item(bucket, session.filters.hide_capsuled)
    compact = category in COMPACT_CATEGORIES

    label: Optional[str] = None
    if category in OVERLAY_CATEGORIES:
        label = title[1:] if title.startswith("L") else title
    elif category == DisplayCategory.MEDIA:
        label = title

    return Card(
        group_key=key,
        title=title,
        category=category,
        count=bucket.count,
        representative=representative,
        capsuled=representative.provenance is not None,
        compact=compact,
        label=label,
        diamonds=mod_diamonds(representative) if category == DisplayCategory.MODS else None,
        info=() if compact else key_info(entry, representative, session),
    )


def matches_search(card: Card, query: str) -> bool:
    """Case-insensitive substring match against the card's visible text."""
    if not query:
        return True
    text = " ".join((card.title, *card.info)).lower()
    return query.lower() in text


def section_order(categories: Iterable[str]) -> List[str]:
    """Preferred sections first, then any other categories alphabetically."""
    present = set(categories)
    extras = sorted(present.difference(SECTION_ORDER), key=collation_key)
    return [c for c in SECTION_ORDER if c in present] + extras


def build_sections(session: Session) -> List[Section]:
    """Filter, group, sort and lay out the session's inventory.

    Sections with no displayable card are omitted. A section's total counts
    every item of the category, including groups hidden as capsuled.
    """
    buckets = build_buckets(session)
    hide = session.filters.hide_capsuled
    sections: List[Section] = []
    for category in section_order(buckets):
        entries = sort_groups(
            buckets[category].items(), category, session.key_sort, session.location
        )
        total = sum(bucket.count for _, bucket in entries)
        cards: List[Card] = []
        for entry in entries:
            if not group_visible(entry[1], hide):
                continue
            card = build_card(entry, session)
            if category == DisplayCategory.KEYS and not matches_search(
                card, session.key_search
            ):
                continue
            cards.append(card)
        if cards:
            sections.append(Section(category=category, total=total, cards=tuple(cards)))
    return sections


def rarity_choices(rarities: Iterable[str]) -> List[str]:
    """Rarities offered in the filter, sorted, without ``VERY_COMMON``."""
    return sorted(r for r in rarities if r not in HIDDEN_FILTER_RARITIES)
