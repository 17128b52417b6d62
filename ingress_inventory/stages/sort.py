"""Per-category ordering of groups.

Every category has its own ordering rule; Keys additionally offer four
user-selectable modes, each with its own direction. All orderings end in the
same fallback (title, then group key string, ascending) so that groups equal
under the primary rule always come out in the same order.

Sorting is done in two stable passes: first by the fallback, then by the
primary key. Python's ``sorted`` keeps equal elements in their incoming order
even with ``reverse=True``, so a descending primary still leaves ties in
ascending fallback order.
"""

import math
from typing import Any, Callable, Iterable, List, Optional

from ingress_inventory.config import KeySortConfig, Location
from ingress_inventory.constants import MOD_ORDER, UNRANKED, WEAPON_ORDER
from ingress_inventory.types import (
    DisplayCategory,
    GroupEntry,
    KeySortMode,
    SortDirection,
)
from ingress_inventory.utils.collate import collation_key
from ingress_inventory.utils.geo import distance_km
from ingress_inventory.utils.rarity import rarity_rank

SortKey = Callable[[GroupEntry], Any]


def _title(entry: GroupEntry) -> Any:
    return collation_key(entry[1].meta.title)


def _fallback(entry: GroupEntry) -> Any:
    return (_title(entry), entry[0])


def _ordered(
    entries: Iterable[GroupEntry], primary: SortKey, descending: bool = False
) -> List[GroupEntry]:
    by_fallback = sorted(entries, key=_fallback)
    return sorted(by_fallback, key=primary, reverse=descending)


def latest_timestamp(entry: GroupEntry) -> int:
    """Most recent acquisition time among a group's items (0 if none)."""
    return max((item.acquired_at for item in entry[1].items), default=0)


def key_distance_km(entry: GroupEntry, location: Location) -> float:
    """Distance to the portal of a key group's first item; ``inf`` if unknown."""
    items = entry[1].items
    coupler = items[0].metadata.portal_coupler if items else None
    if coupler is None or not coupler.portal_location:
        return math.inf
    return distance_km(location, coupler.portal_location)


def sort_keys(
    entries: Iterable[GroupEntry],
    key_sort: KeySortConfig,
    location: Optional[Location] = None,
) -> List[GroupEntry]:
    """Order key groups by the active :class:`KeySortMode`.

    ``DISTANCE`` needs a ``location``; without one the alphabetical order is
    used. Keys whose portal location is unknown are infinitely far, which puts
    them last when ascending and first when descending.
    """
    mode = key_sort.mode
    if mode == KeySortMode.DISTANCE and location is None:
        mode = KeySortMode.ALPHA
    descending = key_sort.direction(mode) == SortDirection.DESC

    if mode == KeySortMode.COUNT:
        return _ordered(entries, lambda e: e[1].count, descending)
    if mode == KeySortMode.TIME:
        return _ordered(entries, latest_timestamp, descending)
    if mode == KeySortMode.DISTANCE and location is not None:
        return _ordered(entries, lambda e: key_distance_km(e, location), descending)
    return _ordered(entries, _title, descending)


def _weapon_key(entry: GroupEntry) -> Any:
    meta = entry[1].meta
    return (WEAPON_ORDER.get(meta.weapon_type, UNRANKED), -meta.level, _title(entry))


def _resonator_key(entry: GroupEntry) -> Any:
    return -entry[1].meta.level


def _cube_key(entry: GroupEntry) -> Any:
    meta = entry[1].meta
    return (collation_key(meta.cube_type), -meta.level)


def _mod_key(entry: GroupEntry) -> Any:
    meta = entry[1].meta
    return (
        MOD_ORDER.get(meta.mod_type, UNRANKED),
        -rarity_rank(meta.rarity),
        collation_key(meta.mod_type),
        _title(entry),
    )


def _powerup_key(entry: GroupEntry) -> Any:
    return (-entry[1].count, _title(entry))


_CATEGORY_KEYS = {
    DisplayCategory.WEAPONS: _weapon_key,
    DisplayCategory.RESONATORS: _resonator_key,
    DisplayCategory.CUBES: _cube_key,
    DisplayCategory.MODS: _mod_key,
    DisplayCategory.POWERUPS: _powerup_key,
}


def sort_groups(
    entries: Iterable[GroupEntry],
    category: str,
    key_sort: Optional[KeySortConfig] = None,
    location: Optional[Location] = None,
) -> List[GroupEntry]:
    """Return ``(group_key, bucket)`` pairs of one category in display order.

    Args:
        entries: Groups of a single display category.
        category: That category's name.
        key_sort: Keys ordering; defaults to alphabetical ascending.
        location: Reference point for distance ordering of keys.

    Returns:
        List[GroupEntry]: A new list; ``entries`` is left untouched.
    """
    if category == DisplayCategory.KEYS:
        return sort_keys(entries, key_sort or KeySortConfig(), location)
    return _ordered(entries, _CATEGORY_KEYS.get(category, _title))
