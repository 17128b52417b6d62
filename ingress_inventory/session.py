"""Caller-owned viewer session and its reducers.

A :class:`Session` is an immutable snapshot of everything the viewer needs to
render: the expanded items of the loaded document plus the user's current
filter, sort, location and search choices. Reducers such as
:func:`with_key_sort` return a *new* session; the caller (e.g. the streamlit
app) decides where to keep it. Nothing here is process-wide state.

Typical flow::

    session = load_session(parse_document(text), source_name="inventory.json")
    session = with_filters(session, FilterConfig(rarity="VERY_RARE"))
    buckets = build_buckets(session)
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ingress_inventory.config import FilterConfig, KeySortConfig, Location
from ingress_inventory.item import InventoryItem
from ingress_inventory.loader import load_items
from ingress_inventory.stages.expand import expand_containers
from ingress_inventory.stages.filter import filter_items
from ingress_inventory.stages.group import group_items
from ingress_inventory.stages.options import FilterOptions, filter_options
from ingress_inventory.types import (
    KeySortMode,
    ResourceType,
    SortDirection,
    TypeBucketMap,
)
from ingress_inventory.utils.variant import raw_resource_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """Immutable viewer session.

    Attributes:
        expanded: Top-level items followed by container contents.
        total_count: Item count shown in the header (keys stored in key
            lockers are not counted twice).
        source_name: Name of the loaded file, if known.
        filters: Active item filters.
        key_sort: Keys section ordering.
        location: User location for key distances, if known.
        key_search: Lower-cased key search query.
    """

    expanded: PVector[InventoryItem] = pvector()
    total_count: int = 0
    source_name: Optional[str] = None
    filters: FilterConfig = field(default_factory=FilterConfig)
    key_sort: KeySortConfig = field(default_factory=KeySortConfig)
    location: Optional[Location] = None
    key_search: str = ""

    @property
    def loaded(self) -> bool:
        return self.source_name is not None or len(self.expanded) > 0


def _is_locker_key(item: InventoryItem) -> bool:
    provenance = item.provenance
    if provenance is None or provenance.container_type != ResourceType.KEY_CAPSULE:
        return False
    coupler = item.metadata.portal_coupler
    if coupler is None:
        return False
    return bool(coupler.portal_guid) or (
        raw_resource_type(item.metadata) == ResourceType.PORTAL_LINK_KEY
    )


def count_total(expanded: Iterable[InventoryItem]) -> int:
    """Count items, leaving out keys synthesized from a key locker.

    Contents of other containers are counted individually.
    """
    items = list(expanded)
    return len(items) - sum(1 for item in items if _is_locker_key(item))


def load_session(data: Any, source_name: Optional[str] = None) -> Session:
    """Build a fresh session from a decoded inventory document.

    Raises:
        InventoryFormatError: If ``data`` is not an inventory export.
    """
    items = load_items(data)
    expanded = expand_containers(items)
    logger.info(
        "Expanded %d items into %d (%d from containers)",
        len(items),
        len(expanded),
        len(expanded) - len(items),
    )
    return Session(
        expanded=expanded,
        total_count=count_total(expanded),
        source_name=source_name,
    )


def with_filters(session: Session, filters: FilterConfig) -> Session:
    return replace(session, filters=filters)


def with_key_sort(
    session: Session, mode: KeySortMode, direction: SortDirection
) -> Session:
    """Activate a key sort mode with the given direction.

    Raises:
        ValueError: If ``mode`` or ``direction`` is not a known value.
    """
    return replace(session, key_sort=session.key_sort.with_direction(mode, direction))


def with_location(session: Session, location: Optional[Location]) -> Session:
    return replace(session, location=location)


def with_key_search(session: Session, query: str) -> Session:
    return replace(session, key_search=(query or "").lower())


def clear_session(session: Session) -> Session:
    """Drop the loaded document and reset filters, sort and search.

    The user location is kept; it does not depend on the document.
    """
    return Session(location=session.location)


def build_buckets(session: Session) -> TypeBucketMap:
    """Filter and group the session's items."""
    return group_items(filter_items(session.expanded, session.filters))


def session_filter_options(session: Session) -> FilterOptions:
    return filter_options(session.expanded)
