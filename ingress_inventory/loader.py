"""Inventory document loading.

Turns the text of an exported inventory file into typed
:class:`~ingress_inventory.item.InventoryItem` records. The export is either
``{"result": [[id, ts, meta], ...]}`` or a bare array of the same triples;
``meta`` is a JSON object whose populated keys select the metadata variant.

This is the only place that validates the document shape; the pipeline stages
assume they were handed well-formed items.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ingress_inventory.components import (
    Container,
    FlipCard,
    ModResource,
    PlayerPowerupResource,
    PortalCoupler,
    Resource,
    ResourceWithLevels,
    StackDescriptor,
    StoryItem,
    TimedPowerupResource,
)
from ingress_inventory.constants import MIN_PRINTABLE_CHAR, VALID_CONTROL_CHARS
from ingress_inventory.item import InventoryItem, Metadata
from ingress_inventory.types import RawRecord
from ingress_inventory.utils.time import to_timestamp

logger = logging.getLogger(__name__)


class InventoryFormatError(ValueError):
    """The document is not an inventory export."""


def clean_json_string(text: str) -> str:
    """Drop control characters JSON does not allow (all but tab, LF, CR)."""
    cleaned = "".join(
        ch
        for ch in text
        if ord(ch) >= MIN_PRINTABLE_CHAR or ord(ch) in VALID_CONTROL_CHARS
    )
    removed = len(text) - len(cleaned)
    if removed:
        logger.info("Cleaned JSON: removed %d invalid control characters", removed)
    return cleaned


def parse_document(text: str) -> Any:
    """Clean and decode an exported document.

    Raises:
        InventoryFormatError: If the cleaned text is not valid JSON.
    """
    try:
        return json.loads(clean_json_string(text))
    except json.JSONDecodeError as exc:
        raise InventoryFormatError(f"Invalid JSON file: {exc}") from exc


def validate_document(data: Any) -> None:
    """Check the top-level shape of a decoded document.

    Raises:
        InventoryFormatError: If ``data`` is empty or neither an array nor an
            object carrying a ``result`` key.
    """
    if data is None or (not data and not isinstance(data, (list, Mapping))):
        raise InventoryFormatError("No data provided")
    if isinstance(data, list):
        return
    if isinstance(data, Mapping) and isinstance(data.get("result"), list):
        return
    raise InventoryFormatError(
        'Invalid inventory file format. Expected JSON with "result" array.'
    )


def document_records(data: Any) -> List[RawRecord]:
    """Return the item triples of a validated document."""
    if isinstance(data, Mapping) and isinstance(data.get("result"), list):
        return data["result"]
    if isinstance(data, list):
        return data
    raise InventoryFormatError("Inventory document has no item list")


def _sub(meta: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = meta.get(key)
    return value if isinstance(value, Mapping) else None


def _level(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _parse_descriptor(raw: Mapping[str, Any]) -> StackDescriptor:
    guids = raw.get("itemGuids")
    template = raw.get("exampleGameEntity")
    return StackDescriptor(
        item_guids=pvector(str(g) for g in guids) if isinstance(guids, list) else None,
        template=parse_item(template) if template else None,
    )


def _parse_container(raw: Mapping[str, Any]) -> Optional[Container]:
    stackable = raw.get("stackableItems")
    if not isinstance(stackable, list):
        return None
    return Container(
        stackable_items=pvector(
            _parse_descriptor(d) for d in stackable if isinstance(d, Mapping)
        ),
    )


def parse_metadata(meta: Optional[Mapping[str, Any]]) -> Metadata:
    """Build a :class:`Metadata` from an exported metadata object.

    Unknown keys are ignored; absent sub-records stay ``None``.
    """
    meta = meta or {}
    resource = _sub(meta, "resource")
    leveled = _sub(meta, "resourceWithLevels")
    mod = _sub(meta, "modResource")
    coupler = _sub(meta, "portalCoupler")
    story = _sub(meta, "storyItem")
    timed = _sub(meta, "timedPowerupResource")
    player = _sub(meta, "playerPowerupResource")
    flip = _sub(meta, "flipCard")
    container = _sub(meta, "container")
    return Metadata(
        resource=(
            Resource(
                resource_type=resource.get("resourceType"),
                resource_rarity=resource.get("resourceRarity"),
            )
            if resource is not None
            else None
        ),
        resource_with_levels=(
            ResourceWithLevels(
                resource_type=leveled.get("resourceType"),
                level=_level(leveled.get("level")),
            )
            if leveled is not None
            else None
        ),
        mod_resource=(
            ModResource(
                resource_type=mod.get("resourceType"),
                rarity=mod.get("rarity"),
                display_name=mod.get("displayName"),
            )
            if mod is not None
            else None
        ),
        portal_coupler=(
            PortalCoupler(
                portal_guid=coupler.get("portalGuid"),
                portal_location=coupler.get("portalLocation"),
                portal_title=coupler.get("portalTitle"),
                portal_address=coupler.get("portalAddress"),
            )
            if coupler is not None
            else None
        ),
        story_item=(
            StoryItem(
                short_description=story.get("shortDescription"),
            )
            if story is not None
            else None
        ),
        timed_powerup=(
            TimedPowerupResource(
                designation=timed.get("designation"),
            )
            if timed is not None
            else None
        ),
        player_powerup=(
            PlayerPowerupResource(player_powerup_enum=player.get("playerPowerupEnum"))
            if player is not None
            else None
        ),
        flip_card=(
            FlipCard(flip_card_type=flip.get("flipCardType"))
            if flip is not None
            else None
        ),
        container=_parse_container(container) if container is not None else None,
    )


def parse_item(record: RawRecord) -> InventoryItem:
    """Build an :class:`InventoryItem` from an ``[id, ts, meta]`` triple.

    Raises:
        InventoryFormatError: If ``record`` is not a three-element array.
    """
    if not isinstance(record, (list, tuple)) or len(record) < 3:
        raise InventoryFormatError(f"Expected [id, timestamp, metadata], got {record!r}")
    item_id, timestamp, meta = record[0], record[1], record[2]
    return InventoryItem(
        id=str(item_id),
        acquired_at=to_timestamp(timestamp),
        metadata=parse_metadata(meta if isinstance(meta, Mapping) else None),
    )


def load_items(data: Any) -> PVector[InventoryItem]:
    """Validate a decoded document and parse all of its top-level items."""
    validate_document(data)
    items = pvector(parse_item(record) for record in document_records(data))
    logger.info("Loaded %d inventory items", len(items))
    return items
