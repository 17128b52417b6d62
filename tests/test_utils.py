"""Builders for raw export records and parsed items used across tests."""

from typing import Any, Dict, List, Optional

from ingress_inventory.item import InventoryItem
from ingress_inventory.loader import parse_item

RawItem = List[Any]


def raw_leveled(item_id: str, resource_type: str, level: int, ts: int = 1000) -> RawItem:
    return [
        item_id,
        str(ts),
        {"resourceWithLevels": {"resourceType": resource_type, "level": level}},
    ]


def raw_resource(
    item_id: str,
    resource_type: str,
    rarity: Optional[str] = None,
    ts: int = 1000,
    **extra: Dict[str, Any],
) -> RawItem:
    resource: Dict[str, Any] = {"resourceType": resource_type}
    if rarity is not None:
        resource["resourceRarity"] = rarity
    return [item_id, str(ts), {"resource": resource, **extra}]


def raw_mod(
    item_id: str,
    resource_type: str,
    rarity: str,
    ts: int = 1000,
    display_name: Optional[str] = None,
) -> RawItem:
    mod: Dict[str, Any] = {"resourceType": resource_type, "rarity": rarity}
    if display_name is not None:
        mod["displayName"] = display_name
    return [item_id, str(ts), {"modResource": mod}]


def raw_key(
    item_id: str,
    title: str,
    location: Optional[str] = None,
    ts: int = 1000,
    address: Optional[str] = None,
) -> RawItem:
    coupler: Dict[str, Any] = {"portalGuid": f"portal-{title}", "portalTitle": title}
    if location is not None:
        coupler["portalLocation"] = location
    if address is not None:
        coupler["portalAddress"] = address
    return [
        item_id,
        str(ts),
        {
            "resource": {
                "resourceType": "PORTAL_LINK_KEY",
                "resourceRarity": "VERY_COMMON",
            },
            "portalCoupler": coupler,
        },
    ]


def raw_container(
    item_id: str,
    container_type: Optional[str],
    stackable_items: List[Dict[str, Any]],
    ts: int = 1000,
) -> RawItem:
    meta: Dict[str, Any] = {"container": {"stackableItems": stackable_items}}
    if container_type is not None:
        meta["resource"] = {"resourceType": container_type, "resourceRarity": "RARE"}
    return [item_id, str(ts), meta]


def item(raw: RawItem) -> InventoryItem:
    return parse_item(raw)


def items(*raws: RawItem) -> List[InventoryItem]:
    return [parse_item(raw) for raw in raws]
