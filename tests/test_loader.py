import json

import pytest

from ingress_inventory.loader import (
    InventoryFormatError,
    clean_json_string,
    document_records,
    load_items,
    parse_document,
    parse_item,
    parse_metadata,
    validate_document,
)
from ingress_inventory.types import MetadataKind
from tests.test_utils import raw_container, raw_key, raw_leveled


def test_clean_json_string_keeps_whitespace_controls() -> None:
    assert clean_json_string('{"a":\x00 "b\x07"}\n\t\r') == '{"a": "b"}\n\t\r'


def test_parse_document_tolerates_stray_control_characters() -> None:
    text = json.dumps({"result": [raw_leveled("r", "EMITTER_A", 1)]})
    assert parse_document(text[:5] + "\x01" + text[5:]) == json.loads(text)


def test_parse_document_rejects_invalid_json() -> None:
    with pytest.raises(InventoryFormatError):
        parse_document("{not json")
    with pytest.raises(ValueError):
        parse_document("")


@pytest.mark.parametrize("data", [{"result": []}, {"result": [["a", 1, {}]]}, [], [["a", 1, {}]]])
def test_validate_accepts_both_shapes(data: object) -> None:
    validate_document(data)


@pytest.mark.parametrize("data", [None, 0, "", {"items": []}, {"result": "x"}, 42])
def test_validate_rejects_other_shapes(data: object) -> None:
    with pytest.raises(InventoryFormatError):
        validate_document(data)


def test_document_records() -> None:
    record = raw_leveled("r", "EMITTER_A", 1)
    assert document_records({"result": [record]}) == [record]
    assert document_records([record]) == [record]


def test_parse_item_rejects_non_triples() -> None:
    with pytest.raises(InventoryFormatError):
        parse_item({"id": "x"})
    with pytest.raises(InventoryFormatError):
        parse_item(["x", 1])


def test_parse_item_coerces_fields() -> None:
    item = parse_item(["abc", "1700000000000", None])
    assert item.id == "abc"
    assert item.acquired_at == 1700000000000
    assert item.metadata.kind == MetadataKind.UNKNOWN
    assert item.provenance is None


def test_parse_metadata_variants() -> None:
    key = parse_item(raw_key("k", "Fountain", location="0,0", address="1 Main St"))
    coupler = key.metadata.portal_coupler
    assert key.metadata.kind == MetadataKind.PORTAL_COUPLER
    assert coupler is not None
    assert (coupler.portal_title, coupler.portal_address) == ("Fountain", "1 Main St")
    assert key.metadata.resource is not None
    assert key.metadata.resource.resource_rarity == "VERY_COMMON"

    leveled = parse_metadata({"resourceWithLevels": {"resourceType": "EMITTER_A", "level": "7"}})
    assert leveled.kind == MetadataKind.LEVELED_RESOURCE
    assert leveled.resource_with_levels.level == 7

    mod = parse_metadata(
        {"modResource": {"resourceType": "HEATSINK", "rarity": "RARE", "displayName": "Heat Sink"}}
    )
    assert mod.kind == MetadataKind.MOD_RESOURCE
    assert mod.mod_resource.display_name == "Heat Sink"


@pytest.mark.parametrize("stats", ["fast", 12, ["HACK_SPEED"], None])
def test_parse_metadata_ignores_malformed_mod_stats(stats: object) -> None:
    meta = parse_metadata({"modResource": {"resourceType": "HEATSINK", "rarity": "RARE", "stats": stats}})
    assert meta.mod_resource is not None
    assert meta.mod_resource.rarity == "RARE"


def test_parse_item_ignores_extra_exported_fields() -> None:
    parsed = parse_item(
        [
            "s",
            "1000",
            {
                "resource": {"resourceType": "MEDIA", "resourceRarity": "VERY_RARE"},
                "storyItem": {"shortDescription": "Tessellation", "primaryUrl": 7, "mediaId": {}},
                "container": {"stackableItems": [], "currentCount": "lots"},
            },
        ]
    )
    assert parsed.metadata.story_item is not None
    assert parsed.metadata.story_item.short_description == "Tessellation"
    assert parsed.metadata.container is not None
    assert len(parsed.metadata.container.stackable_items) == 0


def test_parse_container_descriptors() -> None:
    template = raw_key("t", "Fountain")
    raw = raw_container(
        "locker",
        "KEY_CAPSULE",
        [
            {"itemGuids": ["a", "b"], "exampleGameEntity": template},
            {"exampleGameEntity": raw_leveled("c", "POWER_CUBE", 8)},
            {"itemGuids": ["d"]},
        ],
    )
    container = parse_item(raw).metadata.container
    assert container is not None
    first, second, third = container.stackable_items
    assert list(first.item_guids) == ["a", "b"]
    assert first.template is not None and first.template.id == "t"
    assert second.item_guids is None and second.template.id == "c"
    assert list(third.item_guids) == ["d"] and third.template is None


def test_load_items_from_result_document() -> None:
    loaded = load_items({"result": [raw_leveled("r", "EMITTER_A", 1), raw_key("k", "Fountain")]})
    assert [i.id for i in loaded] == ["r", "k"]
