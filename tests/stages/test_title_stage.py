from ingress_inventory.loader import parse_metadata
from ingress_inventory.stages.title import resolve_title


def test_mod_titles_abbreviate_rarity() -> None:
    for rarity, expected in [("VERY_RARE", "VR"), ("RARE", "R"), ("COMMON", "C")]:
        meta = parse_metadata({"modResource": {"resourceType": "HEATSINK", "rarity": rarity}})
        assert resolve_title("id", meta) == expected


def test_mod_title_passes_unknown_rarity_through() -> None:
    meta = parse_metadata({"modResource": {"resourceType": "TURRET", "rarity": "EPIC"}})
    assert resolve_title("id", meta) == "EPIC"
    meta = parse_metadata({"modResource": {"resourceType": "TURRET"}})
    assert resolve_title("id", meta) == ""


def test_key_uses_portal_title() -> None:
    meta = parse_metadata(
        {
            "resource": {"resourceType": "PORTAL_LINK_KEY"},
            "portalCoupler": {"portalTitle": "Old Mill"},
        }
    )
    assert resolve_title("id", meta) == "Old Mill"


def test_key_without_title_falls_through_to_resource_type() -> None:
    meta = parse_metadata(
        {"resource": {"resourceType": "PORTAL_LINK_KEY"}, "portalCoupler": {}}
    )
    assert resolve_title("id", meta) == "PORTAL_LINK_KEY"


def test_media_uses_short_description() -> None:
    meta = parse_metadata(
        {"resource": {"resourceType": "MEDIA"}, "storyItem": {"shortDescription": "Tessellation"}}
    )
    assert resolve_title("id", meta) == "Tessellation"


def test_level_titles() -> None:
    plain = parse_metadata({"resourceWithLevels": {"resourceType": "EMP_BURSTER", "level": 5}})
    other = parse_metadata({"resourceWithLevels": {"resourceType": "DRONE_X", "level": 2}})
    no_level = parse_metadata({"resourceWithLevels": {"resourceType": "EMITTER_A"}})
    assert resolve_title("id", plain) == "L5"
    assert resolve_title("id", other) == "DRONE_X L2"
    assert resolve_title("id", no_level) == "L"


def test_generic_resource_special_cases() -> None:
    flip = parse_metadata(
        {"resource": {"resourceType": "FLIP_CARD"}, "flipCard": {"flipCardType": "JARVIS"}}
    )
    hyper = parse_metadata({"resource": {"resourceType": "BOOSTED_POWER_CUBE"}})
    frack = parse_metadata(
        {
            "resource": {"resourceType": "PORTAL_POWERUP"},
            "timedPowerupResource": {"designation": "FRACK"},
        }
    )
    apex = parse_metadata(
        {
            "resource": {"resourceType": "PLAYER_POWERUP"},
            "playerPowerupResource": {"playerPowerupEnum": "APEX"},
        }
    )
    capsule = parse_metadata({"resource": {"resourceType": "KEY_CAPSULE"}})
    bare_powerup = parse_metadata({"resource": {"resourceType": "PORTAL_POWERUP"}})
    assert resolve_title("id", flip) == "JARVIS"
    assert resolve_title("id", hyper) == "Hyper"
    assert resolve_title("id", frack) == "FRACK"
    assert resolve_title("id", apex) == "APEX"
    assert resolve_title("id", capsule) == "KEY_CAPSULE"
    assert resolve_title("id", bare_powerup) == "PORTAL_POWERUP"


def test_falls_back_to_item_id() -> None:
    assert resolve_title("abc.6", parse_metadata({})) == "abc.6"
    assert resolve_title("abc.6", parse_metadata({"resource": {}})) == "abc.6"


def test_payload_kind_wins_over_level_record() -> None:
    meta = parse_metadata(
        {
            "resourceWithLevels": {"resourceType": "EMITTER_A", "level": 4},
            "portalCoupler": {"portalTitle": "Old Mill"},
        }
    )
    assert resolve_title("id", meta) == "Old Mill"


def test_media_without_description_falls_through() -> None:
    meta = parse_metadata({"resource": {"resourceType": "MEDIA"}, "storyItem": {}})
    assert resolve_title("id", meta) == "MEDIA"


def test_description_ignored_on_keys() -> None:
    meta = parse_metadata(
        {
            "resource": {"resourceType": "PORTAL_LINK_KEY"},
            "portalCoupler": {},
            "storyItem": {"shortDescription": "Tessellation"},
        }
    )
    assert resolve_title("id", meta) == "PORTAL_LINK_KEY"
