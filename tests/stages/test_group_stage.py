from ingress_inventory.stages.group import group_items, group_key
from tests.test_utils import items, raw_key, raw_leveled, raw_mod, raw_resource


def test_group_key_includes_type_for_weapons_cubes_mods() -> None:
    assert group_key("VR", "HEATSINK", "Mods") == "VR|HEATSINK"
    assert group_key("L8", "POWER_CUBE", "Cubes") == "L8|POWER_CUBE"
    assert group_key("L8", "EMITTER_A", "Resonators") == "L8"
    assert group_key("Old Mill", "PORTAL_LINK_KEY", "Keys") == "Old Mill"


def test_same_title_different_type_split_for_mods() -> None:
    buckets = group_items(
        items(
            raw_mod("a", "HEATSINK", "VERY_RARE"),
            raw_mod("b", "MULTIHACK", "VERY_RARE"),
            raw_mod("c", "HEATSINK", "VERY_RARE"),
        )
    )
    mods = buckets["Mods"]
    assert list(mods) == ["VR|HEATSINK", "VR|MULTIHACK"]
    assert mods["VR|HEATSINK"].count == 2


def test_same_title_different_type_merged_elsewhere() -> None:
    buckets = group_items(
        items(
            raw_resource(
                "a",
                "PORTAL_POWERUP",
                timedPowerupResource={"designation": "APEX"},
            ),
            raw_resource(
                "b",
                "PLAYER_POWERUP",
                playerPowerupResource={"playerPowerupEnum": "APEX"},
            ),
        )
    )
    assert list(buckets["Powerups"]) == ["APEX"]
    assert [i.id for i in buckets["Powerups"]["APEX"].items] == ["a", "b"]


def test_categories_and_groups_keep_first_seen_order() -> None:
    buckets = group_items(
        items(
            raw_key("k1", "Zeta"),
            raw_leveled("r1", "EMITTER_A", 8),
            raw_key("k2", "Alpha"),
            raw_key("k3", "Zeta"),
        )
    )
    assert list(buckets) == ["Keys", "Resonators"]
    assert list(buckets["Keys"]) == ["Zeta", "Alpha"]
    assert [i.id for i in buckets["Keys"]["Zeta"].items] == ["k1", "k3"]


def test_group_meta_snapshot_by_category() -> None:
    buckets = group_items(
        items(
            raw_leveled("w", "ULTRA_STRIKE", 4),
            raw_leveled("c", "POWER_CUBE", 6),
            raw_leveled("r", "EMITTER_A", 7),
            raw_mod("m", "TURRET", "RARE"),
        )
    )
    weapon = buckets["Weapons"]["L4|ULTRA_STRIKE"].meta
    cube = buckets["Cubes"]["L6|POWER_CUBE"].meta
    resonator = buckets["Resonators"]["L7"].meta
    mod = buckets["Mods"]["R|TURRET"].meta
    assert (weapon.weapon_type, weapon.level) == ("ULTRA_STRIKE", 4)
    assert (cube.cube_type, cube.level) == ("POWER_CUBE", 6)
    assert resonator.level == 7
    assert (mod.mod_type, mod.rarity, mod.level) == ("TURRET", "RARE", 0)


def _titled_resonator(item_id: str, level: int) -> list:
    return [
        item_id,
        "1000",
        {
            "resourceWithLevels": {"resourceType": "EMITTER_A", "level": level},
            "portalCoupler": {"portalTitle": "Shared"},
        },
    ]


def test_group_meta_is_first_write_wins() -> None:
    buckets = group_items(items(_titled_resonator("a", 3), _titled_resonator("b", 8)))
    bucket = buckets["Resonators"]["Shared"]
    assert bucket.count == 2
    assert bucket.meta.level == 3

    reversed_buckets = group_items(
        items(_titled_resonator("b", 8), _titled_resonator("a", 3))
    )
    assert reversed_buckets["Resonators"]["Shared"].meta.level == 8
