from ingress_inventory.config import FilterConfig
from ingress_inventory.stages.filter import filter_items, is_visible
from tests.test_utils import item, items, raw_leveled, raw_mod, raw_resource


def test_drones_are_always_hidden() -> None:
    drone = item(raw_resource("d", "DRONE", "VERY_RARE"))
    assert not is_visible(drone, FilterConfig())
    assert not is_visible(drone, FilterConfig(rarity="VERY_RARE"))


def test_no_filter_keeps_everything_else() -> None:
    inventory = items(
        raw_leveled("r", "EMITTER_A", 8),
        raw_mod("m", "HEATSINK", "RARE"),
        raw_resource("c", "CAPSULE", "RARE"),
    )
    assert list(filter_items(inventory, FilterConfig())) == inventory


def test_rarity_filter_matches_resource_and_mod_rarity() -> None:
    capsule = item(raw_resource("c", "CAPSULE", "RARE"))
    mod = item(raw_mod("m", "HEATSINK", "RARE"))
    other_mod = item(raw_mod("m2", "HEATSINK", "VERY_RARE"))
    resonator = item(raw_leveled("r", "EMITTER_A", 8))

    visible = filter_items([capsule, mod, other_mod, resonator], FilterConfig(rarity="RARE"))
    assert [i.id for i in visible] == ["c", "m"]


def test_hide_capsuled_is_not_applied_here() -> None:
    resonator = item(raw_leveled("r", "EMITTER_A", 8))
    assert is_visible(resonator, FilterConfig(hide_capsuled=True))
