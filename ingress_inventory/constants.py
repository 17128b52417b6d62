"""Lookup tables shared by the pipeline stages and the view layer."""

from typing import Dict, FrozenSet, List, Tuple

from ingress_inventory.types import DisplayCategory, Rarity, ResourceType


MOD_TYPES: FrozenSet[str] = frozenset(
    {
        "EXTRA_SHIELD",
        "RES_SHIELD",
        "HEATSINK",
        "LINK_AMPLIFIER",
        "MULTIHACK",
        "TRANSMUTER_ATTACK",
        "TURRET",
        "ULTRA_LINK_AMP",
        "FORCE_AMP",
    }
)

WEAPON_TYPES: FrozenSet[str] = frozenset({"EMP_BURSTER", "FLIP_CARD", "ULTRA_STRIKE"})

CUBE_TYPES: FrozenSet[str] = frozenset({"POWER_CUBE", "BOOSTED_POWER_CUBE"})

CAPSULE_TYPES: FrozenSet[str] = frozenset(
    {
        "CAPSULE",
        "KEY_CAPSULE",
        "KINETIC_CAPSULE",
        "QUANTUM_CAPSULE",
        "INTEREST_CAPSULE",
    }
)

POWERUP_TYPES: FrozenSet[str] = frozenset(
    {ResourceType.PORTAL_POWERUP, ResourceType.PLAYER_POWERUP}
)

# Level items whose title omits the resource type.
PLAIN_LEVEL_TYPES: FrozenSet[str] = frozenset(
    {
        ResourceType.EMITTER_A,
        ResourceType.POWER_CUBE,
        ResourceType.EMP_BURSTER,
        ResourceType.ULTRA_STRIKE,
    }
)

# Categories whose group key carries the raw type next to the title.
TYPED_GROUP_CATEGORIES: FrozenSet[str] = frozenset(
    {DisplayCategory.WEAPONS, DisplayCategory.CUBES, DisplayCategory.MODS}
)

UNKNOWN_CATEGORY = "Unknown"
FALLBACK_CONTAINER_TYPE = "CONTAINER"

RARITY_LABELS: Dict[str, str] = {
    Rarity.COMMON: "Common",
    Rarity.RARE: "Rare",
    Rarity.VERY_RARE: "Very Rare",
}

RARITY_ABBREVIATIONS: Dict[str, str] = {
    Rarity.VERY_RARE: "VR",
    Rarity.RARE: "R",
    Rarity.COMMON: "C",
}

RARITY_SORT_ORDER: Dict[str, int] = {
    Rarity.VERY_RARE: 3,
    Rarity.RARE: 2,
    Rarity.COMMON: 1,
}

# Rarities never offered as a filter choice.
HIDDEN_FILTER_RARITIES: FrozenSet[str] = frozenset({Rarity.VERY_COMMON})

UNRANKED = 9

WEAPON_ORDER: Dict[str, int] = {
    "EMP_BURSTER": 0,
    "ULTRA_STRIKE": 1,
    "FLIP_CARD": 2,
}

MOD_ORDER: Dict[str, int] = {
    "RES_SHIELD": 0,
    "EXTRA_SHIELD": 0,
    "HEATSINK": 1,
    "MULTIHACK": 2,
    "LINK_AMPLIFIER": 3,
    "TRANSMUTER_ATTACK": 4,
    "TRANSMUTER_DEFENSE": 4,
    "TURRET": 5,
    "FORCE_AMP": 6,
}

SECTION_ORDER: List[str] = [
    DisplayCategory.KEYS,
    DisplayCategory.CUBES,
    DisplayCategory.WEAPONS,
    DisplayCategory.RESONATORS,
    DisplayCategory.MODS,
    DisplayCategory.POWERUPS,
    DisplayCategory.CAPSULES,
    DisplayCategory.MEDIA,
]

# Categories rendered as compact thumbnails (no metadata block).
COMPACT_CATEGORIES: FrozenSet[str] = frozenset(
    {
        DisplayCategory.POWERUPS,
        DisplayCategory.CAPSULES,
        DisplayCategory.RESONATORS,
        DisplayCategory.WEAPONS,
        DisplayCategory.CUBES,
        DisplayCategory.MODS,
        DisplayCategory.MEDIA,
    }
)

# (count, color) diamond strips drawn on mod cards.
DIAMOND_AEGIS_AXA: Tuple[int, str] = (4, "pink")
DIAMONDS_BY_RARITY: Dict[str, Tuple[int, str]] = {
    Rarity.VERY_RARE: (3, "pink"),
    Rarity.RARE: (2, "purple"),
    Rarity.COMMON: (1, "teal"),
}

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES_FACTOR = 0.621371
LOCATION_E6_SCALE = 1e-6

# Valid JSON control characters: tab, newline, carriage return.
VALID_CONTROL_CHARS: FrozenSet[int] = frozenset({9, 10, 13})
MIN_PRINTABLE_CHAR = 32

SEARCH_DEBOUNCE_MS = 300
