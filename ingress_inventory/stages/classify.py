"""Resource type to display category mapping."""

from typing import Optional

from ingress_inventory.constants import (
    CAPSULE_TYPES,
    CUBE_TYPES,
    MOD_TYPES,
    POWERUP_TYPES,
    UNKNOWN_CATEGORY,
    WEAPON_TYPES,
)
from ingress_inventory.types import DisplayCategory, ResourceType


def classify(raw_type: Optional[str]) -> str:
    """Return the display category of a raw resource type.

    Exact codes are checked first, then the type sets in a fixed order
    (capsules, mods, weapons, cubes). Anything else is its own category, so
    the mapping is total: unknown codes such as ``DRONE`` pass through
    unchanged (the empty string included) and a missing type maps to
    ``"Unknown"``.
    """
    if raw_type is None:
        return UNKNOWN_CATEGORY

    if raw_type == ResourceType.EMITTER_A:
        return DisplayCategory.RESONATORS
    if raw_type == ResourceType.PORTAL_LINK_KEY:
        return DisplayCategory.KEYS
    if raw_type == ResourceType.MEDIA:
        return DisplayCategory.MEDIA
    if raw_type in POWERUP_TYPES:
        return DisplayCategory.POWERUPS

    if raw_type in CAPSULE_TYPES:
        return DisplayCategory.CAPSULES
    if raw_type in MOD_TYPES:
        return DisplayCategory.MODS
    if raw_type in WEAPON_TYPES:
        return DisplayCategory.WEAPONS
    if raw_type in CUBE_TYPES:
        return DisplayCategory.CUBES

    return raw_type
