"""Resource sub-records.

An exported item describes *what* it is through one of three resource shapes:
a generic ``resource`` (capsules, cubes, powerups, keys...), a level-based
``resourceWithLevels`` (resonators, bursters, strikes, power cubes) or a
``modResource`` (portal mods, rated by rarity instead of level).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Resource:
    """Generic resource descriptor.

    Attributes:
        resource_type: Raw resource-type code, e.g. ``"KEY_CAPSULE"``.
        resource_rarity: Rarity code if the export provides one.
    """

    resource_type: Optional[str] = None
    resource_rarity: Optional[str] = None


@dataclass(frozen=True)
class ResourceWithLevels:
    """Level-based resource (L1..L8)."""

    resource_type: Optional[str] = None
    level: int = 0


@dataclass(frozen=True)
class ModResource:
    """Portal mod descriptor.

    Attributes:
        resource_type: Mod code, e.g. ``"HEATSINK"``.
        rarity: Rarity code (``COMMON``, ``RARE``, ``VERY_RARE``...).
        display_name: Human-readable mod name (used to spot Aegis / AXA shields).
    """

    resource_type: Optional[str] = None
    rarity: Optional[str] = None
    display_name: Optional[str] = None
