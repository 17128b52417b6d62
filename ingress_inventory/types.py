"""Common type aliases and enumerations.

Raw resource-type codes arrive as plain strings from the export; the
enumerations below name the codes the pipeline treats specially. Because they
are ``StrEnum`` members they compare equal to the raw strings, so unknown
codes can flow through untouched as ``str``.
"""

from enum import StrEnum, auto
from typing import Any, Dict, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from ingress_inventory.stages.group import GroupBucket

ItemID = str
Timestamp = int
GroupKey = str

GroupEntry = Tuple[GroupKey, "GroupBucket"]
TypeBucketMap = Dict[str, Dict[GroupKey, "GroupBucket"]]

RawRecord = Any  # ``[id, timestamp, metadata]`` as decoded from JSON


class DisplayCategory(StrEnum):
    """User-facing inventory sections."""

    RESONATORS = "Resonators"
    KEYS = "Keys"
    MEDIA = "Media"
    POWERUPS = "Powerups"
    CAPSULES = "Capsules"
    MODS = "Mods"
    WEAPONS = "Weapons"
    CUBES = "Cubes"


class ResourceType(StrEnum):
    """Resource-type codes with dedicated handling."""

    EMITTER_A = "EMITTER_A"
    PORTAL_LINK_KEY = "PORTAL_LINK_KEY"
    MEDIA = "MEDIA"
    PORTAL_POWERUP = "PORTAL_POWERUP"
    PLAYER_POWERUP = "PLAYER_POWERUP"
    DRONE = "DRONE"
    FLIP_CARD = "FLIP_CARD"
    POWER_CUBE = "POWER_CUBE"
    BOOSTED_POWER_CUBE = "BOOSTED_POWER_CUBE"
    EMP_BURSTER = "EMP_BURSTER"
    ULTRA_STRIKE = "ULTRA_STRIKE"
    EXTRA_SHIELD = "EXTRA_SHIELD"
    CAPSULE = "CAPSULE"
    KEY_CAPSULE = "KEY_CAPSULE"


class Rarity(StrEnum):
    """Game-defined quality tiers."""

    VERY_COMMON = "VERY_COMMON"
    COMMON = "COMMON"
    LESS_COMMON = "LESS_COMMON"
    RARE = "RARE"
    VERY_RARE = "VERY_RARE"
    EXTREMELY_RARE = "EXTREMELY_RARE"


class MetadataKind(StrEnum):
    """Discriminant of the :class:`ingress_inventory.item.Metadata` union."""

    MOD_RESOURCE = auto()
    PORTAL_COUPLER = auto()
    STORY_ITEM = auto()
    LEVELED_RESOURCE = auto()
    FLIP_CARD = auto()
    TIMED_POWERUP = auto()
    PLAYER_POWERUP = auto()
    RESOURCE = auto()
    UNKNOWN = auto()


class KeySortMode(StrEnum):
    """Selectable orderings for the Keys section."""

    ALPHA = auto()
    COUNT = auto()
    TIME = auto()
    DISTANCE = auto()


class SortDirection(StrEnum):
    ASC = auto()
    DESC = auto()
