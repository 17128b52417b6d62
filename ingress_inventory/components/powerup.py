"""Powerup payloads.

Portal powerups (frackers, beacons, fireworks...) are named by a
``designation``; player powerups (Apex...) by an enum string.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TimedPowerupResource:
    designation: Optional[str] = None


@dataclass(frozen=True)
class PlayerPowerupResource:
    player_powerup_enum: Optional[str] = None
