"""Caller-supplied pipeline configuration.

These are plain frozen dataclasses: the viewer builds a new instance whenever
the user changes a control and hands it to the pipeline, nothing is read from
module globals.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from pyrsistent import PMap, pmap

from ingress_inventory.types import KeySortMode, SortDirection


@dataclass(frozen=True)
class Location:
    """Latitude / longitude in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class FilterConfig:
    """Item filters.

    Attributes:
        rarity: Keep only items whose rarity equals this code; ``None`` keeps all.
        hide_capsuled: Hide groups whose items all sit inside a capsule. This
            is applied by the view layer, not by the item filter.
    """

    rarity: Optional[str] = None
    hide_capsuled: bool = False


def _default_directions() -> PMap[KeySortMode, SortDirection]:
    return pmap({mode: SortDirection.ASC for mode in KeySortMode})


@dataclass(frozen=True)
class KeySortConfig:
    """Keys section ordering: the active mode plus a direction per mode."""

    mode: KeySortMode = KeySortMode.ALPHA
    directions: PMap[KeySortMode, SortDirection] = field(
        default_factory=_default_directions
    )

    def direction(self, mode: Optional[KeySortMode] = None) -> SortDirection:
        return self.directions.get(mode or self.mode, SortDirection.ASC)

    def with_direction(
        self, mode: KeySortMode, direction: SortDirection
    ) -> "KeySortConfig":
        """Return a config with ``mode`` active and its direction set."""
        return replace(
            self,
            mode=KeySortMode(mode),
            directions=self.directions.set(
                KeySortMode(mode), SortDirection(direction)
            ),
        )
