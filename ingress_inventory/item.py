"""Inventory item records.

An export is a flat list of ``[id, timestamp, metadata]`` triples. The loader
turns each triple into an :class:`InventoryItem` whose :class:`Metadata` is a
closed tagged union over resource kinds: every sub-record is optional and the
discriminant (:attr:`Metadata.kind`) is computed by a single routine,
:func:`ingress_inventory.utils.variant.detect_kind`. The title resolver and
the group engine dispatch on it; resource type and rarity lookups share the
helpers next to it in :mod:`ingress_inventory.utils.variant`.

Items are value objects. Stages never mutate them; the container expansion
derives new items with :func:`dataclasses.replace`.
"""

from dataclasses import dataclass
from typing import Optional

from ingress_inventory.components import (
    Container,
    FlipCard,
    ModResource,
    PlayerPowerupResource,
    PortalCoupler,
    Provenance,
    Resource,
    ResourceWithLevels,
    StoryItem,
    TimedPowerupResource,
)
from ingress_inventory.types import ItemID, MetadataKind, Timestamp
from ingress_inventory.utils.variant import detect_kind


@dataclass(frozen=True)
class Metadata:
    """Typed view of an item's metadata record.

    Attributes:
        resource: Generic resource (``resource``).
        resource_with_levels: Level-based resource (``resourceWithLevels``).
        mod_resource: Portal mod (``modResource``).
        portal_coupler: Portal key payload (``portalCoupler``).
        story_item: Media payload (``storyItem``).
        timed_powerup: Portal powerup payload (``timedPowerupResource``).
        player_powerup: Player powerup payload (``playerPowerupResource``).
        flip_card: Flip card payload (``flipCard``).
        container: Capsule contents (``container``).
    """

    resource: Optional[Resource] = None
    resource_with_levels: Optional[ResourceWithLevels] = None
    mod_resource: Optional[ModResource] = None
    portal_coupler: Optional[PortalCoupler] = None
    story_item: Optional[StoryItem] = None
    timed_powerup: Optional[TimedPowerupResource] = None
    player_powerup: Optional[PlayerPowerupResource] = None
    flip_card: Optional[FlipCard] = None
    container: Optional[Container] = None

    @property
    def kind(self) -> MetadataKind:
        return detect_kind(self)


@dataclass(frozen=True)
class InventoryItem:
    """One inventory entry.

    Attributes:
        id: Item GUID. Not unique: the same id may appear several times.
        acquired_at: Acquisition timestamp in epoch milliseconds.
        metadata: Typed metadata union.
        provenance: Set only on items extracted from a container.
    """

    id: ItemID
    acquired_at: Timestamp
    metadata: Metadata
    provenance: Optional[Provenance] = None
