"""Metadata sub-record components.

This package re-exports the frozen dataclasses an exported item's metadata is
made of. Each one mirrors a single optional sub-record of the export
(``resource``, ``modResource``, ``portalCoupler``...); an item's
:class:`ingress_inventory.item.Metadata` holds whichever of them the export
populated. :class:`Provenance` is not part of the export: it is attached to
items the container expansion synthesizes.
"""

from .container import Container, StackDescriptor
from .flip_card import FlipCard
from .portal import PortalCoupler
from .powerup import PlayerPowerupResource, TimedPowerupResource
from .provenance import Provenance
from .resource import ModResource, Resource, ResourceWithLevels
from .story import StoryItem

__all__ = [
    "Container",
    "FlipCard",
    "ModResource",
    "PlayerPowerupResource",
    "PortalCoupler",
    "Provenance",
    "Resource",
    "ResourceWithLevels",
    "StackDescriptor",
    "StoryItem",
    "TimedPowerupResource",
]
