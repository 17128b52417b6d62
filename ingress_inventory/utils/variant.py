"""Metadata variant detection.

Every question of the form "which sub-record is populated?" is answered here
so the classifier, title resolver, filter and grouping stages agree on it.
"""

from typing import Optional, TYPE_CHECKING, Union

from ingress_inventory.components import ModResource, Resource, ResourceWithLevels
from ingress_inventory.types import MetadataKind

if TYPE_CHECKING:
    from ingress_inventory.item import Metadata

AnyResource = Union[Resource, ResourceWithLevels, ModResource]


def detect_kind(metadata: "Metadata") -> MetadataKind:
    """Return the discriminant of ``metadata``.

    Payload sub-records take precedence over the generic ``resource`` record
    they usually travel with (a key carries both ``portalCoupler`` and a
    ``PORTAL_LINK_KEY`` resource).
    """
    if metadata.mod_resource is not None:
        return MetadataKind.MOD_RESOURCE
    if metadata.portal_coupler is not None:
        return MetadataKind.PORTAL_COUPLER
    if metadata.story_item is not None:
        return MetadataKind.STORY_ITEM
    if metadata.resource_with_levels is not None:
        return MetadataKind.LEVELED_RESOURCE
    if metadata.flip_card is not None:
        return MetadataKind.FLIP_CARD
    if metadata.timed_powerup is not None:
        return MetadataKind.TIMED_POWERUP
    if metadata.player_powerup is not None:
        return MetadataKind.PLAYER_POWERUP
    if metadata.resource is not None:
        return MetadataKind.RESOURCE
    return MetadataKind.UNKNOWN


def _type_of(resource: Optional[AnyResource]) -> Optional[str]:
    return resource.resource_type if resource is not None else None


def raw_resource_type(metadata: "Metadata") -> Optional[str]:
    """Resource type used for grouping: level-based, then generic, then mod."""
    return (
        _type_of(metadata.resource_with_levels)
        or _type_of(metadata.resource)
        or _type_of(metadata.mod_resource)
        or None
    )


def resolved_resource(metadata: "Metadata") -> Optional[AnyResource]:
    """Resource record used for filtering: generic, then level-based, then mod."""
    if metadata.resource is not None:
        return metadata.resource
    if metadata.resource_with_levels is not None:
        return metadata.resource_with_levels
    return metadata.mod_resource


def resolved_rarity(metadata: "Metadata") -> Optional[str]:
    """Rarity of the resolved resource, else the mod rarity, else ``None``."""
    resource = resolved_resource(metadata)
    if isinstance(resource, Resource) and resource.resource_rarity:
        return resource.resource_rarity
    if metadata.mod_resource is not None and metadata.mod_resource.rarity:
        return metadata.mod_resource.rarity
    return None
