"""Group title derivation."""

from ingress_inventory.constants import PLAIN_LEVEL_TYPES
from ingress_inventory.item import Metadata
from ingress_inventory.types import ItemID, MetadataKind, ResourceType
from ingress_inventory.utils.rarity import abbreviate_rarity


def _level_title(resource_type: str, level: int) -> str:
    label = f"L{level or ''}"
    if resource_type in PLAIN_LEVEL_TYPES:
        return label
    return f"{resource_type} {label}"


def _resource_title(resource_type: str, metadata: Metadata) -> str:
    if resource_type == ResourceType.FLIP_CARD:
        if metadata.flip_card and metadata.flip_card.flip_card_type:
            return metadata.flip_card.flip_card_type
    elif resource_type == ResourceType.BOOSTED_POWER_CUBE:
        return "Hyper"
    elif resource_type == ResourceType.PORTAL_POWERUP:
        if metadata.timed_powerup and metadata.timed_powerup.designation:
            return metadata.timed_powerup.designation
    elif resource_type == ResourceType.PLAYER_POWERUP:
        if metadata.player_powerup and metadata.player_powerup.player_powerup_enum:
            return metadata.player_powerup.player_powerup_enum
    return resource_type


def resolve_title(item_id: ItemID, metadata: Metadata) -> str:
    """Return the human-facing title items are grouped under.

    Payload kinds (see :attr:`Metadata.kind`) are tried first; a key without
    a portal title or media without a description falls through to the
    resource rules. The first matching rule wins:

    1. Mods: rarity abbreviation (``VR``, ``R``, ``C``).
    2. Keys: portal title.
    3. Media: short description.
    4. Level items: ``L{level}`` for resonators, cubes, bursters and strikes,
       ``{type} L{level}`` otherwise.
    5. Generic resources: flip card type, ``Hyper`` for boosted cubes,
       powerup designation / enum, else the resource type.
    6. The item id.
    """
    kind = metadata.kind
    mod = metadata.mod_resource
    if kind == MetadataKind.MOD_RESOURCE and mod is not None:
        return abbreviate_rarity(mod.rarity)

    coupler = metadata.portal_coupler
    if kind == MetadataKind.PORTAL_COUPLER and coupler is not None:
        if coupler.portal_title:
            return coupler.portal_title

    story = metadata.story_item
    if kind == MetadataKind.STORY_ITEM and story is not None:
        if story.short_description:
            return story.short_description

    leveled = metadata.resource_with_levels
    if leveled is not None and leveled.resource_type:
        return _level_title(leveled.resource_type, leveled.level)

    resource = metadata.resource
    if resource is not None and resource.resource_type:
        return _resource_title(resource.resource_type, metadata)

    return item_id
