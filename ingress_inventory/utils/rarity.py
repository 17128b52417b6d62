"""Rarity helpers."""

from typing import Optional

from ingress_inventory.constants import (
    RARITY_ABBREVIATIONS,
    RARITY_LABELS,
    RARITY_SORT_ORDER,
)


def abbreviate_rarity(rarity: Optional[str]) -> str:
    """Return ``VR`` / ``R`` / ``C`` for known rarities, else the raw value."""
    if not rarity:
        return ""
    return RARITY_ABBREVIATIONS.get(rarity, rarity)


def rarity_rank(rarity: Optional[str]) -> int:
    """Numeric rank where higher is rarer; unknown rarities rank 0."""
    return RARITY_SORT_ORDER.get(rarity or "", 0)


def rarity_label(rarity: str) -> str:
    return RARITY_LABELS.get(rarity, rarity)
