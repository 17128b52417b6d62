from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FlipCard:
    """Flip card variant (``ADA`` / ``JARVIS``)."""

    flip_card_type: Optional[str] = None
