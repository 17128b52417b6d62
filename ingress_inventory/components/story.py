"""Media (story item) component."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StoryItem:
    short_description: Optional[str] = None
