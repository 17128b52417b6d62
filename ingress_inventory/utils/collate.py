"""Locale-aware string ordering.

Alphabetical sorts in the viewer follow natural-language collation rather than
code point order: accents and case are ignored at the first level, so
``"apple" < "Banana" < "cherry"`` and ``"Éclair"`` sorts among the E's. Ties on
the first level are broken by accents, then by case with lowercase first.
"""

import unicodedata
from typing import Tuple


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(text: str) -> Tuple[str, str, str]:
    """Return a sort key ordering ``text`` the way a reader expects."""
    base = _strip_accents(text)
    return (base.casefold(), text.casefold(), text.swapcase())
