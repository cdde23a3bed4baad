"""
Filename search over the note catalog.

Plain case-insensitive substring filter on display names. Catalog order is
kept and there is no ranking. Callers debounce keystrokes; this function holds
no state.
"""

import unicodedata
from itertools import islice
from typing import Iterable, List

from notehome.config import SEARCH_RESULT_LIMIT


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text).casefold()


def search(catalog: Iterable, query: str, limit: int = SEARCH_RESULT_LIMIT) -> List:
    """
    Return up to `limit` catalog entries whose display_name contains query.

    An empty or whitespace-only query returns [] without reading the catalog
    (the "hide results" state).
    """
    if not query or not query.strip():
        return []
    q = _normalize(query.strip())
    matches = (entry for entry in catalog if q in _normalize(entry.display_name))
    return list(islice(matches, limit))
