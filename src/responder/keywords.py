"""Keyword table lookup."""

from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional

from .parser import KeywordEntry

KEYWORD_SEPARATOR = re.compile(r",\s*")


def split_keywords(raw_key: str) -> List[str]:
    return [keyword.strip() for keyword in KEYWORD_SEPARATOR.split(raw_key)]


class KeywordTable:
    """Maps raw comma-separated keys to responses.

    Keys are split at lookup time. Entries are scanned in insertion order, so
    when a word appears under several keys the first one loaded wins.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._registry: Dict[str, str] = dict(entries)

    def match(self, word: str) -> Optional[KeywordEntry]:
        for raw_key, response in self._registry.items():
            if word in split_keywords(raw_key):
                return KeywordEntry(raw_key=raw_key, response=response)
        return None

    def entries(self) -> Dict[str, str]:
        return dict(self._registry)

    def __len__(self) -> int:
        return len(self._registry)
