"""
Word Dictionary

Read-only view over the loaded word list plus seedable target selection.
The dictionary is loaded once at startup and shared by every game session.
"""

import random
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from ..errors import NoCandidateWordsError


class WordDictionary:
    """
    Membership-testable set of valid words.

    Each word maps to opaque metadata supplied by the loader; the game only
    ever looks at the keys.
    """

    def __init__(self, entries: Optional[Mapping[str, object]] = None):
        self._entries = MappingProxyType({word.lower(): meta for word, meta in (entries or {}).items()})
        self._by_length: Dict[int, List[str]] = {}

    def has(self, word: str) -> bool:
        """Case-insensitive membership check."""
        return isinstance(word, str) and word.lower() in self._entries

    def words_of_length(self, length: int) -> List[str]:
        """Sorted words of the given length."""
        if length not in self._by_length:
            self._by_length[length] = sorted(w for w in self._entries if len(w) == length)
        return list(self._by_length[length])

    def lengths(self) -> List[int]:
        return sorted({len(word) for word in self._entries})

    @property
    def entries(self) -> Mapping[str, object]:
        return self._entries

    def __contains__(self, word) -> bool:
        return self.has(word)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"WordDictionary({len(self)} words)"


def pick_target(candidates: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Selects a random target word.

    Args:
        candidates: Words to choose from
        rng: Random source; pass a seeded random.Random for repeatable picks

    Raises:
        NoCandidateWordsError: If there is nothing to choose from
    """
    if not candidates:
        raise NoCandidateWordsError("No words available for the selected word length")
    rng = rng or random.Random()
    return rng.choice(list(candidates))
