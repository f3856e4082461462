"""
Word decoder with a lazily populated translation cache.

Lookup order:
1. cache hit
2. vocabulary hit (inserted into the cache)
3. miss -> UNKNOWN_TRANSLATION (not cached; the vocabulary is static)

The cache is append-only for the lifetime of the decoder and bounded by
the vocabulary size. A decoder is owned by a single event loop, so no
lock is taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from constants import UNKNOWN_TRANSLATION
from translation.vocabulary import WORD_TRANSLATIONS


@dataclass
class DecoderStats:
    """
    Lookup counters for observability.
    """
    hits: int = 0
    misses: int = 0
    unknown: int = 0


class Decoder:
    """
    Martian word -> English label.
    """

    def __init__(self, vocabulary: Mapping[str, str] = WORD_TRANSLATIONS) -> None:
        self._vocabulary = vocabulary
        self._cache: dict[str, str] = {}
        self.stats: DecoderStats = DecoderStats()

    def decode(self, word: str) -> str:
        """
        Translate a single word. Unknown words decode to UNKNOWN_TRANSLATION.
        """
        cached = self._cache.get(word)
        if cached is not None:
            self.stats.hits += 1
            return cached

        self.stats.misses += 1
        translation = self._vocabulary.get(word)
        if translation is None:
            self.stats.unknown += 1
            return UNKNOWN_TRANSLATION

        self._cache[word] = translation
        return translation

    def cache_snapshot(self) -> dict[str, str]:
        """Copy of the current cache contents."""
        return dict(self._cache)

    def snapshot(self) -> dict[str, int]:
        """
        Lightweight snapshot for logging / monitoring.
        """
        return {
            "cache_size": len(self._cache),
            "hits": self.stats.hits,
            "misses": self.stats.misses,
            "unknown": self.stats.unknown,
        }
