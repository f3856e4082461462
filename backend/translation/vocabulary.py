"""
Martian vocabulary.

Static word table used by the decoder. The table never changes at
runtime, which is what makes skipping the cache for unknown words safe.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


WORD_TRANSLATIONS: Mapping[str, str] = MappingProxyType({
    "B--B-K---Z": "food",
    "BBKZ": "vomit",
    "B-K-RKK---ZZZ": "sleep",
    "BKR-KK-ZZZ": "philosophy",
    "ZZ-KK": "need",
    "KK-ZZ": "hate",
    "L-R-Z": "I",
    "Z-R-L": "you",
    "ZZKK": "rejoice",
    "B-K": "book",
    "R--Z": "language",
    "K-L--B": "dance",
    "Z-B": "music",
    "LR-K": "death",
    "B-KR-R": "life",
    "ZZ-LL": "love",
    "K-R": "hungry",
    "L--B----Z": "thirsty",
    "R--Z--L": "happy",
    "Z-Z-Z-Z": "sad",
})
