"""
Martian sentence validation.

Responsibilities:
- Detect the keep-alive sentinel sentence
- Check structural well-formedness against the sentence grammar
- Split a valid sentence into words

Non-responsibilities:
- No translation
- No logging (callers record rejections)

All functions are pure.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from constants import SENTENCE_PATTERN, SENTENCE_SEPARATOR, WORD_SEPARATOR


_SENTENCE_RE = re.compile(SENTENCE_PATTERN)


class SentenceKind(str, Enum):
    """
    Classification of an inbound sentence before decoding.
    """
    SENTINEL = "sentinel"
    INVALID = "invalid"
    VALID = "valid"


def is_sentinel(sentence: Any) -> bool:
    """Return True if `sentence` is the keep-alive sentinel."""
    return sentence == SENTENCE_SEPARATOR


def is_valid_sentence(sentence: Any) -> bool:
    """
    Return True if `sentence` matches the Martian grammar.

    Zero words never match; the sentinel is rejected here and must be
    checked first via is_sentinel().
    """
    if not isinstance(sentence, str):
        return False
    return _SENTENCE_RE.fullmatch(sentence) is not None


def classify_sentence(sentence: Any) -> SentenceKind:
    """
    Classify a sentence. The sentinel check runs before the grammar so
    the sentinel never takes the rejection path.
    """
    if is_sentinel(sentence):
        return SentenceKind.SENTINEL
    if is_valid_sentence(sentence):
        return SentenceKind.VALID
    return SentenceKind.INVALID


def split_words(sentence: str) -> tuple[str, ...]:
    """Split a valid sentence into its words."""
    return tuple(sentence.split(WORD_SEPARATOR))
