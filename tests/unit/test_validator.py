# pylint: disable=missing-module-docstring,missing-function-docstring

import time

import pytest

from constants import SENTENCE_SEPARATOR
from translation.validator import (
    SentenceKind,
    classify_sentence,
    is_sentinel,
    is_valid_sentence,
    split_words,
)


# ---------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------

@pytest.mark.parametrize(
    "sentence",
    [
        "L-R-Z-----Z-R-L",
        "L-R-Z-----ZZ-LL",
        "BBKZ",
        "B--B-K---Z",
        "L--B----Z-----Z-Z-Z-Z-----K-R",
        "BKRZL",
    ],
)
def test_valid_sentences_match_grammar(sentence: str):
    assert is_valid_sentence(sentence) is True


@pytest.mark.parametrize(
    "sentence",
    [
        "",
        "-----",
        SENTENCE_SEPARATOR,
        "L-R-Z-",
        "-L-R-Z",
        "L-R-Z----------",
        "L-R-Z-----",
        "PQRS",
        "l-r-z",
        "L R Z",
    ],
)
def test_invalid_sentences_rejected(sentence: str):
    assert is_valid_sentence(sentence) is False


@pytest.mark.parametrize("value", [None, 42, 3.5, ["L-R-Z"], {"sentence": "L-R-Z"}])
def test_non_string_is_invalid(value: object):
    assert is_valid_sentence(value) is False
    assert classify_sentence(value) is SentenceKind.INVALID


# ---------------------------------------------------------------------
# Sentinel
# ---------------------------------------------------------------------

def test_sentinel_short_circuits_before_grammar():
    assert is_sentinel("----------") is True
    assert classify_sentence("----------") is SentenceKind.SENTINEL


def test_single_word_separator_is_not_sentinel():
    assert is_sentinel("-----") is False
    assert classify_sentence("-----") is SentenceKind.INVALID


def test_valid_sentence_classified_valid():
    assert classify_sentence("L-R-Z-----Z-R-L") is SentenceKind.VALID


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def test_split_words_on_five_dash_separator():
    assert split_words("L-R-Z-----ZZ-LL") == ("L-R-Z", "ZZ-LL")
    assert split_words("BBKZ") == ("BBKZ",)


# ---------------------------------------------------------------------
# Pathological input
# ---------------------------------------------------------------------

def test_long_near_valid_sentence_rejected_in_linear_time():
    sentence = "-----".join(["B"] * 40) + "-----X"

    started = time.monotonic()
    kind = classify_sentence(sentence)
    elapsed = time.monotonic() - started

    assert kind is SentenceKind.INVALID
    assert elapsed < 0.5


def test_many_words_with_long_modifier_runs_are_valid():
    sentence = "-----".join(["B--K-------R"] * 200)

    assert classify_sentence(sentence) is SentenceKind.VALID
    assert len(split_words(sentence)) == 200 * 2
