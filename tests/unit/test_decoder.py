# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

from constants import UNKNOWN_TRANSLATION
from translation.decoder import Decoder
from translation.vocabulary import WORD_TRANSLATIONS


def test_known_word_decodes_and_is_cached():
    decoder = Decoder()

    assert decoder.decode("ZZ-LL") == "love"
    assert decoder.cache_snapshot() == {"ZZ-LL": "love"}
    assert decoder.stats.misses == 1
    assert decoder.stats.hits == 0


def test_decode_is_idempotent():
    decoder = Decoder()

    first = decoder.decode("L-R-Z")
    after_first = decoder.cache_snapshot()
    second = decoder.decode("L-R-Z")

    assert first == second == "I"
    # Second call is a hit and leaves the cache exactly as the miss did
    assert decoder.cache_snapshot() == after_first
    assert decoder.stats.hits == 1
    assert decoder.stats.misses == 1


def test_unknown_word_falls_back_without_caching():
    decoder = Decoder()

    assert decoder.decode("PQRS") == UNKNOWN_TRANSLATION
    assert decoder.decode("PQRS") == UNKNOWN_TRANSLATION

    assert decoder.cache_snapshot() == {}
    assert decoder.stats.unknown == 2
    assert decoder.stats.hits == 0


def test_custom_vocabulary():
    decoder = Decoder({"B": "bee"})

    assert decoder.decode("B") == "bee"
    assert decoder.decode("ZZ-LL") == UNKNOWN_TRANSLATION


def test_vocabulary_is_read_only():
    assert len(WORD_TRANSLATIONS) == 20
    with pytest.raises(TypeError):
        WORD_TRANSLATIONS["BKZ"] = "x"  # type: ignore[index]


def test_snapshot_reports_counters():
    decoder = Decoder()
    decoder.decode("BBKZ")
    decoder.decode("BBKZ")
    decoder.decode("nope")

    assert decoder.snapshot() == {
        "cache_size": 1,
        "hits": 1,
        "misses": 2,
        "unknown": 1,
    }
