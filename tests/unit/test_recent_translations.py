# pylint: disable=missing-module-docstring,missing-function-docstring

from typing import Any

import pytest

import listener.recent as recent_mod
from listener.recent import RecentTranslations


def test_keeps_arrival_order():
    recent = RecentTranslations(3)
    recent.append("I love")
    recent.append("you")

    assert recent.snapshot() == ["I love", "you"]


def test_bounded_to_capacity_oldest_evicted(monkeypatch: pytest.MonkeyPatch):
    emitted: list[dict[str, Any]] = []
    monkeypatch.setattr(
        recent_mod, "log_event", lambda event, **_: emitted.append(dict(event))
    )

    recent = RecentTranslations(10)
    for i in range(13):
        recent.append(f"t{i}")

    assert len(recent) == 10
    assert recent.snapshot() == [f"t{i}" for i in range(3, 13)]
    assert [e["translation"] for e in emitted] == ["t0", "t1", "t2"]


def test_snapshot_is_a_copy():
    recent = RecentTranslations()
    recent.append("food")

    view = recent.snapshot()
    view.append("tampered")

    assert recent.snapshot() == ["food"]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        RecentTranslations(0)
