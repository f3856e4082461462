# pylint: disable=missing-module-docstring,missing-function-docstring

import random

import pytest

from constants import DISTRACTION_PAUSE_MS, DISTRACTION_PROBABILITY
from listener.distraction import DistractionModel, DistractionPolicy


class ScriptedRng(random.Random):
    def __init__(self, values: list[float]) -> None:
        super().__init__()
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def test_defaults():
    model = DistractionModel()

    assert model.probability == DISTRACTION_PROBABILITY == 0.10
    assert model.pause_ms == DISTRACTION_PAUSE_MS == 1_000
    assert model.policy is DistractionPolicy.ABORT
    assert model.aborts is True


def test_draw_below_probability_distracts():
    model = DistractionModel(probability=0.1, rng=ScriptedRng([0.05, 0.1, 0.5]))

    assert model.is_distracted() is True
    assert model.is_distracted() is False
    assert model.is_distracted() is False


def test_zero_probability_never_draws():
    model = DistractionModel(probability=0.0, rng=ScriptedRng([]))

    assert not any(model.is_distracted() for _ in range(100))


def test_full_probability_always_distracts():
    model = DistractionModel(probability=1.0, rng=ScriptedRng([]))

    assert all(model.is_distracted() for _ in range(100))


def test_resume_policy_does_not_abort():
    model = DistractionModel(policy=DistractionPolicy.RESUME)

    assert model.aborts is False


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_probability_out_of_range_rejected(probability: float):
    with pytest.raises(ValueError):
        DistractionModel(probability=probability)
