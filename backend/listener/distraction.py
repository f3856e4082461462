"""
Listener distraction model.

Before each word is decoded, one independent draw decides whether the
listener gets distracted. A distraction always pauses; what happens after
the pause depends on the policy:

ABORT (default):
    Abandon the sentence. Words decoded so far are discarded and the entry
    goes back to the tail of the queue for a fresh attempt.

RESUME:
    Decode the same word and carry on with the rest of the sentence.

ABORT has no retry cap: with probability 1.0 a sentence never completes.
"""

from __future__ import annotations

import random
from enum import Enum

from constants import (
    DEFAULT_DISTRACTION_POLICY,
    DISTRACTION_PAUSE_MS,
    DISTRACTION_PROBABILITY,
)


class DistractionPolicy(str, Enum):
    """
    What the processing loop does after a distraction pause.
    """
    ABORT = "abort"
    RESUME = "resume"


class DistractionModel:
    """
    Per-word probabilistic interruption.

    The RNG is injectable so tests can force or suppress distractions.
    """

    def __init__(
        self,
        *,
        probability: float = DISTRACTION_PROBABILITY,
        pause_ms: int = DISTRACTION_PAUSE_MS,
        policy: DistractionPolicy = DistractionPolicy(DEFAULT_DISTRACTION_POLICY),
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be within [0, 1]")
        if pause_ms < 0:
            raise ValueError("pause_ms must be >= 0")

        self.probability = probability
        self.pause_ms = pause_ms
        self.policy = policy
        self._rng = rng or random.Random()

    @property
    def aborts(self) -> bool:
        return self.policy is DistractionPolicy.ABORT

    def is_distracted(self) -> bool:
        """
        Draw once. Called exactly once per word, before decoding it.
        """
        if self.probability <= 0.0:
            return False
        if self.probability >= 1.0:
            return True
        return self._rng.random() < self.probability
