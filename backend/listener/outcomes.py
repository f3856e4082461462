"""
Entry outcome policy.

Maps the result of one processing attempt to what the loop must do with
the entry. Pure: no timers, no async, no side effects. The runtime
executes the decision.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from listener.entries import EntryState


class ProcessOutcome(str, Enum):
    """
    Result of a single attempt at the head entry.

    SENTINEL:
        Keep-alive sentence. Nothing to translate or acknowledge.

    INVALID:
        Failed the grammar or was not a string. Recorded, never retried.

    TRANSLATED:
        Every word decoded without an abort.

    ABORTED:
        A distraction abandoned the attempt. Retried from the start later.
    """

    SENTINEL = "sentinel"
    INVALID = "invalid"
    TRANSLATED = "translated"
    ABORTED = "aborted"


@dataclass(frozen=True)
class EntryDecision:
    """
    What to do with the entry after an attempt.

    record:      append the translation to the recent buffer
    acknowledge: fire the entry's ack (if it has one)
    """
    next_state: EntryState
    record: bool = False
    acknowledge: bool = False

    @property
    def remove(self) -> bool:
        return self.next_state is EntryState.DONE


_DECISIONS: dict[ProcessOutcome, EntryDecision] = {
    ProcessOutcome.SENTINEL: EntryDecision(next_state=EntryState.DONE),
    ProcessOutcome.INVALID: EntryDecision(next_state=EntryState.DONE),
    ProcessOutcome.TRANSLATED: EntryDecision(
        next_state=EntryState.DONE,
        record=True,
        acknowledge=True,
    ),
    ProcessOutcome.ABORTED: EntryDecision(next_state=EntryState.PARTIAL),
}


def decide(outcome: ProcessOutcome) -> EntryDecision:
    """Return the decision for `outcome`."""
    return _DECISIONS[outcome]
