"""
Queue entries and the acknowledgement capability.

One QueueEntry per inbound sentence. Entries are created on arrival and
mutated only by the processing loop.

State machine:
    PENDING -> PARTIAL (aborted attempt, re-queued) -> ... -> DONE
DONE is terminal.
"""

from __future__ import annotations

import inspect
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Union


AckCallback = Callable[[str], Union[None, Awaitable[None]]]

_entry_ids = itertools.count(1)


class EntryState(str, Enum):
    """
    Processing state of a queue entry.
    """
    PENDING = "pending"
    PARTIAL = "in_progress_partial"
    DONE = "done"


class Acknowledgement:
    """
    One-shot wrapper around the transport's ack callback.

    The callback may be sync or async. It fires at most once; later
    calls are ignored and reported via the return value.
    """

    def __init__(self, callback: AckCallback) -> None:
        self._callback = callback
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    async def send(self, payload: str) -> bool:
        """
        Invoke the callback with `payload`.

        Returns False if it already fired. The fired flag is set before
        the callback runs, so a raising callback still counts as sent.
        """
        if self._fired:
            return False
        self._fired = True

        result = self._callback(payload)
        if inspect.isawaitable(result):
            await result
        return True


@dataclass
class QueueEntry:
    """Mutable per-sentence bookkeeping."""

    sentence: Any
    ack: Acknowledgement | None = None
    state: EntryState = EntryState.PENDING
    attempts: int = 0
    entry_id: int = field(default_factory=lambda: next(_entry_ids))

    @property
    def is_done(self) -> bool:
        return self.state is EntryState.DONE

    def mark(self, state: EntryState) -> None:
        """
        Transition to `state`. Leaving DONE is a programming error.
        """
        if self.state is EntryState.DONE and state is not EntryState.DONE:
            raise RuntimeError(
                f"entry {self.entry_id} is done and cannot move to {state.value}"
            )
        self.state = state

    def log_context(self) -> dict[str, Any]:
        return {
            "entry_id": self.entry_id,
            "entry_state": self.state.value,
            "attempts": self.attempts,
        }


def make_entry(sentence: Any, ack: AckCallback | None = None) -> QueueEntry:
    """Build a PENDING entry; a None callback means no ack is expected."""
    return QueueEntry(
        sentence=sentence,
        ack=Acknowledgement(ack) if ack is not None else None,
    )
