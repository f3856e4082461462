"""
Sentence queue.

- FIFO of QueueEntry objects, unbounded
- The head is inspected in place; it leaves the front only by being
  removed (DONE) or rotated to the tail (not DONE)
- Rotation means strict arrival order is not preserved once an entry
  has been interrupted
- Deterministic, synchronous behavior
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from listener.entries import EntryState, QueueEntry


@dataclass
class QueueCounters:
    """
    Lifetime counters for observability.
    """
    enqueued: int = 0
    completed: int = 0
    requeued: int = 0


class SentenceQueue:
    """
    FIFO queue of sentence entries with rotate-to-tail.
    """

    def __init__(self) -> None:
        self._entries: Deque[QueueEntry] = deque()
        self.counters: QueueCounters = QueueCounters()

    # -------------------------
    # Core queue operations
    # -------------------------

    def append(self, entry: QueueEntry) -> None:
        """Append an entry at the tail."""
        self._entries.append(entry)
        self.counters.enqueued += 1

    def peek(self) -> Optional[QueueEntry]:
        """
        View the head entry without removing it.

        Returns None if the queue is empty.
        """
        return self._entries[0] if self._entries else None

    def pop_head(self) -> QueueEntry:
        """
        Remove and return the head entry. Only DONE entries may leave.
        """
        head = self._entries[0]
        if head.state is not EntryState.DONE:
            raise RuntimeError(
                f"entry {head.entry_id} removed while {head.state.value}"
            )
        self._entries.popleft()
        self.counters.completed += 1
        return head

    def rotate_head_to_tail(self) -> QueueEntry:
        """
        Move the head entry to the tail (never back to the head).
        """
        head = self._entries.popleft()
        self._entries.append(head)
        self.counters.requeued += 1
        return head

    # -------------------------
    # Introspection helpers
    # -------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._entries

    def entries(self) -> tuple[QueueEntry, ...]:
        """Current entries, head first."""
        return tuple(self._entries)

    def snapshot(self) -> dict[str, int]:
        """
        Lightweight snapshot for logging / monitoring.
        """
        partial = sum(1 for e in self._entries if e.state is EntryState.PARTIAL)
        return {
            "depth": len(self._entries),
            "partial": partial,
            "enqueued_total": self.counters.enqueued,
            "completed_total": self.counters.completed,
            "requeued_total": self.counters.requeued,
        }
