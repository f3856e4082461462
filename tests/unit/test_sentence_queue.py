# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

from listener.entries import EntryState, make_entry
from listener.queues import SentenceQueue


def test_fifo_peek_does_not_remove():
    q = SentenceQueue()
    first = make_entry("L-R-Z")
    second = make_entry("Z-R-L")

    q.append(first)
    q.append(second)

    assert q.peek() is first
    assert len(q) == 2


def test_done_head_is_removed():
    q = SentenceQueue()
    entry = make_entry("L-R-Z")
    q.append(entry)

    entry.mark(EntryState.DONE)
    assert q.pop_head() is entry
    assert q.is_empty()
    assert q.counters.completed == 1


def test_head_cannot_leave_unless_done():
    q = SentenceQueue()
    q.append(make_entry("L-R-Z"))

    with pytest.raises(RuntimeError):
        q.pop_head()
    assert len(q) == 1


# ---------------------------------------------------------------------
# Re-queue goes to the tail
# ---------------------------------------------------------------------

def test_rotate_moves_head_behind_later_arrivals():
    q = SentenceQueue()
    a, b, c = make_entry("BBKZ"), make_entry("B-K"), make_entry("Z-B")
    for e in (a, b, c):
        q.append(e)

    a.mark(EntryState.PARTIAL)
    assert q.rotate_head_to_tail() is a

    assert q.entries() == (b, c, a)
    assert q.counters.requeued == 1


def test_snapshot_counts_partial_entries():
    q = SentenceQueue()
    a, b = make_entry("BBKZ"), make_entry("B-K")
    q.append(a)
    q.append(b)
    a.mark(EntryState.PARTIAL)

    assert q.snapshot() == {
        "depth": 2,
        "partial": 1,
        "enqueued_total": 2,
        "completed_total": 0,
        "requeued_total": 0,
    }
