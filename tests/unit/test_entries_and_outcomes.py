# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

from listener.entries import Acknowledgement, EntryState, make_entry
from listener.outcomes import ProcessOutcome, decide


# ---------------------------------------------------------------------
# Outcome policy
# ---------------------------------------------------------------------

def test_translated_is_recorded_acknowledged_and_removed():
    decision = decide(ProcessOutcome.TRANSLATED)

    assert decision.next_state is EntryState.DONE
    assert decision.record is True
    assert decision.acknowledge is True
    assert decision.remove is True


@pytest.mark.parametrize("outcome", [ProcessOutcome.SENTINEL, ProcessOutcome.INVALID])
def test_sentinel_and_invalid_finish_silently(outcome: ProcessOutcome):
    decision = decide(outcome)

    assert decision.next_state is EntryState.DONE
    assert decision.record is False
    assert decision.acknowledge is False


def test_aborted_is_requeued_without_side_effects():
    decision = decide(ProcessOutcome.ABORTED)

    assert decision.next_state is EntryState.PARTIAL
    assert decision.remove is False
    assert decision.record is False
    assert decision.acknowledge is False


# ---------------------------------------------------------------------
# Entry state machine
# ---------------------------------------------------------------------

def test_new_entry_is_pending_with_unique_id():
    a = make_entry("BBKZ")
    b = make_entry("BBKZ")

    assert a.state is EntryState.PENDING
    assert a.ack is None
    assert a.entry_id != b.entry_id


def test_done_is_terminal():
    entry = make_entry("BBKZ")
    entry.mark(EntryState.PARTIAL)
    entry.mark(EntryState.DONE)

    with pytest.raises(RuntimeError):
        entry.mark(EntryState.PENDING)
    assert entry.is_done


# ---------------------------------------------------------------------
# One-shot acknowledgement
# ---------------------------------------------------------------------

@pytest.mark.asyncio
async def test_ack_fires_at_most_once_sync_callback():
    calls: list[str] = []
    ack = Acknowledgement(calls.append)

    assert await ack.send("received") is True
    assert await ack.send("received") is False

    assert calls == ["received"]
    assert ack.fired


@pytest.mark.asyncio
async def test_ack_awaits_async_callback():
    calls: list[str] = []

    async def callback(payload: str) -> None:
        calls.append(payload)

    ack = Acknowledgement(callback)
    await ack.send("received")

    assert calls == ["received"]


@pytest.mark.asyncio
async def test_raising_callback_still_counts_as_fired():
    def callback(payload: str) -> None:
        raise ConnectionError(payload)

    ack = Acknowledgement(callback)
    with pytest.raises(ConnectionError):
        await ack.send("received")

    assert await ack.send("received") is False
