"""
Processing loop for a single listener session.

Responsibilities:
- Own the sentence queue, decoder, pacing state, distraction model
  and recent-translations buffer of one session
- Drain the queue one entry at a time (single consumer)
- Apply the pacing delay before each head entry
- Validate, then decode word by word honoring distractions
- Execute the outcome policy: record, acknowledge, remove or re-queue

Non-responsibilities:
- Transport concerns (frames, reconnects)
- Outcome decisions (see listener.outcomes)
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from constants import ACK_PAYLOAD, FRAME_PREVIEW_CHARS
from listener.distraction import DistractionModel
from listener.entries import AckCallback, QueueEntry, make_entry
from listener.outcomes import ProcessOutcome, decide
from listener.pacing import PacingController
from listener.queues import SentenceQueue
from listener.recent import RecentTranslations
from observability.logger import log_event
from observability.metrics import timed
from translation.decoder import Decoder
from translation.validator import SentenceKind, classify_sentence, split_words


SleepFn = Callable[[float], Awaitable[None]]


def _preview(sentence: Any) -> str:
    return str(sentence)[:FRAME_PREVIEW_CHARS]


class ListenerRuntime:
    """
    Single cooperative worker for one session.

    Suspension points are exactly two: the pacing sleep before each head
    entry and the distraction pause before a word. Both are cancellable
    only through shutdown(); new arrivals just extend the tail.

    Guarantees:
    - At most one drain is active; re-entrant drain() calls are no-ops
    - An entry leaves the queue only when DONE
    - A non-DONE entry goes to the tail after each attempt
    - An acknowledgement fires at most once, after the entry is DONE
    """

    def __init__(
        self,
        *,
        session_id: str | None = None,
        decoder: Decoder | None = None,
        pacing: PacingController | None = None,
        distraction: DistractionModel | None = None,
        recent: RecentTranslations | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._session_id = session_id
        self._queue = SentenceQueue()
        self._decoder = decoder or Decoder()
        self._pacing = pacing or PacingController()
        self._distraction = distraction or DistractionModel()
        self._recent = recent or RecentTranslations(session_id=session_id)
        self._sleep = sleep

        self._draining = False
        self._drain_task: asyncio.Task[int] | None = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def queue(self) -> SentenceQueue:
        return self._queue

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    @property
    def is_draining(self) -> bool:
        return self._draining

    def get_recent_translations(self) -> list[str]:
        """Last translations, oldest first. Returns a copy."""
        return self._recent.snapshot()

    def snapshot(self) -> dict[str, Any]:
        """
        Lightweight snapshot for monitoring.
        """
        return {
            "draining": self._draining,
            "queue": self._queue.snapshot(),
            "decoder": self._decoder.snapshot(),
            "recent_count": len(self._recent),
            "distraction_policy": self._distraction.policy.value,
        }

    # ------------------------------------------------------------------
    # Inbound
    # ------------------------------------------------------------------

    def enqueue(self, sentence: Any, ack: AckCallback | None = None) -> QueueEntry:
        """
        Append a PENDING entry at the tail. Does not start processing.
        """
        entry = make_entry(sentence, ack)
        self._queue.append(entry)
        log_event({
            "event_type": "SENTENCE_RECEIVED",
            "session_id": self._session_id,
            "sentence": _preview(sentence),
            "expects_ack": entry.ack is not None,
            "queue_depth": len(self._queue),
            **entry.log_context(),
        }, level="debug")
        return entry

    def submit(self, sentence: Any, ack: AckCallback | None = None) -> QueueEntry:
        """
        Enqueue and make sure a drain task is running.

        Must be called from within the event loop.
        """
        entry = self.enqueue(sentence, ack)
        self._ensure_draining()
        return entry

    def _ensure_draining(self) -> None:
        if self._draining:
            return
        if self._drain_task is not None and not self._drain_task.done():
            return
        self._drain_task = asyncio.get_running_loop().create_task(self.drain())

    # ------------------------------------------------------------------
    # Processing loop
    # ------------------------------------------------------------------

    async def drain(self, max_cycles: int | None = None) -> int:
        """
        Process head entries until the queue is empty.

        max_cycles bounds the number of head entries handled; None means
        run until idle. Returns the number of head entries handled.
        """
        if self._draining:
            log_event({
                "event_type": "DRAIN_ALREADY_ACTIVE",
                "session_id": self._session_id,
            }, level="debug")
            return 0

        self._draining = True
        cycles = 0
        try:
            while not self._queue.is_empty():
                if max_cycles is not None and cycles >= max_cycles:
                    break

                delay_ms = self._pacing.next_delay_ms()
                if delay_ms > 0:
                    log_event({
                        "event_type": "PACING_DELAY",
                        "session_id": self._session_id,
                        "delay_ms": delay_ms,
                    }, level="debug")
                    await self._sleep(delay_ms / 1000)

                entry = self._queue.peek()
                assert entry is not None, "only the drain loop removes entries"
                await self._handle_head(entry)
                cycles += 1
        finally:
            self._draining = False

        if self._queue.is_empty():
            log_event({
                "event_type": "QUEUE_IDLE",
                "session_id": self._session_id,
                "cycles": cycles,
            }, level="debug")
        return cycles

    async def _handle_head(self, entry: QueueEntry) -> None:
        entry.attempts += 1

        with timed(
            "sentence_attempt",
            session_id=self._session_id,
            details={"entry_id": entry.entry_id, "attempt": entry.attempts},
            queue_depth=len(self._queue),
        ):
            outcome, translation = await self._process(entry)

        decision = decide(outcome)
        entry.mark(decision.next_state)

        if decision.record and translation is not None:
            self._recent.append(translation)

        if decision.remove:
            self._queue.pop_head()
        else:
            self._queue.rotate_head_to_tail()

        if decision.acknowledge:
            await self._acknowledge(entry)

    async def _process(self, entry: QueueEntry) -> tuple[ProcessOutcome, str | None]:
        """
        One attempt at an entry: classify, then decode every word.
        """
        kind = classify_sentence(entry.sentence)

        if kind is SentenceKind.SENTINEL:
            log_event({
                "event_type": "SENTINEL_SKIPPED",
                "session_id": self._session_id,
                **entry.log_context(),
            }, level="debug")
            return ProcessOutcome.SENTINEL, None

        if kind is SentenceKind.INVALID:
            log_event({
                "event_type": "INVALID_SENTENCE",
                "session_id": self._session_id,
                "sentence": _preview(entry.sentence),
                "sentence_type": type(entry.sentence).__name__,
                **entry.log_context(),
            }, level="warning")
            return ProcessOutcome.INVALID, None

        log_event({
            "event_type": "ORIGINAL_SENTENCE",
            "session_id": self._session_id,
            "sentence": entry.sentence,
            **entry.log_context(),
        })

        words = split_words(entry.sentence)
        translated: list[str] = []

        for index, word in enumerate(words):
            if self._distraction.is_distracted():
                log_event({
                    "event_type": "LISTENER_DISTRACTED",
                    "session_id": self._session_id,
                    "word_index": index,
                    "pause_ms": self._distraction.pause_ms,
                    "policy": self._distraction.policy.value,
                    **entry.log_context(),
                })
                await self._sleep(self._distraction.pause_ms / 1000)

                if self._distraction.aborts:
                    log_event({
                        "event_type": "SENTENCE_ABORTED",
                        "session_id": self._session_id,
                        "words_discarded": len(translated),
                        **entry.log_context(),
                    })
                    return ProcessOutcome.ABORTED, None

            translated.append(self._decoder.decode(word))

        translation = " ".join(translated)
        log_event({
            "event_type": "SENTENCE_TRANSLATED",
            "session_id": self._session_id,
            "translation": translation,
            **entry.log_context(),
        })
        return ProcessOutcome.TRANSLATED, translation

    async def _acknowledge(self, entry: QueueEntry) -> None:
        if entry.ack is None:
            return

        try:
            sent = await entry.ack.send(ACK_PAYLOAD)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            log_event({
                "event_type": "ACK_FAILED",
                "session_id": self._session_id,
                "exception": type(exc).__name__,
                "message": str(exc),
                **entry.log_context(),
            }, level="error")
            return

        if sent:
            log_event({
                "event_type": "ACK_SENT",
                "session_id": self._session_id,
                **entry.log_context(),
            })

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def shutdown(self) -> None:
        """
        Cancel the drain task, if any, and wait for it to finish.

        Entries interrupted mid-attempt stay queued in their current state.
        """
        task = self._drain_task
        self._drain_task = None
        if task is None or task.done():
            return

        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        log_event({
            "event_type": "LISTENER_RUNTIME_SHUTDOWN",
            "session_id": self._session_id,
            "queue_depth": len(self._queue),
        })
