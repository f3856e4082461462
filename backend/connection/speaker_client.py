"""
Speaker WebSocket client.

Connection lifecycle:
- Connect to the speaker URL (automatic reconnection is ours, not the library's)
- On success: reset the failure counter, hand the send function to the
  gateway, forward every text frame to it
- On a transient failure or disconnect: count an attempt and retry after
  a fixed delay while attempts < max
- At the cap, or on a fatal error: log and stop; status becomes FAILED

Design constraints:
- Never touches the processing loop directly; everything goes through
  the gateway
- Connect and sleep are injectable so tests need no network or wall-clock
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from websockets.asyncio.client import connect as ws_connect

from connection.errors import (
    FatalConnectionError,
    SpeakerConnectionError,
    TransientConnectionError,
    classify_connection_error,
)
from connection.retry import (
    RetryAttempt,
    get_retry_delay_ms,
    next_attempt,
    reset_attempt,
    should_retry,
)
from constants import CONNECT_TIMEOUT_S, MAX_RECONNECTION_ATTEMPTS, RECONNECT_DELAY_MS
from observability.logger import log_event
from session.connection_status import ConnectionStatus
from session.gateway import SpeakerGateway


# Returns an async context manager yielding a connection that supports
# `async for message in conn` and `await conn.send(text)`.
ConnectFn = Callable[..., Any]
SleepFn = Callable[[float], Awaitable[None]]


class SpeakerConnection:
    """
    Bounded-retry connection to the speaker for one gateway.
    """

    def __init__(
        self,
        *,
        url: str,
        gateway: SpeakerGateway,
        max_attempts: int = MAX_RECONNECTION_ATTEMPTS,
        retry_delay_ms: int = RECONNECT_DELAY_MS,
        open_timeout_s: float = CONNECT_TIMEOUT_S,
        connect: ConnectFn = ws_connect,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._url = url
        self._gateway = gateway
        self._max_attempts = max_attempts
        self._retry_delay_ms = retry_delay_ms
        self._open_timeout_s = open_timeout_s
        self._connect = connect
        self._sleep = sleep

        self._attempt: RetryAttempt = reset_attempt()
        self._ever_connected = False
        self._stopping = False
        self._task: asyncio.Task[None] | None = None

    @property
    def attempt(self) -> RetryAttempt:
        return self._attempt

    @property
    def _session_id(self) -> str:
        return self._gateway.session.session_id

    def _set_status(self, status: ConnectionStatus) -> None:
        self._gateway.session.connection_status = status

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> asyncio.Task[None]:
        """Run the connection loop as a background task."""
        if self._task is None or self._task.done():
            self._stopping = False
            self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    async def stop(self) -> None:
        """Stop reconnecting and cancel the connection loop."""
        self._stopping = True
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self._set_status(ConnectionStatus.DOWN)

    async def run(self) -> None:
        """
        Connect, serve, and reconnect until stopped, capped, or fatal.
        """
        if self._attempt.attempt >= self._max_attempts:
            log_event({
                "event_type": "SPEAKER_MAX_RECONNECT_ATTEMPTS",
                "session_id": self._session_id,
                "message": "Max reconnection attempts reached. Please check the speaker.",
            })
            return

        while not self._stopping:
            self._set_status(ConnectionStatus.CONNECTING)

            error: SpeakerConnectionError
            try:
                await self._connect_and_serve()
                error = TransientConnectionError("Speaker closed the connection")
            except Exception as exc:  # pylint: disable=broad-exception-caught
                error = classify_connection_error(exc)

            if self._stopping:
                break

            if isinstance(error, FatalConnectionError):
                log_event({
                    "event_type": "SPEAKER_FATAL_ERROR",
                    "session_id": self._session_id,
                    "url": self._url,
                    "error": str(error),
                    "cause": type(error.__cause__).__name__ if error.__cause__ else None,
                }, level="error")
                self._set_status(ConnectionStatus.FAILED)
                return

            self._attempt = next_attempt(self._attempt)
            log_event({
                "event_type": "SPEAKER_CONNECT_ERROR",
                "session_id": self._session_id,
                "url": self._url,
                "error": str(error),
                "attempt": self._attempt.attempt,
                "max_attempts": self._max_attempts,
            })

            if not should_retry(
                error=error,
                attempt=self._attempt,
                max_attempts=self._max_attempts,
            ):
                log_event({
                    "event_type": "SPEAKER_MAX_RECONNECT_ATTEMPTS",
                    "session_id": self._session_id,
                    "message": "Max reconnection attempts reached. Please check the speaker.",
                }, level="error")
                self._set_status(ConnectionStatus.FAILED)
                return

            self._set_status(ConnectionStatus.DOWN)
            delay_ms = get_retry_delay_ms(
                attempt=self._attempt,
                delay_ms=self._retry_delay_ms,
            )
            await self._sleep(delay_ms / 1000)

        self._set_status(ConnectionStatus.DOWN)

    # ------------------------------------------------------------------
    # Single connection
    # ------------------------------------------------------------------

    async def _connect_and_serve(self) -> None:
        """
        Open one connection and pump frames until it closes.

        Returns normally on a clean close; raises on failures.
        """
        async with self._connect(self._url, open_timeout=self._open_timeout_s) as ws:
            self._attempt = reset_attempt()
            reconnected = self._ever_connected
            self._ever_connected = True

            await self._gateway.on_connect(ws.send)
            log_event({
                "event_type": "SPEAKER_RECONNECTED" if reconnected else "SPEAKER_CONNECTED",
                "url": self._url,
                **self._gateway.session.log_context(),
            })

            try:
                async for message in ws:
                    await self._gateway.on_text_message(message)
            finally:
                reason = getattr(ws, "close_reason", None)
                await self._gateway.on_disconnect(reason=reason)
                log_event({
                    "event_type": "SPEAKER_DISCONNECTED",
                    "session_id": self._session_id,
                    "close_code": getattr(ws, "close_code", None),
                    "reason": reason,
                })
