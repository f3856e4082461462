"""
Speaker gateway.

Responsibilities:
- Owns the ListenerSession
- Tracks connection_status independently of the processing loop
- Decodes inbound text frames and submits sentences to the runtime
- Builds the acknowledgement capability for each sentence
- Logs dropped frames

NOT responsible for:
- Connecting / reconnecting (see connection.speaker_client)
- Validating or translating sentences
- Deciding when to acknowledge
"""

from __future__ import annotations

from typing import Awaitable, Callable

from constants import FRAME_PREVIEW_CHARS
from listener.entries import AckCallback, QueueEntry
from observability.logger import log_event
from protocol.messages import (
    AckId,
    MessageProtocolError,
    decode_inbound,
    encode_ack,
)
from session.connection_status import ConnectionStatus
from session.listener_session import ListenerSession


SendFn = Callable[[str], Awaitable[None]]


def _make_ack(send: SendFn, ack_id: AckId) -> AckCallback:
    """
    Bind an ack to the connection the sentence arrived on.

    If that connection is gone by the time the ack fires, send raises
    and the runtime logs ACK_FAILED.
    """
    async def ack(payload: str) -> None:
        await send(encode_ack(ack_id, payload))
    return ack


class SpeakerGateway:
    """
    One gateway == one listener session, across reconnects.
    """

    def __init__(self, session: ListenerSession) -> None:
        self.session = session
        self._send: SendFn | None = None

    async def on_connect(self, send: SendFn) -> None:
        """Called when the speaker connection is established."""
        self._send = send
        self.session.connection_status = ConnectionStatus.UP
        self.session.connections += 1
        log_event({
            "event_type": "GATEWAY_CONNECTED",
            **self.session.log_context(),
        }, level="debug")

    async def on_disconnect(self, reason: str | None = None) -> None:
        """Called when the speaker connection goes away."""
        self._send = None
        if self.session.connection_status is ConnectionStatus.UP:
            self.session.connection_status = ConnectionStatus.DOWN
        log_event({
            "event_type": "GATEWAY_DISCONNECTED",
            "reason": reason,
            **self.session.log_context(),
        }, level="debug")

    async def on_text_message(self, payload: str | bytes) -> QueueEntry | None:
        """
        Route an inbound frame to the runtime.

        Returns the queued entry, or None if the frame was dropped.
        """
        try:
            inbound = decode_inbound(payload)
        except MessageProtocolError as e:
            log_event({
                "event_type": "FRAME_DECODE_ERROR",
                "session_id": self.session.session_id,
                "error_class": type(e).__name__,
                "error": str(e),
                "payload_preview": str(payload)[:FRAME_PREVIEW_CHARS],
            }, level="warning")
            return None

        ack: AckCallback | None = None
        if inbound.ack_id is not None:
            if self._send is None:
                log_event({
                    "event_type": "ACK_WITHOUT_CONNECTION",
                    "session_id": self.session.session_id,
                    "ack_id": inbound.ack_id,
                }, level="warning")
            else:
                ack = _make_ack(self._send, inbound.ack_id)

        runtime = self.session.require_runtime()
        return runtime.submit(inbound.sentence, ack)
