"""
Text frame codec for the speaker connection.

Speaker -> Listener (sentence):
    {"type": "sentence", "sentence": <any>, "ack_id": <int | str | null>}

    "sentence" is passed through untouched; type checking is the
    validator's job. A missing or null ack_id means the speaker does not
    expect an acknowledgement.

Listener -> Speaker (acknowledgement):
    {"type": "ack", "ack_id": <int | str>, "payload": "received"}

Usage example:

    try:
        inbound = decode_inbound(text)
    except MessageProtocolError as e:
        log_event({"event_type": "FRAME_DECODE_ERROR", "error": str(e)})
        return

    await ws.send(encode_ack(inbound.ack_id, ACK_PAYLOAD))
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from constants import ACK_PAYLOAD


AckId = Union[int, str]

SENTENCE_FRAME_TYPE = "sentence"
ACK_FRAME_TYPE = "ack"


# -------------------------
# Exceptions
# -------------------------

class MessageProtocolError(Exception):
    """Base class for text frame protocol errors."""


class MalformedFrame(MessageProtocolError):
    """
    Raised when a frame is not a JSON object.

    The frame is unsafe to interpret and must be dropped.
    """


class UnknownFrameType(MessageProtocolError):
    """
    Raised when a frame's "type" is missing or not understood.
    """


class InvalidAckId(MessageProtocolError):
    """
    Raised when ack_id is present but neither an int nor a str.
    """


# -------------------------
# Frames
# -------------------------

@dataclass(frozen=True)
class InboundSentence:
    """
    Decoded speaker -> listener sentence frame.
    """
    sentence: Any
    ack_id: AckId | None = None

    @property
    def expects_ack(self) -> bool:
        return self.ack_id is not None


def decode_inbound(payload: str | bytes) -> InboundSentence:
    """
    Decode a speaker -> listener frame.
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedFrame(f"Frame is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedFrame(f"Frame must be a JSON object, got {type(data).__name__}")

    frame_type = data.get("type")
    if frame_type != SENTENCE_FRAME_TYPE:
        raise UnknownFrameType(f"Unknown frame type: {frame_type!r}")

    ack_id = data.get("ack_id")
    # bool is an int subclass but never a valid id
    if ack_id is not None and (
        isinstance(ack_id, bool) or not isinstance(ack_id, (int, str))
    ):
        raise InvalidAckId(f"Invalid ack_id: {ack_id!r}")

    return InboundSentence(sentence=data.get("sentence"), ack_id=ack_id)


def encode_ack(ack_id: AckId, payload: str = ACK_PAYLOAD) -> str:
    """
    Encode a listener -> speaker acknowledgement frame.
    """
    return json.dumps(
        {"type": ACK_FRAME_TYPE, "ack_id": ack_id, "payload": payload},
        separators=(",", ":"),
    )


def encode_sentence(sentence: Any, ack_id: AckId | None = None) -> str:
    """
    Encode a speaker -> listener frame. Used by tests and tooling that
    play the speaker's role.
    """
    return json.dumps(
        {"type": SENTENCE_FRAME_TYPE, "sentence": sentence, "ack_id": ack_id},
        separators=(",", ":"),
    )
