"""
Speaker connection error classification.

TransientConnectionError:
    The speaker may come back: refused/reset connections, open timeouts,
    abnormal closes, 5xx handshake responses. Eligible for bounded
    reconnect attempts.

FatalConnectionError:
    Retrying cannot help: malformed URI, rejected handshake, anything
    unexpected. The connection gives up immediately.

Neither class ever reaches the processing loop.
"""

from __future__ import annotations

from websockets.exceptions import (
    ConnectionClosed,
    InvalidHandshake,
    InvalidMessage,
    InvalidStatus,
    InvalidURI,
)


class SpeakerConnectionError(Exception):
    """Base class for classified speaker connection failures."""


class TransientConnectionError(SpeakerConnectionError):
    """Failure that bounded reconnect attempts may recover from."""


class FatalConnectionError(SpeakerConnectionError):
    """Failure that stops reconnect attempts immediately."""


def _status_code(exc: InvalidStatus) -> int | None:
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None)


def classify_connection_error(exc: BaseException) -> SpeakerConnectionError:
    """
    Map a raw transport exception to a classified error.

    Already-classified errors are returned unchanged; anything else is
    wrapped with the original as __cause__.
    """
    if isinstance(exc, SpeakerConnectionError):
        return exc

    error: SpeakerConnectionError
    if isinstance(exc, InvalidURI):
        error = FatalConnectionError(f"Invalid speaker URI: {exc}")
    elif isinstance(exc, InvalidStatus):
        status = _status_code(exc)
        if status is not None and status >= 500:
            error = TransientConnectionError(f"Speaker unavailable (HTTP {status})")
        else:
            error = FatalConnectionError(f"Handshake rejected (HTTP {status})")
    elif isinstance(exc, InvalidMessage):
        # Connection dropped mid-handshake
        error = TransientConnectionError(f"Handshake interrupted: {exc}")
    elif isinstance(exc, InvalidHandshake):
        error = FatalConnectionError(f"Invalid handshake: {exc}")
    elif isinstance(exc, (ConnectionClosed, OSError, TimeoutError)):
        error = TransientConnectionError(f"{type(exc).__name__}: {exc}")
    else:
        error = FatalConnectionError(f"Unexpected {type(exc).__name__}: {exc}")

    error.__cause__ = exc
    return error
