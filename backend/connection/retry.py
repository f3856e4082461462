"""
Reconnect policy helpers.

Purpose:
- Centralize the speaker reconnect rules
- Allow the connection loop to make deterministic retry decisions

This module contains NO timers, NO async, NO side effects.
"""
from __future__ import annotations

from dataclasses import dataclass

from connection.errors import SpeakerConnectionError, TransientConnectionError

from constants import MAX_RECONNECTION_ATTEMPTS, RECONNECT_DELAY_MS


# =============================================================================
# Retry State
# =============================================================================

@dataclass(frozen=True)
class RetryAttempt:
    """
    Immutable count of consecutive failed connection attempts.

    Semantics:
    - attempt == 0: no failure since the last successful connect
    - attempt >= 1: that many consecutive failures
    """
    attempt: int


def next_attempt(current: RetryAttempt) -> RetryAttempt:
    """
    Record one more failure. Returns a new RetryAttempt.
    """
    return RetryAttempt(attempt=current.attempt + 1)


def reset_attempt() -> RetryAttempt:
    """Returns a fresh retry attempt counter (successful connect)."""
    return RetryAttempt(attempt=0)


# =============================================================================
# Policy
# =============================================================================

def should_retry(
    *,
    error: SpeakerConnectionError,
    attempt: RetryAttempt,
    max_attempts: int = MAX_RECONNECTION_ATTEMPTS,
) -> bool:
    """
    Returns True if another connection attempt is allowed.

    attempt = failures counted so far, including the one just seen.
    Fatal errors are never retried; transient ones are retried while
    attempt < max_attempts, so max_attempts bounds total tries.
    """
    if not isinstance(error, TransientConnectionError):
        return False
    return attempt.attempt < max_attempts


# =============================================================================
# Delay Calculation
# =============================================================================

def get_retry_delay_ms(
    *,
    attempt: RetryAttempt,  # pylint: disable=unused-argument
    delay_ms: int = RECONNECT_DELAY_MS,
) -> int:
    """
    Returns delay before the next connection attempt.

    Fixed backoff: every retry waits the same delay. attempt is accepted
    so a growing backoff can be introduced without changing callers.
    """
    return delay_ms
