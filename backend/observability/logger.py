"""
JSONL event logger.

- Write one JSON object per line
- Output to stdout
- No buffering, no batching
- Every line carries a level; lines below the configured minimum are skipped
- No side effects beyond logging
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any, Mapping, Callable

from constants import LOG_LEVELS


# ------------------------------------------------------------------
# Explicit output sink (patchable in tests)
# ------------------------------------------------------------------

def _stdout_print(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()

_print: Callable[[str], None] = _stdout_print

_min_level_index: int = LOG_LEVELS.index("info")


def now_ms() -> int:
    """Wall-clock milliseconds, used for ts_ms on every event."""
    return time.time_ns() // 1_000_000


def set_min_level(level: str) -> None:
    """
    Set the minimum level that reaches the sink.

    Unknown level names raise ValueError so a typo in LOG_LEVEL
    fails at startup rather than silencing everything.
    """
    global _min_level_index  # pylint: disable=global-statement
    normalized = level.lower()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {LOG_LEVELS}")
    _min_level_index = LOG_LEVELS.index(normalized)


def log_event(event: Mapping[str, Any], *, level: str = "info") -> None:
    """
    Write a single JSONL event to stdout.

    The caller is responsible for:
    - Supplying event_type and any session_id / entry context

    This function:
    - Adds ts_ms (unless supplied) and level
    - Serializes to JSON
    - Writes exactly one line
    - Flushes immediately (no buffering)
    - Never raises
    """
    level_index = LOG_LEVELS.index(level) if level in LOG_LEVELS else len(LOG_LEVELS) - 1
    if level_index < _min_level_index:
        return

    record: dict[str, Any] = {"ts_ms": now_ms(), "level": level, **event}

    try:
        line = json.dumps(record, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        # Last-resort fallback: logging must never crash the listener
        fallback: dict[str, Any] = {
            "ts_ms": record.get("ts_ms"),
            "level": "error",
            "event_type": "LOGGER_SERIALIZATION_ERROR",
            "error": str(e),
            "original_event_repr": repr(event),
        }
        line = json.dumps(fallback, ensure_ascii=False, separators=(",", ":"))

    _print(line)
