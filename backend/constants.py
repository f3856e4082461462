"""
CONSTANTS-AS-POLICY
-------------------
Single source of truth for all behavioral constants of the listener.

Rules:
- If changing a value changes runtime behavior, it belongs here.
- No magic numbers elsewhere in the codebase.
- config.py reads environment overrides and falls back to these values.
"""

from __future__ import annotations

from typing import Final, Tuple

# =============================================================================
# Martian Grammar
# =============================================================================

MARTIAN_SYMBOLS: Final[str] = "BKRZL"
MODIFIER_CHAR: Final[str] = "-"

# Words inside a sentence are joined by exactly five modifier characters
WORD_SEPARATOR: Final[str] = MODIFIER_CHAR * 5

# Keep-alive sentence the speaker sends after every real sentence
SENTENCE_SEPARATOR: Final[str] = MODIFIER_CHAR * 10

# Words joined by WORD_SEPARATOR form a single symbol/modifier run, so the
# sentence grammar collapses to one unambiguous (linear-time) pattern.
SENTENCE_PATTERN: Final[str] = r"^[BKRZL](?:-*[BKRZL])*$"

UNKNOWN_TRANSLATION: Final[str] = "UNKNOWN"

# =============================================================================
# Acknowledgement
# =============================================================================

ACK_PAYLOAD: Final[str] = "received"

# =============================================================================
# Pacing
# =============================================================================

MAX_PACING_DELAY_MS: Final[int] = 5_000

# =============================================================================
# Distraction
# =============================================================================

DISTRACTION_PROBABILITY: Final[float] = 0.10
DISTRACTION_PAUSE_MS: Final[int] = 1_000
DISTRACTION_POLICIES: Final[Tuple[str, ...]] = ("abort", "resume")
DEFAULT_DISTRACTION_POLICY: Final[str] = "abort"

# =============================================================================
# Recent Translations
# =============================================================================

RECENT_TRANSLATIONS_CAPACITY: Final[int] = 10

# =============================================================================
# Speaker Connection
# =============================================================================

DEFAULT_SPEAKER_URL: Final[str] = "ws://localhost:3000"
MAX_RECONNECTION_ATTEMPTS: Final[int] = 5
RECONNECT_DELAY_MS: Final[int] = 5_000
CONNECT_TIMEOUT_S: Final[float] = 10.0

# =============================================================================
# HTTP Monitor
# =============================================================================

DEFAULT_HTTP_HOST: Final[str] = "0.0.0.0"
DEFAULT_HTTP_PORT: Final[int] = 8000

# =============================================================================
# Observability
# =============================================================================

LOG_LEVELS: Final[Tuple[str, ...]] = ("debug", "info", "warning", "error")
FRAME_PREVIEW_CHARS: Final[int] = 100
