"""
Application configuration.

Responsibilities:
- Load deployment-specific configuration
- Read environment variables
- Provide a typed, immutable config object

Non-responsibilities:
- No processing logic
- No behavioral constants (defaults come from constants.py)
- No runtime mutation
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from constants import (
    CONNECT_TIMEOUT_S,
    DEFAULT_DISTRACTION_POLICY,
    DEFAULT_HTTP_HOST,
    DEFAULT_HTTP_PORT,
    DEFAULT_SPEAKER_URL,
    DISTRACTION_PAUSE_MS,
    DISTRACTION_POLICIES,
    DISTRACTION_PROBABILITY,
    MAX_PACING_DELAY_MS,
    MAX_RECONNECTION_ATTEMPTS,
    RECENT_TRANSLATIONS_CAPACITY,
    RECONNECT_DELAY_MS,
)


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable application configuration.

    Constructed once at process startup.
    Passed downward to the app factory, which wires session/runtime/connection.
    """

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    env: str = "dev"
    log_level: str = "info"

    # ------------------------------------------------------------------
    # Speaker connection
    # ------------------------------------------------------------------

    speaker_url: str = DEFAULT_SPEAKER_URL
    max_reconnection_attempts: int = MAX_RECONNECTION_ATTEMPTS
    reconnect_delay_ms: int = RECONNECT_DELAY_MS
    connect_timeout_s: float = CONNECT_TIMEOUT_S

    # ------------------------------------------------------------------
    # Processing loop
    # ------------------------------------------------------------------

    max_pacing_delay_ms: int = MAX_PACING_DELAY_MS
    distraction_probability: float = DISTRACTION_PROBABILITY
    distraction_pause_ms: int = DISTRACTION_PAUSE_MS
    distraction_policy: str = DEFAULT_DISTRACTION_POLICY
    recent_translations_capacity: int = RECENT_TRANSLATIONS_CAPACITY

    # ------------------------------------------------------------------
    # HTTP monitor
    # ------------------------------------------------------------------

    http_host: str = DEFAULT_HTTP_HOST
    http_port: int = DEFAULT_HTTP_PORT

    def __post_init__(self) -> None:
        if not 0.0 <= self.distraction_probability <= 1.0:
            raise ValueError("distraction_probability must be within [0, 1]")
        if self.distraction_policy not in DISTRACTION_POLICIES:
            raise ValueError(
                f"distraction_policy must be one of {DISTRACTION_POLICIES}, "
                f"got {self.distraction_policy!r}"
            )
        if self.recent_translations_capacity <= 0:
            raise ValueError("recent_translations_capacity must be > 0")

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @staticmethod
    def load_from_env() -> AppConfig:
        """
        Load configuration from environment variables.

        Raises:
            ValueError if a variable is present but malformed.
        """
        return AppConfig(
            env=os.environ.get("ENV", "dev"),
            log_level=os.environ.get("LOG_LEVEL", "info").lower(),

            speaker_url=os.environ.get("SPEAKER_URL", DEFAULT_SPEAKER_URL),
            max_reconnection_attempts=int(
                os.environ.get("MAX_RECONNECTION_ATTEMPTS", MAX_RECONNECTION_ATTEMPTS)
            ),
            reconnect_delay_ms=int(
                os.environ.get("RECONNECT_DELAY_MS", RECONNECT_DELAY_MS)
            ),
            connect_timeout_s=float(
                os.environ.get("CONNECT_TIMEOUT_S", CONNECT_TIMEOUT_S)
            ),

            max_pacing_delay_ms=int(
                os.environ.get("MAX_PACING_DELAY_MS", MAX_PACING_DELAY_MS)
            ),
            distraction_probability=float(
                os.environ.get("DISTRACTION_PROBABILITY", DISTRACTION_PROBABILITY)
            ),
            distraction_pause_ms=int(
                os.environ.get("DISTRACTION_PAUSE_MS", DISTRACTION_PAUSE_MS)
            ),
            distraction_policy=os.environ.get(
                "DISTRACTION_POLICY", DEFAULT_DISTRACTION_POLICY
            ).lower(),
            recent_translations_capacity=int(
                os.environ.get(
                    "RECENT_TRANSLATIONS_CAPACITY", RECENT_TRANSLATIONS_CAPACITY
                )
            ),

            http_host=os.environ.get("HTTP_HOST", DEFAULT_HTTP_HOST),
            http_port=int(os.environ.get("HTTP_PORT", DEFAULT_HTTP_PORT)),
        )
