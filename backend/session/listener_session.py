"""
Listener session container.

- Owns the processing runtime for one speaker connection
- Owns connection status (mutable, gateway/connection-controlled)
- NOT a state machine
- Contains no processing logic
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any

from uuid import uuid4

from config import AppConfig
from listener.distraction import DistractionModel, DistractionPolicy
from listener.pacing import PacingController
from listener.recent import RecentTranslations
from listener.runtime import ListenerRuntime
from session.connection_status import ConnectionStatus


def new_session_id() -> str:
    return f"sess_{uuid4().hex[:12]}"


# ---------------------------------------------------------------------
# ListenerSession
# ---------------------------------------------------------------------


@dataclass
class ListenerSession:
    """Mutable runtime container for a single listener session."""

    # ------------------------------------------------------------------
    # Identity / lifecycle
    # ------------------------------------------------------------------

    session_id: str = field(default_factory=new_session_id)
    created_at: float = field(default_factory=time.time)

    # ------------------------------------------------------------------
    # Connection-controlled state
    # ------------------------------------------------------------------

    connection_status: ConnectionStatus = ConnectionStatus.DOWN
    connections: int = 0

    # ------------------------------------------------------------------
    # Runtime (owns queue, decoder, pacing, recent translations)
    # ------------------------------------------------------------------

    runtime: ListenerRuntime | None = None

    # ------------------------------------------------------------------
    # Wiring helpers
    # ------------------------------------------------------------------

    def attach_runtime(self, runtime: ListenerRuntime) -> None:
        """Attach the processing runtime."""
        self.runtime = runtime

    def require_runtime(self) -> ListenerRuntime:
        assert self.runtime is not None, "Runtime must be attached before use"
        return self.runtime

    # ------------------------------------------------------------------
    # Observability helpers (read-only)
    # ------------------------------------------------------------------

    def log_context(self) -> dict[str, Any]:
        """
        Return standard logging context for this session.
        """
        return {
            "session_id": self.session_id,
            "connection_status": self.connection_status.value,
            "connections": self.connections,
        }


def build_session(
    config: AppConfig,
    *,
    rng: random.Random | None = None,
) -> ListenerSession:
    """
    Construct a session with a runtime configured from `config`.
    """
    session = ListenerSession()
    runtime = ListenerRuntime(
        session_id=session.session_id,
        pacing=PacingController(ceiling_ms=config.max_pacing_delay_ms),
        distraction=DistractionModel(
            probability=config.distraction_probability,
            pause_ms=config.distraction_pause_ms,
            policy=DistractionPolicy(config.distraction_policy),
            rng=rng,
        ),
        recent=RecentTranslations(
            config.recent_translations_capacity,
            session_id=session.session_id,
        ),
    )
    session.attach_runtime(runtime)
    return session
