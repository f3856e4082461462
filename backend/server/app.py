"""
FastAPI app factory.

Responsibilities:
- Create and configure FastAPI app
- Build the listener session, gateway and speaker connection once per process
- Run the speaker connection for the lifetime of the app
- Register routes
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from config import AppConfig
from connection.speaker_client import SpeakerConnection
from observability.logger import log_event, set_min_level
from session.gateway import SpeakerGateway
from session.listener_session import build_session

from server.routes import register_routes


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Components are built eagerly so routes work even when the lifespan
    (and therefore the speaker connection) is not running, e.g. in tests.
    """
    config = config or AppConfig.load_from_env()
    set_min_level(config.log_level)

    session = build_session(config)
    gateway = SpeakerGateway(session)
    connection = SpeakerConnection(
        url=config.speaker_url,
        gateway=gateway,
        max_attempts=config.max_reconnection_attempts,
        retry_delay_ms=config.reconnect_delay_ms,
        open_timeout_s=config.connect_timeout_s,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log_event({
            "event_type": "LISTENER_STARTED",
            "env": config.env,
            "speaker_url": config.speaker_url,
            **session.log_context(),
        })
        connection.start()
        try:
            yield
        finally:
            await connection.stop()
            await session.require_runtime().shutdown()
            log_event({
                "event_type": "LISTENER_STOPPED",
                **session.log_context(),
            })

    app = FastAPI(title="Martian Listener", lifespan=lifespan)

    app.state.config = config
    app.state.session = session
    app.state.gateway = gateway
    app.state.connection = connection

    # Routes
    register_routes(app)

    return app
