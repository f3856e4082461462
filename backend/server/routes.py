"""
Route registration for the listener monitor.

Responsibilities:
- Define read-only HTTP endpoints
- Pull the session from app.state
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from session.listener_session import ListenerSession


def register_routes(app: FastAPI) -> None:
    """Register all routes on the FastAPI app."""
    @app.get("/health")
    async def health() -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        return {"status": "ok"}

    @app.get("/translations")
    async def translations() -> dict[str, list[str]]: # pyright: ignore[reportUnusedFunction]
        session: ListenerSession = app.state.session
        return {"translations": session.require_runtime().get_recent_translations()}

    @app.get("/status")
    async def status() -> dict[str, Any]: # pyright: ignore[reportUnusedFunction]
        session: ListenerSession = app.state.session
        return {
            **session.log_context(),
            "runtime": session.require_runtime().snapshot(),
        }
