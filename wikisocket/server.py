"""Main FastAPI server for the wiki collaboration backend.

This module builds the application serving:

- REST endpoints for health checks (/healthz, /)
- WebSocket endpoint for the wiki client protocol (/ws)

Server Lifecycle:
    1. On startup: read settings from the Settings collaborator once and
       assemble the shared runtime services
    2. Accept WebSocket connections on /ws
    3. Route each inbound command through the command router
    4. On disconnect: log the session out and drop it

Example:
    Run directly with uvicorn:
        $ uvicorn wikisocket.server:app --host 0.0.0.0 --port 8080

    Or through the package entry point (port taken from settings):
        $ python -m wikisocket
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from .config.server import WS_PATH
from .logging import configure_logging
from .runtime.bootstrap import build_runtime_deps
from .collaborators.base import UsersService, SettingsService, DiscussionsService
from .handlers.websocket import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


def create_app(
    *,
    users: UsersService | None = None,
    discussions: DiscussionsService | None = None,
    settings_store: SettingsService | None = None,
) -> FastAPI:
    """Create the application; collaborators default to the in-memory ones."""
    app = FastAPI(default_response_class=ORJSONResponse)
    app.state.runtime_deps = None

    @app.on_event("startup")
    async def load_runtime() -> None:
        """Read settings and assemble runtime services before serving traffic."""
        app.state.runtime_deps = await build_runtime_deps(
            users=users,
            discussions=discussions,
            settings_store=settings_store,
        )

    @app.get("/")
    async def root():
        """Root endpoint for load balancer health checks."""
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz():
        """Health check endpoint."""
        deps = app.state.runtime_deps
        return {"status": "ok" if deps is not None else "starting"}

    @app.get("/favicon.ico", status_code=204)
    async def favicon():
        """Suppress favicon requests from browsers/probes."""
        return None

    @app.websocket(WS_PATH)
    async def websocket_endpoint(websocket: WebSocket):
        """Main WebSocket endpoint for the wiki client protocol."""
        await handle_websocket_connection(websocket, app.state.runtime_deps)

    return app


app = create_app()
