"""Run the server with uvicorn on the port stored in settings."""

from __future__ import annotations

import asyncio

import uvicorn

from .config.server import SERVER_HOST, SERVER_ACCESS_LOG
from .runtime.bootstrap import load_settings
from .collaborators.settings import EnvSettingsStore


def main() -> None:
    _, server_settings = asyncio.run(load_settings(EnvSettingsStore()))
    uvicorn.run(
        "wikisocket.server:app",
        host=SERVER_HOST,
        port=server_settings.port,
        access_log=SERVER_ACCESS_LOG,
    )


if __name__ == "__main__":
    main()
