"""
Process entry point: serve the listener monitor with uvicorn.

The speaker connection starts with the app lifespan.
"""

from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from config import AppConfig


def main() -> None:
    load_dotenv()
    config = AppConfig.load_from_env()

    uvicorn.run(
        "server.asgi:app",
        host=config.http_host,
        port=config.http_port,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    main()
