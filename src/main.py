"""Main application entry point.

Serves the relay API and the NiceGUI chat page from one uvicorn server,
or from two processes when RUN_MODE=separate.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def _port() -> int:
    return int(os.getenv("PORT", "8000"))


def run_integrated() -> None:
    """Mount the chat page onto the relay app and serve both on one port.

    The page reaches the relay over HTTP like any other client, so
    API_BASE_URL defaults to this same server.
    """
    import uvicorn
    from nicegui import ui

    os.environ.setdefault("API_BASE_URL", f"http://localhost:{_port()}")

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="Lexora",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "lexora-chat-secret"),
    )

    logger.info(f"Relay and chat UI on http://localhost:{_port()}")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_port(),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the relay API and the chat UI as two processes.

    Relay on PORT (default 8000), UI on 8080 pointing at the relay.
    """
    import asyncio
    import subprocess

    async def run_servers() -> None:
        api_base_url = f"http://localhost:{_port()}"
        logger.info(f"Starting relay API on {api_base_url}")
        logger.info("Starting chat UI on http://localhost:8080")

        relay_proc = subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "src.api.app:app",
                "--host",
                os.getenv("HOST", "0.0.0.0"),
                "--port",
                str(_port()),
            ]
        )
        ui_proc = subprocess.Popen(
            [sys.executable, "-c", "from src.ui.chat_page import main; main()"],
            env={**os.environ, "API_BASE_URL": api_base_url},
        )

        try:
            while relay_proc.poll() is None and ui_proc.poll() is None:
                await asyncio.sleep(1)
        finally:
            relay_proc.terminate()
            ui_proc.terminate()
            relay_proc.wait()
            ui_proc.wait()

    try:
        asyncio.run(run_servers())
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")


def main() -> None:
    """Application entry point. RUN_MODE selects integrated (default) or separate."""
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Lexora Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
