"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.chat import router as chat_router
from src.relay.config import RelayConfig, get_relay_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    if app.state.relay_config.api_key is None:
        logger.warning("GEMINI_API_KEY is not set; chat requests will fail with 500")
    logger.info("Starting Lexora Chat API...")
    yield
    logger.info("Shutting down Lexora Chat API...")


def create_app(config: RelayConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Relay configuration. Loads from environment if not provided.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Lexora Chat API",
        description=(
            "Relay between the chat UI and a generative-language API. "
            "Forwards the latest message of a conversation and returns the "
            "generated text."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.relay_config = config or get_relay_config()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "lexora-chat"}

    return application


app = create_app()
