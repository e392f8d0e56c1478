"""FastAPI endpoints for the chat relay.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Relay the latest message to the generation API
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
