"""Pydantic models for the relay protocol and the upstream generation API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Individual message in the conversation
    - RelayRequest: Conversation payload posted by the client
    - RelayResult / RelayErrorResponse: Normalized relay responses
    - GenerateContentRequest / GenerateContentResponse: Upstream API shapes
"""

from src.models.schemas import (
    GenerateContentRequest,
    GenerateContentResponse,
    Message,
    RelayErrorResponse,
    RelayRequest,
    RelayResult,
    Sender,
)

__all__ = [
    "GenerateContentRequest",
    "GenerateContentResponse",
    "Message",
    "RelayErrorResponse",
    "RelayRequest",
    "RelayResult",
    "Sender",
]
