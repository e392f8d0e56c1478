"""Conversation client - UI state and the relay exchange.

Responsibilities:
    - Message list, loading/generating flags, error text, pending file
    - Relay calls with cooperative cancellation
    - Regenerating a reply from its preceding prompt

Contains no rendering. The NiceGUI page observes state changes.
"""

from src.client.config import ClientConfig, get_client_config
from src.client.conversation import SUGGESTIONS, ConversationClient, ConversationState
from src.client.transport import (
    CANCELLED,
    CancellationToken,
    Cancelled,
    HttpRelayTransport,
    RelayFailure,
    RelayOutcome,
    RelaySuccess,
)

__all__ = [
    "CANCELLED",
    "SUGGESTIONS",
    "CancellationToken",
    "Cancelled",
    "ClientConfig",
    "ConversationClient",
    "ConversationState",
    "HttpRelayTransport",
    "RelayFailure",
    "RelayOutcome",
    "RelaySuccess",
    "get_client_config",
]
