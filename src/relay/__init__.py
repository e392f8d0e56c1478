"""Relay to the upstream generation API.

Translates the internal conversation shape into a single-prompt
generateContent call and back.

Responsibilities:
    - Credential configuration loaded from the environment
    - Upstream request construction and response extraction
    - Typed errors for configuration and upstream failures

Holds no state between requests.
"""

from src.relay.config import RelayConfig, get_relay_config
from src.relay.errors import CredentialNotConfiguredError, RelayError, UpstreamError
from src.relay.gemini_client import GeminiClient

__all__ = [
    "CredentialNotConfiguredError",
    "GeminiClient",
    "RelayConfig",
    "RelayError",
    "UpstreamError",
    "get_relay_config",
]
