"""Relay configuration with environment variable loading.

Pydantic-based configuration for the upstream generation API.
The credential is optional at load time; a missing key is reported
per request as a configuration error.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.relay.errors import CredentialNotConfiguredError

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
)


class RelayConfig(BaseModel):
    """Configuration for the relay endpoint.

    Attributes:
        api_key: Credential for the generation API (None if not configured).
        api_url: Upstream generateContent URL.
        timeout: Upstream request timeout in seconds.
    """

    api_key: str | None = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY"),
        validate_default=True,
        description="API key for the generation API",
    )
    api_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_URL", DEFAULT_API_URL),
        description="Upstream generateContent endpoint",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("RELAY_TIMEOUT", "60")),
        gt=0.0,
        description="Upstream request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: str | None) -> str | None:
        """Strip whitespace; treat blank keys as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    def require_api_key(self) -> str:
        """Return the credential or fail before any network call.

        Raises:
            CredentialNotConfiguredError: If no API key is set.
        """
        if self.api_key is None:
            raise CredentialNotConfiguredError()
        return self.api_key


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment."""
    return RelayConfig()
