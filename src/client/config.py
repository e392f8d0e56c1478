"""Conversation client configuration.

Pydantic-based configuration for reaching the relay endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the conversation client.

    Attributes:
        api_base_url: Base URL of the relay API.
        timeout: Request timeout in seconds.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
        description="Base URL of the relay API",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("CLIENT_TIMEOUT", "120")),
        gt=0.0,
        description="Relay request timeout in seconds",
    )

    @property
    def chat_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/api/chat"


def get_client_config() -> ClientConfig:
    return ClientConfig()
