"""Client for the upstream generation API.

Sends a single prompt to Gemini's generateContent endpoint and
extracts the text of the first candidate.

Design notes:

1. **Single prompt** - only the latest message is sent upstream. History
   arrives with the request but is not forwarded.

2. **Per-call HTTP client** - each call opens its own httpx.AsyncClient so
   the relay holds no connection state between requests. Tests inject an
   httpx transport instead of patching.

3. **Typed failures** - non-success statuses and malformed bodies raise
   UpstreamError; a missing credential raises before any network I/O.
"""

import logging

import httpx
from pydantic import ValidationError

from src.models.schemas import GenerateContentRequest, GenerateContentResponse
from src.relay.config import RelayConfig
from src.relay.errors import UpstreamError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Relays prompts to the generation API."""

    def __init__(
        self,
        config: RelayConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Relay configuration holding the credential and URL.
            transport: Optional httpx transport (used for testing).
        """
        self._config = config
        self._transport = transport

    @property
    def config(self) -> RelayConfig:
        return self._config

    def ensure_configured(self) -> None:
        """Raise CredentialNotConfiguredError if no API key is set."""
        self._config.require_api_key()

    async def generate(self, prompt: str) -> str:
        """Generate text for a single prompt.

        Args:
            prompt: The text sent as the only content part.

        Returns:
            Text of the first candidate's first part.

        Raises:
            CredentialNotConfiguredError: If no API key is set.
            UpstreamError: On non-success status or unexpected response body.
            httpx.RequestError: On network failure.
        """
        api_key = self._config.require_api_key()
        payload = GenerateContentRequest.from_prompt(prompt)

        async with httpx.AsyncClient(
            transport=self._transport, timeout=self._config.timeout
        ) as client:
            response = await client.post(
                self._config.api_url,
                params={"key": api_key},
                json=payload.model_dump(),
            )

        if response.is_error:
            logger.error(
                f"Generation API returned {response.status_code} {response.reason_phrase}"
            )
            raise UpstreamError(
                f"Gemini API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        try:
            data = GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise UpstreamError(
                "Gemini API error: unexpected response shape",
                status_code=response.status_code,
            ) from e

        logger.debug(f"Generation API response: {data.model_dump()}")
        return data.text
