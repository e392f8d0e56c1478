"""Relay transport with cooperative cancellation.

The outbound call is raced against a cancellation token. Every way the
call can end is returned as a value: RelaySuccess, RelayFailure or
Cancelled. Nothing is raised to the caller for expected failures.
"""

import asyncio
import logging
from typing import Protocol

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from src.client.config import ClientConfig
from src.models.schemas import Message, RelayErrorResponse, RelayRequest, RelayResult

logger = logging.getLogger(__name__)


class RelaySuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: str


class RelayFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: str


class Cancelled(BaseModel):
    """The call was abandoned because its token fired."""

    model_config = ConfigDict(frozen=True)


CANCELLED = Cancelled()

RelayOutcome = RelaySuccess | RelayFailure | Cancelled


class CancellationToken:
    """One-shot cancellation signal observed at the network suspension point."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()


class RelayTransport(Protocol):
    async def send(
        self, messages: list[Message], token: CancellationToken
    ) -> RelayOutcome: ...


class HttpRelayTransport:
    """Posts the conversation to the relay endpoint over HTTP."""

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Client configuration with the relay URL and timeout.
            transport: Optional httpx transport (ASGI or mock for tests).
        """
        self._config = config
        self._transport = transport

    async def send(
        self, messages: list[Message], token: CancellationToken
    ) -> RelayOutcome:
        """Send the conversation unless the token fires first.

        Args:
            messages: Full conversation history, last message is the prompt.
            token: Cancellation signal for this call.

        Returns:
            RelaySuccess, RelayFailure or CANCELLED.
        """
        if token.cancelled:
            return CANCELLED

        request_task = asyncio.create_task(self._post(messages))
        cancel_task = asyncio.create_task(token.wait())
        try:
            await asyncio.wait(
                {request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            cancel_task.cancel()
            if token.cancelled or not request_task.done():
                request_task.cancel()

        if token.cancelled:
            if request_task.done() and not request_task.cancelled():
                # Result is discarded; retrieve any exception so it is not reported.
                request_task.exception()
            return CANCELLED
        return request_task.result()

    async def _post(self, messages: list[Message]) -> RelayOutcome:
        try:
            payload = RelayRequest(messages=messages)
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._config.timeout
            ) as client:
                response = await client.post(
                    self._config.chat_url, json=payload.model_dump(mode="json")
                )
        except httpx.RequestError as e:
            return RelayFailure(error=f"Connection failed: {e}")
        except Exception as e:
            logger.error(f"Unexpected relay transport error: {e}")
            return RelayFailure(error=f"Unexpected error: {str(e) or type(e).__name__}")

        if response.is_error:
            return RelayFailure(error=_describe_error(response))

        try:
            body = RelayResult.model_validate_json(response.content)
        except ValidationError:
            return RelayFailure(error="API error: unexpected response body")
        return RelaySuccess(result=body.result)


def _describe_error(response: httpx.Response) -> str:
    """Build a readable message from a failed relay response."""
    message = f"API error: {response.reason_phrase}"
    try:
        detail = RelayErrorResponse.model_validate_json(response.content).error
    except ValidationError:
        return message
    return f"{message} ({detail})"
