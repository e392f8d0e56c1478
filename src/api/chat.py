"""Chat relay endpoint.

Accepts the conversation, forwards the last message to the generation
API, and normalizes the outcome into {result} or {error}.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.models.schemas import RelayErrorResponse, RelayRequest, RelayResult
from src.relay.errors import CredentialNotConfiguredError
from src.relay.gemini_client import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


def get_gemini_client(request: Request) -> GeminiClient:
    """Build the upstream client from the configuration injected at startup."""
    return GeminiClient(request.app.state.relay_config)


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=RelayErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/chat",
    response_model=RelayResult,
    responses={500: {"model": RelayErrorResponse}},
)
async def chat(
    request: Request,
    gemini: GeminiClient = Depends(get_gemini_client),
) -> RelayResult | JSONResponse:
    """Relay the latest message of a conversation to the generation API.

    The body is parsed by hand so that malformed payloads take the same
    500 path as every other failure.

    Returns:
        RelayResult with the generated text.

    Raises:
        Nothing: all failures are returned as {error} with status 500.
    """
    logger.info("Relay endpoint called")

    try:
        gemini.ensure_configured()
    except CredentialNotConfiguredError as e:
        logger.error("Generation API key is missing")
        return _error_response(str(e))

    try:
        relay_request = RelayRequest.model_validate(await request.json())
        result = await gemini.generate(relay_request.prompt)
    except Exception as e:
        logger.error(f"Error in relay: {e}")
        return _error_response(f"Error in relay: {str(e) or 'Unknown error'}")

    return RelayResult(result=result)
