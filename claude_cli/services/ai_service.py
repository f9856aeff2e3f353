"""
AI Service for Claude CLI

This service sends single-turn chat messages to the Messages API and
classifies each response body as a reply, a provider error, or an
unrecognized payload.
"""

import logging
import time
from typing import Dict, Optional

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..config import Settings, get_settings
from ..errors import InvalidRequest, NetworkError, RemoteApiError, UnrecognizedResponse
from ..models.chat import (
    ApiErrorResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ParsedResponse,
    RemoteError,
    Success,
    Unrecognized,
)
from ..utils.debug_logger import debug_logger

logger = logging.getLogger(__name__)

UNKNOWN_FORMAT_MESSAGE = "Unknown error format. Response printed to terminal."


def parse_response(body: str) -> ParsedResponse:
    """
    Classify a raw response body, first match wins

    Args:
        body: Full response body text

    Returns:
        Success with the first content block's text, RemoteError with the
        provider message, or Unrecognized carrying the raw body
    """
    try:
        response = ChatResponse.model_validate_json(body)
        return Success(text=response.content[0].text)
    except ValidationError:
        pass

    try:
        error = ApiErrorResponse.model_validate_json(body)
        return RemoteError(message=error.error.message)
    except ValidationError:
        pass

    return Unrecognized(raw=body)


class AIService:
    """Service for the Messages API"""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.Client] = None):
        """Initialize the AI service; a client passed in stays owned by the caller"""
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "AIService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_request(self, text: str) -> ChatRequest:
        return ChatRequest(
            model=self.settings.model,
            max_tokens=self.settings.max_tokens,
            messages=[ChatMessage(role="user", content=text)],
        )

    def _headers(self, api_key: str) -> Dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": self.settings.api_version,
            "content-type": "application/json",
        }

    def send(self, api_key: str, text: str) -> str:
        """
        Send one chat message and return the reply text

        Args:
            api_key: Provider API key
            text: Literal user input

        Returns:
            Text of the first content block in the reply

        Raises:
            InvalidRequest: key or message cannot be encoded
            NetworkError: transport failure
            RemoteApiError: provider returned a structured error
            UnrecognizedResponse: body matched neither known shape
        """
        request = self.build_request(text)
        debug_logger.log_ai(
            f"Sending message: '{text[:50]}{'...' if len(text) > 50 else ''}'",
            model=request.model,
        )

        try:
            payload = request.model_dump_json()
        except PydanticSerializationError as e:
            raise InvalidRequest(f"Message could not be encoded: {e}") from e

        started_at = time.perf_counter()
        try:
            response = self.client.post(
                self.settings.api_url,
                headers=self._headers(api_key),
                content=payload,
            )
            body = response.text
        except httpx.HTTPError as e:
            debug_logger.log_ai(f"Transport error: {e}", started_at)
            raise NetworkError(str(e)) from e
        except (UnicodeEncodeError, httpx.InvalidURL) as e:
            # header values must be ASCII
            raise InvalidRequest(f"Request could not be encoded: {e}") from e

        debug_logger.log_timing("Messages API call", (time.perf_counter() - started_at) * 1000,
                                status=response.status_code)

        parsed = parse_response(body)
        if isinstance(parsed, Success):
            debug_logger.log_ai(f"Reply length: {len(parsed.text)} characters")
            return parsed.text
        if isinstance(parsed, RemoteError):
            debug_logger.log_ai(f"Provider error: {parsed.message}")
            raise RemoteApiError(parsed.message)

        logger.error("Unrecognized response format: %s", parsed.raw)
        raise UnrecognizedResponse(UNKNOWN_FORMAT_MESSAGE, parsed.raw)
