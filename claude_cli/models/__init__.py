"""
Data models for Claude CLI

This module contains all Pydantic models for data validation and serialization.
"""

from .chat import (
    ApiErrorDetail,
    ApiErrorResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ContentBlock,
    ParsedResponse,
    RemoteError,
    Success,
    Unrecognized,
)

__all__ = [
    "ApiErrorDetail",
    "ApiErrorResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ContentBlock",
    "ParsedResponse",
    "RemoteError",
    "Success",
    "Unrecognized",
]
