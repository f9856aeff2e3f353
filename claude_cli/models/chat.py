"""
Chat-related data models

These models define the wire shapes of the Messages API request and
responses, plus the tagged outcome produced when a response body is parsed.
"""

from typing import List, Literal, Union

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single user-authored turn"""
    role: str
    content: str


class ChatRequest(BaseModel):
    """Request body for a single-turn chat call"""
    model: str
    max_tokens: int
    messages: List[ChatMessage]


class ContentBlock(BaseModel):
    text: str


class ChatResponse(BaseModel):
    """Successful response; the first block's text is shown to the user"""
    content: List[ContentBlock] = Field(min_length=1)


class ApiErrorDetail(BaseModel):
    message: str


class ApiErrorResponse(BaseModel):
    """Structured failure reported by the provider"""
    error: ApiErrorDetail


class Success(BaseModel):
    kind: Literal["success"] = "success"
    text: str


class RemoteError(BaseModel):
    kind: Literal["remote_error"] = "remote_error"
    message: str


class Unrecognized(BaseModel):
    kind: Literal["unrecognized"] = "unrecognized"
    raw: str


ParsedResponse = Union[Success, RemoteError, Unrecognized]
