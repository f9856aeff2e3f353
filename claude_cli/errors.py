"""Exception types raised by the Claude CLI."""

from __future__ import annotations


class ClaudeCliError(Exception):
    """Base error for Claude CLI failures."""


class ConfigDirNotFound(ClaudeCliError):
    """Raised when the platform cannot supply a per-user config directory."""


class ApiError(ClaudeCliError):
    """Base error for a single failed chat message; the loop keeps running."""


class NetworkError(ApiError):
    """Raised when the HTTP transport fails before a response body is read."""


class RemoteApiError(ApiError):
    """Raised when the provider returns a structured error payload."""


class InvalidRequest(ApiError):
    """Raised when the key or message cannot be encoded into an HTTP request."""


class UnrecognizedResponse(ApiError):
    """Raised when a response body matches neither known payload shape."""

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw
