"""
Services layer for Claude CLI

This module contains the config store, the API client and the
interactive chat loop.
"""

from .ai_service import AIService, parse_response
from .chat_service import ChatService, LoopState
from .config_store import Config

__all__ = [
    "AIService",
    "ChatService",
    "Config",
    "LoopState",
    "parse_response",
]
