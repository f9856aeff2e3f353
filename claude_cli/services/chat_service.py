"""
Chat Service

This service runs the interactive loop: it reads lines from stdin,
handles the built-in commands and forwards everything else to the
AI service.
"""

import sys
from enum import Enum
from typing import Optional, TextIO

from ..errors import ApiError
from ..utils.debug_logger import debug_logger
from .ai_service import AIService
from .config_store import Config

PROMPT = "👤 "
REPLY_MARKER = "🤖"
BANNER = "Claude CLI started. Type /quit to exit, /help for commands."
HELP_LINES = (
    "  /quit           Exit the program",
    "  /help           Show this help message",
)


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class ChatService:
    """Service for the interactive chat loop"""

    def __init__(self, config: Config, ai_service: AIService,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.config = config
        self.ai_service = ai_service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.state = LoopState.RUNNING

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)

    def run(self) -> None:
        """Prompt and dispatch until /quit or end of input; read errors propagate"""
        self._print(BANNER)

        while self.state is LoopState.RUNNING:
            self.stdout.write(PROMPT)
            self.stdout.flush()

            raw = self.stdin.readline()
            if not raw:
                debug_logger.log_chat("End of input, leaving loop")
                self.state = LoopState.TERMINATED
                break

            self.handle_line(raw)

    def handle_line(self, raw: str) -> LoopState:
        """
        Dispatch one line of input

        Args:
            raw: Line as read from stdin, surrounding whitespace included

        Returns:
            Loop state after handling the line
        """
        line = raw.strip()

        if line == "/quit":
            self.state = LoopState.TERMINATED
        elif line == "/help":
            for help_line in HELP_LINES:
                self._print(help_line)
        elif line:
            self._send(line)

        return self.state

    def _send(self, line: str) -> None:
        try:
            reply = self.ai_service.send(self.config.api_key, line)
        except ApiError as e:
            debug_logger.log_chat(f"Message failed: {type(e).__name__}")
            self._print(f"Error: {e}")
            return

        self._print(f"{REPLY_MARKER} {reply}")
