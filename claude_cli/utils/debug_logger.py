"""
Debug logging utility with timing support

Provides centralized debug logging with operation timing and consistent formatting.
Output goes to stderr so it never mixes with chat replies on stdout.
"""

import sys
import time
from typing import Optional

from ..config import get_settings


class DebugLogger:
    """Centralized debug logging with timing support"""

    def __init__(self, enabled: Optional[bool] = None):
        self.debug_enabled = get_settings().debug if enabled is None else enabled

    def log(self,
            service: str,
            message: str,
            started_at: Optional[float] = None,
            **kwargs) -> None:
        """
        Log a debug message with optional timing information

        Args:
            service: Service/component name (e.g., 'CONFIG', 'AI', 'CHAT')
            message: Debug message
            started_at: time.perf_counter() value the elapsed time is measured from
            **kwargs: Additional context to include in log
        """
        if not self.debug_enabled:
            return

        elapsed_seconds = None
        if started_at is not None:
            elapsed_seconds = f"{time.perf_counter() - started_at:.3f}s"

        timing_part = f" [{elapsed_seconds}]" if elapsed_seconds else ""

        context_str = ""
        if kwargs:
            context_items = [f"{k}={v}" for k, v in kwargs.items()]
            context_str = f" {' '.join(context_items)}"

        # Format: [DEBUG] [service] [timing] message [context]
        log_message = f"[DEBUG] [{service}]{timing_part} {message}{context_str}"

        print(log_message, file=sys.stderr)

    def log_config(self, message: str, **kwargs):
        """Log a config store debug message"""
        self.log("CONFIG", message, **kwargs)

    def log_ai(self, message: str, started_at: Optional[float] = None, **kwargs):
        """Log an API client debug message"""
        self.log("AI", message, started_at, **kwargs)

    def log_chat(self, message: str, **kwargs):
        """Log an interactive loop debug message"""
        self.log("CHAT", message, **kwargs)

    def log_timing(self, operation: str, duration_ms: float, **kwargs):
        """Log a specific timing measurement"""
        self.log("TIMING", f"{operation} completed in {duration_ms:.3f}ms", **kwargs)


# Global debug logger instance
debug_logger = DebugLogger()
