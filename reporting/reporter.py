"""
reporting/reporter.py
---------------------
The reporting port and its in-process implementations.
"""

from typing import Protocol

from utils.logger import get_logger

logger = get_logger(__name__)


class Reporter(Protocol):
    """Receives human-readable error strings meant for the user."""

    def error(self, message: str) -> None:
        ...


class LogReporter:
    """Default reporter: writes user-facing messages to the log."""

    def error(self, message: str) -> None:
        logger.warning(f"⚠️ {message}")


class CollectingReporter:
    """Keeps every reported message in memory, in order."""

    def __init__(self):
        self.messages: list[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()
