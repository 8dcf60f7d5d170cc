"""
reporting/ - User-facing Notifications
======================================
Fire-and-forget channel that repositories use to surface human-readable
error messages. Implementations never raise back into the caller.
"""

from reporting.reporter import CollectingReporter, LogReporter, Reporter
from reporting.telegram_reporter import TelegramReporter

__all__ = ["Reporter", "LogReporter", "CollectingReporter", "TelegramReporter"]
