"""
reporting/telegram_reporter.py
------------------------------
Delivers user-facing error messages to Telegram chats.
"""

import asyncio
from typing import Iterable, Optional

from telegram import Bot

from utils.logger import get_logger

logger = get_logger(__name__)


class TelegramReporter:
    """
    Sends every reported message to a fixed set of chats.

    `error()` is synchronous and returns immediately: delivery is scheduled
    on the running event loop. Without a running loop the message is only
    logged. Delivery failures are logged and dropped.
    """

    def __init__(self, bot: Bot, chat_ids: Iterable[int]):
        self.bot = bot
        self.chat_ids = list(chat_ids)
        self._pending: set[asyncio.Task] = set()

    def error(self, message: str) -> None:
        loop = self._running_loop()
        if loop is None:
            logger.warning(f"No event loop, Telegram message dropped: {message}")
            return
        for chat_id in self.chat_ids:
            task = loop.create_task(self._send(chat_id, f"⚠️ {message}"))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def flush(self) -> None:
        """Wait for every scheduled delivery to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    async def _send(self, chat_id: int, text: str) -> None:
        try:
            await self.bot.send_message(chat_id=chat_id, text=text)
        except Exception as e:
            logger.error(f"Failed to send notification to {chat_id}: {e}")

    @staticmethod
    def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None
