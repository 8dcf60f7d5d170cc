"""
main.py
-------
Entry point for FarmBook.

Responsibilities:
    - Initialize the record store client.
    - Wire the reporter (Telegram when configured, log otherwise) and repositories.
    - Build the dashboard overview, print it and send it to the notify chats.
"""

import asyncio
from typing import Optional

from telegram import Bot

from config import NOTIFY_CHAT_IDS, TELEGRAM_BOT_TOKEN
from reporting import LogReporter, Reporter, TelegramReporter
from repositories import CropRepository, FarmRepository, FinancialRepository, TaskRepository
from services.dashboard_service import DashboardService, format_overview
from store.client import close_client, get_client, init_client
from utils.logger import get_logger

logger = get_logger(__name__)


def build_dashboard(reporter: Reporter) -> DashboardService:
    """Create the four repositories around the shared client."""
    client = get_client()
    return DashboardService(
        farms=FarmRepository(client, reporter),
        crops=CropRepository(client, reporter),
        tasks=TaskRepository(client, reporter),
        finances=FinancialRepository(client, reporter),
    )


async def send_report(bot: Bot, text: str) -> None:
    """Send the dashboard report to every configured chat."""
    for chat_id in NOTIFY_CHAT_IDS:
        try:
            await bot.send_message(chat_id=chat_id, text=text)
            logger.info(f"Sent dashboard report to chat {chat_id}")
        except Exception as e:
            logger.error(f"Failed to send dashboard report to {chat_id}: {e}")


async def run() -> None:
    """Build the overview once and deliver it."""
    init_client()
    bot: Optional[Bot] = None
    notifier: Optional[TelegramReporter] = None
    try:
        if TELEGRAM_BOT_TOKEN and NOTIFY_CHAT_IDS:
            bot = Bot(TELEGRAM_BOT_TOKEN)
            await bot.initialize()
            notifier = TelegramReporter(bot, NOTIFY_CHAT_IDS)
        reporter: Reporter = notifier or LogReporter()

        overview = await build_dashboard(reporter).get_overview()
        report = format_overview(overview)
        print(report)

        if bot is not None:
            await send_report(bot, report)
    finally:
        if notifier is not None:
            await notifier.flush()
        if bot is not None:
            await bot.shutdown()
        await close_client()


def main() -> None:
    logger.info("🚜 FarmBook starting...")
    asyncio.run(run())
    logger.info("FarmBook finished.")


if __name__ == "__main__":
    main()
