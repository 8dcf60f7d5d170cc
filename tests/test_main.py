"""Entry point tests, with the Telegram bot replaced by mocks."""

from unittest.mock import AsyncMock, MagicMock

import pytest

import main


class FailingDashboard:
    """Reports a user-facing error, then fails before the overview is built."""

    def __init__(self, reporter):
        self.reporter = reporter

    async def get_overview(self):
        self.reporter.error("Table farms_c is locked")
        raise RuntimeError("dashboard exploded")


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def bot(monkeypatch, events) -> MagicMock:
    bot = MagicMock()
    bot.initialize = AsyncMock()
    bot.send_message = AsyncMock(side_effect=lambda **kwargs: events.append(("send", kwargs["text"])))
    bot.shutdown = AsyncMock(side_effect=lambda: events.append(("shutdown", None)))
    monkeypatch.setattr(main, "TELEGRAM_BOT_TOKEN", "token")
    monkeypatch.setattr(main, "NOTIFY_CHAT_IDS", [42])
    monkeypatch.setattr(main, "Bot", lambda token: bot)
    return bot


@pytest.mark.asyncio
async def test_pending_notifications_delivered_before_shutdown_on_failure(monkeypatch, bot, events) -> None:
    monkeypatch.setattr(main, "build_dashboard", FailingDashboard)

    with pytest.raises(RuntimeError):
        await main.run()

    assert events == [("send", "⚠️ Table farms_c is locked"), ("shutdown", None)]


@pytest.mark.asyncio
async def test_report_sent_to_chats(monkeypatch, bot, events) -> None:
    overview = MagicMock()
    dashboard = MagicMock()
    dashboard.get_overview = AsyncMock(return_value=overview)
    monkeypatch.setattr(main, "build_dashboard", lambda reporter: dashboard)
    monkeypatch.setattr(main, "format_overview", lambda o: "🌾 Farm dashboard")

    await main.run()

    assert events == [("send", "🌾 Farm dashboard"), ("shutdown", None)]
