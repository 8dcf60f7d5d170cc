"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Record store ──────────────────────────────────────────
RECORD_STORE_URL: str = os.getenv("RECORD_STORE_URL", "")
RECORD_STORE_API_KEY: str = os.getenv("RECORD_STORE_API_KEY", "")
RECORD_STORE_PROJECT_ID: str = os.getenv("RECORD_STORE_PROJECT_ID", "")
RECORD_STORE_TIMEOUT: float = float(os.getenv("RECORD_STORE_TIMEOUT", "10"))

# ── Telegram notifications ────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

_raw_ids = os.getenv("NOTIFY_CHAT_IDS", "")
NOTIFY_CHAT_IDS: list[int] = (
    [int(cid.strip()) for cid in _raw_ids.split(",") if cid.strip()]
    if _raw_ids
    else []
)

# ── Tasks ─────────────────────────────────────────────────
UPCOMING_TASK_DAYS: int = int(os.getenv("UPCOMING_TASK_DAYS", "7"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
