"""
utils/dates.py
--------------
Timestamp helpers for the record store's date fields.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """
    Format a datetime the way the record store stores timestamps:
    UTC, millisecond precision, `Z` suffix (e.g. 2024-05-01T08:30:00.000Z).

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
