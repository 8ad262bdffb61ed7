"""Lookback window helpers."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta


def as_datetime(value: date | datetime, like: datetime) -> datetime:
    """Promote a plain date to midnight, in the timezone of ``like``."""

    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=like.tzinfo)


def window_start(now: datetime, days: float) -> datetime:
    return now - timedelta(days=days)


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def to_local_naive(value: datetime) -> datetime:
    """Convert an offset-aware datetime to naive local time; naive values pass through."""

    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
