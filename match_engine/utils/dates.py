"""Timestamp helpers"""
from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Return an aware timestamp; naive timestamps are read as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
