"""Declarative base shared by all models."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the form stored in the DB)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Return a mutation timestamp strictly later than ``previous``.

    Coarse clocks can hand back the same value twice in a row; in that case
    the previous value is advanced by one microsecond.
    """
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now
