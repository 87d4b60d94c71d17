"""
UTC helpers.

All timestamps are stored and compared as timezone-aware UTC.  Values
without an offset are taken to be UTC already.
"""

import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Convert ``value`` to an aware UTC datetime."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def as_utc_or_none(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    return as_utc(value) if value is not None else None


# Datetime field type for API schemas.  Incoming offsets are folded into UTC,
# and naive values read back from SQLite are tagged as UTC.
UTCDateTime = Annotated[datetime.datetime, AfterValidator(as_utc)]
