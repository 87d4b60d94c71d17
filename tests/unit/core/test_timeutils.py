"""
Unit tests for the UTC helpers.
"""

import datetime

from pydantic import BaseModel

from liftlog.core.timeutils import UTCDateTime, as_utc, as_utc_or_none, utc_now

UTC = datetime.timezone.utc


class _Stamped(BaseModel):
    at: UTCDateTime


class TestAsUtc:

    def test_offset_converted(self):
        value = datetime.datetime(2026, 10, 19, 23, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=-5)))
        assert as_utc(value) == datetime.datetime(2026, 10, 20, 4, 30, tzinfo=UTC)
        assert as_utc(value).tzinfo == UTC

    def test_naive_taken_as_utc(self):
        assert as_utc(datetime.datetime(2026, 1, 1, 12, 0)) == datetime.datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_none_passthrough(self):
        assert as_utc_or_none(None) is None

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo == UTC


class TestUTCDateTimeField:

    def test_parses_offset_string(self):
        stamped = _Stamped(at="2026-10-19T23:30:00-05:00")
        assert stamped.at == datetime.datetime(2026, 10, 20, 4, 30, tzinfo=UTC)
        assert stamped.at.utcoffset() == datetime.timedelta(0)
