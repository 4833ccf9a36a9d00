"""
Tests for epoch string decomposition and datetime materialization.
"""
import datetime

import pandas as pd
import pytest
from sfconvert.adapters.timestamp import decompose_epoch, from_day_count
from sfconvert.adapters.timestamp import from_epoch_naive, from_epoch_utc
from sfconvert.adapters.timestamp import from_time_of_day, parse_int64
from sfconvert.adapters.timestamp import to_pandas_timestamp
from sfconvert.exceptions import ParseError


class TestDecomposeEpoch:
    """Splitting epoch strings into seconds and nanoseconds"""

    def test_whole_seconds(self):
        """Test a value without fraction has zero nanoseconds"""
        assert decompose_epoch('1000') == (1000, 0)

    def test_fraction_is_padded_to_nanoseconds(self):
        """Test short fractions are right-padded to nine digits"""
        assert decompose_epoch('1000.123') == (1000, 123000000)
        assert decompose_epoch('1000.5') == (1000, 500000000)

    def test_full_nanosecond_fraction(self):
        """Test a nine digit fraction is taken as is"""
        assert decompose_epoch('1000.123456789') == (1000, 123456789)

    def test_negative_seconds(self):
        """Test the seconds field may be negative, the fraction stays positive"""
        assert decompose_epoch('-1') == (-1, 0)
        assert decompose_epoch('-1.5') == (-1, 500000000)

    def test_empty_fraction(self):
        """Test a trailing separator means zero nanoseconds"""
        assert decompose_epoch('5.') == (5, 0)

    def test_long_fraction_not_truncated(self):
        """Test fractions over nine digits overflow the nanosecond range"""
        seconds, nanos = decompose_epoch('1.1234567891')
        assert seconds == 1
        assert nanos == 1234567891

    @pytest.mark.parametrize('raw', [
        '',
        'abc',
        '.5',
        '1.2.3',
        ' 1',
        '1 ',
        '1_000',
        '1.x',
        '9223372036854775808',
        '1.12345678901234567890',
    ])
    def test_malformed_segments(self, raw):
        """Test malformed seconds or fraction segments raise ParseError"""
        with pytest.raises(ParseError) as excinfo:
            decompose_epoch(raw)
        assert isinstance(excinfo.value, ValueError)


def test_parse_int64_bounds():
    """Test the 64-bit signed range is accepted and nothing beyond it"""
    assert parse_int64('9223372036854775807') == 2**63 - 1
    assert parse_int64('-9223372036854775808') == -2**63
    assert parse_int64('+7') == 7
    with pytest.raises(ParseError):
        parse_int64('-9223372036854775809')


def test_parse_int64_rejects_non_ascii_digits():
    """Test only ASCII digits are accepted"""
    with pytest.raises(ParseError):
        parse_int64('١٢')


def test_from_epoch_utc(utc):
    """Test epoch offsets become aware UTC datetimes"""
    assert from_epoch_utc(0) == datetime.datetime(1970, 1, 1, tzinfo=utc)
    assert from_epoch_utc(1000, 500000000) == datetime.datetime(1970, 1, 1, 0, 16, 40, 500000, tzinfo=utc)


def test_from_epoch_naive_truncates_below_microseconds():
    """Test naive datetimes keep the UTC wall clock and drop nanoseconds"""
    value = from_epoch_naive(1000, 123456789)
    assert value.tzinfo is None
    assert value == datetime.datetime(1970, 1, 1, 0, 16, 40, 123456)


def test_nanosecond_overflow_carries_into_seconds():
    """Test a nanosecond part over one second moves the instant forward"""
    assert from_epoch_naive(1, 1234567891) == datetime.datetime(1970, 1, 1, 0, 0, 2, 234567)


def test_from_day_count(utc):
    """Test day counts become UTC midnight"""
    assert from_day_count(0) == datetime.datetime(1970, 1, 1, tzinfo=utc)
    assert from_day_count(-1) == datetime.datetime(1969, 12, 31, tzinfo=utc)
    assert from_day_count(19000) == datetime.datetime(2022, 1, 8, tzinfo=utc)


def test_from_time_of_day(utc):
    """Test time values are offsets from the zero instant"""
    value = from_time_of_day(45296, 789000000)
    assert value.date() == datetime.date(1, 1, 1)
    assert value.time() == datetime.time(12, 34, 56, 789000)
    assert value.tzinfo == utc


def test_out_of_range_raises_parse_error():
    """Test instants outside the datetime range raise ParseError"""
    with pytest.raises(ParseError):
        from_day_count(10**9)
    with pytest.raises(ParseError):
        from_time_of_day(-1)


def test_to_pandas_timestamp_keeps_nanoseconds(utc):
    """Test pandas timestamps carry the full nanosecond part"""
    value = to_pandas_timestamp(1000, 123456789)
    assert isinstance(value, pd.Timestamp)
    assert value.nanosecond == 789
    assert value.tzinfo is not None
    assert value.to_pydatetime(warn=False) == datetime.datetime(1970, 1, 1, 0, 16, 40, 123456, tzinfo=utc)

    naive = to_pandas_timestamp(1000, 123456789, tz=None)
    assert naive.tzinfo is None
    assert naive == pd.Timestamp('1970-01-01 00:16:40.123456789')


def test_to_pandas_timestamp_out_of_range():
    """Test values outside the pandas bounds raise ParseError"""
    with pytest.raises(ParseError):
        to_pandas_timestamp(2**62)
