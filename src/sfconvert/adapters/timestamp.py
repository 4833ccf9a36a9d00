"""
Epoch string decomposition and datetime materialization.

Temporal values arrive as decimal seconds since the epoch with an optional
fraction of up to nine digits (``'1000'``, ``'1000.123'``,
``'-86400.5'``). `decompose_epoch` splits such a string into whole seconds
and nanoseconds; the ``from_*`` functions turn the parts back into datetimes.

Python datetimes carry microseconds, so digits below the microsecond are
dropped unless the caller asks for `pandas.Timestamp` results.
"""
import datetime
import logging
import re

import pandas as pd
from sfconvert.exceptions import ParseError

logger = logging.getLogger(__name__)

__all__ = [
    'decompose_epoch',
    'parse_int64',
    'from_day_count',
    'from_epoch_utc',
    'from_epoch_naive',
    'from_time_of_day',
    'to_pandas_timestamp',
]

UTC = datetime.timezone.utc
EPOCH = datetime.datetime(1970, 1, 1, tzinfo=UTC)
# TIME values are offsets from the zero instant, not calendar dates
TIME_REFERENCE = datetime.datetime(1, 1, 1, tzinfo=UTC)

SECONDS_PER_DAY = 86400
NANOS_PER_SECOND = 1_000_000_000
FRACTION_DIGITS = 9

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')


def parse_int64(raw: str) -> int:
    """Parse a strict base-10 signed 64-bit integer.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and out-of-range values are rejected.

    >>> parse_int64('-42')
    -42
    """
    if not isinstance(raw, str) or _INT_PATTERN.fullmatch(raw) is None:
        raise ParseError(raw)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(raw, f'value out of range: {raw!r}')
    return value


def decompose_epoch(raw: str) -> tuple[int, int]:
    """Split an epoch string into (seconds, nanoseconds).

    The part after the first ``.`` is right-padded with zeros to nine digits.
    Longer fractions are parsed as they are, so the nanosecond part can exceed
    one second; materialization carries the excess into the seconds.

    >>> decompose_epoch('1000')
    (1000, 0)
    >>> decompose_epoch('1000.123')
    (1000, 123000000)
    >>> decompose_epoch('1000.123456789')
    (1000, 123456789)
    """
    logger.debug(f'Decomposing epoch value: {raw}')
    seconds_part, separator, fraction = raw.partition('.')
    seconds = parse_int64(seconds_part)
    if not separator:
        return seconds, 0
    # TODO: decide between truncating and rejecting fractions over nine digits
    nanos = parse_int64(fraction.ljust(FRACTION_DIGITS, '0'))
    logger.debug(f'sec: {seconds}, nsec: {nanos}')
    return seconds, nanos


def _elapsed(seconds: int, nanos: int) -> datetime.timedelta:
    return datetime.timedelta(seconds=seconds, microseconds=nanos // 1000)


def _shift(reference: datetime.datetime, seconds: int, nanos: int, raw) -> datetime.datetime:
    try:
        return reference + _elapsed(seconds, nanos)
    except OverflowError as exc:
        raise ParseError(raw, f'value out of range: {raw!r}') from exc


def from_epoch_utc(seconds: int, nanos: int = 0) -> datetime.datetime:
    """Timezone-aware UTC datetime for an epoch offset.
    """
    return _shift(EPOCH, seconds, nanos, f'{seconds}.{nanos:09d}')


def from_epoch_naive(seconds: int, nanos: int = 0) -> datetime.datetime:
    """Naive datetime holding the UTC wall clock for an epoch offset.
    """
    return from_epoch_utc(seconds, nanos).replace(tzinfo=None)


def from_day_count(days: int) -> datetime.datetime:
    """UTC midnight of the day `days` after the epoch.

    >>> from_day_count(1)
    datetime.datetime(1970, 1, 2, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return _shift(EPOCH, days * SECONDS_PER_DAY, 0, str(days))


def from_time_of_day(seconds: int, nanos: int = 0) -> datetime.datetime:
    """Instant `seconds` after the zero reference point, as a time of day.

    >>> from_time_of_day(3600).time()
    datetime.time(1, 0)
    """
    return _shift(TIME_REFERENCE, seconds, nanos, f'{seconds}.{nanos:09d}')


def to_pandas_timestamp(seconds: int, nanos: int = 0,
                        tz: datetime.tzinfo | None = UTC) -> pd.Timestamp:
    """Nanosecond precision timestamp for an epoch offset.

    With `tz` None the result is naive and holds the UTC wall clock. Raises
    ParseError outside the range pandas can represent.
    """
    try:
        value = pd.Timestamp(seconds * NANOS_PER_SECOND + nanos, unit='ns', tz=UTC)
    except (OverflowError, ValueError) as exc:
        raise ParseError(f'{seconds}.{nanos:09d}', f'value out of range: {seconds}.{nanos:09d}') from exc
    if tz is None:
        return value.tz_localize(None)
    return value.tz_convert(tz)
