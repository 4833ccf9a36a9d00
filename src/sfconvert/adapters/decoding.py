"""
Decoding of result values (wire → Python direction only).

Each result field arrives as a string, or None for SQL NULL, together with
the column's wire type tag. `decode` dispatches on the tag:

- text: the string unchanged
- fixed, real, boolean: Python numbers and booleans
- date: day count since the epoch, as UTC midnight
- time: seconds since start of day, offset from 0001-01-01T00:00:00Z
- timestamp_ntz: epoch seconds, as a naive datetime
- timestamp_ltz: epoch seconds, normalized into the local zone
- timestamp_tz: epoch seconds and a biased minute offset

Unrecognized tags are not an error: the string passes through unchanged.
"""
import datetime
import logging
import re
from typing import Any

from dateutil import tz
from sfconvert.adapters.timestamp import decompose_epoch, from_day_count
from sfconvert.adapters.timestamp import from_epoch_naive, from_epoch_utc
from sfconvert.adapters.timestamp import from_time_of_day, parse_int64
from sfconvert.adapters.timestamp import to_pandas_timestamp
from sfconvert.adapters.type_inference import NativeValue
from sfconvert.adapters.type_mapping import WireTypeTag, resolve_tag
from sfconvert.exceptions import InvalidTimestampTzError, ParseError
from sfconvert.options import ConversionOptions, default_options

logger = logging.getLogger(__name__)

# TIMESTAMP_TZ offsets are stored as minutes + 1440 to stay non-negative
TZ_OFFSET_BIAS = 1440
MINUTES_PER_DAY = 1440

_FIXED_PATTERN = re.compile(r'[+-]?[0-9]+(\.[0-9]*)?')

BOOLEAN_STRINGS = {
    '1': True,
    'true': True,
    '0': False,
    'false': False,
    }


def offset_zone(minutes: int) -> datetime.tzinfo:
    """Fixed-offset zone named like ``+0130``.

    >>> offset_zone(-60).tzname(None)
    '-0100'
    """
    sign = '-' if minutes < 0 else '+'
    hours, mins = divmod(abs(minutes), 60)
    return tz.tzoffset(f'{sign}{hours:02d}{mins:02d}', minutes * 60)


def _decode_fixed(raw: str) -> int | float:
    """Integers stay exact at any width, scaled values become floats.
    """
    if _FIXED_PATTERN.fullmatch(raw) is None:
        raise ParseError(raw)
    if '.' in raw:
        return float(raw)
    return int(raw)


def _decode_real(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ParseError(raw) from exc


def _decode_boolean(raw: str) -> bool:
    try:
        return BOOLEAN_STRINGS[raw.lower()]
    except KeyError as exc:
        raise ParseError(raw, f'invalid boolean value: {raw!r}') from exc


def _decode_timestamp_ltz(raw: str, options: ConversionOptions) -> datetime.datetime:
    """Shift the epoch instant by the local offset in force at that instant.
    """
    seconds, nanos = decompose_epoch(raw)
    zone = options.zone
    if options.nanosecond_precision:
        instant = to_pandas_timestamp(seconds, nanos)
    else:
        instant = from_epoch_utc(seconds, nanos)
    try:
        offset = instant.astimezone(zone).utcoffset()
        logger.debug(f'local: {zone!r}, {offset}')
        return (instant - offset).astimezone(zone)
    except (OverflowError, ValueError) as exc:
        raise ParseError(raw, f'value out of range: {raw!r}') from exc


def _decode_timestamp_tz(raw: str, options: ConversionOptions) -> datetime.datetime:
    """Decode ``'<epoch> <biased offset>'`` into a fixed-offset datetime.
    """
    logger.debug(f'tz: {raw}')
    fields = raw.split(' ')
    if len(fields) != 2:
        raise InvalidTimestampTzError(raw)
    epoch_part, offset_part = fields
    seconds, nanos = decompose_epoch(epoch_part)
    try:
        minutes = parse_int64(offset_part) - TZ_OFFSET_BIAS
    except ParseError as exc:
        raise InvalidTimestampTzError(raw) from exc
    if abs(minutes) >= MINUTES_PER_DAY:
        raise InvalidTimestampTzError(raw)
    zone = offset_zone(minutes)
    if options.nanosecond_precision:
        return to_pandas_timestamp(seconds, nanos, tz=zone)
    try:
        return from_epoch_utc(seconds, nanos).astimezone(zone)
    except OverflowError as exc:
        raise ParseError(raw, f'value out of range: {raw!r}') from exc


def decode(field: str | None, tag: Any,
           options: ConversionOptions | None = None) -> NativeValue:
    """Convert one encoded result field to a Python value.

    Args:
        field: Encoded value, None for SQL NULL
        tag: Column type, a WireTypeTag or the metadata type string
        options: Conversion options, defaults to `default_options`

    Returns
        Decoded value, None when the field is None

    Raises
        ParseError: malformed numeric segment
        InvalidTimestampTzError: malformed TIMESTAMP_TZ payload
    """
    if field is None:
        return None
    options = options or default_options

    match resolve_tag(tag):
        case WireTypeTag.TEXT:
            return field
        case WireTypeTag.FIXED:
            return _decode_fixed(field)
        case WireTypeTag.REAL:
            return _decode_real(field)
        case WireTypeTag.BOOLEAN:
            return _decode_boolean(field)
        case WireTypeTag.DATE:
            return from_day_count(parse_int64(field))
        case WireTypeTag.TIME:
            seconds, nanos = decompose_epoch(field)
            logger.debug(f'SEC: {seconds}, NSEC: {nanos}')
            return from_time_of_day(seconds, nanos)
        case WireTypeTag.TIMESTAMP_NTZ:
            seconds, nanos = decompose_epoch(field)
            if options.nanosecond_precision:
                return to_pandas_timestamp(seconds, nanos, tz=None)
            return from_epoch_naive(seconds, nanos)
        case WireTypeTag.TIMESTAMP_LTZ:
            return _decode_timestamp_ltz(field, options)
        case WireTypeTag.TIMESTAMP_TZ:
            return _decode_timestamp_tz(field, options)
        case _:
            # unrecognized tags keep the raw string
            return field
