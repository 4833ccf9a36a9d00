"""
Wire type tags and their Python counterparts.

Every encoded field travels with a logical type label taken from the column
metadata (result side) or inferred from the bound value (parameter side).
This module defines the closed set of labels the driver understands and the
Python type each one decodes into.

The module focuses solely on type identification, not conversion.
"""
import datetime
import enum
import logging
from typing import Any

logger = logging.getLogger(__name__)


class WireTypeTag(str, enum.Enum):
    """Logical column type accompanying each encoded value.

    Member values are the lower-case names found in result metadata. Binding
    payloads use the upper-case member name (see `binding_name`).
    """
    FIXED = 'fixed'
    BOOLEAN = 'boolean'
    REAL = 'real'
    TEXT = 'text'
    DATE = 'date'
    TIME = 'time'
    TIMESTAMP_NTZ = 'timestamp_ntz'
    TIMESTAMP_LTZ = 'timestamp_ltz'
    TIMESTAMP_TZ = 'timestamp_tz'

    @property
    def binding_name(self) -> str:
        return self.name

    @property
    def is_temporal(self) -> bool:
        return self in TEMPORAL_TAGS

    def __str__(self) -> str:
        return self.value


TEMPORAL_TAGS = frozenset({
    WireTypeTag.DATE,
    WireTypeTag.TIME,
    WireTypeTag.TIMESTAMP_NTZ,
    WireTypeTag.TIMESTAMP_LTZ,
    WireTypeTag.TIMESTAMP_TZ,
    })

python_types = {
    WireTypeTag.FIXED: int,
    WireTypeTag.BOOLEAN: bool,
    WireTypeTag.REAL: float,
    WireTypeTag.TEXT: str,
    WireTypeTag.DATE: datetime.datetime,
    WireTypeTag.TIME: datetime.datetime,
    WireTypeTag.TIMESTAMP_NTZ: datetime.datetime,
    WireTypeTag.TIMESTAMP_LTZ: datetime.datetime,
    WireTypeTag.TIMESTAMP_TZ: datetime.datetime,
    }


def resolve_tag(tag: Any) -> WireTypeTag | None:
    """Map a tag from column metadata to a `WireTypeTag`.

    Strings are matched exactly against the lower-case wire names, as the
    metadata delivers them. Anything unrecognized resolves to None, which
    callers treat as plain text.

    >>> resolve_tag('timestamp_tz')
    <WireTypeTag.TIMESTAMP_TZ: 'timestamp_tz'>
    >>> resolve_tag('variant') is None
    True
    """
    if isinstance(tag, WireTypeTag):
        return tag
    try:
        return WireTypeTag(tag)
    except ValueError:
        logger.debug(f'Unrecognized wire type tag: {tag!r}')
        return None


def resolve_type(tag: Any) -> type:
    """Get the Python type a value with the given tag decodes into.
    """
    resolved = resolve_tag(tag)
    if resolved is None:
        return str
    return python_types[resolved]
