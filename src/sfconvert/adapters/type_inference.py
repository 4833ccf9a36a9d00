"""
Type inference for outgoing parameters.

`to_native` is the one place where arbitrary caller values enter the closed
set of native kinds (None, bool, int, float, str, datetime). NumPy and Pandas
scalars are unwrapped here; anything else is rejected with
UnsupportedTypeError. `infer_tag` picks the wire type label sent alongside an
encoded parameter and never fails.
"""
import datetime
import logging
from typing import Any

import numpy as np
import pandas as pd
from sfconvert.adapters.type_mapping import WireTypeTag
from sfconvert.exceptions import UnsupportedTypeError

logger = logging.getLogger(__name__)

NativeValue = None | bool | int | float | str | datetime.datetime

BOOL_TYPES = (bool, np.bool_)
INT_TYPES = (int, np.integer)
FLOAT_TYPES = (float, np.floating)
TEMPORAL_TYPES = (datetime.date, np.datetime64)


def is_missing(value: Any) -> bool:
    """Check whether a value is a null marker.

    None, `pd.NA`, `pd.NaT` and NumPy NaT count as missing. Float NaN is a
    number and does not.
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    if isinstance(value, np.datetime64):
        return bool(np.isnat(value))
    return False


def _datetime64_to_datetime(value: np.datetime64) -> datetime.datetime:
    """Convert np.datetime64 to a naive datetime holding the UTC wall clock.
    """
    return pd.Timestamp(value).to_pydatetime(warn=False)


def to_native(value: Any) -> NativeValue:
    """Convert a caller-supplied value into a native value.

    Raises UnsupportedTypeError for kinds with no native counterpart.

    >>> import numpy as np
    >>> to_native(np.int16(7))
    7
    >>> to_native(np.bool_(True))
    True
    """
    if is_missing(value):
        return None
    if isinstance(value, BOOL_TYPES):
        return bool(value)
    if isinstance(value, INT_TYPES):
        return int(value)
    if isinstance(value, FLOAT_TYPES):
        return float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, np.datetime64):
        return _datetime64_to_datetime(value)
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    logger.debug(f'No native counterpart for {type(value).__name__}')
    raise UnsupportedTypeError(type(value))


def infer_tag(value: Any) -> WireTypeTag:
    """Get the wire type label for a parameter value.

    Temporal values are labelled DATE whether or not they carry a time of
    day, so the time part is not preserved by the label.

    >>> infer_tag(42)
    <WireTypeTag.FIXED: 'fixed'>
    >>> infer_tag(True)
    <WireTypeTag.BOOLEAN: 'boolean'>
    >>> infer_tag(object())
    <WireTypeTag.TEXT: 'text'>
    """
    # bool before int, bool is an int subclass
    if isinstance(value, BOOL_TYPES):
        return WireTypeTag.BOOLEAN
    if isinstance(value, INT_TYPES):
        return WireTypeTag.FIXED
    if isinstance(value, FLOAT_TYPES):
        return WireTypeTag.REAL
    if isinstance(value, TEMPORAL_TYPES) and not is_missing(value):
        return WireTypeTag.DATE
    return WireTypeTag.TEXT
