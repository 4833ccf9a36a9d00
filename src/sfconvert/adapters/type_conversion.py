"""
Type conversion for query parameters (Python → wire direction only).

It provides:
1. `encode`, turning one native value into the string handed to the transport
2. `format_float32`, the float formatting used for REAL parameters
3. A weak legacy path for containers and records, which are stringified

Usage:
    encoded = encode(42)            # '42'
    encoded = encode(None)          # None, SQL NULL
    encoded = encode(0.1)           # '0.1'
"""
import dataclasses
import logging
from collections.abc import Mapping, Sequence, Set
from typing import Any

import numpy as np
from sfconvert.adapters.type_inference import to_native

logger = logging.getLogger(__name__)

# Exponent form is used outside [1e-4, 1e6)
SCIENTIFIC_MIN_EXPONENT = -4
SCIENTIFIC_MAX_EXPONENT = 6

BINARY_TYPES = (str, bytes, bytearray, memoryview)


def format_float32(value: float) -> str:
    """Format a float with the shortest digits that identify it as float32.

    The value is rounded to single precision first, whatever its source
    width, so wide values lose digits.

    >>> format_float32(0.1)
    '0.1'
    >>> format_float32(1 / 3)
    '0.33333334'
    >>> format_float32(1e6)
    '1e+06'
    >>> format_float32(float('-inf'))
    '-Inf'
    """
    with np.errstate(over='ignore'):
        single = np.float32(value)
    if np.isnan(single):
        return 'NaN'
    if np.isinf(single):
        return '+Inf' if single > 0 else '-Inf'
    scientific = np.format_float_scientific(single, unique=True, trim='-', exp_digits=2)
    exponent = int(scientific.rsplit('e', 1)[1])
    if exponent < SCIENTIFIC_MIN_EXPONENT or exponent >= SCIENTIFIC_MAX_EXPONENT:
        return scientific
    return np.format_float_positional(single, unique=True, trim='-')


def _is_container(value: Any) -> bool:
    """Check for sequences, mappings, sets and dataclass records.
    """
    if isinstance(value, BINARY_TYPES):
        return False
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, Mapping | Sequence | Set)


def _encode_container(value: Any) -> str | None:
    """Stringify a container, empty ones are NULL.

    There is no round trip for these values.
    """
    if dataclasses.is_dataclass(value):
        return str(value)
    if len(value) == 0:
        return None
    return str(value)


def encode(value: Any) -> str | None:
    """Convert a value to its wire string for parameter binding.

    Args:
        value: Value to bind

    Returns
        Encoded string, or None for SQL NULL

    Raises
        UnsupportedTypeError: value has no wire representation
    """
    logger.debug(f'Encoding parameter of type {type(value).__name__}: {value!r}')
    if _is_container(value):
        return _encode_container(value)

    native = to_native(value)
    if native is None:
        return None
    if isinstance(native, bool):
        return 'true' if native else 'false'
    if isinstance(native, int):
        return str(native)
    if isinstance(native, float):
        return format_float32(native)
    if isinstance(native, str):
        return native
    # temporal instants have no dedicated wire form and take the record path
    return str(native)
