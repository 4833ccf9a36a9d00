"""
Value conversion between a warehouse driver's wire format and Python.

Results arrive as strings tagged with the column's logical type and are
decoded one value at a time; query parameters are labelled with a type and
encoded to strings. Both directions can be called as:
- Module functions: sfconvert.decode(raw, 'timestamp_tz')
- Row/parameter helpers: sfconvert.decode_row(values, columns)

Nothing here performs I/O; the statement and connection layers own that.
"""
__version__ = '0.1.0'

from sfconvert.adapters.decoding import decode
from sfconvert.adapters.timestamp import decompose_epoch
from sfconvert.adapters.type_conversion import encode
from sfconvert.adapters.type_inference import infer_tag, to_native
from sfconvert.exceptions import InvalidTimestampTzError, ParseError
from sfconvert.exceptions import TypeConversionError, UnsupportedTypeError
from sfconvert.options import ConversionOptions
from sfconvert.params import bind_parameters
from sfconvert.row import decode_row
from sfconvert.types import ColumnMetadata, NativeValue, WireTypeTag

__all__ = [
    'ColumnMetadata',
    'ConversionOptions',
    'InvalidTimestampTzError',
    'NativeValue',
    'ParseError',
    'TypeConversionError',
    'UnsupportedTypeError',
    'WireTypeTag',
    'bind_parameters',
    'decode',
    'decode_row',
    'decompose_epoch',
    'encode',
    'infer_tag',
    'to_native',
]
