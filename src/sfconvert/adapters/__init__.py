"""
Value adapters package.

This package provides the following components:

- column_info: Result column metadata
- decoding: Result value decoding (wire → Python)
- timestamp: Epoch string decomposition and datetime materialization
- type_conversion: Parameter encoding (Python → wire)
- type_inference: Native value normalization and wire type inference
- type_mapping: Wire type tags and their Python types (no conversion)

Conversion principles:
1. Wire → Python: `decode`, one field at a time, driven by the column's tag
2. Python → Wire: `infer_tag` labels a parameter and `encode` renders it
"""
from sfconvert.adapters.column_info import ColumnMetadata
from sfconvert.adapters.decoding import decode
from sfconvert.adapters.timestamp import decompose_epoch
from sfconvert.adapters.type_conversion import encode, format_float32
from sfconvert.adapters.type_inference import NativeValue, infer_tag
from sfconvert.adapters.type_inference import to_native
from sfconvert.adapters.type_mapping import WireTypeTag, resolve_tag

__all__ = [
    'ColumnMetadata',
    'NativeValue',
    'WireTypeTag',
    'decode',
    'decompose_epoch',
    'encode',
    'format_float32',
    'infer_tag',
    'resolve_tag',
    'to_native',
]
