"""
Consolidated type definitions for value conversion.

This module provides:
- NativeValue: The closed set of Python values the converters produce
- WireTypeTag: Logical column types accompanying encoded values
- ColumnMetadata: Result column metadata
"""
from sfconvert.adapters.column_info import ColumnMetadata
from sfconvert.adapters.type_inference import NativeValue
from sfconvert.adapters.type_mapping import TEMPORAL_TAGS, WireTypeTag
from sfconvert.adapters.type_mapping import python_types, resolve_type

__all__ = [
    'ColumnMetadata',
    'NativeValue',
    'TEMPORAL_TAGS',
    'WireTypeTag',
    'python_types',
    'resolve_type',
]
