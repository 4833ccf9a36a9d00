"""Row materialization from encoded result values."""
import logging
from collections.abc import Sequence
from typing import Any

from sfconvert.adapters.column_info import ColumnMetadata
from sfconvert.adapters.decoding import decode
from sfconvert.adapters.type_inference import NativeValue
from sfconvert.options import ConversionOptions

logger = logging.getLogger(__name__)


def decode_row(values: Sequence[str | None],
               columns: Sequence[ColumnMetadata | dict[str, Any]],
               options: ConversionOptions | None = None) -> dict[str, NativeValue]:
    """Decode one result row into a dictionary keyed by column name.

    Args:
        values: Encoded field values in column order
        columns: ColumnMetadata instances or raw rowtype mappings
        options: Conversion options passed to `decode`

    Returns
        Dictionary mapping column names to decoded values

    The first failing value raises; there is no partial row.
    """
    if len(values) != len(columns):
        raise ValueError(f'Row has {len(values)} values for {len(columns)} columns')
    columns = [c if isinstance(c, ColumnMetadata) else ColumnMetadata.from_rowtype(c)
               for c in columns]
    return {
        column.name: decode(value, column.type, options)
        for column, value in zip(columns, values)
    }
