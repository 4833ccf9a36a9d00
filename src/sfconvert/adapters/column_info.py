"""
Column information carried by a result set.
"""
import logging
from typing import Any, Self

from sfconvert.adapters.type_mapping import WireTypeTag, resolve_tag
from sfconvert.adapters.type_mapping import resolve_type

logger = logging.getLogger(__name__)


class ColumnMetadata:
    """Representation of a result column with its wire type and metadata

    Technical implementation details:
    - Built from the rowtype entries that accompany every result set
    - `type` is kept as delivered; `tag` is the resolved WireTypeTag or None
      when the type is not one the decoder knows (decoded as text)
    - Provides static helpers for handling column collections
    """

    def __init__(self,
                 name: str,
                 type: str | WireTypeTag,
                 length: int | None = None,
                 byte_length: int | None = None,
                 precision: int | None = None,
                 scale: int | None = None,
                 nullable: bool | None = None):
        """
        Initialize column information

        Args:
            name: Display name of the column
            type: Wire type tag as delivered in the metadata
            length: Maximum length in characters (text columns)
            byte_length: Maximum length in bytes (text columns)
            precision: Numeric precision (fixed columns)
            scale: Numeric scale (fixed and temporal columns)
            nullable: Whether the column allows NULL values
        """
        self.name = name
        self.type = type
        self.length = length
        self.byte_length = byte_length
        self.precision = precision
        self.scale = scale
        self.nullable = nullable

    @property
    def tag(self) -> WireTypeTag | None:
        return resolve_tag(self.type)

    @property
    def python_type(self) -> type:
        return resolve_type(self.type)

    @classmethod
    def from_rowtype(cls, rowtype: dict[str, Any]) -> Self:
        """Create a ColumnMetadata from one rowtype entry of a query response.

        Args:
            rowtype: Mapping with keys name, type, length, byteLength,
                precision, scale and nullable

        Returns
            ColumnMetadata instance
        """
        return cls(
            name=rowtype.get('name'),
            type=rowtype.get('type'),
            length=rowtype.get('length'),
            byte_length=rowtype.get('byteLength'),
            precision=rowtype.get('precision'),
            scale=rowtype.get('scale'),
            nullable=rowtype.get('nullable'),
        )

    @staticmethod
    def get_names(columns: list['ColumnMetadata']) -> list[str]:
        """Get column names from a list of columns.
        """
        return [c.name for c in columns]

    @staticmethod
    def get_column_types_dict(columns: list['ColumnMetadata']) -> dict[str, type]:
        """Map column names to the Python types their values decode into.
        """
        return {c.name: c.python_type for c in columns}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnMetadata):
            return NotImplemented
        return (self.name, self.type, self.length, self.byte_length, self.precision,
                self.scale, self.nullable) == (other.name, other.type, other.length,
                                               other.byte_length, other.precision,
                                               other.scale, other.nullable)

    __hash__ = None

    def __repr__(self) -> str:
        return f'ColumnMetadata(name={self.name!r}, type={str(self.type)!r}, nullable={self.nullable!r})'
