"""Core type definitions for tabledef."""

from enum import Enum
from typing import TypeAlias, Union

TableName: TypeAlias = str
ColumnName: TypeAlias = str
TypeName: TypeAlias = str
DefaultValue: TypeAlias = Union[str, int, float, bool, None]

__all__ = [
    "TableName",
    "ColumnName",
    "TypeName",
    "DefaultValue",
    "DataType",
    "CURRENT_TIMESTAMP",
    "varchar",
    "decimal",
]

# Emitted verbatim as a DEFAULT, never quoted.
CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP"


class DataType(Enum):
    """MySQL column type names used by the builder's convenience operations."""

    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INT = "INT"
    INT_UNSIGNED = "INT UNSIGNED"
    BIGINT = "BIGINT"
    BIGINT_UNSIGNED = "BIGINT UNSIGNED"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"
    TEXT = "TEXT"
    LONGTEXT = "LONGTEXT"
    JSON = "JSON"


def varchar(length: int) -> TypeName:
    """Return the VARCHAR type name for the given length."""
    return f"VARCHAR({length})"


def decimal(precision: int, scale: int = 0) -> TypeName:
    """Return the DECIMAL type name for the given precision and scale."""
    return f"DECIMAL({precision},{scale})"
