"""tabledef: build CREATE TABLE and ALTER TABLE statements."""

from tabledef.exceptions import (
    ConfigError,
    MissingColumnTypeError,
    SchemaLoadError,
    TabledefError,
)
from tabledef.schema.builder import TableDefinition, render_default_value
from tabledef.schema.models import ColumnDescriptor
from tabledef.types import CURRENT_TIMESTAMP, DataType

__all__ = [
    "CURRENT_TIMESTAMP",
    "ColumnDescriptor",
    "ConfigError",
    "DataType",
    "MissingColumnTypeError",
    "SchemaLoadError",
    "TableDefinition",
    "TabledefError",
    "render_default_value",
]
