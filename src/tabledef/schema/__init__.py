"""Table definition model, builder and loader."""

from tabledef.schema.builder import TableDefinition, render_default_value
from tabledef.schema.loader import load_tables
from tabledef.schema.models import ColumnDescriptor

__all__ = [
    "ColumnDescriptor",
    "TableDefinition",
    "load_tables",
    "render_default_value",
]
