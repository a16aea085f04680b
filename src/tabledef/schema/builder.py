"""Build CREATE TABLE and ALTER TABLE statements from column descriptors."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from tabledef.exceptions import MissingColumnTypeError
from tabledef.schema.models import ColumnDescriptor
from tabledef.types import (
    CURRENT_TIMESTAMP,
    ColumnName,
    DataType,
    DefaultValue,
    TableName,
    TypeName,
)

__all__ = ["TableDefinition", "render_default_value"]

ColumnSpecs = Union[
    Mapping[ColumnName, Mapping[str, Any]],
    Iterable[tuple[ColumnName, Mapping[str, Any]]],
]


def render_default_value(value: DefaultValue) -> str:
    """Render a default value as SQL literal text.

    CURRENT_TIMESTAMP is emitted as-is. Everything else is JSON encoded with
    double quotes swapped for single quotes, so strings and booleans come out
    quoted and numbers bare. Quotes inside strings are not escaped.
    """
    if value == CURRENT_TIMESTAMP:
        return CURRENT_TIMESTAMP
    if isinstance(value, bool):
        return f"'{json.dumps(value)}'"
    return json.dumps(value, ensure_ascii=False).replace('"', "'")


class TableDefinition:
    """Fluent builder describing the columns of one table.

    Every mutator appends to the column list (or sets the primary key) and
    returns the builder so calls can be chained:

        TableDefinition("users").add_primary_column("id").add_timestamps()

    Rendering reads the current state only and can be repeated.
    """

    def __init__(self, table_name: TableName):
        self._table_name = table_name
        self._columns: list[ColumnDescriptor] = []
        self.primary_key: Optional[ColumnName] = None

    @property
    def table_name(self) -> TableName:
        return self._table_name

    @property
    def columns(self) -> list[ColumnDescriptor]:
        """Columns in insertion order."""
        return list(self._columns)

    def add_primary_column(self, column_name: ColumnName) -> TableDefinition:
        """Add an unsigned BIGINT column and make it the primary key."""
        self._columns.append(
            ColumnDescriptor(name=column_name, type=DataType.BIGINT_UNSIGNED)
        )
        self.primary_key = column_name
        return self

    def add_column(
        self,
        column_name: ColumnName,
        column_type: Union[TypeName, DataType],
        default_value: DefaultValue = None,
        nullable: bool = False,
    ) -> TableDefinition:
        """Add a single column."""
        self._columns.append(
            ColumnDescriptor(
                name=column_name,
                type=column_type,
                default_value=default_value,
                nullable=nullable,
            )
        )
        return self

    def add_columns(self, columns: ColumnSpecs) -> TableDefinition:
        """Add several columns at once.

        Args:
            columns: Mapping of column name to descriptor, or an iterable of
                (name, descriptor) pairs. Each descriptor needs a "type" and
                may set "default_value", "nullable" and "after".

        Raises:
            MissingColumnTypeError: If a descriptor has no "type"
        """
        items = columns.items() if isinstance(columns, Mapping) else columns
        for column_name, spec in items:
            if "type" not in spec:
                raise MissingColumnTypeError(column_name)
            self._columns.append(
                ColumnDescriptor(
                    name=column_name,
                    type=spec["type"],
                    default_value=spec.get("default_value"),
                    nullable=spec.get("nullable", False),
                    after=spec.get("after"),
                )
            )
        return self

    def add_timestamps(self) -> TableDefinition:
        """Add created_at and updated_at, both defaulting to CURRENT_TIMESTAMP."""
        for column_name in ("created_at", "updated_at"):
            self._columns.append(
                ColumnDescriptor(
                    name=column_name,
                    type=DataType.DATETIME,
                    default_value=CURRENT_TIMESTAMP,
                )
            )
        return self

    def set_primary_key(self, column_name: ColumnName) -> TableDefinition:
        """Designate the primary key column. The name is not checked."""
        self.primary_key = column_name
        return self

    @staticmethod
    def render_default_value(value: DefaultValue) -> str:
        """Render a default value as SQL literal text."""
        return render_default_value(value)

    def _column_sql(self, column: ColumnDescriptor) -> str:
        col_def = f"{column.name} {column.type}"
        if column.not_null:
            col_def += " NOT NULL"
        if column.has_default:
            col_def += f" DEFAULT {render_default_value(column.default_value)}"
        if column.name == self.primary_key:
            col_def += " AUTO_INCREMENT"
        return col_def

    def generate_create(self) -> str:
        """Generate the CREATE TABLE statement."""
        sql = f"CREATE TABLE `{self._table_name}` (\n"
        for column in self._columns:
            sql += f"  {self._column_sql(column)},\n"
        if self.primary_key:
            sql += f"  PRIMARY KEY ({self.primary_key})"
        return sql + "\n)"

    def generate_alter(self) -> str:
        """Generate an ALTER TABLE statement adding every column."""
        clauses = []
        for column in self._columns:
            clause = f"ADD COLUMN {self._column_sql(column)}"
            if column.after:
                clause += f" AFTER {column.after}"
            clauses.append(clause)
        return f"ALTER TABLE {self._table_name}\n" + ",\n".join(clauses)
