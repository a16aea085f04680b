"""Load table definitions from YAML files."""

import logging
from pathlib import Path

import yaml

from tabledef.exceptions import SchemaLoadError
from tabledef.schema.builder import TableDefinition

logger = logging.getLogger(__name__)

VALID_TABLE_FIELDS = {
    "table",
    "description",
    "primary_column",
    "columns",
    "timestamps",
    "primary_key",
}

VALID_COLUMN_FIELDS = {
    "name",
    "type",
    "default",
    "nullable",
    "after",
}

# Unquoted YAML dates and timestamps load as datetime objects.
DEFAULT_VALUE_TYPES = (str, int, float, bool, type(None))


def load_tables(schema_path: Path) -> dict[str, TableDefinition]:
    """Load table definitions from a directory of YAML files or a single file."""
    schema_path = Path(schema_path)
    if schema_path.is_file():
        return _load_single_file(schema_path)
    elif schema_path.is_dir():
        return _load_directory(schema_path)
    else:
        raise SchemaLoadError(f"Schema path does not exist: {schema_path}")


def _load_directory(directory: Path) -> dict[str, TableDefinition]:
    """Load table definitions from every YAML file in a directory."""
    tables: dict[str, TableDefinition] = {}
    for yaml_file in sorted(directory.glob("*.yaml")):
        for name, table in _load_single_file(yaml_file).items():
            if name in tables:
                raise SchemaLoadError(
                    f"Duplicate table name '{name}' found in directory"
                )
            tables[name] = table
    return tables


def _load_single_file(file_path: Path) -> dict[str, TableDefinition]:
    """Load one YAML file holding a table or a 'tables' list."""
    logger.debug(f"Loading table definitions from {file_path}")
    with open(file_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaLoadError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        raise SchemaLoadError(f"Empty YAML file: {file_path}")
    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected a mapping at top level of {file_path}")

    if "tables" in data:
        tables: dict[str, TableDefinition] = {}
        for table_data in data.get("tables") or []:
            table = _parse_table_dict(table_data)
            if table.table_name in tables:
                raise SchemaLoadError(
                    f"Duplicate table name '{table.table_name}' in file"
                )
            tables[table.table_name] = table
        return tables

    table = _parse_table_dict(data)
    return {table.table_name: table}


def _parse_table_dict(data: dict) -> TableDefinition:
    """Build a TableDefinition from a table document."""
    if not isinstance(data, dict):
        raise SchemaLoadError(f"Table definition must be a mapping, got: {data!r}")

    unknown_fields = set(data.keys()) - VALID_TABLE_FIELDS
    if unknown_fields:
        raise SchemaLoadError(
            f"Unknown field(s) in table definition: {', '.join(sorted(unknown_fields))}"
        )

    name = data.get("table")
    if not name:
        raise SchemaLoadError("Table definition missing 'table' field")

    table = TableDefinition(name)
    seen = set()

    if primary_column := data.get("primary_column"):
        table.add_primary_column(primary_column)
        seen.add(primary_column)

    column_specs = []
    for col_data in data.get("columns") or []:
        col_name, spec = _parse_column(col_data)
        if col_name in seen:
            raise SchemaLoadError(
                f"Duplicate column name '{col_name}' in table '{name}'"
            )
        seen.add(col_name)
        column_specs.append((col_name, spec))
    table.add_columns(column_specs)

    if data.get("timestamps"):
        for col_name in ("created_at", "updated_at"):
            if col_name in seen:
                raise SchemaLoadError(
                    f"Duplicate column name '{col_name}' in table '{name}'"
                )
        table.add_timestamps()

    if primary_key := data.get("primary_key"):
        table.set_primary_key(primary_key)

    logger.debug(f"Loaded table '{name}' ({len(table.columns)} columns)")
    return table


def _parse_column(data: dict) -> tuple[str, dict]:
    """Turn a column document into an add_columns entry."""
    if not isinstance(data, dict):
        raise SchemaLoadError(f"Column definition must be a mapping, got: {data!r}")

    unknown_fields = set(data.keys()) - VALID_COLUMN_FIELDS
    if unknown_fields:
        raise SchemaLoadError(
            f"Unknown field(s) in column definition: {', '.join(sorted(unknown_fields))}"
        )

    name = data.get("name")
    if not name:
        raise SchemaLoadError("Column definition missing 'name' field")

    spec = {}
    if "type" in data:
        spec["type"] = data["type"]
    if "default" in data:
        default = data["default"]
        if not isinstance(default, DEFAULT_VALUE_TYPES):
            raise SchemaLoadError(
                f"Column '{name}' default must be a string, number or boolean, "
                f"got {type(default).__name__} (quote it in YAML)"
            )
        spec["default_value"] = default
    if "nullable" in data:
        spec["nullable"] = data["nullable"]
    if "after" in data:
        spec["after"] = data["after"]
    return name, spec
