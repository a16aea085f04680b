"""Exception classes for tabledef."""

__all__ = [
    "TabledefError",
    "MissingColumnTypeError",
    "SchemaLoadError",
    "ConfigError",
]


class TabledefError(Exception):
    """Base exception for tabledef."""


class MissingColumnTypeError(TabledefError):
    """Column added through add_columns without a 'type'."""

    def __init__(self, column_name: str):
        self.column_name = column_name
        super().__init__(
            f"Column 'type' missing for {column_name}. "
            "Column 'type' is mandatory when defining a column with 'add_columns'"
        )


class SchemaLoadError(TabledefError):
    """Error loading table definition files."""


class ConfigError(TabledefError):
    """Error in configuration."""
