"""Tests for tabledef.exceptions module."""

import pytest

from tabledef.exceptions import (
    ConfigError,
    MissingColumnTypeError,
    SchemaLoadError,
    TabledefError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_exception_hierarchy(self):
        """All exceptions inherit from TabledefError."""
        assert issubclass(MissingColumnTypeError, TabledefError)
        assert issubclass(SchemaLoadError, TabledefError)
        assert issubclass(ConfigError, TabledefError)
        assert issubclass(TabledefError, Exception)

    def test_missing_column_type_error_has_column_name(self):
        error = MissingColumnTypeError("foo")
        assert error.column_name == "foo"
        assert str(error) == (
            "Column 'type' missing for foo. "
            "Column 'type' is mandatory when defining a column with 'add_columns'"
        )

    def test_exceptions_can_be_raised_and_caught(self):
        with pytest.raises(TabledefError):
            raise MissingColumnTypeError("foo")

        with pytest.raises(TabledefError):
            raise SchemaLoadError("Bad file")

        with pytest.raises(TabledefError):
            raise ConfigError("Bad config")
