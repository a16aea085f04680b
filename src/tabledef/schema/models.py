"""Column descriptor model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tabledef.types import DefaultValue


@dataclass
class ColumnDescriptor:
    """One column to be created or added.

    Args:
        name: Column identifier
        type: SQL type text, e.g. "BIGINT UNSIGNED" or "VARCHAR(255)"
        default_value: Value for the DEFAULT clause, None for no clause
        nullable: If False, the column is rendered with NOT NULL
        after: Existing column to place this one after (ALTER form only)
    """

    name: str
    type: str
    default_value: DefaultValue = None
    nullable: bool = False
    after: Optional[str] = None

    def __post_init__(self) -> None:
        """Store catalog members as their type name."""
        if isinstance(self.type, Enum):
            self.type = self.type.value

    @property
    def has_default(self) -> bool:
        """True when a DEFAULT clause should be rendered."""
        return self.default_value is not None

    @property
    def not_null(self) -> bool:
        """True when the column is rendered with NOT NULL."""
        return not self.nullable
