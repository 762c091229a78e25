"""
Changed-row representation consumed by the SQL template builder.

A migration reader emits one DataRecord per changed row. Each record names
its table and carries the row's columns in table order, every column flagged
with whether it belongs to the primary key, a unique key, or was modified.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OperationKind(str, Enum):
    INSERT = 'INSERT'
    UPDATE = 'UPDATE'
    DELETE = 'DELETE'


@dataclass(frozen=True)
class Column:
    """A single column value of a changed row."""

    name: str
    value: Any = None
    primary_key: bool = False
    unique_key: bool = False
    updated: bool = False


@dataclass(frozen=True)
class DataRecord:
    """A changed row: operation, table and ordered columns.

    Columns are stored as a tuple so the record stays immutable once built.
    """

    operation: OperationKind
    table_name: str
    columns: tuple[Column, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'operation', OperationKind(self.operation))
        object.__setattr__(self, 'columns', tuple(self.columns))

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.columns)


def extract_primary_columns(record: DataRecord) -> list[Column]:
    """Get the columns identifying the record's row.

    Args:
        record: Changed row

    Returns
        Primary-key columns in record order, or the unique-key columns when
        the table has no primary key
    """
    primary = [c for c in record.columns if c.primary_key]
    if primary:
        return primary
    return [c for c in record.columns if c.unique_key]


def extract_updated_columns(columns: Iterable[Column]) -> list[Column]:
    """Filter to the columns flagged as updated, keeping their order."""
    return [c for c in columns if c.updated]
