from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from sqlwriter.exceptions import UnknownDialectError
from sqlwriter.strategy import get_available_dialects, is_supported_dialect

__all__ = ['BuilderOptions']


@dataclass
class BuilderOptions:
    """Options

    supported dialects: `mysql`, `mariadb`, `postgresql`, `sqlite`, `mssql`, `plain`

    - validate: Reject rows that would produce malformed SQL (default: True)
    - check_insert_columns: Reject INSERT rows whose columns differ from the
      columns the cached statement for that table was built from (default: False)
    """
    dialect: str = 'mysql'
    validate: bool = True
    check_insert_columns: bool = False

    def __post_init__(self):
        self.dialect = self.dialect.lower()
        if not is_supported_dialect(self.dialect):
            available = get_available_dialects()
            raise UnknownDialectError(f'dialect must be one of: {available}')

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'BuilderOptions':
        """Build options from a config mapping, ignoring unrelated keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in mapping.items() if k in names})
