"""
PostgreSQL and SQLite quoting strategies.

Both follow the SQL standard and wrap identifiers in double quotes.
"""
from sqlwriter.strategy.base import QuotingStrategy, register_strategy


@register_strategy('postgresql')
class PostgresQuoting(QuotingStrategy):
    """Double-quoted identifiers for PostgreSQL.
    """

    def left_quote(self) -> str:
        return '"'

    def right_quote(self) -> str:
        return '"'


@register_strategy('sqlite')
class SQLiteQuoting(PostgresQuoting):
    """Double-quoted identifiers for SQLite.
    """
