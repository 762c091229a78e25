"""
SQL Server quoting strategy.
"""
from sqlwriter.strategy.base import QuotingStrategy, register_strategy


@register_strategy('mssql')
class SQLServerQuoting(QuotingStrategy):
    """Bracket-quoted identifiers for SQL Server"""

    def left_quote(self) -> str:
        return '['

    def right_quote(self) -> str:
        return ']'
