"""
MySQL quoting strategy.
"""
from sqlwriter.strategy.base import QuotingStrategy, register_strategy


@register_strategy('mysql')
@register_strategy('mariadb')
class MySQLQuoting(QuotingStrategy):
    """Backtick-quoted identifiers for MySQL and MariaDB.
    """

    def left_quote(self) -> str:
        return '`'

    def right_quote(self) -> str:
        return '`'
