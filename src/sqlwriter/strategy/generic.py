"""
Quoting strategies not bound to one registered dialect.

PlainQuoting leaves identifiers bare. DialectQuoting borrows the quote
characters from any SQLAlchemy dialect, which covers backends without a
dedicated strategy here.
"""
from sqlalchemy.engine import Dialect

from sqlwriter.strategy.base import QuotingStrategy, register_strategy


@register_strategy('plain')
class PlainQuoting(QuotingStrategy):
    """Unquoted identifiers.
    """

    def left_quote(self) -> str:
        return ''

    def right_quote(self) -> str:
        return ''


class DialectQuoting(QuotingStrategy):
    """Quote strings taken from a SQLAlchemy dialect's identifier preparer.

    Args:
        dialect: SQLAlchemy Dialect instance, e.g. ``mysql.dialect()``
    """

    def __init__(self, dialect: Dialect) -> None:
        preparer = dialect.identifier_preparer
        self.dialect_name = dialect.name
        self._left = preparer.initial_quote
        self._right = preparer.final_quote

    def left_quote(self) -> str:
        return self._left

    def right_quote(self) -> str:
        return self._right
