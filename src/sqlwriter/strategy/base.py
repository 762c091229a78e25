"""
Base quoting strategy interface.

Each SQL dialect wraps table and column identifiers in its own quote
characters. A QuotingStrategy supplies the left and right quote strings for
one dialect; the SQL template builder holds a strategy instance and calls it
whenever it renders an identifier.
"""
from abc import ABC, abstractmethod

# Registry of dialect name -> strategy class
# Defined here to avoid circular imports (concrete strategies import from base)
_STRATEGY_REGISTRY: dict[str, type['QuotingStrategy']] = {}


def register_strategy(dialect: str):
    """Decorator to register a quoting strategy class for a dialect.

    Usage:
        @register_strategy('mysql')
        class MySQLQuoting(QuotingStrategy):
            ...
    """
    def decorator(cls: type['QuotingStrategy']) -> type['QuotingStrategy']:
        _STRATEGY_REGISTRY[dialect] = cls
        return cls
    return decorator


class QuotingStrategy(ABC):
    """Identifier quoting convention of a SQL dialect.
    """

    @abstractmethod
    def left_quote(self) -> str:
        """Get the string written before an identifier.
        """

    @abstractmethod
    def right_quote(self) -> str:
        """Get the string written after an identifier.
        """

    def quote(self, identifier: str) -> str:
        """Wrap an identifier in the dialect's quote strings.

        Identifiers come from the migration source schema and are trusted;
        embedded quote characters are not escaped.

        Args:
            identifier: Table or column name

        Returns
            str: Quoted identifier
        """
        return f'{self.left_quote()}{identifier}{self.right_quote()}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.left_quote()!r}, {self.right_quote()!r})'
