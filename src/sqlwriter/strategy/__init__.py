"""
Quoting strategy factory for dialect-specific identifier quoting.
"""
import logging
from functools import lru_cache

from sqlwriter.exceptions import UnknownDialectError
from sqlwriter.strategy.base import _STRATEGY_REGISTRY
from sqlwriter.strategy.base import QuotingStrategy as QuotingStrategy
from sqlwriter.strategy.base import register_strategy as register_strategy
from sqlwriter.strategy.generic import DialectQuoting as DialectQuoting
from sqlwriter.strategy.generic import PlainQuoting as PlainQuoting
from sqlwriter.strategy.mysql import MySQLQuoting as MySQLQuoting
from sqlwriter.strategy.postgres import PostgresQuoting as PostgresQuoting
from sqlwriter.strategy.postgres import SQLiteQuoting as SQLiteQuoting
from sqlwriter.strategy.sqlserver import SQLServerQuoting as SQLServerQuoting

logger = logging.getLogger(__name__)


def _validate_dialect(dialect: str) -> None:
    """Raise UnknownDialectError if dialect is not registered."""
    if dialect not in _STRATEGY_REGISTRY:
        available = get_available_dialects()
        raise UnknownDialectError(f'Unsupported dialect: {dialect}. Available: {available}')


@lru_cache(maxsize=8)
def _get_strategy(dialect: str) -> QuotingStrategy:
    """Get cached strategy instance for a dialect."""
    _validate_dialect(dialect)
    return _STRATEGY_REGISTRY[dialect]()


def get_strategy(dialect: str) -> QuotingStrategy:
    """Get quoting strategy instance for a dialect name.
    """
    return _get_strategy(dialect.lower())


def _get_dialect(obj):
    """Find the SQLAlchemy dialect of an engine, connection or dialect."""
    if hasattr(obj, 'identifier_preparer'):
        return obj
    if hasattr(obj, 'dialect'):
        return obj.dialect
    if hasattr(obj, 'engine') and hasattr(obj.engine, 'dialect'):
        return obj.engine.dialect
    raise UnknownDialectError(f'Cannot determine SQL dialect of {type(obj).__name__}')


def get_strategy_for(obj) -> QuotingStrategy:
    """Get quoting strategy for a SQLAlchemy engine, connection or dialect.

    Registered strategies take precedence; any other dialect falls back to
    the quote characters of its own identifier preparer.
    """
    dialect = _get_dialect(obj)
    name = str(dialect.name).lower()
    if is_supported_dialect(name):
        return _get_strategy(name)
    logger.debug(f'No registered quoting strategy for {name}, using dialect preparer')
    return DialectQuoting(dialect)


def get_available_dialects() -> list[str]:
    """Return list of registered dialect names."""
    return sorted(_STRATEGY_REGISTRY.keys())


def is_supported_dialect(dialect: str) -> bool:
    """Check if a dialect is supported."""
    return dialect.lower() in _STRATEGY_REGISTRY


def get_strategy_class(dialect: str) -> type[QuotingStrategy]:
    """Get the strategy class for a dialect without instantiating."""
    _validate_dialect(dialect.lower())
    return _STRATEGY_REGISTRY[dialect.lower()]
