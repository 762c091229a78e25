"""
SQL writer exception classes.
"""


class SqlWriterError(Exception):
    """Base class for all sqlwriter errors.
    """


class MalformedRecordError(SqlWriterError, ValueError):
    """Changed row cannot produce a valid statement.

    Raised for an INSERT without columns, an UPDATE or DELETE without
    primary-key (or unique-key) columns, or an UPDATE without updated columns.
    """


class ColumnMismatchError(MalformedRecordError):
    """Row columns differ from the columns a cached INSERT was built from.
    """


class UnknownDialectError(SqlWriterError, ValueError):
    """No quoting strategy is registered for the requested dialect.
    """
