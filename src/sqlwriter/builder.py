"""
SQL template builder for the migration write path.

Builds INSERT, UPDATE and DELETE statements with ``?`` placeholders for a
changed row, quoting identifiers through a QuotingStrategy. The invariant part
of each statement is cached per table and operation:

- INSERT and DELETE cache the finished statement.
- UPDATE caches ``UPDATE <table> SET %s WHERE <keys>``; the SET fragment
  depends on which columns a row changed and is rendered on every call.

Parameters are bound by the caller in this order:

- INSERT: every column value, in record order
- UPDATE: updated column values, then primary-key values
- DELETE: primary-key values
"""
import logging
from collections.abc import Iterable
from typing import Any

from sqlwriter.cache import TemplateCache, TemplateKey
from sqlwriter.exceptions import ColumnMismatchError, MalformedRecordError
from sqlwriter.options import BuilderOptions
from sqlwriter.record import Column, DataRecord, OperationKind
from sqlwriter.record import extract_primary_columns, extract_updated_columns
from sqlwriter.strategy import QuotingStrategy, get_strategy

logger = logging.getLogger(__name__)


class SqlTemplateBuilder:
    """Build and cache parameterized DML statements for changed rows.

    Safe to share between writer threads.

    Args:
        quoting: Identifier quoting strategy of the target dialect
        cache: Template cache to use, by default a new private cache
        validate: Raise MalformedRecordError instead of emitting invalid SQL
        check_insert_columns: Raise ColumnMismatchError when an INSERT row's
            columns differ from those of the cached statement
    """

    def __init__(self, quoting: QuotingStrategy, cache: TemplateCache | None = None,
                 validate: bool = True, check_insert_columns: bool = False) -> None:
        self.quoting = quoting
        self.cache = cache if cache is not None else TemplateCache()
        self.validate = validate
        self.check_insert_columns = check_insert_columns

    @classmethod
    def from_options(cls, options: BuilderOptions,
                     cache: TemplateCache | None = None) -> 'SqlTemplateBuilder':
        """Create a builder for the dialect named in options."""
        return cls(get_strategy(options.dialect), cache=cache,
                   validate=options.validate,
                   check_insert_columns=options.check_insert_columns)

    def _quote(self, identifier: str) -> str:
        return self.quoting.quote(identifier)

    def _assignments(self, columns: Iterable[Column], sep: str) -> str:
        return sep.join(f'{self._quote(c.name)} = ?' for c in columns)

    def _require(self, columns: list[Column], what: str, record: DataRecord) -> None:
        if self.validate and not columns:
            raise MalformedRecordError(
                f'{record.operation.value} on {record.table_name!r} has no {what} columns')

    # INSERT

    def build_insert_sql(self, record: DataRecord) -> str:
        """Build INSERT SQL.

        Args:
            record: Changed row; all rows of a table must share one column list

        Returns
            str: ``INSERT INTO t(c1,c2) VALUES(?,?)``
        """
        columns = list(record.columns)
        self._require(columns, 'value', record)
        key = TemplateKey(OperationKind.INSERT, record.table_name)
        sql = self.cache.get_or_create(
            key, lambda: self._build_insert_sql(record.table_name, columns))
        if self.check_insert_columns:
            self._check_insert_columns(record, columns, sql)
        return sql

    def _render_insert_sql(self, table_name: str, columns: list[Column]) -> str:
        names = ','.join(self._quote(c.name) for c in columns)
        holders = ','.join('?' for _ in columns)
        return f'INSERT INTO {self._quote(table_name)}({names}) VALUES({holders})'

    def _build_insert_sql(self, table_name: str, columns: list[Column]) -> str:
        sql = self._render_insert_sql(table_name, columns)
        logger.debug(f'Built insert template for {table_name}: {sql}')
        return sql

    def _check_insert_columns(self, record: DataRecord, columns: list[Column],
                              cached: str) -> None:
        # compare against the cached text itself, which may come from another builder
        if self._render_insert_sql(record.table_name, columns) != cached:
            raise ColumnMismatchError(
                f'INSERT on {record.table_name!r} has columns {list(record.column_names)}, '
                f'cached statement is {cached!r}')

    # UPDATE

    def build_update_sql(self, record: DataRecord) -> str:
        """Build UPDATE SQL.

        The SET clause lists only the columns flagged as updated in this
        record; the WHERE clause comes from the cached per-table template.

        Args:
            record: Changed row

        Returns
            str: ``UPDATE t SET a = ?,b = ? WHERE id = ?``
        """
        updated = extract_updated_columns(record.columns)
        self._require(updated, 'updated', record)
        primary = extract_primary_columns(record)
        self._require(primary, 'primary key', record)
        key = TemplateKey(OperationKind.UPDATE, record.table_name)
        template = self.cache.get_or_create(
            key, lambda: self._build_update_template(record.table_name, primary))
        return template % self._assignments(updated, ',')

    def _build_update_template(self, table_name: str, primary: list[Column]) -> str:
        # '%' in identifiers must survive the SET substitution
        table = self._quote(table_name).replace('%', '%%')
        where = self._assignments(primary, ' AND ').replace('%', '%%')
        template = f'UPDATE {table} SET %s WHERE {where}'
        logger.debug(f'Built update template for {table_name}: {template}')
        return template

    # DELETE

    def build_delete_sql(self, record: DataRecord) -> str:
        """Build DELETE SQL.

        Args:
            record: Changed row carrying at least its key columns

        Returns
            str: ``DELETE FROM t WHERE id = ?``
        """
        primary = extract_primary_columns(record)
        self._require(primary, 'primary key', record)
        key = TemplateKey(OperationKind.DELETE, record.table_name)
        return self.cache.get_or_create(
            key, lambda: self._build_delete_sql(record.table_name, primary))

    def _build_delete_sql(self, table_name: str, primary: list[Column]) -> str:
        where = self._assignments(primary, ' AND ')
        sql = f'DELETE FROM {self._quote(table_name)} WHERE {where}'
        logger.debug(f'Built delete template for {table_name}: {sql}')
        return sql

    # Dispatch

    def build_sql(self, record: DataRecord) -> str:
        """Build the statement matching the record's operation."""
        if record.operation is OperationKind.INSERT:
            return self.build_insert_sql(record)
        if record.operation is OperationKind.UPDATE:
            return self.build_update_sql(record)
        if record.operation is OperationKind.DELETE:
            return self.build_delete_sql(record)
        raise MalformedRecordError(f'Unsupported operation: {record.operation}')

    def parameters(self, record: DataRecord) -> tuple[Any, ...]:
        """Collect bind values in the placeholder order of build_sql(record).
        """
        if record.operation is OperationKind.INSERT:
            return tuple(c.value for c in record.columns)
        primary = tuple(c.value for c in extract_primary_columns(record))
        if record.operation is OperationKind.UPDATE:
            return tuple(c.value for c in extract_updated_columns(record.columns)) + primary
        return primary

    def build_statement(self, record: DataRecord) -> tuple[str, tuple[Any, ...]]:
        """Build SQL and its bind values for a record.

        Returns
            tuple: (sql, parameters) ready for ``cursor.execute``
        """
        return self.build_sql(record), self.parameters(record)
