"""
Cached SQL statement templates for data-migration writers.

Usage:
    builder = SqlTemplateBuilder(get_strategy('mysql'))
    sql, params = builder.build_statement(record)
    cursor.execute(sql, params)
"""
__version__ = '0.1.0'

from sqlwriter.builder import SqlTemplateBuilder
from sqlwriter.cache import CacheInfo, TemplateCache, TemplateKey
from sqlwriter.exceptions import ColumnMismatchError, MalformedRecordError
from sqlwriter.exceptions import SqlWriterError, UnknownDialectError
from sqlwriter.options import BuilderOptions
from sqlwriter.record import Column, DataRecord, OperationKind
from sqlwriter.record import extract_primary_columns, extract_updated_columns
from sqlwriter.strategy import DialectQuoting, QuotingStrategy, get_strategy
from sqlwriter.strategy import get_strategy_for, register_strategy

__all__ = [
    'BuilderOptions',
    'CacheInfo',
    'Column',
    'ColumnMismatchError',
    'DataRecord',
    'DialectQuoting',
    'MalformedRecordError',
    'OperationKind',
    'QuotingStrategy',
    'SqlTemplateBuilder',
    'SqlWriterError',
    'TemplateCache',
    'TemplateKey',
    'UnknownDialectError',
    'extract_primary_columns',
    'extract_updated_columns',
    'get_strategy',
    'get_strategy_for',
    'register_strategy',
]
