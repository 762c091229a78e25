import pytest
from sqlwriter.builder import SqlTemplateBuilder
from sqlwriter.record import Column, DataRecord, OperationKind
from sqlwriter.strategy import QuotingStrategy


class BacktickQuoting(QuotingStrategy):
    """Backtick strategy that counts how often it is asked for quotes"""

    def __init__(self):
        self.calls = 0

    def left_quote(self):
        self.calls += 1
        return '`'

    def right_quote(self):
        return '`'


@pytest.fixture
def quoting():
    return BacktickQuoting()


@pytest.fixture
def builder(quoting):
    return SqlTemplateBuilder(quoting)


def _make_record(operation, table, *columns):
    return DataRecord(operation, table, [Column(**c) if isinstance(c, dict) else c
                                         for c in columns])


@pytest.fixture
def make_record():
    """
    Fixture that provides a factory for DataRecord instances.

    Columns may be given as Column objects or as keyword dicts.

    Example usage:
        def test_insert(make_record):
            rec = make_record('INSERT', 'users', {'name': 'id', 'value': 1})
    """
    return _make_record


@pytest.fixture
def orders_update():
    return DataRecord(OperationKind.UPDATE, 'orders', [
        Column('id', 7, primary_key=True),
        Column('status', 'shipped', updated=True),
        Column('amount', 10),
    ])
