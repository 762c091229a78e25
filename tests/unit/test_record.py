"""Unit tests for the changed-row model and column extraction."""
import dataclasses

import pytest
from sqlwriter.record import Column, DataRecord, OperationKind
from sqlwriter.record import extract_primary_columns, extract_updated_columns


def test_record_coerces_operation_and_columns():
    rec = DataRecord('UPDATE', 'orders', [Column('id', 1, primary_key=True)])
    assert rec.operation is OperationKind.UPDATE
    assert isinstance(rec.columns, tuple)
    assert rec.column_names == ('id',)


def test_unknown_operation_rejected():
    with pytest.raises(ValueError):
        DataRecord('MERGE', 'orders', [])


def test_column_is_immutable():
    col = Column('id', 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        col.name = 'other'


class TestExtractPrimaryColumns:
    """Tests for key column extraction"""

    def test_primary_keys_in_record_order(self):
        rec = DataRecord('DELETE', 't', [
            Column('b', 2, primary_key=True),
            Column('x', 0),
            Column('a', 1, primary_key=True),
        ])
        assert [c.name for c in extract_primary_columns(rec)] == ['b', 'a']

    def test_unique_key_fallback(self):
        rec = DataRecord('DELETE', 't', [
            Column('code', 'X', unique_key=True),
            Column('name', 'n'),
        ])
        assert [c.name for c in extract_primary_columns(rec)] == ['code']

    def test_primary_key_preferred_over_unique_key(self):
        rec = DataRecord('DELETE', 't', [
            Column('code', 'X', unique_key=True),
            Column('id', 1, primary_key=True),
        ])
        assert [c.name for c in extract_primary_columns(rec)] == ['id']

    def test_no_keys(self):
        rec = DataRecord('DELETE', 't', [Column('name', 'n')])
        assert extract_primary_columns(rec) == []


def test_extract_updated_columns_keeps_order():
    cols = [Column('a', updated=True), Column('b'), Column('c', updated=True)]
    assert [c.name for c in extract_updated_columns(cols)] == ['a', 'c']
