#!/usr/bin/env python3
"""
mssql2mysql Test Configuration - PyTest Configuration and Fixtures

Provides an in-memory catalog that stands in for a SQL Server connection, plus
shared sample tables.
"""

import os
import sys
from typing import Dict, List, Sequence

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.schema_ir import ColumnDescriptor, ForeignKeyRow, IndexEntry


class FakeCatalog:
    """CatalogSource backed by dictionaries; records every call it receives"""

    def __init__(self):
        self.tables: List[str] = []
        self.columns: Dict[str, List[ColumnDescriptor]] = {}
        self.index_entries: Dict[str, List[IndexEntry]] = {}
        self.foreign_keys: Dict[str, List[ForeignKeyRow]] = {}
        self.rows: Dict[str, List[tuple]] = {}
        self.calls: List[tuple] = []
        self.close_count = 0

    def add_table(self, name, columns, index_entries=(), foreign_keys=(), rows=()):
        self.tables.append(name)
        self.columns[name] = list(columns)
        self.index_entries[name] = list(index_entries)
        self.foreign_keys[name] = list(foreign_keys)
        self.rows[name] = list(rows)
        return self

    def list_tables(self):
        self.calls.append(('list_tables',))
        return list(self.tables)

    def get_columns(self, table):
        self.calls.append(('get_columns', table))
        return list(self.columns.get(table, []))

    def get_index_entries(self, table):
        self.calls.append(('get_index_entries', table))
        return list(self.index_entries.get(table, []))

    def get_foreign_keys(self, table):
        self.calls.append(('get_foreign_keys', table))
        return list(self.foreign_keys.get(table, []))

    def fetch_rows(self, table, columns: Sequence[str]):
        self.calls.append(('fetch_rows', table, tuple(columns)))
        # project stored rows (keyed by full column list) onto the requested columns
        all_names = [col.name for col in self.columns.get(table, [])]
        positions = [all_names.index(name) for name in columns]
        for row in self.rows.get(table, []):
            yield tuple(row[i] for i in positions)

    def close(self):
        self.close_count += 1


def users_columns():
    return [
        ColumnDescriptor('Id', 'int identity', size=4, precision=10, scale=0, nullable=False),
        ColumnDescriptor('Name', 'nvarchar', size=200, precision=100, nullable=True),
        ColumnDescriptor('old_temp', 'varchar', size=10, precision=10, nullable=True),
    ]


@pytest.fixture
def fake_catalog():
    """Empty fake catalog"""
    return FakeCatalog()


@pytest.fixture
def users_catalog():
    """Catalog with a Users table (Id identity PK, Name, legacy old_temp) and Orders referencing it"""
    catalog = FakeCatalog()
    catalog.add_table(
        'Users',
        users_columns(),
        index_entries=[IndexEntry('Id', True)],
        rows=[(1, "O'Brien", 'x'), (2, None, 'y')],
    )
    catalog.add_table(
        'Orders',
        [
            ColumnDescriptor('OrderId', 'int', size=4, precision=10, scale=0, nullable=False),
            ColumnDescriptor('UserId', 'int', size=4, precision=10, scale=0, nullable=False),
            ColumnDescriptor('Total', 'money', size=21, precision=19, scale=4, nullable=True),
        ],
        index_entries=[IndexEntry('OrderId', True)],
        foreign_keys=[ForeignKeyRow('FK_Orders_Users', 'UserId', 'Users', 'Id')],
    )
    return catalog


ENV_KEYS = (
    'MSSQL2MYSQL_CONNECTION_STRING',
    'MSSQL2MYSQL_FILE_NAME',
    'MSSQL2MYSQL_LOG_LEVEL',
    'MSSQL2MYSQL_HOME',
)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Private copy of os.environ without MSSQL2MYSQL_* keys; .env lookups point at tmp_path"""
    environ = {key: value for key, value in os.environ.items() if key not in ENV_KEYS}
    environ['MSSQL2MYSQL_HOME'] = str(tmp_path)
    monkeypatch.setattr(os, 'environ', environ)
    return tmp_path


# Custom markers for test organization
def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test component interaction"
    )
