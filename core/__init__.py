#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mssql2mysql Core Package Initialization
Exports all main components for clean imports
"""

from .errors import ErrorCode, DumpError, ConfigurationError, CatalogQueryError
from .schema_ir import ColumnDescriptor, IndexEntry, ForeignKeyRow, exportable_columns
from .type_registry import TypeRegistry, MappedType
from .value_formatter import ValueFormatter, CellKind, classify_value, format_value
from .catalog import CatalogSource, MSSQLCatalog
from .key_resolver import KeyResolver
from .schema_emitter import SchemaEmitter
from .data_emitter import DataEmitter
from .script_driver import ScriptDriver, DumpOptions, DumpReport

__all__ = [
    # Orchestration
    'ScriptDriver',
    'DumpOptions',
    'DumpReport',

    # Emitters
    'SchemaEmitter',
    'DataEmitter',
    'KeyResolver',

    # Translation
    'TypeRegistry',
    'MappedType',
    'ValueFormatter',
    'CellKind',
    'classify_value',
    'format_value',

    # Catalog
    'CatalogSource',
    'MSSQLCatalog',
    'ColumnDescriptor',
    'IndexEntry',
    'ForeignKeyRow',
    'exportable_columns',

    # Errors
    'ErrorCode',
    'DumpError',
    'ConfigurationError',
    'CatalogQueryError',
]

# Version info
__version__ = '1.0.0'
__description__ = 'mssql2mysql - SQL Server to MySQL script generator'
