"""
SQL Server catalog access.

The emitters only see the CatalogSource protocol. MSSQLCatalog implements it on
top of a DB-API connection using the sys.sp_* catalog procedures. Every call
runs its own query on a fresh cursor; nothing is cached between calls.
"""

import logging
from typing import Any, Iterator, List, Optional, Protocol, Sequence, Tuple

from core.errors import CatalogQueryError, ConfigurationError
from core.identifiers import quote_mssql
from core.schema_ir import ColumnDescriptor, ForeignKeyRow, IndexEntry

logger = logging.getLogger(__name__)

FETCH_BATCH_SIZE = 1000

# Result set positions of the catalog procedures
# sp_tables
TABLES_NAME = 2
# sp_columns
COLUMNS_NAME = 3
COLUMNS_TYPE_NAME = 5
COLUMNS_PRECISION = 6
COLUMNS_LENGTH = 7
COLUMNS_SCALE = 8
COLUMNS_NULLABLE = 10
# sp_indexes_rowset
INDEXES_PRIMARY_KEY = 6
INDEXES_COLUMN_NAME = 17
# sp_fkeys
FKEYS_PKTABLE_NAME = 2
FKEYS_PKCOLUMN_NAME = 3
FKEYS_FKCOLUMN_NAME = 7
FKEYS_FK_NAME = 11


class CatalogSource(Protocol):
    """Query capability consumed by the emitters and the script driver."""

    def list_tables(self) -> List[str]: ...
    def get_columns(self, table: str) -> List[ColumnDescriptor]: ...
    def get_index_entries(self, table: str) -> List[IndexEntry]: ...
    def get_foreign_keys(self, table: str) -> List[ForeignKeyRow]: ...
    def fetch_rows(self, table: str, columns: Sequence[str]) -> Iterator[Tuple[Any, ...]]: ...


class MSSQLCatalog:
    """CatalogSource backed by a SQL Server DB-API connection (pymssql)"""

    LIST_TABLES_SQL = "EXEC sys.sp_tables NULL, 'dbo', NULL, '''TABLE'''"
    COLUMNS_SQL = "EXEC sys.sp_columns @table_name = %s"
    INDEXES_SQL = "EXEC sys.sp_indexes_rowset @table_name = %s"
    FKEYS_SQL = "EXEC sys.sp_fkeys @fktable_name = %s"

    def __init__(self, connection):
        self.connection = connection

    @classmethod
    def connect(cls, settings) -> "MSSQLCatalog":
        """Open a pymssql connection from ConnectionSettings"""
        try:
            import pymssql
        except ImportError as e:
            raise ConfigurationError("pymssql not installed. Please install it: pip install pymssql") from e

        logger.info(f"Connecting to source: {settings.host}:{settings.port}/{settings.database}...")
        try:
            connection = pymssql.connect(
                server=settings.host,
                port=settings.port,
                user=settings.user,
                password=settings.password,
                database=settings.database,
            )
        except Exception as e:
            raise CatalogQueryError(f"Failed to connect to source: {e}") from e
        logger.info("Connected to MSSQL source")
        return cls(connection)

    def close(self):
        """Close the underlying connection; safe to call more than once"""
        if self.connection is not None:
            self.connection.close()
            self.connection = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _query(self, statement: str, params: Optional[tuple] = None) -> List[tuple]:
        cursor = self.connection.cursor()
        try:
            if params is None:
                cursor.execute(statement)
            else:
                cursor.execute(statement, params)
            return list(cursor.fetchall())
        except Exception as e:
            raise CatalogQueryError(f"Catalog query failed: {e}", statement=statement) from e
        finally:
            cursor.close()

    def list_tables(self) -> List[str]:
        return [row[TABLES_NAME] for row in self._query(self.LIST_TABLES_SQL)]

    def get_columns(self, table: str) -> List[ColumnDescriptor]:
        columns = []
        for row in self._query(self.COLUMNS_SQL, (table,)):
            scale = row[COLUMNS_SCALE]
            columns.append(ColumnDescriptor(
                name=row[COLUMNS_NAME],
                type_name=row[COLUMNS_TYPE_NAME],
                size=int(row[COLUMNS_LENGTH] or 0),
                precision=int(row[COLUMNS_PRECISION] or 0),
                scale=int(scale) if scale is not None else None,
                nullable=row[COLUMNS_NULLABLE] == 1,
            ))
        return columns

    def get_index_entries(self, table: str) -> List[IndexEntry]:
        return [
            IndexEntry(column_name=row[INDEXES_COLUMN_NAME], is_primary_key=bool(row[INDEXES_PRIMARY_KEY]))
            for row in self._query(self.INDEXES_SQL, (table,))
        ]

    def get_foreign_keys(self, table: str) -> List[ForeignKeyRow]:
        return [
            ForeignKeyRow(
                constraint_name=row[FKEYS_FK_NAME],
                column_name=row[FKEYS_FKCOLUMN_NAME],
                ref_table=row[FKEYS_PKTABLE_NAME],
                ref_column=row[FKEYS_PKCOLUMN_NAME],
            )
            for row in self._query(self.FKEYS_SQL, (table,))
        ]

    def build_select(self, table: str, columns: Sequence[str]) -> str:
        projection = ",".join(quote_mssql(col) for col in columns)
        return f"SELECT {projection} FROM {quote_mssql(table)};"

    def fetch_rows(self, table: str, columns: Sequence[str]) -> Iterator[Tuple[Any, ...]]:
        """Stream rows of a projected SELECT in natural source order"""
        statement = self.build_select(table, columns)
        cursor = self.connection.cursor()
        try:
            try:
                cursor.execute(statement)
                while True:
                    rows = cursor.fetchmany(FETCH_BATCH_SIZE)
                    if not rows:
                        break
                    for row in rows:
                        yield tuple(row)
            except Exception as e:
                raise CatalogQueryError(f"Row query failed: {e}", statement=statement) from e
        finally:
            cursor.close()
