"""
INSERT generation for one SQL Server table.
"""

import logging
from typing import Dict, Iterator, Optional

from core.catalog import CatalogSource
from core.identifiers import quote_mysql
from core.schema_ir import exportable_columns
from core.value_formatter import ValueFormatter

logger = logging.getLogger(__name__)


class DataEmitter:
    """Builds a single multi-row INSERT for a table's data"""

    def __init__(self, catalog: CatalogSource, formatter: Optional[ValueFormatter] = None):
        self.catalog = catalog
        self.formatter = formatter or ValueFormatter()
        # table -> rows written
        self.row_counts: Dict[str, int] = {}

    def iter_table_data(self, table: str) -> Iterator[str]:
        """Yield the data script for a table in chunks; yields nothing for an empty table"""
        catalog_columns = self.catalog.get_columns(table)
        columns = [col.name for col in exportable_columns(catalog_columns)]
        if not columns:
            if catalog_columns:
                logger.warning(f"All columns of {table} are excluded, skipping data")
            self.row_counts[table] = 0
            return

        quoted = quote_mysql(table)
        count = 0
        for row in self.catalog.fetch_rows(table, columns):
            if count == 0:
                yield f"/*!40000 ALTER TABLE {quoted} DISABLE KEYS */;\n"
                yield f"INSERT INTO {quoted} VALUES\n"
            else:
                yield ",\n"
            yield self.formatter.format_row(row)
            count += 1

        self.row_counts[table] = count
        if count:
            yield ";\n"
            yield f"/*!40000 ALTER TABLE {quoted} ENABLE KEYS */;\n"

    def emit_table_data(self, table: str) -> str:
        return "".join(self.iter_table_data(table))
