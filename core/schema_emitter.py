"""
CREATE TABLE generation for one SQL Server table.
"""

import logging
from typing import List, Optional

from core.catalog import CatalogSource
from core.identifiers import quote_mysql
from core.key_resolver import KeyResolver
from core.schema_ir import ColumnDescriptor, exportable_columns
from core.type_registry import TypeRegistry

logger = logging.getLogger(__name__)


class SchemaEmitter:
    """Builds DROP/CREATE TABLE statements from catalog metadata"""

    def __init__(self, catalog: CatalogSource, key_resolver: Optional[KeyResolver] = None):
        self.catalog = catalog
        self.key_resolver = key_resolver or KeyResolver(catalog)
        # Unmapped and lossy column notes, in emission order
        self.warnings: List[str] = []

    def _column_definition(self, table: str, column: ColumnDescriptor) -> str:
        nullable = " NULL" if column.nullable else " NOT NULL"
        clause, ok = TypeRegistry.map_type(column)

        if not ok:
            msg = f"UNMAPPED TYPE: {table}.{column.name} has type '{column.type_name}', emitted as {clause}"
            logger.warning(msg)
            self.warnings.append(msg)
        else:
            reason = TypeRegistry.lossy_reason(column.type_name)
            if reason:
                msg = f"LOSSY TYPE: {table}.{column.name} ({column.type_name} -> {clause}): {reason}"
                logger.warning(msg)
                self.warnings.append(msg)

        return f"\t{quote_mysql(column.name)} {clause} {nullable}"

    def emit_table_ddl(self, table: str) -> str:
        """Return the DDL script for a table, or "" when the catalog has no columns for it"""
        columns = self.catalog.get_columns(table)
        if not columns:
            return ""

        body = [self._column_definition(table, col) for col in exportable_columns(columns)]

        primary_key = self.key_resolver.primary_key(table)
        if primary_key is not None:
            body.append(primary_key)
        foreign_keys = self.key_resolver.foreign_keys(table)
        if foreign_keys is not None:
            body.append(foreign_keys)

        quoted = quote_mysql(table)
        return (
            f"DROP TABLE IF EXISTS {quoted};\n"
            f"CREATE TABLE {quoted} (\n"
            + ",\n".join(body)
            + "\n);"
        )
