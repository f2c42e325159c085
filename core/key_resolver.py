"""
Primary and foreign key clauses for MySQL CREATE TABLE bodies.
"""

from typing import Dict, Optional

from core.catalog import CatalogSource
from core.identifiers import quote_mysql


class KeyResolver:
    """Derives key clauses for a table from its catalog rows"""

    # Referential actions are not read from the source catalog
    REFERENTIAL_ACTIONS = "ON DELETE NO ACTION ON UPDATE NO ACTION"

    def __init__(self, catalog: CatalogSource):
        self.catalog = catalog

    def primary_key(self, table: str) -> Optional[str]:
        """Return the PRIMARY KEY clause, or None when the table has no primary key.

        Index rows repeat a column once per index it belongs to, so names are
        collapsed into an ordered set keyed by first discovery.
        """
        columns: Dict[str, None] = {}
        for entry in self.catalog.get_index_entries(table):
            if entry.is_primary_key:
                columns.setdefault(entry.column_name)

        if not columns:
            return None
        return f"\tPRIMARY KEY ({','.join(quote_mysql(name) for name in columns)})"

    def foreign_keys(self, table: str) -> Optional[str]:
        """Return KEY + CONSTRAINT pairs for every sp_fkeys row, or None"""
        clauses = []
        for fk in self.catalog.get_foreign_keys(table):
            name = quote_mysql(fk.constraint_name)
            column = quote_mysql(fk.column_name)
            clauses.append(
                f"\tKEY {name} ({column}),\n"
                f"\tCONSTRAINT {name} FOREIGN KEY ({column}) "
                f"REFERENCES {quote_mysql(fk.ref_table)} ({quote_mysql(fk.ref_column)}) "
                f"{self.REFERENTIAL_ACTIONS}"
            )

        if not clauses:
            return None
        return ",\n".join(clauses)
