from dataclasses import dataclass
from typing import Iterable, List, Optional

# Columns carrying this prefix are legacy leftovers and are never exported
EXCLUDED_COLUMN_PREFIX = "old"

@dataclass(frozen=True)
class ColumnDescriptor:
    """Column definition as reported by sp_columns"""
    name: str
    type_name: str
    size: int = 0  # byte length (LENGTH), not characters
    precision: int = 0
    scale: Optional[int] = None
    nullable: bool = True

    @property
    def is_excluded(self) -> bool:
        return self.name.startswith(EXCLUDED_COLUMN_PREFIX)

@dataclass(frozen=True)
class IndexEntry:
    """One row of sp_indexes_rowset"""
    column_name: str
    is_primary_key: bool = False

@dataclass(frozen=True)
class ForeignKeyRow:
    """One row of sp_fkeys; composite keys span several rows with the same constraint name"""
    constraint_name: str
    column_name: str
    ref_table: str
    ref_column: str

def exportable_columns(columns: Iterable[ColumnDescriptor]) -> List[ColumnDescriptor]:
    """Catalog-ordered columns that take part in both schema and data output"""
    return [col for col in columns if not col.is_excluded]
