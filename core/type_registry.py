from typing import Dict, NamedTuple, Optional

from core.schema_ir import ColumnDescriptor

class MappedType(NamedTuple):
    clause: str
    ok: bool

class TypeRegistry:
    # SQL Server type name -> MySQL column type template
    # Placeholders: {size} byte length, {chars} size/2 for 2-byte encodings,
    # {precision}, {scale}
    MSSQL_TO_MYSQL: Dict[str, str] = {
        'nvarchar': 'VARCHAR({chars}) CHARACTER SET utf8mb4',
        'varchar': 'VARCHAR({size}) CHARACTER SET utf8mb4',
        'text': 'LONGTEXT CHARACTER SET utf8mb4',
        'ntext': 'LONGTEXT CHARACTER SET utf8mb4',
        'char': 'CHAR({size}) CHARACTER SET utf8mb4',
        'nchar': 'CHAR({size}) CHARACTER SET utf8mb4',
        'int': 'INT',
        'int8': 'INT',
        'smallint': 'SMALLINT',
        'datetime': 'DATETIME',
        'smalldatetime': 'DATETIME',
        'datetimeoffset': 'DATETIME',
        'uniqueidentifier': 'CHAR(13)',
        'image': 'LONGBLOB',
        'binary': 'LONGBLOB',
        'varbinary': 'LONGBLOB',
        'money': 'DECIMAL({precision},{scale})',
        'smallmoney': 'DECIMAL({precision},{scale})',
        'decimal': 'DECIMAL({precision},{scale})',
        'numeric': 'DECIMAL({precision},{scale})',
        'float': 'FLOAT',
        'real': 'FLOAT',
        'bit': 'TINYINT(1)',
        'int identity': 'INT AUTO_INCREMENT',
    }

    # Mappings that are known to lose information on the way to MySQL
    LOSSY_TYPES: Dict[str, str] = {
        'uniqueidentifier': "36-character GUID text does not fit CHAR(13); values will be truncated",
        'datetimeoffset': "Timezone loss: DATETIMEOFFSET -> DATETIME (UTC normalized)",
    }

    UNMAPPED = "NOTFOUND"

    @staticmethod
    def map_type(column: ColumnDescriptor) -> MappedType:
        """Map a SQL Server column to a MySQL type clause.

        Lookup is case-sensitive on the catalog type name. Unknown types come
        back as the NOTFOUND sentinel with ok=False so a dump can carry on and
        the operator can patch the script by hand.
        """
        template = TypeRegistry.MSSQL_TO_MYSQL.get(column.type_name)
        if template is None:
            return MappedType(TypeRegistry.UNMAPPED, False)

        clause = template.format(
            size=column.size,
            chars=column.size // 2,
            precision=column.precision,
            scale=column.scale if column.scale is not None else 0,
        )
        return MappedType(clause, True)

    @staticmethod
    def lossy_reason(type_name: str) -> Optional[str]:
        """Describe why a mapping loses information, or None if it does not"""
        return TypeRegistry.LOSSY_TYPES.get(type_name)
