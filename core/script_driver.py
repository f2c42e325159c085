"""
Dump Script Driver
==================

Walks the source tables in enumeration order and writes the MySQL script to a
text sink (anything with a ``write(str)`` method).

Two modes:
    - full: optional CREATE DATABASE/USE preamble, then every table's DDL and,
      when requested, its data, inside a FOREIGN_KEY_CHECKS=0/1 envelope
    - single table: only the INSERT block of one table, inside the same envelope
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from core.catalog import CatalogSource
from core.data_emitter import DataEmitter
from core.identifiers import quote_mysql
from core.schema_emitter import SchemaEmitter

logger = logging.getLogger(__name__)


@dataclass
class DumpOptions:
    """What to dump"""
    schema: Optional[str] = None
    ignore_tables: Sequence[str] = field(default_factory=tuple)
    with_data: bool = False
    table_name: Optional[str] = None

    @property
    def single_table(self) -> bool:
        return bool(self.table_name) and self.with_data


@dataclass
class DumpReport:
    """Outcome of one run"""
    tables: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    empty_tables: List[str] = field(default_factory=list)
    rows: Dict[str, int] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return sum(self.rows.values())


class ScriptDriver:
    """Orchestrates schema and data emission for a whole source database"""

    def __init__(self, catalog: CatalogSource, options: Optional[DumpOptions] = None,
                 schema_emitter: Optional[SchemaEmitter] = None,
                 data_emitter: Optional[DataEmitter] = None):
        self.catalog = catalog
        self.options = options or DumpOptions()
        self.schema_emitter = schema_emitter or SchemaEmitter(catalog)
        self.data_emitter = data_emitter or DataEmitter(catalog)

    @staticmethod
    def _write_line(sink, text: str = ""):
        sink.write(text + "\n")

    def _write_data(self, sink, table: str, report: DumpReport):
        for chunk in self.data_emitter.iter_table_data(table):
            sink.write(chunk)
        sink.write("\n")
        report.rows[table] = self.data_emitter.row_counts.get(table, 0)

    def run(self, sink) -> DumpReport:
        """Write the script for the configured mode and return the run report"""
        if self.options.single_table:
            return self.run_table_data(sink, self.options.table_name)

        if self.options.table_name:
            logger.warning(f"Table {self.options.table_name} ignored without data export; dumping all tables")

        report = DumpReport()
        ignored = set(self.options.ignore_tables or ())

        if self.options.schema:
            schema = quote_mysql(self.options.schema)
            self._write_line(sink, f"CREATE DATABASE  IF NOT EXISTS {schema} /*!40100 DEFAULT CHARACTER SET latin1 */;")
            self._write_line(sink, f"USE {schema};")
            self._write_line(sink)

        self._write_line(sink, "SET FOREIGN_KEY_CHECKS=0;")
        for table in self.catalog.list_tables():
            if table in ignored:
                logger.info(f"Skipping: {table}")
                report.skipped.append(table)
                continue

            logger.info(f"Generating: {table}")
            ddl = self.schema_emitter.emit_table_ddl(table)
            if ddl:
                report.tables.append(table)
            else:
                report.empty_tables.append(table)
            self._write_line(sink, ddl)
            self._write_line(sink)

            if self.options.with_data:
                self._write_data(sink, table, report)
        self._write_line(sink, "SET FOREIGN_KEY_CHECKS=1;")

        report.warnings.extend(self.schema_emitter.warnings)
        return report

    def run_table_data(self, sink, table: str) -> DumpReport:
        """Write only one table's INSERT block, without enumerating the catalog"""
        report = DumpReport()
        logger.info(f"Generating data: {table}")
        self._write_line(sink, "SET FOREIGN_KEY_CHECKS=0;")
        self._write_data(sink, table, report)
        self._write_line(sink, "SET FOREIGN_KEY_CHECKS=1;")
        report.tables.append(table)
        return report
