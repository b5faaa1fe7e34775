"""
Schema manager: table bootstrap, seeding, reads and writes.

The manager owns the single store connection. Startup walks the linear
progression connected -> initialized -> tables ensured, and each stage
fails fast: a failure is logged and re-raised, nothing is retried.

All values are sent as bound parameters. Column projections, join and
order fragments given to `select` are appended to the statement verbatim,
so they must never carry user input.
"""
import logging
import re
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from sqlalchemy import MetaData, Table, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.schema import CreateTable, DropTable, sort_tables
from sqlalchemy.sql import ClauseElement

from employee_tracker.config import Settings
from employee_tracker.core.exceptions import StatementError
from employee_tracker.database.connections import (
    close_connection,
    connect,
    initialize_database,
    supports_databases,
)
from employee_tracker.database.registry import TableRegistry
from employee_tracker.models.table import SeedRow, TableDescriptor
from employee_tracker.schemas.write import WriteResult

logger = logging.getLogger(__name__)

_ALIAS = re.compile(r"\s+as\s+", re.IGNORECASE)


def result_key(column: str) -> str:
    """
    Name under which a projected column shows up in result rows.

    "employee.first_name" -> "first_name", "concat(...) AS manager" -> "manager".
    """
    parts = _ALIAS.split(column.strip())
    if len(parts) > 1:
        return parts[-1].strip().strip('`"')
    return parts[0].rsplit(".", 1)[-1].strip('`"')


class SchemaManager:
    """Sets up the registry's tables and runs reads and writes against them."""

    def __init__(self, connection: AsyncConnection, settings: Settings, registry: TableRegistry):
        self.connection = connection
        self.settings = settings
        self.registry = registry
        self._metadata = MetaData()

    @classmethod
    async def open(
        cls,
        settings: Settings,
        registry: TableRegistry,
        force_recreate: bool = False,
        seed: bool = False,
    ) -> "SchemaManager":
        """
        Connect, initialize the database and set up every registered table.

        Raises:
            DatabaseConnectionError: If the store cannot be reached
            StatementError: If database or table setup fails
        """
        connection = await connect(settings)
        manager = cls(connection, settings, registry)
        try:
            await manager.initialize()
            await manager.setup_all(registry, force_recreate=force_recreate, seed=seed)
        except BaseException as e:
            logger.error(f"Startup failed: {e!r}")
            await manager.close()
            raise
        logger.info("Connection established")
        return manager

    async def close(self) -> None:
        await close_connection(self.connection)
        logger.info("Connection closed")

    @property
    def dialect(self):
        return self.connection.dialect

    async def initialize(self) -> None:
        """Create and select the configured database."""
        await initialize_database(self.connection, self.settings.db_name)

    # ==================== Statement helpers ====================

    async def _execute(self, statement: ClauseElement, parameters: Any = None):
        try:
            return await self.connection.execute(statement, parameters)
        except SQLAlchemyError as e:
            logger.error(f"Statement failed: {e}")
            raise StatementError(str(e)) from e

    def _quote(self, identifier: str) -> str:
        return self.dialect.identifier_preparer.quote(identifier)

    def _table(self, descriptor: TableDescriptor) -> Table:
        """SQLAlchemy table for `descriptor`, with its referenced tables registered."""
        table = self._metadata.tables.get(descriptor.name)
        if table is not None and [c.name for c in table.columns] != descriptor.column_names:
            self._metadata.remove(table)

        # Foreign keys only compile when the referenced table is in the metadata
        for target in descriptor.foreign_key_targets:
            if target != descriptor.name and target not in self._metadata.tables:
                referenced = self.registry.describe(target)
                if referenced is not None:
                    referenced.to_table(self._metadata)

        return descriptor.to_table(self._metadata)

    def create_table_statement(self, descriptor: TableDescriptor) -> str:
        """DDL for `descriptor` as the live dialect would issue it."""
        return str(CreateTable(self._table(descriptor)).compile(dialect=self.dialect)).strip()

    def render_expression(self, expression: ClauseElement) -> str:
        """Compile an expression to SQL text for the live dialect, literals inlined."""
        compiled = expression.compile(
            dialect=self.dialect, compile_kwargs={"literal_binds": True}
        )
        return str(compiled)

    # ==================== Table setup ====================

    async def table_exists(self, name: str) -> bool:
        """
        Check the store's catalog for a table named `name`.

        Server stores are asked about the configured database explicitly:
        the connection's default schema is read before `USE` selects it.
        """
        if supports_databases(self.connection):
            result = await self._execute(
                text(
                    "SELECT COUNT(*) FROM information_schema.tables "
                    "WHERE table_schema = :schema AND table_name = :name"
                ),
                {"schema": self.settings.db_name, "name": name},
            )
            return bool(result.scalar())

        try:
            return await self.connection.run_sync(
                lambda sync_conn: inspect(sync_conn).has_table(name)
            )
        except Exception as e:
            logger.error(f"Catalog lookup for {name} failed: {e}")
            raise StatementError(str(e)) from e

    async def drop_table(self, descriptor: TableDescriptor) -> None:
        """Drop the table if it exists."""
        await self._execute(DropTable(self._table(descriptor), if_exists=True))

    async def drop_tables(self, descriptors: Iterable[TableDescriptor]) -> None:
        """Drop tables so that referencing tables go before the tables they reference."""
        tables = [self._table(d) for d in descriptors]
        for table in reversed(sort_tables(tables)):
            await self._execute(DropTable(table, if_exists=True))

    async def ensure_table(
        self,
        descriptor: TableDescriptor,
        force_recreate: bool = False,
        exists: Optional[bool] = None,
    ) -> bool:
        """
        Make sure the table exists.

        An existing table is left untouched unless `force_recreate` is set,
        in which case it is dropped and created empty. Every table it
        references (other than itself) must already exist.

        Args:
            descriptor: Table to ensure
            force_recreate: Drop and recreate even if the table exists
            exists: Known existence, to skip a catalog lookup

        Returns:
            True if the table was (re)created

        Raises:
            StatementError: If a referenced table is missing or the store
                rejects the DDL
        """
        if exists is None:
            exists = await self.table_exists(descriptor.name)
        if exists and not force_recreate:
            return False

        await self.drop_table(descriptor)

        for target in descriptor.foreign_key_targets:
            if target != descriptor.name and not await self.table_exists(target):
                message = (
                    f"Cannot create table {descriptor.name}: "
                    f"referenced table {target} does not exist"
                )
                logger.error(message)
                raise StatementError(message)

        logger.info(f"Creating {descriptor.name} table")
        logger.debug(self.create_table_statement(descriptor))
        await self._execute(CreateTable(self._table(descriptor)))
        return True

    async def seed_table(self, descriptor: TableDescriptor) -> int:
        """
        Insert the descriptor's seed rows, one insert per row.

        Rows are awaited one after the other, batch by batch, so later
        batches can reference rows inserted by earlier ones.

        Returns:
            Number of rows inserted
        """
        logger.info(f"Seeding {descriptor.name} table")
        inserted = 0
        for batch in descriptor.seeds:
            for row in batch:
                result = await self.insert(descriptor, [row])
                inserted += result.rowcount
        return inserted

    async def setup_table(
        self,
        descriptor: TableDescriptor,
        force_recreate: bool = False,
        seed: bool = False,
    ) -> None:
        exists = await self.table_exists(descriptor.name)
        logger.info(f"Does {descriptor.name} table exist: {exists}")
        await self.ensure_table(descriptor, force_recreate, exists=exists)
        if seed:
            await self.seed_table(descriptor)

    async def setup_all(
        self,
        descriptors: Optional[Iterable[TableDescriptor]] = None,
        force_recreate: bool = False,
        seed: bool = False,
    ) -> None:
        """
        Set up each table in the given order, stopping at the first failure.

        Referenced tables must come before the tables referencing them.
        Tables already set up are not rolled back when a later one fails.
        """
        descriptors = list(self.registry if descriptors is None else descriptors)
        if force_recreate:
            await self.drop_tables(descriptors)
        for descriptor in descriptors:
            await self.setup_table(descriptor, force_recreate=force_recreate, seed=seed)

    # ==================== Reads ====================

    async def select(
        self,
        table_name: str,
        columns: Union[str, Sequence[str]] = "*",
        joins: Optional[Sequence[str]] = None,
        order_by: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table_name: Table to select from
            columns: Projection, "*" by default
            joins: JOIN fragments, appended verbatim
            order_by: ORDER BY fragment, appended verbatim

        Returns:
            One mapping of result column name to value per row
        """
        projection = columns if isinstance(columns, str) else ", ".join(columns)
        lines = [f"SELECT {projection}", f"FROM {self._quote(table_name)}"]
        lines.extend(joins or [])
        if order_by:
            lines.append(f"ORDER BY {order_by}")

        result = await self._execute(text("\n".join(lines)))
        rows = [dict(row) for row in result.mappings()]
        logger.debug(f"Selected {len(rows)} rows from {table_name}")
        return rows

    async def select_column(
        self,
        table_name: str,
        column: str,
        joins: Optional[Sequence[str]] = None,
        order_by: Optional[str] = None,
    ) -> list[Any]:
        """Select a single column; rows without that field yield None."""
        rows = await self.select(table_name, column, joins, order_by)
        key = result_key(column)
        return [row.get(key) for row in rows]

    # ==================== Writes ====================

    async def insert(self, descriptor: TableDescriptor, rows: Iterable[SeedRow]) -> WriteResult:
        """
        Insert rows, each aligned positionally to the insertable columns.

        Raises:
            StatementError: If there are no rows, a row has the wrong number
                of values, or the store rejects the insert
        """
        rows = list(rows)
        if not rows:
            raise StatementError(f"No rows to insert into {descriptor.name}")
        try:
            params = [descriptor.row_to_params(row) for row in rows]
        except ValueError as e:
            logger.error(str(e))
            raise StatementError(str(e)) from e

        table = self._table(descriptor)
        result = await self._execute(table.insert(), params[0] if len(params) == 1 else params)

        last_insert_id = None
        if len(params) == 1 and result.inserted_primary_key:
            last_insert_id = result.inserted_primary_key[0]
        return WriteResult(
            table=descriptor.name,
            rowcount=result.rowcount,
            last_insert_id=last_insert_id,
        )

    async def update(
        self,
        descriptor: TableDescriptor,
        values: Mapping[str, Any],
        where: Mapping[str, Any],
    ) -> WriteResult:
        """
        Update rows matching every `where` column/value pair.

        Raises:
            StatementError: If nothing is set, no condition is given, a
                column is unknown, or the store rejects the update
        """
        if not values or not where:
            raise StatementError(f"Update of {descriptor.name} needs values and a condition")
        unknown = [name for name in (*values, *where) if descriptor.column(name) is None]
        if unknown:
            raise StatementError(
                f"Unknown columns for table {descriptor.name}: {', '.join(unknown)}"
            )

        table = self._table(descriptor)
        statement = table.update().values(**values)
        for name, value in where.items():
            statement = statement.where(table.c[name] == value)

        result = await self._execute(statement)
        return WriteResult(table=descriptor.name, rowcount=result.rowcount)
