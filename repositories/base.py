"""
repositories/base.py
--------------------
Generic CRUD repository driven by a TableDescriptor.

Every operation borrows a connection from the provider, works inside a
scoped cursor, and hands the connection back whatever the outcome.
Driver errors are rolled back, logged and re-raised unchanged.
"""

from contextlib import closing
from typing import Any, Generic, Optional, TypeVar

from config import SQL_TRACE
from db.connection import ConnectionProvider
from repositories import statements
from repositories.descriptor import TableDescriptor, decode
from repositories.exceptions import MissingIdentifier, MissingRequiredField
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Repository(Generic[T]):
    """CRUD operations on one table, for one record type."""

    def __init__(self, database: ConnectionProvider, descriptor: TableDescriptor[T]):
        self.database = database
        self.descriptor = descriptor

    # ── CREATE ────────────────────────────────────────────

    def create(self, record: T) -> T:
        """
        Insert a record and reflect the generated identifier back onto it.

        Args:
            record: The record to persist. Optional columns may be None.

        Returns:
            The record with its identifier assigned.

        Raises:
            MissingRequiredField: A required column has no value. Nothing is executed.
        """
        params = []
        for column in self.descriptor.columns:
            value = column.getter(record)
            if value is None and column.required:
                raise MissingRequiredField(column.name)
            params.append(value)

        sql = statements.insert_statement(self.descriptor, self.database.placeholder)
        self._trace(sql, params)
        conn = self.database.get_connection()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql, params)
                rows = cur.fetchall()
            conn.commit()
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to insert into {self.descriptor.table_name}: {e}")
            raise
        finally:
            self.database.release_connection(conn)

        if rows:
            record = self._assign_identifier(record, rows[0][0])
        logger.info(
            f"Added {self.descriptor.table_name} #{self.descriptor.id_getter(record)}"
        )
        return record

    # ── READ ──────────────────────────────────────────────

    def exists(self, record_id: Any) -> bool:
        """True if a row with this identifier is present."""
        sql = statements.select_by_id_statement(self.descriptor, self.database.placeholder)
        self._trace(sql, [record_id])
        conn = self.database.get_connection()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql, (record_id,))
                return cur.fetchone() is not None
        except Exception:
            self._rollback(conn)
            raise
        finally:
            self.database.release_connection(conn)

    def fetch_by_id(self, record_id: Any) -> Optional[T]:
        """
        Load one record by identifier.

        Returns:
            A freshly built record, or None if no row matched.
        """
        sql = statements.select_by_id_statement(self.descriptor, self.database.placeholder)
        self._trace(sql, [record_id])
        conn = self.database.get_connection()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql, (record_id,))
                row = cur.fetchone()
                if row is None:
                    return None
                return self._row_to_record(row, self._column_positions(cur))
        except Exception:
            self._rollback(conn)
            raise
        finally:
            self.database.release_connection(conn)

    def fetch_all(self) -> list[T]:
        """Load every row of the table, in the order the store returns them."""
        sql = statements.select_all_statement(self.descriptor)
        self._trace(sql, [])
        conn = self.database.get_connection()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql)
                positions = self._column_positions(cur)
                return [self._row_to_record(row, positions) for row in cur]
        except Exception:
            self._rollback(conn)
            raise
        finally:
            self.database.release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, record: T) -> None:
        """
        Write every column of a saved record back to its row.

        Raises:
            MissingIdentifier: The record has no identifier. Nothing is executed.
        """
        record_id = self.descriptor.id_getter(record)
        if record_id is None:
            raise MissingIdentifier()

        params = [column.getter(record) for column in self.descriptor.columns]
        params.append(record_id)

        sql = statements.update_statement(self.descriptor, self.database.placeholder)
        self._trace(sql, params)
        conn = self.database.get_connection()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql, params)
            conn.commit()
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to update {self.descriptor.table_name} #{record_id}: {e}")
            raise
        finally:
            self.database.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def remove(self, record_id: Any) -> bool:
        """
        Delete a row by identifier.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = statements.delete_statement(self.descriptor, self.database.placeholder)
        self._trace(sql, [record_id])
        conn = self.database.get_connection()
        try:
            with closing(conn.cursor()) as cur:
                cur.execute(sql, (record_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted {self.descriptor.table_name} #{record_id}")
            return deleted
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to delete {self.descriptor.table_name} #{record_id}: {e}")
            raise
        finally:
            self.database.release_connection(conn)

    # ── VALIDATION ────────────────────────────────────────

    def is_valid(self, record: T) -> bool:
        """True if every required column has a value. No database access."""
        return all(
            column.getter(record) is not None
            for column in self.descriptor.columns
            if column.required
        )

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _column_positions(cur) -> dict[str, int]:
        """Map result column names to row positions (DB-API rows are plain tuples)."""
        return {desc[0]: i for i, desc in enumerate(cur.description)}

    def _row_to_record(self, row, positions: dict[str, int]) -> T:
        """Build a record from a row: identifier from the first column, the rest by name."""
        record = self.descriptor.new_record()
        record = self._assign_identifier(record, row[0])
        for column in self.descriptor.columns:
            value = decode(row[positions[column.name]], column.value_type)
            result = column.setter(record, value)
            if result is not None:
                record = result
        return record

    def _assign_identifier(self, record: T, raw_id: Any) -> T:
        result = self.descriptor.id_setter(record, decode(raw_id, self.descriptor.id_type))
        return record if result is None else result

    def _rollback(self, conn) -> None:
        """Roll back after a failure without masking the error being raised."""
        try:
            conn.rollback()
        except Exception:
            logger.exception(f"Rollback failed on {self.descriptor.table_name}")

    def _trace(self, sql: str, params: list) -> None:
        if SQL_TRACE:
            logger.debug(f"{sql} -- params={params}")
