"""
Shared SQL for the table repositories.

Column names equal the entity dataclass field names, so a repository
only declares its table, key column, value columns and entity class.
Type conversions that SQLite cannot do on its own (booleans, dates)
are handled by overriding ``_to_db`` and ``_from_db``.

Table and column names come from these class attributes only, never
from request data; all values are bound as parameters.
"""

import sqlite3
from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

EntityT = TypeVar("EntityT")


class TableRepository(Generic[EntityT]):
    """CRUD operations over one table keyed by an integer surrogate id."""

    table: str
    id_column: str
    columns: Sequence[str]
    entity_class: Type[EntityT]

    def find_by_id(self, conn: sqlite3.Connection, entity_id: int) -> Optional[EntityT]:
        row = conn.execute(
            f"SELECT * FROM {self.table} WHERE {self.id_column} = ?",
            (entity_id,),
        ).fetchone()
        if row is None:
            return None
        return self._row_to_entity(row)

    def exists_by_id(self, conn: sqlite3.Connection, entity_id: int) -> bool:
        row = conn.execute(
            f"SELECT 1 FROM {self.table} WHERE {self.id_column} = ?",
            (entity_id,),
        ).fetchone()
        return row is not None

    def save(self, conn: sqlite3.Connection, entity: EntityT) -> EntityT:
        """Insert or update ``entity`` and return the stored row.

        Without a key the row is inserted and the generated key is
        read back.  With a key the row is updated; if no row has that
        key it is inserted under it.
        """
        values = self._entity_to_values(entity)
        entity_id = getattr(entity, self.id_column)
        if entity_id is None:
            placeholders = ", ".join("?" for _ in self.columns)
            cursor = conn.execute(
                f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
                values,
            )
            entity_id = cursor.lastrowid
        else:
            assignments = ", ".join(f"{column} = ?" for column in self.columns)
            cursor = conn.execute(
                f"UPDATE {self.table} SET {assignments} WHERE {self.id_column} = ?",
                (*values, entity_id),
            )
            if cursor.rowcount == 0:
                all_columns = (self.id_column, *self.columns)
                placeholders = ", ".join("?" for _ in all_columns)
                conn.execute(
                    f"INSERT INTO {self.table} ({', '.join(all_columns)}) VALUES ({placeholders})",
                    (entity_id, *values),
                )
        return self.find_by_id(conn, entity_id)

    def delete_by_id(self, conn: sqlite3.Connection, entity_id: int) -> None:
        conn.execute(f"DELETE FROM {self.table} WHERE {self.id_column} = ?", (entity_id,))

    def _entity_to_values(self, entity: EntityT) -> Tuple[Any, ...]:
        return tuple(self._to_db(column, getattr(entity, column)) for column in self.columns)

    def _row_to_entity(self, row: sqlite3.Row) -> EntityT:
        fields = {column: self._from_db(column, row[column]) for column in (self.id_column, *self.columns)}
        return self.entity_class(**fields)

    def _to_db(self, column: str, value: Any) -> Any:
        return value

    def _from_db(self, column: str, value: Any) -> Any:
        return value


class ProfileChildRepository(TableRepository[EntityT]):
    """Repository for tables whose rows belong to a profile."""

    def find_by_profile_id_ordered(self, conn: sqlite3.Connection, profile_id: int) -> List[EntityT]:
        """Return the profile's rows by ascending ``sort_order``.

        Rows without a ``sort_order`` come last.  Rows with equal
        ``sort_order`` keep insertion order.  An unknown profile yields an
        empty list.
        """
        rows = conn.execute(
            f"SELECT * FROM {self.table} WHERE profile_id = ? "
            f"ORDER BY sort_order IS NULL, sort_order ASC, {self.id_column} ASC",
            (profile_id,),
        ).fetchall()
        return [self._row_to_entity(row) for row in rows]
