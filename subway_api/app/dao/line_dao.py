"""
Persistence access for lines.

``update`` and ``delete`` return the number of affected rows (0 or 1)
rather than raising; translating 0 into a not-found outcome is the
caller's job.  Ids that do not fit in an SQLite INTEGER match no row.
"""

import logging
import sqlite3
from typing import List, Optional, Set

from subway_api.app.core.db import get_connection, get_cursor, is_storable_id
from subway_api.app.dao.section_dao import SectionDao
from subway_api.app.domain import Line

logger = logging.getLogger(__name__)


class LineDao:
    @classmethod
    def save(cls, line: Line) -> int:
        """Insert a line and return its generated id.

        Sections carried by ``line`` are written in the same transaction,
        so a line and its initial section are stored as one unit.
        """
        with get_cursor() as cursor:
            line_id = cls._insert(cursor, line)
        logger.debug("Saved line %s with %d section(s)", line_id, len(line.sections))
        return line_id

    @classmethod
    def save_unique(cls, line: Line) -> Optional[int]:
        """Insert ``line`` unless a line with the same name exists.

        The name lookup and the insert share one ``BEGIN IMMEDIATE``
        transaction, so concurrent writers cannot both store the same
        name.  Returns the new id, or ``None`` if the name is taken.
        """
        with get_cursor() as cursor:
            cursor.execute("BEGIN IMMEDIATE")
            row = cursor.execute(
                "SELECT id FROM line WHERE name = ? LIMIT 1", (line.name,)
            ).fetchone()
            if row is not None:
                return None
            line_id = cls._insert(cursor, line)
        logger.debug("Saved line %s with %d section(s)", line_id, len(line.sections))
        return line_id

    @classmethod
    def find_all(cls) -> List[Line]:
        """Return every line in id order.  Sections are not populated."""
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, name, color FROM line ORDER BY id").fetchall()
            return [cls._row_to_line(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def find_by_id(cls, line_id: int) -> Optional[Line]:
        if not is_storable_id(line_id):
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, color FROM line WHERE id = ?", (line_id,)
            ).fetchone()
            return cls._row_to_line(row) if row else None
        finally:
            conn.close()

    @classmethod
    def find_by_name(cls, name: str) -> Optional[Line]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, color FROM line WHERE name = ? ORDER BY id LIMIT 1",
                (name,),
            ).fetchone()
            return cls._row_to_line(row) if row else None
        finally:
            conn.close()

    @classmethod
    def find_stations_id_by_line_id(cls, line_id: int) -> Set[int]:
        """Return the ids of every station referenced by the line's sections."""
        if not is_storable_id(line_id):
            return set()
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT up_station_id AS station_id FROM section WHERE line_id = ?
                UNION
                SELECT down_station_id AS station_id FROM section WHERE line_id = ?
                """,
                (line_id, line_id),
            ).fetchall()
            return {row["station_id"] for row in rows}
        finally:
            conn.close()

    @classmethod
    def update(cls, line_id: int, line: Line) -> int:
        if not is_storable_id(line_id):
            return 0
        with get_cursor() as cursor:
            cursor.execute(
                "UPDATE line SET name = ?, color = ? WHERE id = ?",
                (line.name, line.color, line_id),
            )
            return cursor.rowcount

    @classmethod
    def delete(cls, line_id: int) -> int:
        """Delete a line.  Its sections are removed by ``ON DELETE CASCADE``."""
        if not is_storable_id(line_id):
            return 0
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM line WHERE id = ?", (line_id,))
            return cursor.rowcount

    @staticmethod
    def _insert(cursor: sqlite3.Cursor, line: Line) -> int:
        cursor.execute(
            "INSERT INTO line (name, color) VALUES (?, ?)",
            (line.name, line.color),
        )
        line_id = cursor.lastrowid
        for section in line.sections:
            section.line_id = line_id
            section.id = SectionDao.insert(cursor, section)
        return line_id

    @staticmethod
    def _row_to_line(row: sqlite3.Row) -> Line:
        return Line(id=row["id"], name=row["name"], color=row["color"])
