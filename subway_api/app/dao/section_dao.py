"""Persistence access for sections."""

import logging
import sqlite3
from typing import List

from subway_api.app.core.db import get_connection, get_cursor, is_storable_id
from subway_api.app.domain import Section, Station

logger = logging.getLogger(__name__)


class SectionDao:
    @classmethod
    def save(cls, section: Section) -> int:
        """Insert a section row tied to ``section.line_id``."""
        with get_cursor() as cursor:
            section_id = cls.insert(cursor, section)
        logger.debug("Saved section %s on line %s", section_id, section.line_id)
        return section_id

    @staticmethod
    def insert(cursor: sqlite3.Cursor, section: Section) -> int:
        """Insert a section using an already open cursor.

        Lets callers write a section in the same transaction as other rows.
        """
        cursor.execute(
            """
            INSERT INTO section (line_id, up_station_id, down_station_id, distance)
            VALUES (?, ?, ?, ?)
            """,
            (
                section.line_id,
                section.up_station_id,
                section.down_station_id,
                section.distance,
            ),
        )
        return cursor.lastrowid

    @classmethod
    def find_by_line_id(cls, line_id: int) -> List[Section]:
        """Return the sections of a line in insertion order with stations resolved."""
        if not is_storable_id(line_id):
            return []
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT s.id, s.line_id, s.distance,
                       up.id AS up_id, up.name AS up_name,
                       down.id AS down_id, down.name AS down_name
                FROM section s
                JOIN station up ON up.id = s.up_station_id
                JOIN station down ON down.id = s.down_station_id
                WHERE s.line_id = ?
                ORDER BY s.id
                """,
                (line_id,),
            ).fetchall()
            return [cls._row_to_section(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_section(row: sqlite3.Row) -> Section:
        return Section(
            id=row["id"],
            line_id=row["line_id"],
            up_station=Station(id=row["up_id"], name=row["up_name"]),
            down_station=Station(id=row["down_id"], name=row["down_name"]),
            distance=row["distance"],
        )
