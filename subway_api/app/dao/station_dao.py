"""Persistence access for stations."""

import logging
import sqlite3
from typing import List, Optional

from subway_api.app.core.db import get_connection, get_cursor, is_storable_id
from subway_api.app.domain import Station

logger = logging.getLogger(__name__)


class StationDao:
    @classmethod
    def save(cls, name: str) -> int:
        """Insert a station and return its generated id.

        Names are not checked for duplicates.
        """
        with get_cursor() as cursor:
            cursor.execute("INSERT INTO station (name) VALUES (?)", (name,))
            station_id = cursor.lastrowid
        logger.debug("Saved station %s (%s)", station_id, name)
        return station_id

    @classmethod
    def find_by_id(cls, station_id: int) -> Optional[Station]:
        if not is_storable_id(station_id):
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name FROM station WHERE id = ?", (station_id,)
            ).fetchone()
            return cls._row_to_station(row) if row else None
        finally:
            conn.close()

    @classmethod
    def find_all(cls) -> List[Station]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, name FROM station ORDER BY id").fetchall()
            return [cls._row_to_station(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_station(row: sqlite3.Row) -> Station:
        return Station(id=row["id"], name=row["name"])
