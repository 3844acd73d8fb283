"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that wraps one unit of
work in a transaction (``get_cursor``) and applying migrations on
application start (``init_db``).  SQLite is used as a lightweight
embedded database; to switch to another DBMS you would replace the
connection logic and adapt the SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)

# Bounds of an SQLite INTEGER.  sqlite3 raises OverflowError when a
# Python int outside this range is bound as a parameter.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: stations and lines
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS station (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS line (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            color TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: sections link two stations on a line.  Sections go
    # away together with their line.
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS section (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            line_id INTEGER NOT NULL,
            up_station_id INTEGER NOT NULL,
            down_station_id INTEGER NOT NULL,
            distance INTEGER NOT NULL DEFAULT 0,
            FOREIGN KEY(line_id) REFERENCES line(id) ON DELETE CASCADE,
            FOREIGN KEY(up_station_id) REFERENCES station(id),
            FOREIGN KEY(down_station_id) REFERENCES station(id)
        );

        CREATE INDEX IF NOT EXISTS idx_section_line_id ON section(line_id);
        CREATE INDEX IF NOT EXISTS idx_line_name ON line(name);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # subway_api/
    return str((base_dir / db_url).resolve())


def is_storable_id(value: int) -> bool:
    """Return True if ``value`` fits in an SQLite INTEGER column.

    Ids outside this range can never have been generated by the
    database, so lookups with them are answered as "no such row"
    without touching SQLite.
    """
    return SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite leaves it off by default, which would make
    the ``ON DELETE CASCADE`` on ``section.line_id`` a no-op.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor for one unit of work.

    The transaction is committed when the block exits normally and
    rolled back if it raises.  The connection is always closed.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version
