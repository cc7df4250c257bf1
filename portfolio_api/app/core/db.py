"""
SQLite integration, scoped transactions and a small migration system.

This module provides the record store for the portfolio API:

* ``get_connection`` opens a connection with named-column rows and
  foreign key enforcement switched on;
* ``transaction`` wraps one service call: it commits when the block
  exits normally and rolls back on any exception;
* ``init_db`` applies the versioned schema migrations at startup.

Applied migration versions are stored in the ``migrations`` table and
new migrations run in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"


MIGRATIONS: list[tuple[int, list[str]]] = [
    # Migration 1: portfolio schema
    (
        1,
        [
            """
            CREATE TABLE IF NOT EXISTS profile (
                profile_id INTEGER PRIMARY KEY AUTOINCREMENT,
                first_name TEXT,
                last_name TEXT,
                photo_url VARCHAR(500),
                status TEXT
            )
            """,
            """
            CREATE TABLE IF NOT EXISTS achievement (
                achievement_id INTEGER PRIMARY KEY AUTOINCREMENT,
                profile_id INTEGER NOT NULL,
                slug VARCHAR(50),
                title TEXT,
                subtitle TEXT,
                emoji VARCHAR(10),
                progress_percent INTEGER,
                variant VARCHAR(20),
                stat_label VARCHAR(50),
                stat_value VARCHAR(50),
                sort_order INTEGER,
                FOREIGN KEY(profile_id) REFERENCES profile(profile_id) ON DELETE CASCADE
            )
            """,
            """
            CREATE TABLE IF NOT EXISTS aspiration (
                aspiration_id INTEGER PRIMARY KEY AUTOINCREMENT,
                profile_id INTEGER NOT NULL,
                slug VARCHAR(50),
                title TEXT,
                subtitle TEXT,
                status_text VARCHAR(100),
                progress_percent INTEGER,
                variant VARCHAR(20),
                footer_text TEXT,
                animated INTEGER,
                sort_order INTEGER,
                FOREIGN KEY(profile_id) REFERENCES profile(profile_id) ON DELETE CASCADE
            )
            """,
            """
            CREATE TABLE IF NOT EXISTS experience (
                experience_id INTEGER PRIMARY KEY AUTOINCREMENT,
                profile_id INTEGER NOT NULL,
                slug VARCHAR(50),
                company VARCHAR(100),
                role TEXT,
                role_style VARCHAR(20),
                description TEXT,
                start_date DATE,
                end_date DATE,
                sort_order INTEGER,
                FOREIGN KEY(profile_id) REFERENCES profile(profile_id) ON DELETE CASCADE
            )
            """,
        ],
    ),
    # Migration 2: every child listing filters by profile and sorts by sort_order
    (
        2,
        [
            "CREATE INDEX IF NOT EXISTS idx_achievement_profile_sort ON achievement(profile_id, sort_order)",
            "CREATE INDEX IF NOT EXISTS idx_aspiration_profile_sort ON aspiration(profile_id, sort_order)",
            "CREATE INDEX IF NOT EXISTS idx_experience_profile_sort ON experience(profile_id, sort_order)",
        ],
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    ``settings.database_url`` may be a plain path or a
    ``sqlite:///<path>`` URL.  Absolute paths are used directly;
    relative ones are resolved against the project root.
    """
    db_url = settings.database_url
    if db_url.startswith(SQLITE_URL_PREFIX):
        db_url = db_url[len(SQLITE_URL_PREFIX):]
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # portfolio_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so repositories can read
    columns by name.  Foreign keys are off by default in SQLite and
    must be enabled per connection, otherwise child rows could point
    at missing profiles and ``ON DELETE CASCADE`` would not fire.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction(read_only: bool = False) -> Iterator[sqlite3.Connection]:
    """Run a block inside a single store transaction.

    Yields an open connection.  The transaction is committed when the
    block completes and rolled back if it raises; the exception is
    re-raised unchanged.  With ``read_only`` the connection refuses
    writes (``PRAGMA query_only``).
    """
    conn = get_connection()
    try:
        if read_only:
            conn.execute("PRAGMA query_only = ON")
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def check_connection() -> bool:
    """Return ``True`` if the store answers a trivial query."""
    try:
        with transaction(read_only=True) as conn:
            conn.execute("SELECT 1").fetchone()
        return True
    except sqlite3.Error:
        logger.exception("Database health check failed")
        return False


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, reads the
    current schema version and applies every newer entry of
    ``MIGRATIONS``.  To change the schema, append a migration with the
    next version number; each entry is a list of single SQL statements.

    Everything runs in one explicit transaction, so a failing statement
    leaves neither its schema changes nor its version row behind.
    """
    with transaction() as conn:
        # sqlite3 autocommits DDL outside an explicit transaction.
        conn.execute("BEGIN")
        conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, statements in MIGRATIONS:
            if version > current_version:
                for statement in statements:
                    conn.execute(statement)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied database migration %s", version)
                current_version = version
