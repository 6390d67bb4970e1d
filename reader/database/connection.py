"""
Database connection management, sessions and schema initialization.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Mapping

logger = logging.getLogger(__name__)


class Session:
    """
    Unit of work over a single SQLite connection.

    Statements run inside one transaction which is committed or rolled back
    by whoever owns the session (usually `DatabaseConnection.session()`).
    """

    def __init__(self, connection: sqlite3.Connection):
        self._connection = connection

    def execute(self, sql: str, params: Mapping[str, Any] | None = None) -> int:
        """Execute a statement. Returns affected row count."""
        cursor = self._connection.execute(sql, params or {})
        return cursor.rowcount

    def query(self, sql: str, params: Mapping[str, Any] | None = None) -> list[sqlite3.Row]:
        """Execute a query and return all rows."""
        return self._connection.execute(sql, params or {}).fetchall()

    def query_one(self, sql: str, params: Mapping[str, Any] | None = None) -> sqlite3.Row | None:
        """Execute a query and return the first row, or None."""
        return self._connection.execute(sql, params or {}).fetchone()

    def commit(self):
        self._connection.commit()

    def rollback(self):
        self._connection.rollback()


class DatabaseConnection:
    """Manages database connection and schema."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @contextmanager
    def conn(self) -> Iterator[sqlite3.Connection]:
        """Get database connection with row factory."""
        # Request sessions are opened and closed on threadpool workers
        connection = sqlite3.connect(self.db_path, check_same_thread=False)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON")
        try:
            yield connection
            connection.commit()
        finally:
            connection.close()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Open a session. Commits when the block exits cleanly, rolls back
        and re-raises when it raises.
        """
        with self.conn() as connection:
            session = Session(connection)
            try:
                yield session
            except Exception:
                logger.warning("Rolling back session after error")
                session.rollback()
                raise

    def _init_schema(self):
        """Initialize database schema."""
        with self.conn() as connection:
            connection.executescript("""
                CREATE TABLE IF NOT EXISTS feeds (
                    id TEXT PRIMARY KEY,
                    url TEXT UNIQUE NOT NULL,
                    title TEXT,
                    create_date TIMESTAMP NOT NULL
                );

                CREATE TABLE IF NOT EXISTS articles (
                    id TEXT PRIMARY KEY,
                    feed_id TEXT NOT NULL REFERENCES feeds(id),
                    url TEXT NOT NULL,
                    base_uri TEXT NOT NULL,
                    guid TEXT NOT NULL,
                    title TEXT NOT NULL,
                    creator TEXT,
                    description TEXT,
                    comment_url TEXT,
                    comment_count INTEGER,
                    enclosure_url TEXT,
                    enclosure_length INTEGER,
                    enclosure_type TEXT,
                    publication_date TIMESTAMP,
                    create_date TIMESTAMP NOT NULL,
                    delete_date TIMESTAMP
                );

                CREATE INDEX IF NOT EXISTS idx_articles_feed ON articles(feed_id);
                CREATE INDEX IF NOT EXISTS idx_articles_guid ON articles(guid);
                CREATE INDEX IF NOT EXISTS idx_articles_created ON articles(create_date);
            """)
