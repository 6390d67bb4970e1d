"""
Database facade - bundles the connection with the repositories.
"""

from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator

from .connection import DatabaseConnection, Session
from .article_repository import ArticleRepository
from .converters import utc_now
from .feed_repository import FeedRepository


class Database:
    """Unified database access facade."""

    def __init__(self, db_path: Path, clock: Callable[[], datetime] = utc_now):
        self._connection = DatabaseConnection(db_path)

        self.articles = ArticleRepository(clock=clock)
        self.feeds = FeedRepository()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a unit of work; see DatabaseConnection.session()."""
        with self._connection.session() as session:
            yield session
