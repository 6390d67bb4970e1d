"""
Article repository - CRUD operations and criteria search for articles.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable

from ..exceptions import ArticleNotFoundError
from .connection import Session
from .converters import row_to_article, rows_to_summaries, to_db_timestamp, utc_now
from .criteria import ArticleCriteria, build_where
from .models import Article, ArticleSummary

logger = logging.getLogger(__name__)

# Select list for summaries; converters.row_to_summary depends on this order.
SUMMARY_COLUMNS = (
    "a.id, a.url, a.guid, a.title, a.creator, a.description, a.comment_url, "
    "a.comment_count, a.enclosure_url, a.enclosure_length, a.enclosure_type, "
    "a.publication_date, a.feed_id"
)


class ArticleRepository:
    """
    Repository for article operations.

    Stateless apart from the clock; every method runs on the session the
    caller passes in and never commits it.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock

    def create(self, session: Session, article: Article) -> str:
        """Insert a new article. Assigns and returns its ID."""
        article.id = str(uuid.uuid4())
        article.create_date = self._clock()

        session.execute(
            """INSERT INTO articles
               (id, feed_id, url, base_uri, guid, title, creator, description,
                comment_url, comment_count, enclosure_url, enclosure_length,
                enclosure_type, publication_date, create_date)
               VALUES (:id, :feed_id, :url, :base_uri, :guid, :title, :creator, :description,
                       :comment_url, :comment_count, :enclosure_url, :enclosure_length,
                       :enclosure_type, :publication_date, :create_date)""",
            {
                "id": article.id,
                "feed_id": article.feed_id,
                "url": article.url,
                "base_uri": article.base_uri,
                "guid": article.guid,
                "title": article.title,
                "creator": article.creator,
                "description": article.description,
                "comment_url": article.comment_url,
                "comment_count": article.comment_count,
                "enclosure_url": article.enclosure_url,
                "enclosure_length": article.enclosure_length,
                "enclosure_type": article.enclosure_type,
                "publication_date": to_db_timestamp(article.publication_date),
                "create_date": to_db_timestamp(article.create_date),
            },
        )
        logger.info(f"Created article {article.id} in feed {article.feed_id}")
        return article.id

    def update(self, session: Session, article: Article) -> int:
        """
        Update the mutable fields of a live article.

        Returns the number of rows changed: 0 when the ID is unknown or the
        article has been deleted.
        """
        return session.execute(
            """UPDATE articles SET
               url = :url,
               title = :title,
               creator = :creator,
               description = :description,
               comment_url = :comment_url,
               comment_count = :comment_count,
               enclosure_url = :enclosure_url,
               enclosure_length = :enclosure_length,
               enclosure_type = :enclosure_type
               WHERE id = :id AND delete_date IS NULL""",
            {
                "id": article.id,
                "url": article.url,
                "title": article.title,
                "creator": article.creator,
                "description": article.description,
                "comment_url": article.comment_url,
                "comment_count": article.comment_count,
                "enclosure_url": article.enclosure_url,
                "enclosure_length": article.enclosure_length,
                "enclosure_type": article.enclosure_type,
            },
        )

    def find_all(self, session: Session) -> list[Article]:
        """Get every live article, ordered by ID."""
        rows = session.query(
            "SELECT * FROM articles WHERE delete_date IS NULL ORDER BY id"
        )
        return [row_to_article(row) for row in rows]

    def get(self, session: Session, article_id: str) -> Article | None:
        """Get a single live article by ID."""
        row = session.query_one(
            "SELECT * FROM articles WHERE id = :id AND delete_date IS NULL",
            {"id": article_id},
        )
        return row_to_article(row) if row else None

    def delete(self, session: Session, article_id: str):
        """
        Soft-delete an article by stamping its delete date.

        Raises ArticleNotFoundError if there is no live article with this ID.
        The change is durable once the session commits.
        """
        row = session.query_one(
            "SELECT id FROM articles WHERE id = :id AND delete_date IS NULL",
            {"id": article_id},
        )
        if row is None:
            raise ArticleNotFoundError(article_id)

        session.execute(
            "UPDATE articles SET delete_date = :delete_date WHERE id = :id",
            {"id": article_id, "delete_date": to_db_timestamp(self._clock())},
        )
        logger.info(f"Deleted article {article_id}")

    def find_by_criteria(
        self,
        session: Session,
        criteria: ArticleCriteria,
        limit: int | None = None,
    ) -> list[ArticleSummary]:
        """Search live articles, oldest first."""
        where, params = build_where(criteria)
        query = f"SELECT {SUMMARY_COLUMNS} FROM articles a{where} ORDER BY a.create_date ASC"
        if limit is not None:
            query += " LIMIT :limit"
            params["limit"] = limit

        logger.debug(f"Article search: {query} {params}")
        return rows_to_summaries(session.query(query, params))

    def find_first_by_criteria(
        self, session: Session, criteria: ArticleCriteria
    ) -> ArticleSummary | None:
        """Earliest-created article matching the criteria, or None."""
        articles = self.find_by_criteria(session, criteria, limit=1)
        return articles[0] if articles else None
