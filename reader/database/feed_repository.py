"""
Feed repository - the feed rows that articles reference.
"""

import uuid

from .connection import Session
from .converters import row_to_feed, to_db_timestamp, utc_now
from .models import Feed


class FeedRepository:
    """Repository for feed operations."""

    def add(self, session: Session, url: str, title: str | None = None) -> str:
        """Add a new feed. Returns feed ID."""
        feed_id = str(uuid.uuid4())
        session.execute(
            "INSERT INTO feeds (id, url, title, create_date) VALUES (:id, :url, :title, :create_date)",
            {
                "id": feed_id,
                "url": url,
                "title": title,
                "create_date": to_db_timestamp(utc_now()),
            },
        )
        return feed_id

    def get(self, session: Session, feed_id: str) -> Feed | None:
        row = session.query_one("SELECT * FROM feeds WHERE id = :id", {"id": feed_id})
        return row_to_feed(row) if row else None
