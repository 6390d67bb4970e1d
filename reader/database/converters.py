"""
Database row converters - convert SQLite rows to dataclasses.
"""

import sqlite3
from datetime import datetime, timezone
from typing import Iterable, Sequence

from .models import Article, ArticleSummary, Feed


def utc_now() -> datetime:
    """Current time as naive UTC, the form timestamps are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_db_timestamp(value: datetime | None) -> str | None:
    """
    Serialize a datetime as naive UTC with fixed precision so text order
    matches time order. Aware values are converted; naive values are taken
    to be UTC already.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="microseconds")


def from_db_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


def row_to_summary(row: Sequence) -> ArticleSummary:
    """Map a positional row laid out like SUMMARY_COLUMNS to an ArticleSummary."""
    (
        article_id, url, guid, title, creator, description,
        comment_url, comment_count, enclosure_url, enclosure_length,
        enclosure_type, publication_date, feed_id,
    ) = tuple(row)

    return ArticleSummary(
        id=article_id,
        url=url,
        guid=guid,
        title=title,
        creator=creator,
        description=description,
        comment_url=comment_url,
        comment_count=comment_count,
        enclosure_url=enclosure_url,
        enclosure_length=enclosure_length,
        enclosure_type=enclosure_type,
        publication_date=from_db_timestamp(publication_date),
        feed_id=feed_id,
    )


def rows_to_summaries(rows: Iterable[Sequence]) -> list[ArticleSummary]:
    return [row_to_summary(row) for row in rows]


def row_to_article(row: sqlite3.Row) -> Article:
    """Convert a full articles row to an Article."""
    return Article(
        id=row["id"],
        feed_id=row["feed_id"],
        url=row["url"],
        base_uri=row["base_uri"],
        guid=row["guid"],
        title=row["title"],
        creator=row["creator"],
        description=row["description"],
        comment_url=row["comment_url"],
        comment_count=row["comment_count"],
        enclosure_url=row["enclosure_url"],
        enclosure_length=row["enclosure_length"],
        enclosure_type=row["enclosure_type"],
        publication_date=from_db_timestamp(row["publication_date"]),
        create_date=from_db_timestamp(row["create_date"]),
        delete_date=from_db_timestamp(row["delete_date"]),
    )


def row_to_feed(row: sqlite3.Row) -> Feed:
    """Convert a database row to a Feed."""
    return Feed(
        id=row["id"],
        url=row["url"],
        title=row["title"],
        create_date=from_db_timestamp(row["create_date"]),
    )
