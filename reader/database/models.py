"""
Database models - dataclasses for database entities.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Article:
    feed_id: str
    url: str
    base_uri: str
    guid: str
    title: str
    creator: str | None = None
    description: str | None = None
    comment_url: str | None = None
    comment_count: int | None = None
    enclosure_url: str | None = None
    enclosure_length: int | None = None
    enclosure_type: str | None = None
    publication_date: datetime | None = None

    # Assigned by the repository
    id: str | None = None
    create_date: datetime | None = None
    delete_date: datetime | None = None


@dataclass(frozen=True)
class ArticleSummary:
    """Read-only projection returned by criteria searches."""
    id: str
    url: str
    guid: str
    title: str
    creator: str | None
    description: str | None
    comment_url: str | None
    comment_count: int | None
    enclosure_url: str | None
    enclosure_length: int | None
    enclosure_type: str | None
    publication_date: datetime | None
    feed_id: str


@dataclass
class Feed:
    id: str
    url: str
    title: str | None
    create_date: datetime
