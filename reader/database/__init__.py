"""
Database module - SQLite storage for articles and the feeds they belong to.

Uses repository pattern; callers own the session (unit of work).
"""

from .connection import DatabaseConnection, Session
from .models import Article, ArticleSummary, Feed
from .criteria import ArticleCriteria
from .article_repository import ArticleRepository
from .feed_repository import FeedRepository
from .database import Database

__all__ = [
    "Database",
    "DatabaseConnection",
    "Session",
    "Article",
    "ArticleSummary",
    "ArticleCriteria",
    "Feed",
    "ArticleRepository",
    "FeedRepository",
]
