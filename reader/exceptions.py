"""
Domain errors and HTTP exception utilities.

Provides helper functions to reduce boilerplate for common 404 errors.
"""

from typing import TypeVar

from fastapi import HTTPException

T = TypeVar("T")


class ReaderError(Exception):
    """Base class for reader errors."""


class ArticleNotFoundError(ReaderError):
    """No live article with the given ID."""

    def __init__(self, article_id: str):
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


def require_resource(resource: T | None, detail: str = "Resource not found") -> T:
    """
    Raise 404 if resource is None, otherwise return the resource.

    Usage:
        article = require_resource(repo.find_first_by_criteria(...), "Article not found")
    """
    if resource is None:
        raise HTTPException(status_code=404, detail=detail)
    return resource


def require_article(article: T | None) -> T:
    """Raise 404 if article is None."""
    return require_resource(article, "Article not found")


def require_feed(feed: T | None) -> T:
    """Raise 404 if feed is None."""
    return require_resource(feed, "Feed not found")
