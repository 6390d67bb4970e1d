"""
Pytest fixtures for reader tests.
"""

import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from reader.config import state
from reader.database import Article, Database
from reader.server import app


class FakeClock:
    """Deterministic clock; every reading advances one second."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def set(self, value: datetime):
        self.current = value

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


def _make_article(feed_id: str, **overrides) -> Article:
    """Build an unsaved article with sensible defaults."""
    fields = dict(
        feed_id=feed_id,
        url="https://example.com/posts/1",
        base_uri="https://example.com/",
        guid="urn:example:1",
        title="First post",
        creator="alice",
        description="<p>Hello</p>",
        comment_url="https://example.com/posts/1#comments",
        publication_date=datetime(2024, 1, 1, 8, 0, 0),
    )
    fields.update(overrides)
    return Article(**fields)


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        yield Path(f.name)
    # Cleanup
    if os.path.exists(f.name):
        os.unlink(f.name)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def test_db(temp_db_path, clock):
    """Create a test database instance."""
    return Database(temp_db_path, clock=clock)


@pytest.fixture
def session(test_db):
    """An open session, committed at teardown."""
    with test_db.session() as s:
        yield s


@pytest.fixture
def feed_id(session, test_db):
    return test_db.feeds.add(session, "https://example.com/feed.xml", "Example")


@pytest.fixture
def client(temp_db_path, clock):
    """Create a test client with isolated database."""
    original_db = state.db
    state.db = Database(temp_db_path, clock=clock)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    state.db = original_db


@pytest.fixture
def client_with_data(client):
    """Test client with a feed and two articles pre-populated."""
    with state.db.session() as s:
        feed_id = state.db.feeds.add(s, "https://example.com/feed.xml", "Test Feed")
        article1_id = state.db.articles.create(s, _make_article(feed_id))
        article2_id = state.db.articles.create(s, _make_article(
            feed_id,
            url="https://example.com/posts/2",
            guid="urn:example:2",
            title="Second post",
            comment_count=4,
        ))

    yield client, {
        "feed_id": feed_id,
        "article_ids": [article1_id, article2_id],
    }


@pytest.fixture
def article_factory():
    """Factory for unsaved articles: article_factory(feed_id, **overrides)."""
    return _make_article
