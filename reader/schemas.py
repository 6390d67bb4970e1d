"""
Pydantic models for API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel

from .database import Article, ArticleSummary, Feed


# ─────────────────────────────────────────────────────────────
# Article Schemas
# ─────────────────────────────────────────────────────────────

class ArticleSummaryResponse(BaseModel):
    """Article for list and search views."""
    id: str
    feed_id: str
    url: str
    guid: str
    title: str
    creator: str | None = None
    description: str | None = None
    comment_url: str | None = None
    comment_count: int | None = None
    enclosure_url: str | None = None
    enclosure_length: int | None = None
    enclosure_type: str | None = None
    publication_date: str | None = None

    @classmethod
    def from_db(cls, article: ArticleSummary) -> "ArticleSummaryResponse":
        return cls(
            id=article.id,
            feed_id=article.feed_id,
            url=article.url,
            guid=article.guid,
            title=article.title,
            creator=article.creator,
            description=article.description,
            comment_url=article.comment_url,
            comment_count=article.comment_count,
            enclosure_url=article.enclosure_url,
            enclosure_length=article.enclosure_length,
            enclosure_type=article.enclosure_type,
            publication_date=article.publication_date.isoformat() if article.publication_date else None,
        )


class ArticleDetailResponse(ArticleSummaryResponse):
    """Full article record including administrative fields."""
    base_uri: str
    create_date: str

    @classmethod
    def from_article(cls, article: Article) -> "ArticleDetailResponse":
        return cls(
            id=article.id,
            feed_id=article.feed_id,
            url=article.url,
            base_uri=article.base_uri,
            guid=article.guid,
            title=article.title,
            creator=article.creator,
            description=article.description,
            comment_url=article.comment_url,
            comment_count=article.comment_count,
            enclosure_url=article.enclosure_url,
            enclosure_length=article.enclosure_length,
            enclosure_type=article.enclosure_type,
            publication_date=article.publication_date.isoformat() if article.publication_date else None,
            create_date=article.create_date.isoformat(),
        )


class CreateArticleRequest(BaseModel):
    """Request to store a new article."""
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

    def to_article(self) -> Article:
        return Article(**self.model_dump())


class UpdateArticleRequest(BaseModel):
    """Mutable article fields. Omitted optional fields are stored as null."""
    url: str
    title: str
    creator: str | None = None
    description: str | None = None
    comment_url: str | None = None
    comment_count: int | None = None
    enclosure_url: str | None = None
    enclosure_length: int | None = None
    enclosure_type: str | None = None


class CreatedResponse(BaseModel):
    id: str


class UpdatedResponse(BaseModel):
    updated: int


# ─────────────────────────────────────────────────────────────
# Feed Schemas
# ─────────────────────────────────────────────────────────────

class CreateFeedRequest(BaseModel):
    """Request to register a feed."""
    url: str
    title: str | None = None


class FeedResponse(BaseModel):
    id: str
    url: str
    title: str | None
    create_date: str

    @classmethod
    def from_db(cls, feed: Feed) -> "FeedResponse":
        return cls(
            id=feed.id,
            url=feed.url,
            title=feed.title,
            create_date=feed.create_date.isoformat(),
        )
