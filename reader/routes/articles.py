"""
Article routes: search, detail, create, update, delete.
"""

import dataclasses
import logging
import sqlite3
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_db, get_session
from ..database import ArticleCriteria, Database, Session
from ..exceptions import ArticleNotFoundError, require_article
from ..schemas import (
    ArticleDetailResponse,
    ArticleSummaryResponse,
    CreateArticleRequest,
    CreatedResponse,
    UpdateArticleRequest,
    UpdatedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])


# ─────────────────────────────────────────────────────────────
# Search & List (static paths first)
# ─────────────────────────────────────────────────────────────

@router.get("")
async def search_articles(
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
    id: str | None = None,
    guid: Annotated[list[str] | None, Query()] = None,
    title: str | None = None,
    url: str | None = None,
    published_after: datetime | None = None,
    feed_id: str | None = None,
) -> list[ArticleSummaryResponse]:
    """Search live articles, oldest first.

    Args:
        guid: Repeatable; matches articles whose GUID is any of the values.
        published_after: Exclusive lower bound on publication date.
    """
    criteria = ArticleCriteria(
        id=id,
        guid_in=guid,
        title=title,
        url=url,
        publication_date_min=published_after,
        feed_id=feed_id,
    )
    articles = db.articles.find_by_criteria(session, criteria)
    return [ArticleSummaryResponse.from_db(a) for a in articles]


@router.get("/all")
async def list_all_articles(
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
) -> list[ArticleDetailResponse]:
    """Every live article ordered by ID. Administrative use only."""
    return [ArticleDetailResponse.from_article(a) for a in db.articles.find_all(session)]


@router.post("", status_code=201)
async def create_article(
    request: CreateArticleRequest,
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
) -> CreatedResponse:
    """Store a new article."""
    try:
        article_id = db.articles.create(session, request.to_article())
    except sqlite3.IntegrityError as e:
        logger.warning(f"Rejected article {request.url}: {e}")
        raise HTTPException(status_code=409, detail=f"Article rejected: {e}")
    return CreatedResponse(id=article_id)


# ─────────────────────────────────────────────────────────────
# Single Article
# ─────────────────────────────────────────────────────────────

@router.get("/{article_id}")
async def get_article(
    article_id: str,
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
) -> ArticleDetailResponse:
    """Get a single live article."""
    article = require_article(db.articles.get(session, article_id))
    return ArticleDetailResponse.from_article(article)


@router.put("/{article_id}")
async def update_article(
    article_id: str,
    request: UpdateArticleRequest,
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
) -> UpdatedResponse:
    """Update the mutable fields of an article."""
    article = require_article(db.articles.get(session, article_id))
    article = dataclasses.replace(article, **request.model_dump())
    try:
        updated = db.articles.update(session, article)
    except sqlite3.IntegrityError as e:
        raise HTTPException(status_code=409, detail=f"Article rejected: {e}")
    return UpdatedResponse(updated=updated)


@router.delete("/{article_id}")
async def delete_article(
    article_id: str,
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
):
    """Soft-delete an article."""
    try:
        db.articles.delete(session, article_id)
    except ArticleNotFoundError:
        raise HTTPException(status_code=404, detail="Article not found")
    return {"success": True}
