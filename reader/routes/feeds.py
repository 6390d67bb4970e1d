"""
Feed routes: register and look up the feeds articles belong to.
"""

import sqlite3
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ..config import get_db, get_session
from ..database import Database, Session
from ..exceptions import require_feed
from ..schemas import CreateFeedRequest, FeedResponse

router = APIRouter(prefix="/feeds", tags=["feeds"])


@router.post("", status_code=201)
async def add_feed(
    request: CreateFeedRequest,
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
) -> FeedResponse:
    """Register a new feed."""
    try:
        feed_id = db.feeds.add(session, request.url, request.title)
    except sqlite3.IntegrityError as e:
        raise HTTPException(status_code=409, detail=f"Feed already exists: {e}")
    return FeedResponse.from_db(db.feeds.get(session, feed_id))


@router.get("/{feed_id}")
async def get_feed(
    feed_id: str,
    db: Annotated[Database, Depends(get_db)],
    session: Annotated[Session, Depends(get_session)],
) -> FeedResponse:
    """Get a single feed."""
    return FeedResponse.from_db(require_feed(db.feeds.get(session, feed_id)))
