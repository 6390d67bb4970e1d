"""
Configuration and application state management.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .database import Database, Session

# Load environment variables
load_dotenv()


class Config:
    """Application configuration from environment."""
    DB_PATH: Path = Path(os.getenv("DB_PATH", "./data/reader.db"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


config = Config()


class AppState:
    """Shared application state."""
    db: "Database | None" = None


state = AppState()


def get_db() -> "Database":
    """Dependency to get database instance."""
    if not state.db:
        raise HTTPException(status_code=500, detail="Database not initialized")
    return state.db


def get_session() -> Iterator["Session"]:
    """Dependency yielding a session that commits after the request handler returns."""
    db = get_db()
    with db.session() as session:
        yield session
