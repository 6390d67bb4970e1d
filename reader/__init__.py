"""
Reader article store

Storage layer for an RSS/Atom reader: article create, update, soft delete
and criteria search over SQLite, with a small FastAPI surface.
"""

__version__ = "1.0.0"
