"""Storage layer for Sortable Posts."""

from sortable_posts.storage.database import Database, get_db, reset_db
from sortable_posts.storage.repositories import (
    PostRepository,
    TermMetaRepository,
    TermRepository,
)

__all__ = [
    "Database",
    "get_db",
    "reset_db",
    "PostRepository",
    "TermRepository",
    "TermMetaRepository",
]
