"""Database models for Sortable Posts."""

from sortable_posts.models.post import Post
from sortable_posts.models.term import Term
from sortable_posts.models.term_meta import TermMeta

__all__ = ["Post", "Term", "TermMeta"]
