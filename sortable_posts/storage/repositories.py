"""Repository pattern implementation for data access layer."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from sortable_posts.models.post import Post
from sortable_posts.models.term import Term
from sortable_posts.models.term_meta import TermMeta


class PostRepository:
    """Repository for post operations."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, post: Post) -> Post:
        """Create a new post."""
        self.session.add(post)
        self.session.flush()
        return post

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """Get post by ID."""
        return self.session.get(Post, post_id)

    def get_existing_ids(self, post_ids: Iterable[str]) -> set[str]:
        """Return the subset of ``post_ids`` that exist."""
        post_ids = list(post_ids)
        if not post_ids:
            return set()
        stmt = select(Post.id).where(Post.id.in_(post_ids))
        return set(self.session.scalars(stmt))

    def get_menu_orders(self, post_ids: Iterable[str]) -> dict[str, int]:
        """Map each existing post ID to its menu_order."""
        post_ids = list(post_ids)
        if not post_ids:
            return {}
        stmt = select(Post.id, Post.menu_order).where(Post.id.in_(post_ids))
        return {row.id: row.menu_order for row in self.session.execute(stmt)}

    def bulk_update_menu_order(self, menu_orders: dict[str, int]) -> None:
        """
        Write menu_order for many posts in one UPDATE-by-primary-key batch.

        Every key must be an existing post ID.
        """
        if not menu_orders:
            return
        self.session.execute(
            update(Post),
            [{"id": post_id, "menu_order": value} for post_id, value in menu_orders.items()],
        )
        self.session.flush()

    def list_by_menu_order(self, post_type: str = "post", limit: int = 100, offset: int = 0) -> list[Post]:
        """List posts of a type in display order."""
        stmt = (
            select(Post)
            .where(Post.post_type == post_type)
            .order_by(Post.menu_order, Post.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.session.scalars(stmt))


class TermRepository:
    """Repository for term operations."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, term: Term) -> Term:
        """Create a new term."""
        self.session.add(term)
        self.session.flush()
        return term

    def get_by_id(self, term_id: str) -> Optional[Term]:
        """Get term by ID."""
        return self.session.get(Term, term_id)


class TermMetaRepository:
    """Repository for term metadata with one value per (term, key)."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def get(self, term_id: str, meta_key: str) -> Optional[TermMeta]:
        """Get a term's metadata row for ``meta_key``."""
        stmt = select(TermMeta).where(
            TermMeta.term_id == term_id, TermMeta.meta_key == meta_key
        )
        return self.session.scalar(stmt)

    def get_values(self, term_ids: Iterable[str], meta_key: str) -> dict[str, Any]:
        """Map each term ID that has ``meta_key`` set to its value."""
        term_ids = list(term_ids)
        if not term_ids:
            return {}
        stmt = select(TermMeta.term_id, TermMeta.meta_value).where(
            TermMeta.term_id.in_(term_ids), TermMeta.meta_key == meta_key
        )
        return {row.term_id: row.meta_value for row in self.session.execute(stmt)}

    def set(self, term_id: str, meta_key: str, meta_value: str) -> TermMeta:
        """Insert or update a term's metadata value."""
        meta = self.get(term_id, meta_key)
        if meta is None:
            meta = TermMeta(term_id=term_id, meta_key=meta_key, meta_value=meta_value)
            self.session.add(meta)
        else:
            meta.meta_value = meta_value
        self.session.flush()
        return meta
