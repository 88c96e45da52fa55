"""Shared pytest fixtures and test utilities for Sortable Posts tests."""

import os
import tempfile
import uuid
from typing import Generator

import pytest

from sortable_posts.models.post import Post
from sortable_posts.models.term import Term
from sortable_posts.services.reorder_service import ReorderService
from sortable_posts.storage.database import Database, reset_db
from sortable_posts.storage.repositories import PostRepository, TermRepository


@pytest.fixture(scope="function")
def temp_db() -> Generator[Database, None, None]:
    """
    Create a temporary SQLite database for testing.

    Yields:
        Database instance with tables created
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    reset_db()

    database = Database(f"sqlite:///{db_path}")
    database.create_tables()

    yield database

    # Cleanup
    database.drop_tables()
    database.dispose()
    reset_db()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def db_session(temp_db):
    """Get a database session from temp_db."""
    with temp_db.session() as session:
        yield session


@pytest.fixture
def reorder_service(db_session):
    """Create a reorder service instance."""
    return ReorderService(db_session)


@pytest.fixture
def sample_posts(temp_db) -> list[str]:
    """Create posts 1-9 with menu_order 0 and return their IDs."""
    post_ids = [str(i) for i in range(1, 10)]
    with temp_db.session() as session:
        repo = PostRepository(session)
        for post_id in post_ids:
            repo.create(TestDataGenerator.post(post_id))
    return post_ids


@pytest.fixture
def sample_terms(temp_db) -> list[str]:
    """Create terms a-e and return their IDs."""
    term_ids = ["a", "b", "c", "d", "e"]
    with temp_db.session() as session:
        repo = TermRepository(session)
        for term_id in term_ids:
            repo.create(TestDataGenerator.term(term_id))
    return term_ids


class TestDataGenerator:
    """Utility class for generating test data."""

    @staticmethod
    def generate_id() -> str:
        """Generate a unique, sanitization-safe ID."""
        return uuid.uuid4().hex

    @staticmethod
    def post(post_id: str | None = None, menu_order: int = 0, post_type: str = "post") -> Post:
        """Build an unsaved post."""
        post_id = post_id or TestDataGenerator.generate_id()
        return Post(
            id=post_id,
            title=f"Post {post_id}",
            post_type=post_type,
            menu_order=menu_order,
        )

    @staticmethod
    def term(term_id: str | None = None, taxonomy: str = "category") -> Term:
        """Build an unsaved term."""
        term_id = term_id or TestDataGenerator.generate_id()
        return Term(id=term_id, name=f"Term {term_id}", taxonomy=taxonomy)

    @staticmethod
    def reorder_payload(order, start=0, object_type: str = "post") -> dict:
        """Create a reorder request body."""
        return {"order": order, "start": start, "object_type": object_type}


def read_post_order(db: Database, post_ids: list[str]) -> dict[str, int]:
    """Read menu_order of posts through a fresh session."""
    with db.session() as session:
        return PostRepository(session).get_menu_orders(post_ids)


@pytest.fixture
def test_data_generator():
    """Provide TestDataGenerator instance."""
    return TestDataGenerator
