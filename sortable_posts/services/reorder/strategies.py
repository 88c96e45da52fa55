"""Storage strategies that persist a new order for one object kind."""

import logging
from abc import ABC, abstractmethod
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sortable_posts.config import get_settings
from sortable_posts.exceptions import (
    DatabaseError,
    PartialWriteError,
    UnsupportedObjectTypeError,
)
from sortable_posts.storage.repositories import (
    PostRepository,
    TermMetaRepository,
    TermRepository,
)

logger = logging.getLogger(__name__)


class OrderStore(ABC):
    """Interface shared by all reorder strategies."""

    @abstractmethod
    def apply(self, order: list[str], start: int) -> int:
        """
        Persist the order of ``order``.

        Returns:
            Number of records written; 0 means nothing happened
        """

    @abstractmethod
    def current_order(self, ids: list[str]) -> dict[str, int]:
        """Read back the stored order value of each existing identifier in ``ids``."""


class SequentialOrderStore(OrderStore):
    """Assigns ``start, start + 1, ...`` to posts' ``menu_order`` in one batch."""

    def __init__(self, session: Session, post_repo: PostRepository | None = None):
        self.session = session
        self.post_repo = post_repo or PostRepository(session)

    @staticmethod
    def assign(order: list[str], start: int) -> dict[str, int]:
        """Map each identifier to its order value; a repeated identifier keeps its last value."""
        assignments: dict[str, int] = {}
        for offset, identifier in enumerate(order):
            assignments[identifier] = start + offset
        return assignments

    def apply(self, order: list[str], start: int) -> int:
        """
        Update menu_order for every existing post in ``order``.

        Identifiers without a post are skipped. All updates are committed
        together or not at all.

        Raises:
            DatabaseError: If the batch could not be written
        """
        assignments = self.assign(order, start)
        try:
            existing = self.post_repo.get_existing_ids(assignments)
            updates = {post_id: value for post_id, value in assignments.items() if post_id in existing}
            self.post_repo.bulk_update_menu_order(updates)
            self.session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to update post order: {str(e)}", e) from e

        skipped = len(assignments) - len(updates)
        if skipped:
            logger.debug("Skipped %d unknown post id(s)", skipped)
        return len(updates)

    def current_order(self, ids: list[str]) -> dict[str, int]:
        return self.post_repo.get_menu_orders(ids)


class PositionalMetaStore(OrderStore):
    """Stores each term's 1-based position as term metadata, one write per term."""

    def __init__(
        self,
        session: Session,
        meta_key: str | None = None,
        term_repo: TermRepository | None = None,
        meta_repo: TermMetaRepository | None = None,
    ):
        self.session = session
        self.meta_key = meta_key or get_settings().term_order_meta_key
        self.term_repo = term_repo or TermRepository(session)
        self.meta_repo = meta_repo or TermMetaRepository(session)

    @staticmethod
    def positions(order: list[str]) -> dict[str, int]:
        """Map each identifier to its 1-based position; a repeated identifier keeps its last position."""
        return {identifier: index + 1 for index, identifier in enumerate(order)}

    def _write(self, term_id: str, position: int) -> bool:
        """Write one position inside its own savepoint. Returns False if the term does not exist."""
        with self.session.begin_nested():
            if self.term_repo.get_by_id(term_id) is None:
                return False
            self.meta_repo.set(term_id, self.meta_key, str(position))
        return True

    def apply(self, order: list[str], start: int) -> int:
        """
        Write the position of every term in ``order``; ``start`` is ignored.

        Writes succeed or fail independently and successful ones are kept.

        Raises:
            PartialWriteError: If some, but not all, writes failed
            DatabaseError: If the successful writes could not be committed
        """
        written = 0
        failed: list[str] = []
        for term_id, position in self.positions(order).items():
            try:
                ok = self._write(term_id, position)
            except SQLAlchemyError as e:
                logger.warning("Failed to write %s for term %s: %s", self.meta_key, term_id, e)
                ok = False
            if ok:
                written += 1
            else:
                failed.append(term_id)

        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to save term order: {str(e)}", e) from e

        if written and failed:
            raise PartialWriteError(written, failed)
        return written

    def current_order(self, ids: list[str]) -> dict[str, int]:
        values = self.meta_repo.get_values(ids, self.meta_key)
        return {term_id: int(value) for term_id, value in values.items() if value is not None}


StoreFactory = Callable[[Session], OrderStore]


class StrategyRegistry:
    """Maps object types to the factory of the store that reorders them."""

    def __init__(self):
        self._factories: dict[str, StoreFactory] = {}

    def register(self, object_type: str, factory: StoreFactory) -> None:
        """Register (or replace) the store factory for ``object_type``."""
        self._factories[object_type] = factory

    def names(self) -> list[str]:
        """Registered object types, sorted."""
        return sorted(self._factories)

    def __contains__(self, object_type: str) -> bool:
        return object_type in self._factories

    def resolve(self, object_type: str, session: Session) -> OrderStore:
        """
        Build the store for ``object_type``.

        Raises:
            UnsupportedObjectTypeError: If no store is registered for the type
        """
        factory = self._factories.get(object_type)
        if factory is None:
            raise UnsupportedObjectTypeError(object_type)
        return factory(session)


def default_registry() -> StrategyRegistry:
    """Registry with the post and term strategies and their admin screen aliases."""
    registry = StrategyRegistry()
    registry.register("post", SequentialOrderStore)
    registry.register("term", PositionalMetaStore)
    # Screen names sent by the list-table drag and drop script
    registry.register("edit", SequentialOrderStore)
    registry.register("edit-tags", PositionalMetaStore)
    return registry
