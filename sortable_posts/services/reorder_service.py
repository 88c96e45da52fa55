"""Reorder service: validates a request, dispatches it to a store and reports the outcome."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy.orm import Session

from sortable_posts.config import get_settings
from sortable_posts.exceptions import NoOpError, PartialWriteError, SortablePostsError
from sortable_posts.services.reorder.strategies import StrategyRegistry, default_registry
from sortable_posts.services.reorder.validation import ReorderValidator

logger = logging.getLogger(__name__)

SUCCESS_CODE = "sortable-posts-updated"
SUCCESS_MESSAGE = "Saved successfully."


@dataclass
class ReorderRequest:
    """One reorder call: identifiers in their new order, a starting value and the object type."""

    order: Any
    start: int = 0
    object_type: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ReorderRequest":
        """
        Build a request from a parsed request body.

        ``start`` and ``object_type`` are normalized here; ``order`` is kept as
        received and validated by the service.
        """
        return cls(
            order=payload.get("order"),
            start=ReorderValidator.normalize_start(payload.get("start")),
            object_type=ReorderValidator.normalize_object_type(payload.get("object_type")),
        )


@dataclass
class ReorderResult:
    """Outcome of a reorder call."""

    success: bool
    code: str
    message: str
    status: int
    updated: int = 0
    kind: Optional[type[SortablePostsError]] = None
    error: Optional[SortablePostsError] = None
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, updated: int) -> "ReorderResult":
        return cls(
            success=True,
            code=SUCCESS_CODE,
            message=SUCCESS_MESSAGE,
            status=200,
            updated=updated,
        )

    @classmethod
    def from_error(cls, error: SortablePostsError) -> "ReorderResult":
        data: dict[str, Any] = {}
        updated = 0
        if isinstance(error, PartialWriteError):
            data = {"written": error.written, "failed": error.failed}
            updated = error.written
        return cls(
            success=False,
            code=error.code,
            message=str(error),
            status=error.status,
            updated=updated,
            kind=type(error),
            error=error,
            data=data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Response body in the host's REST envelope."""
        return {
            "code": self.code,
            "message": self.message,
            "data": {"status": self.status, "after_message": "", **self.data},
        }


class ReorderService:
    """Service layer for reordering posts and terms."""

    def __init__(
        self,
        session: Session,
        registry: StrategyRegistry | None = None,
        validator: ReorderValidator | None = None,
    ):
        """
        Initialize reorder service with database session.

        Args:
            session: SQLAlchemy database session
            registry: Object type to store mapping (default: post and term stores)
            validator: Input validator (default: prefixes from settings)
        """
        self.session = session
        self.registry = registry or default_registry()
        self.validator = validator or ReorderValidator(get_settings().identifier_prefixes)

    def reorder(self, request: ReorderRequest) -> ReorderResult:
        """
        Persist the order submitted in ``request``.

        Never raises for bad input or storage failures; every failure is
        reported through the returned result.

        Args:
            request: Normalized reorder request

        Returns:
            ReorderResult describing success, no-op or the error that occurred
        """
        try:
            order = self.validator.validate_order(request.order)
            store = self.registry.resolve(request.object_type, self.session)
            start = self.validator.fit_start(request.start, len(order))
            updated = store.apply(order, start)
            if updated == 0:
                raise NoOpError()
        except SortablePostsError as e:
            logger.warning(
                "Reorder of %r failed with %s: %s", request.object_type, e.code, e
            )
            return ReorderResult.from_error(e)

        logger.info(
            "Reordered %d %s item(s) starting at %d", updated, request.object_type, start
        )
        return ReorderResult.ok(updated)

    def current_order(self, ids: list[str], object_type: str) -> dict[str, int]:
        """
        Read the stored order values of ``ids``.

        Raises:
            ValidationError: If ids is not a non-empty list
            UnsupportedObjectTypeError: If object_type is not registered
        """
        sanitized = self.validator.validate_order(ids)
        store = self.registry.resolve(ReorderValidator.normalize_object_type(object_type), self.session)
        return store.current_order(sanitized)
