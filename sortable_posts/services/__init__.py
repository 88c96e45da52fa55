"""Service layer for business logic and validation."""

from sortable_posts.services.reorder_service import ReorderRequest, ReorderResult, ReorderService

__all__ = ["ReorderRequest", "ReorderResult", "ReorderService"]
