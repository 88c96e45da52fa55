"""Reorder components: input validation and storage strategies."""

from sortable_posts.services.reorder.strategies import (
    OrderStore,
    PositionalMetaStore,
    SequentialOrderStore,
    StrategyRegistry,
    default_registry,
)
from sortable_posts.services.reorder.validation import ReorderValidator

__all__ = [
    "OrderStore",
    "PositionalMetaStore",
    "ReorderValidator",
    "SequentialOrderStore",
    "StrategyRegistry",
    "default_registry",
]
