"""Reorder input validation and normalization."""

import re
from typing import Any, Iterable, Sequence

from sortable_posts.exceptions import ValidationError


class ReorderValidator:
    """Validates and normalizes the fields of a reorder request."""

    # Characters allowed in a safe key; everything else is removed
    UNSAFE_KEY_CHARS = re.compile(r"[^a-z0-9_\-]")
    DEFAULT_PREFIXES = ("post-", "tag-")
    DEFAULT_START = 0
    # Largest value a signed 32-bit INTEGER order column holds
    MAX_ORDER_VALUE = 2**31 - 1

    def __init__(self, prefixes: Iterable[str] | None = None):
        """
        Initialize validator.

        Args:
            prefixes: Type prefixes stripped from submitted identifiers
        """
        self.prefixes = tuple(prefixes) if prefixes is not None else self.DEFAULT_PREFIXES

    @classmethod
    def sanitize_key(cls, value: Any) -> str:
        """
        Reduce a value to safe-key form: lowercase ``[a-z0-9_-]`` only.

        Non-scalar values sanitize to an empty string.
        """
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return ""
        return cls.UNSAFE_KEY_CHARS.sub("", str(value).lower())

    def sanitize_identifier(self, value: Any) -> str:
        """Sanitize one identifier and strip its type prefixes (``post-12`` -> ``12``)."""
        identifier = self.sanitize_key(value)
        stripped = True
        while stripped:
            stripped = False
            for prefix in self.prefixes:
                if prefix and identifier.startswith(prefix):
                    identifier = identifier[len(prefix):]
                    stripped = True
        return identifier

    def validate_order(self, order: Any) -> list[str]:
        """
        Validate the submitted order and return its sanitized identifiers.

        Identifiers that sanitize to an empty string are dropped.

        Args:
            order: Raw order value from the request

        Returns:
            Sanitized identifiers in submitted order (duplicates preserved)

        Raises:
            ValidationError: If order is missing, not a list, or has no usable identifiers
        """
        if not isinstance(order, Sequence) or isinstance(order, (str, bytes)):
            raise ValidationError("Order needs to be an array", "order")
        if not order:
            raise ValidationError("Order needs to be an array", "order")

        sanitized = [self.sanitize_identifier(item) for item in order]
        sanitized = [identifier for identifier in sanitized if identifier]
        if not sanitized:
            raise ValidationError("Order needs to be an array", "order")
        return sanitized

    @classmethod
    def normalize_start(cls, start: Any) -> int:
        """
        Normalize the starting order value.

        Integers and numeric strings are accepted. Anything absent, blank,
        unparseable, negative or above ``MAX_ORDER_VALUE`` becomes
        ``DEFAULT_START``.
        """
        if isinstance(start, bool):
            return cls.DEFAULT_START
        if isinstance(start, int):
            value = start
        elif isinstance(start, str):
            try:
                value = int(start.strip())
            except ValueError:
                return cls.DEFAULT_START
        else:
            return cls.DEFAULT_START
        if value < 0 or value > cls.MAX_ORDER_VALUE:
            return cls.DEFAULT_START
        return value

    @classmethod
    def fit_start(cls, start: int, count: int) -> int:
        """Return ``start``, or ``DEFAULT_START`` if ``count`` values from it would overflow the column."""
        if start + max(count - 1, 0) > cls.MAX_ORDER_VALUE:
            return cls.DEFAULT_START
        return start

    @classmethod
    def normalize_object_type(cls, object_type: Any) -> str:
        """Reduce the object type to safe-key form; absent becomes ``""``."""
        return cls.sanitize_key(object_type)
