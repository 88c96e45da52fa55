"""Custom exceptions for reorder operations.

Every exception carries the wire ``code`` and HTTP-equivalent ``status`` used
when it is reported back to a caller.
"""


class SortablePostsError(Exception):
    """Base exception for Sortable Posts errors."""

    code = "sortable-posts-error"
    status = 500


class ValidationError(SortablePostsError):
    """Raised when the submitted order is missing or malformed."""

    code = "order-not-array"
    # Existing admin screens expect a server error code here.
    status = 500

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class UnsupportedObjectTypeError(SortablePostsError):
    """Raised when no reorder strategy is registered for an object type."""

    code = "not-sortable"
    status = 400

    def __init__(self, object_type: str):
        super().__init__("Sorry this object type is not sortable at the moment.")
        self.object_type = object_type


class NoOpError(SortablePostsError):
    """Reported when a reorder touched no records."""

    code = "nothing-happened"
    status = 400

    def __init__(self, message: str = "Nothing happened. Try again."):
        super().__init__(message)


class PartialWriteError(SortablePostsError):
    """Raised when only some of the per-item writes succeeded."""

    code = "partial-write"
    status = 500

    def __init__(self, written: int, failed: list[str]):
        message = f"Saved {written} item(s) but failed to save {len(failed)}: {', '.join(failed)}"
        super().__init__(message)
        self.written = written
        self.failed = failed


class AuthorizationError(SortablePostsError):
    """Raised when a caller lacks the capability required to reorder."""

    def __init__(self, capability: str, authenticated: bool = True):
        super().__init__("Sorry, you are not allowed to do that.")
        self.capability = capability
        self.authenticated = authenticated

    @property
    def code(self) -> str:
        return "rest_forbidden" if self.authenticated else "rest_not_logged_in"

    @property
    def status(self) -> int:
        return 403 if self.authenticated else 401


class DatabaseError(SortablePostsError):
    """Raised when a database operation fails."""

    code = "database-error"
    status = 500

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error
