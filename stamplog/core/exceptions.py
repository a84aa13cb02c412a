"""Exception hierarchy for timestamp log operations."""


class StampLogError(Exception):
    """Base exception for timestamp log errors.

    Carries a short user-facing message; the exception text itself may
    hold more detail for logs.
    """

    def __init__(self, user_message: str, internal_details: str = "") -> None:
        super().__init__(internal_details or user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message


class RecordNotFoundError(StampLogError):
    """Raised when a record id or list position does not exist."""


class NothingToExportError(StampLogError):
    """Raised when an export is requested for an empty log."""


class StorageError(StampLogError):
    """Raised when the timestamp log cannot be changed on disk."""
