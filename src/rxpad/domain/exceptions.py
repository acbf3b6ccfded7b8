"""Domain exceptions."""


class RxPadError(Exception):
    """Base exception for rxpad."""

    pass


class ValidationError(RxPadError):
    """Validation failed for input data."""

    pass


class ConfirmationDeclined(RxPadError):
    """User declined a destructive-action confirmation."""

    pass


class NotFound(RxPadError):
    """Requested resource was not found."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class PersistenceReadError(RxPadError):
    """Stored value is malformed or could not be read."""

    pass


class PersistenceWriteError(RxPadError):
    """Value could not be persisted (quota, permissions)."""

    pass


class FileReadError(RxPadError):
    """Uploaded file could not be turned into an image blob."""

    pass
