"""Custom exceptions for MBTA subway info."""


class TransitInfoError(Exception):
    """Base exception carrying a status code and a message."""

    code = 500

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class RemoteError(TransitInfoError):
    """Raised when the MBTA API fails or reports an error."""

    pass


class ValidationError(TransitInfoError):
    """Raised when a stop cannot be resolved or no trip exists."""

    code = 400


class InternalError(TransitInfoError):
    """Raised when fetched data is inconsistent."""

    pass
