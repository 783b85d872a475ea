"""Exceptions for Pushover SDK.

Transport failures are not wrapped: they surface as the original
``httpx.TransportError`` unless an abort signal fired, in which case the
signal's reason is raised instead.
"""


class PushoverError(Exception):
    """Base exception for all Pushover SDK errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize PushoverError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidInputError(PushoverError):
    """Raised when a required request field is missing."""

    field: str = ""

    def __init__(self, message: str = "Invalid input") -> None:
        """Initialize InvalidInputError."""
        super().__init__(message)


class InvalidMessageError(InvalidInputError):
    """Raised when the message text is missing."""

    field = "message"

    def __init__(self, message: str = "Invalid message") -> None:
        """Initialize InvalidMessageError."""
        super().__init__(message)


class InvalidTokenError(InvalidInputError):
    """Raised when the application token is missing."""

    field = "token"

    def __init__(self, message: str = "Invalid token") -> None:
        """Initialize InvalidTokenError."""
        super().__init__(message)


class InvalidUserError(InvalidInputError):
    """Raised when the user or group key is missing."""

    field = "user"

    def __init__(self, message: str = "Invalid user") -> None:
        """Initialize InvalidUserError."""
        super().__init__(message)


class InvalidRequestError(PushoverError):
    """Raised when an outgoing HTTP request cannot be built."""

    def __init__(self, message: str = "Invalid request") -> None:
        """Initialize InvalidRequestError."""
        super().__init__(message)


class InvalidResponseError(PushoverError):
    """Raised when the Pushover API response cannot be decoded."""

    def __init__(
        self,
        message: str = "Invalid response",
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        """Initialize InvalidResponseError."""
        self.response_body = response_body
        super().__init__(message, status_code=status_code)


class RequestAbortedError(PushoverError):
    """Raised when a call is aborted through its abort signal."""

    def __init__(self, message: str = "Request aborted") -> None:
        """Initialize RequestAbortedError."""
        super().__init__(message)


class DeadlineExceededError(RequestAbortedError):
    """Raised when a call's deadline passes before it completes."""

    def __init__(self, message: str = "Deadline exceeded") -> None:
        """Initialize DeadlineExceededError."""
        super().__init__(message)
