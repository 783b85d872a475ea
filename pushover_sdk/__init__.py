"""Pushover Python SDK

Provides an async client for the Pushover message and user validation APIs.

Example:
    ```python
    from pushover_sdk import (
        AbortController,
        MessageRequest,
        PushoverClient,
        ValidateRequest,
    )

    async with PushoverClient() as client:
        # Send a message with an attachment, giving up after 10 seconds
        with open("snapshot.jpg", "rb") as image:
            response = await client.send_message(
                MessageRequest(
                    token="app-token",
                    user="user-key",
                    message="Motion detected",
                    priority=1,
                    attachment=image,
                    attachment_name="snapshot.jpg",
                ),
                signal=AbortController(timeout=10.0).signal,
            )

        # Check a user key
        validation = await client.validate_user(
            ValidateRequest(token="app-token", user="user-key")
        )
        print(validation.devices)
    ```
"""

from .client import PushoverClient, message, validate
from .config import MESSAGES_URL, VALIDATE_URL, PushoverConfig
from .exceptions import (
    DeadlineExceededError,
    InvalidInputError,
    InvalidMessageError,
    InvalidRequestError,
    InvalidResponseError,
    InvalidTokenError,
    InvalidUserError,
    PushoverError,
    RequestAbortedError,
)
from .models import (
    MessageRequest,
    MessageResponse,
    PushoverResponse,
    ValidateRequest,
    ValidateResponse,
)
from .signals import AbortController, AbortSignal

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "PushoverClient",
    "message",
    "validate",
    # Configuration
    "PushoverConfig",
    "MESSAGES_URL",
    "VALIDATE_URL",
    # Cancellation
    "AbortController",
    "AbortSignal",
    # Exceptions
    "PushoverError",
    "InvalidInputError",
    "InvalidMessageError",
    "InvalidTokenError",
    "InvalidUserError",
    "InvalidRequestError",
    "InvalidResponseError",
    "RequestAbortedError",
    "DeadlineExceededError",
    # Request Models
    "MessageRequest",
    "ValidateRequest",
    # Response Models
    "PushoverResponse",
    "MessageResponse",
    "ValidateResponse",
]
