"""Pre-flight checks for required request fields."""

from .exceptions import InvalidMessageError, InvalidTokenError, InvalidUserError
from .models import MessageRequest, ValidateRequest


def check_message_request(request: MessageRequest) -> None:
    """
    Check the fields the message API requires.

    Raises:
        InvalidMessageError: If the message text is empty
        InvalidTokenError: If the token is empty
        InvalidUserError: If the user key is empty
    """
    if not request.message:
        raise InvalidMessageError()
    if not request.token:
        raise InvalidTokenError()
    if not request.user:
        raise InvalidUserError()


def check_validate_request(request: ValidateRequest) -> None:
    """
    Check the fields the validation API requires.

    Raises:
        InvalidTokenError: If the token is empty
        InvalidUserError: If the user key is empty
    """
    if not request.token:
        raise InvalidTokenError()
    if not request.user:
        raise InvalidUserError()
