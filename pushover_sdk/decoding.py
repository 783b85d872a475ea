"""Decoding of Pushover API response bodies.

Pushover reports rejected parameters as extra top-level keys next to the
known ones, e.g. ``{"user": "invalid", "errors": [...], "status": 0, ...}``.
Known keys are removed as they are read and whatever is left becomes
``error_parameters``. Decoding is strict: a known key of the wrong type or a
leftover value that is not a string fails the whole response.
"""

import json
from typing import Any

from .exceptions import InvalidResponseError
from .models import MessageResponse, ValidateResponse

KEY_DEVICES = "devices"
KEY_ERRORS = "errors"
KEY_GROUP = "group"
KEY_LICENSES = "licenses"
KEY_RECEIPT = "receipt"
KEY_REQUEST = "request"
KEY_STATUS = "status"


class _ResponseFields:
    """Working copy of a response object that hands out typed values."""

    def __init__(self, body: bytes, status_code: int) -> None:
        self.status_code = status_code
        self.text = body.decode("utf-8", errors="replace")
        try:
            data = json.loads(body)
        except ValueError as e:
            raise self._invalid("Response body is not valid JSON") from e
        if not isinstance(data, dict):
            raise self._invalid("Response body is not a JSON object")
        self._data: dict[str, Any] = data

    def _invalid(self, message: str) -> InvalidResponseError:
        return InvalidResponseError(
            message, status_code=self.status_code, response_body=self.text
        )

    def _pop(self, key: str, required: bool) -> Any:
        value = self._data.pop(key, None)
        if value is None and required:
            raise self._invalid(f"Response is missing '{key}'")
        return value

    def number(self, key: str, required: bool = False) -> int | None:
        value = self._pop(key, required)
        if value is None:
            return None
        # bool is an int subclass but true/false is not a JSON number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._invalid(f"Response field '{key}' is not a number")
        if isinstance(value, float) and not value.is_integer():
            raise self._invalid(f"Response field '{key}' is not an integer")
        try:
            return int(value)
        except (ValueError, OverflowError) as e:
            raise self._invalid(f"Response field '{key}' is not a finite number") from e

    def string(self, key: str, required: bool = False) -> str | None:
        value = self._pop(key, required)
        if value is not None and not isinstance(value, str):
            raise self._invalid(f"Response field '{key}' is not a string")
        return value

    def string_list(self, key: str) -> list[str]:
        value = self._pop(key, False)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self._invalid(f"Response field '{key}' is not a list")
        if not all(isinstance(item, str) for item in value):
            raise self._invalid(f"Response field '{key}' has a non-string element")
        return list(value)

    def remaining(self) -> dict[str, str]:
        """Return the keys nobody consumed; these are the parameter errors."""
        for key, value in self._data.items():
            if not isinstance(value, str):
                raise self._invalid(f"Response parameter '{key}' is not a string")
        return dict(self._data)


def decode_message_response(status_code: int, http_status: str, body: bytes) -> MessageResponse:
    """
    Decode a message API response.

    The HTTP status is copied through as is: a 400 with a well-formed body is
    a normal response whose ``api_status`` is 0.

    Raises:
        InvalidResponseError: If the body is not a valid response object
    """
    fields = _ResponseFields(body, status_code)
    api_status = fields.number(KEY_STATUS, required=True)
    request_id = fields.string(KEY_REQUEST, required=True)
    receipt = fields.string(KEY_RECEIPT)
    errors = fields.string_list(KEY_ERRORS)

    return MessageResponse(
        response_body=fields.text,
        http_status=http_status,
        http_status_code=status_code,
        api_status=api_status,
        request=request_id,
        receipt=receipt,
        errors=errors,
        error_parameters=fields.remaining(),
    )


def decode_validate_response(status_code: int, http_status: str, body: bytes) -> ValidateResponse:
    """
    Decode a user validation API response.

    Raises:
        InvalidResponseError: If the body is not a valid response object
    """
    fields = _ResponseFields(body, status_code)
    api_status = fields.number(KEY_STATUS, required=True)
    request_id = fields.string(KEY_REQUEST, required=True)
    group = fields.number(KEY_GROUP)
    licenses = fields.string_list(KEY_LICENSES)
    devices = fields.string_list(KEY_DEVICES)
    errors = fields.string_list(KEY_ERRORS)

    return ValidateResponse(
        response_body=fields.text,
        http_status=http_status,
        http_status_code=status_code,
        api_status=api_status,
        request=request_id,
        group=group or 0,
        licenses=licenses,
        devices=devices,
        errors=errors,
        error_parameters=fields.remaining(),
    )
