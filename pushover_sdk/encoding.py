"""Request body encoding for the Pushover API.

Only fields with a value are put on the wire: Pushover treats a missing
parameter differently from an empty one.
"""

from typing import Any, BinaryIO

import httpx

from .exceptions import InvalidRequestError
from .models import MessageRequest, ValidateRequest

KEY_ATTACHMENT = "attachment"
KEY_CALLBACK = "callback"
KEY_DEVICE = "device"
KEY_EXPIRE = "expire"
KEY_HTML = "html"
KEY_MESSAGE = "message"
KEY_MONOSPACE = "monospace"
KEY_PRIORITY = "priority"
KEY_RETRY = "retry"
KEY_SOUND = "sound"
KEY_TIMESTAMP = "timestamp"
KEY_TITLE = "title"
KEY_TOKEN = "token"
KEY_URL = "url"
KEY_URL_TITLE = "url_title"
KEY_USER = "user"

DEFAULT_ATTACHMENT_NAME = "image.jpg"

Fields = list[tuple[str, str]]


def _wire_value(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def _present(pairs: list[tuple[str, Any]]) -> Fields:
    fields = [(key, _wire_value(value)) for key, value in pairs]
    return [(key, value) for key, value in fields if value]


def message_fields(request: MessageRequest) -> Fields:
    """Return the wire fields for a message request, in API order."""
    return _present(
        [
            (KEY_TOKEN, request.token),
            (KEY_USER, request.user),
            (KEY_MESSAGE, request.message),
            (KEY_TITLE, request.title),
            (KEY_URL, request.url),
            (KEY_URL_TITLE, request.url_title),
            (KEY_HTML, request.html),
            (KEY_MONOSPACE, request.monospace),
            (KEY_SOUND, request.sound),
            (KEY_DEVICE, request.device),
            (KEY_PRIORITY, request.priority),
            (KEY_RETRY, request.retry),
            (KEY_EXPIRE, request.expire),
            (KEY_CALLBACK, request.callback),
            (KEY_TIMESTAMP, request.timestamp),
        ]
    )


def validate_fields(request: ValidateRequest) -> Fields:
    """Return the wire fields for a validation request."""
    return _present(
        [
            (KEY_TOKEN, request.token),
            (KEY_USER, request.user),
            (KEY_DEVICE, request.device),
        ]
    )


def _target_url(url: str) -> httpx.URL:
    try:
        target = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidRequestError(f"Invalid request URL: {e}") from e

    if target.scheme not in ("http", "https") or not target.host:
        raise InvalidRequestError(f"Invalid request URL: {url!r}")

    return target


def build_request(
    url: str,
    fields: Fields,
    attachment: BinaryIO | None = None,
    attachment_name: str | None = None,
) -> httpx.Request:
    """
    Build the POST request for a Pushover API call.

    Without an attachment the body is ``application/x-www-form-urlencoded``.
    With one, it is ``multipart/form-data``: the attachment goes in the
    ``attachment`` file part and every field becomes a text part.

    Args:
        url: Target API URL
        fields: Wire fields with non-empty values
        attachment: Binary stream, read to the end but not closed
        attachment_name: Attachment filename (default: image.jpg)

    Returns:
        Request ready to be sent by an ``httpx.AsyncClient``

    Raises:
        InvalidRequestError: If the URL cannot be used for a request
    """
    target = _target_url(url)
    data = dict(fields)

    if attachment is None:
        return httpx.Request("POST", target, data=data)

    content = attachment.read()
    files = {KEY_ATTACHMENT: (attachment_name or DEFAULT_ATTACHMENT_NAME, content)}
    return httpx.Request("POST", target, data=data, files=files)
