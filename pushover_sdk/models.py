"""Data models for Pushover SDK."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Request Models
# =============================================================================


class MessageRequest(BaseModel):
    """
    Request for the Pushover message API.

    Fields left as None (or empty strings, or False for the flags) are not
    sent. Setting both ``html`` and ``monospace`` is rejected by Pushover,
    not by this SDK.
    """

    pushover_url: str | None = Field(None, description="Override for the message API URL")

    token: str | None = Field(None, description="Application API token")
    user: str | None = Field(None, description="User or group key")
    message: str | None = Field(None, description="Message text")

    title: str | None = Field(None, description="Message title")
    url: str | None = Field(None, description="Supplementary URL")
    url_title: str | None = Field(None, description="Displayed text for the supplementary URL")
    html: bool = Field(False, description="Enable HTML formatting")
    monospace: bool = Field(False, description="Enable monospace formatting")
    sound: str | None = Field(None, description="Sound name")
    device: str | None = Field(None, description="Target device name")
    priority: int | None = Field(None, description="Priority, -2 to 2")
    retry: int | None = Field(None, description="Retry interval in seconds for emergency priority")
    expire: int | None = Field(None, description="Expiration window in seconds for emergency priority")
    callback: str | None = Field(None, description="Callback URL for emergency priority")
    timestamp: int | None = Field(None, description="Unix timestamp shown instead of receive time")

    attachment: Any = Field(None, description="Readable binary stream with attachment data")
    attachment_name: str | None = Field(None, description="Attachment filename")

    @field_validator("attachment")
    @classmethod
    def _attachment_is_readable(cls, value: Any) -> Any:
        if value is not None and not callable(getattr(value, "read", None)):
            raise ValueError("attachment must be a readable binary stream")
        return value


class ValidateRequest(BaseModel):
    """Request for the Pushover user validation API."""

    pushover_url: str | None = Field(None, description="Override for the validation API URL")
    token: str | None = Field(None, description="Application API token")
    user: str | None = Field(None, description="User or group key to validate")
    device: str | None = Field(None, description="Device name to validate")


# =============================================================================
# Response Models
# =============================================================================


class PushoverResponse(BaseModel):
    """Fields shared by every decoded Pushover API response."""

    response_body: str = Field(..., description="Raw response body")
    http_status: str = Field(..., description="HTTP status line, e.g. '200 OK'")
    http_status_code: int = Field(..., description="HTTP status code")
    api_status: int = Field(..., description="Pushover status, 1 when accepted")
    request: str = Field(..., description="Request ID assigned by Pushover")
    errors: list[str] = Field(default_factory=list)
    error_parameters: dict[str, str] = Field(
        default_factory=dict, description="Per-parameter error messages"
    )

    @property
    def accepted(self) -> bool:
        return self.api_status == 1


class MessageResponse(PushoverResponse):
    """Decoded response from the message API."""

    receipt: str | None = Field(None, description="Receipt, returned for emergency priority")


class ValidateResponse(PushoverResponse):
    """Decoded response from the user validation API."""

    group: int = Field(0, description="Group flag")
    devices: list[str] = Field(default_factory=list, description="Registered device names")
    licenses: list[str] = Field(default_factory=list, description="Licensed platforms")
