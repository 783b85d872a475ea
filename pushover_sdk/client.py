"""Pushover SDK Client implementation."""

import asyncio
from typing import Any

import httpx
import structlog

from .config import PushoverConfig
from .decoding import decode_message_response, decode_validate_response
from .encoding import build_request, message_fields, validate_fields
from .exceptions import InvalidResponseError
from .models import (
    MessageRequest,
    MessageResponse,
    PushoverResponse,
    ValidateRequest,
    ValidateResponse,
)
from .signals import AbortSignal
from .validation import check_message_request, check_validate_request

logger = structlog.get_logger()


class PushoverClient:
    """
    Async client for the Pushover message and user validation APIs.

    Each call makes exactly one HTTP round-trip and is never retried.
    A response Pushover rejected (``api_status`` other than 1) is returned
    like any other; only local failures, transport failures and undecodable
    responses raise.

    Example:
        ```python
        from pushover_sdk import AbortController, MessageRequest, PushoverClient

        async with PushoverClient() as client:
            response = await client.send_message(
                MessageRequest(token="app-token", user="user-key", message="Hello!"),
                signal=AbortController(timeout=5.0).signal,
            )
            if not response.accepted:
                print(response.errors, response.error_parameters)
        ```
    """

    def __init__(self, config: PushoverConfig | None = None) -> None:
        """
        Initialize Pushover client.

        Args:
            config: Client configuration. If None, uses default config.
        """
        self.config = config or PushoverConfig()
        self._client: httpx.AsyncClient | None = None
        logger.info("PushoverClient initialized", messages_url=self.config.messages_url)

    async def __aenter__(self) -> "PushoverClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("PushoverClient closed")

    # =========================================================================
    # Transport
    # =========================================================================

    async def _roundtrip(self, request: httpx.Request) -> tuple[int, str, bytes]:
        """Send a request and return its status code, status line and body."""
        response = await self._get_client().send(request, stream=True)
        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            raise InvalidResponseError(
                f"Response body could not be read: {e}", status_code=response.status_code
            ) from e
        finally:
            await response.aclose()

        http_status = f"{response.status_code} {response.reason_phrase}".rstrip()
        return response.status_code, http_status, body

    async def _submit(
        self, request: httpx.Request, signal: AbortSignal | None
    ) -> tuple[int, str, bytes]:
        """
        Run one round-trip, racing it against ``signal`` when one is given.

        The signal covers both the send and the body read.

        Raises:
            httpx.TransportError: If the transport fails and no abort happened
            InvalidResponseError: If the body cannot be read and no abort happened
            Exception: The signal's reason, if the signal fired first or
                before the round-trip failed
        """
        url = str(request.url)

        if signal is None:
            try:
                return await self._roundtrip(request)
            except (httpx.TransportError, InvalidResponseError) as e:
                logger.error("Pushover request failed", url=url, error=str(e))
                raise

        signal.raise_if_aborted()

        roundtrip_task = asyncio.ensure_future(self._roundtrip(request))
        abort_task = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait({roundtrip_task, abort_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (roundtrip_task, abort_task):
                task.cancel()
            await asyncio.gather(roundtrip_task, abort_task, return_exceptions=True)

        if roundtrip_task.cancelled():
            logger.warning("Pushover request aborted", url=url, reason=str(signal.reason))
            raise signal.reason

        error = roundtrip_task.exception()
        if error is None:
            return roundtrip_task.result()

        if isinstance(error, (httpx.TransportError, InvalidResponseError)):
            if signal.aborted:
                logger.warning("Pushover request aborted", url=url, reason=str(signal.reason))
                raise signal.reason from error
            logger.error("Pushover request failed", url=url, error=str(error))
        raise error

    @staticmethod
    def _log_result(operation: str, result: PushoverResponse) -> None:
        if result.accepted:
            logger.info(
                f"Pushover {operation} accepted",
                request_id=result.request,
                http_status_code=result.http_status_code,
            )
        else:
            logger.warning(
                f"Pushover {operation} rejected",
                request_id=result.request,
                http_status_code=result.http_status_code,
                api_status=result.api_status,
                errors=result.errors,
            )

    # =========================================================================
    # Messages
    # =========================================================================

    async def send_message(
        self, request: MessageRequest, *, signal: AbortSignal | None = None
    ) -> MessageResponse:
        """
        Send a message after checking its required fields.

        Args:
            request: Message request; token, user and message are required
            signal: Optional abort signal governing the call

        Returns:
            MessageResponse, accepted or rejected by Pushover

        Raises:
            InvalidMessageError: If the message text is empty
            InvalidTokenError: If the token is empty
            InvalidUserError: If the user key is empty
            InvalidRequestError: If the target URL is unusable
            InvalidResponseError: If the response cannot be decoded
            httpx.TransportError: If the transport fails
        """
        check_message_request(request)
        return await self.send_message_unchecked(request, signal=signal)

    async def send_message_unchecked(
        self, request: MessageRequest, *, signal: AbortSignal | None = None
    ) -> MessageResponse:
        """
        Send a message without checking required fields locally.

        Missing fields are reported by Pushover in the returned response.
        """
        url = request.pushover_url or self.config.messages_url
        http_request = build_request(
            url, message_fields(request), request.attachment, request.attachment_name
        )

        logger.info(
            "Sending Pushover message", url=url, has_attachment=request.attachment is not None
        )
        status_code, http_status, body = await self._submit(http_request, signal)
        result = decode_message_response(status_code, http_status, body)
        self._log_result("message", result)
        return result

    # =========================================================================
    # User Validation
    # =========================================================================

    async def validate_user(
        self, request: ValidateRequest, *, signal: AbortSignal | None = None
    ) -> ValidateResponse:
        """
        Validate a user or group key (and optionally a device) after checking
        the required fields.

        Raises:
            InvalidTokenError: If the token is empty
            InvalidUserError: If the user key is empty
            InvalidRequestError: If the target URL is unusable
            InvalidResponseError: If the response cannot be decoded
            httpx.TransportError: If the transport fails
        """
        check_validate_request(request)
        return await self.validate_user_unchecked(request, signal=signal)

    async def validate_user_unchecked(
        self, request: ValidateRequest, *, signal: AbortSignal | None = None
    ) -> ValidateResponse:
        """Validate a user or group key without checking required fields locally."""
        url = request.pushover_url or self.config.validate_url
        http_request = build_request(url, validate_fields(request))

        logger.info("Sending Pushover validation", url=url)
        status_code, http_status, body = await self._submit(http_request, signal)
        result = decode_validate_response(status_code, http_status, body)
        self._log_result("validation", result)
        return result


async def message(
    request: MessageRequest,
    signal: AbortSignal | None = None,
    config: PushoverConfig | None = None,
) -> MessageResponse:
    """Send one message with a short-lived client."""
    async with PushoverClient(config) as client:
        return await client.send_message(request, signal=signal)


async def validate(
    request: ValidateRequest,
    signal: AbortSignal | None = None,
    config: PushoverConfig | None = None,
) -> ValidateResponse:
    """Validate one user or group key with a short-lived client."""
    async with PushoverClient(config) as client:
        return await client.validate_user(request, signal=signal)
