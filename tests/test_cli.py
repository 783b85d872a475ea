"""Tests for the pushover command line interface."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from click.testing import CliRunner

from pushover_sdk import (
    InvalidMessageError,
    MessageRequest,
    MessageResponse,
    PushoverClient,
    ValidateResponse,
    __version__,
)
from pushover_sdk.cli import cli


def _message_response(**overrides) -> MessageResponse:
    fields = dict(
        response_body='{"status":1,"request":"deadbeef","receipt":"1337"}',
        http_status="200 OK",
        http_status_code=200,
        api_status=1,
        request="deadbeef",
        receipt="1337",
    )
    fields.update(overrides)
    return MessageResponse(**fields)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_pushover_env(monkeypatch):
    monkeypatch.delenv("PUSHOVER_TOKEN", raising=False)
    monkeypatch.delenv("PUSHOVER_USER", raising=False)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestMessageCommand:
    """Tests for `pushover message`."""

    def test_message(self, runner):
        send = AsyncMock(return_value=_message_response())
        with patch.object(PushoverClient, "send_message", send):
            result = runner.invoke(cli, ["message", "-t", "t", "-u", "u", "-m", "hi"])

        assert result.exit_code == 0, result.output
        assert "deadbeef" in result.output
        assert "1337" in result.output

        request = send.call_args[0][0]
        assert isinstance(request, MessageRequest)
        assert (request.token, request.user, request.message) == ("t", "u", "hi")
        assert request.attachment is None
        assert send.call_args[1] == {"signal": None}

    def test_message_options(self, runner):
        send = AsyncMock(return_value=_message_response())
        with patch.object(PushoverClient, "send_message", send):
            result = runner.invoke(
                cli,
                [
                    "message", "-t", "t", "-u", "u", "-m", "hi",
                    "--title", "Title", "--html", "--priority", "0",
                    "--pushover-url", "http://localhost:8080/messages.json",
                    "--timeout", "5",
                ],
            )

        assert result.exit_code == 0, result.output
        request = send.call_args[0][0]
        assert request.title == "Title"
        assert request.html is True
        assert request.monospace is False
        assert request.priority == 0
        assert request.pushover_url == "http://localhost:8080/messages.json"
        assert send.call_args[1]["signal"] is not None

    def test_message_from_env(self, runner, monkeypatch):
        monkeypatch.setenv("PUSHOVER_TOKEN", "env-token")
        monkeypatch.setenv("PUSHOVER_USER", "env-user")
        send = AsyncMock(return_value=_message_response())
        with patch.object(PushoverClient, "send_message", send):
            result = runner.invoke(cli, ["message", "-m", "hi"])

        assert result.exit_code == 0, result.output
        request = send.call_args[0][0]
        assert request.token == "env-token"
        assert request.user == "env-user"

    def test_message_requires_token(self, runner):
        result = runner.invoke(cli, ["message", "-u", "u", "-m", "hi"])
        assert result.exit_code == 2
        assert "--token" in result.output

    def test_message_with_image(self, runner, tmp_path):
        image = tmp_path / "snapshot.png"
        image.write_bytes(b"png data")
        seen = {}

        async def _send(request, signal=None):
            seen["data"] = request.attachment.read()
            seen["name"] = request.attachment_name
            return _message_response()

        with patch.object(PushoverClient, "send_message", AsyncMock(side_effect=_send)):
            result = runner.invoke(
                cli, ["message", "-t", "t", "-u", "u", "-m", "hi", "--image", str(image)]
            )

        assert result.exit_code == 0, result.output
        assert seen == {"data": b"png data", "name": "snapshot.png"}

    def test_message_missing_image(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["message", "-t", "t", "-u", "u", "-m", "hi", "--image", str(tmp_path / "nope.png")]
        )
        assert result.exit_code == 2

    def test_message_rejected(self, runner):
        response = _message_response(
            response_body='{"user":"invalid","errors":["user key is invalid"],"status":0,"request":"x"}',
            http_status="400 Bad Request",
            http_status_code=400,
            api_status=0,
            request="x",
            receipt=None,
            errors=["user key is invalid"],
            error_parameters={"user": "invalid"},
        )
        with patch.object(PushoverClient, "send_message", AsyncMock(return_value=response)):
            result = runner.invoke(cli, ["message", "-t", "t", "-u", "u", "-m", "hi"])

        assert result.exit_code == 0, result.output
        assert "user key is invalid" in result.output

    def test_message_error_exits(self, runner):
        send = AsyncMock(side_effect=InvalidMessageError())
        with patch.object(PushoverClient, "send_message", send):
            result = runner.invoke(cli, ["message", "-t", "t", "-u", "u", "-m", "hi"])

        assert result.exit_code == 1
        assert "Invalid message" in result.output

    def test_transport_error_exits(self, runner):
        send = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        with patch.object(PushoverClient, "send_message", send):
            result = runner.invoke(cli, ["message", "-t", "t", "-u", "u", "-m", "hi"])

        assert result.exit_code == 1
        assert "connection refused" in result.output


    def test_foreign_abort_reason_is_not_reported(self, runner):
        send = AsyncMock(side_effect=RuntimeError("shutting down"))
        with patch.object(PushoverClient, "send_message", send):
            result = runner.invoke(cli, ["message", "-t", "t", "-u", "u", "-m", "hi"])

        assert result.exit_code == 1
        assert isinstance(result.exception, RuntimeError)
        assert "✗" not in result.output


class TestValidateCommand:
    """Tests for `pushover validate`."""

    def test_validate(self, runner):
        response = ValidateResponse(
            response_body='{"status":1,"group":0,"devices":["pixel"],"licenses":["Android"],"request":"abc"}',
            http_status="200 OK",
            http_status_code=200,
            api_status=1,
            request="abc",
            devices=["pixel"],
            licenses=["Android"],
        )
        validate = AsyncMock(return_value=response)
        with patch.object(PushoverClient, "validate_user", validate):
            result = runner.invoke(cli, ["validate", "-t", "t", "-u", "u", "--device", "pixel"])

        assert result.exit_code == 0, result.output
        assert "abc" in result.output
        assert "Android" in result.output

        request = validate.call_args[0][0]
        assert (request.token, request.user, request.device) == ("t", "u", "pixel")
