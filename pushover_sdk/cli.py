import asyncio
import os
from typing import Any, Awaitable, Callable

import click
import httpx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .client import PushoverClient
from .exceptions import PushoverError
from .models import (
    MessageRequest,
    MessageResponse,
    PushoverResponse,
    ValidateRequest,
    ValidateResponse,
)
from .signals import AbortController

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="pushover")
def cli():
    """
    Pushover - Notification API client

    Submit message and validate requests to the Pushover API.
    See https://pushover.net/api for details on each parameter.
    """
    pass


def _request_table(rows: list[tuple[str, Any]]) -> Table:
    table = Table(title="Request", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for name, value in rows:
        if value is None or value is False or value == "":
            continue
        table.add_row(name, escape(str(value)))

    return table


def _response_table(response: PushoverResponse) -> Table:
    table = Table(title="Response", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    status_style = "green" if response.accepted else "red"
    table.add_row("HTTP Status", response.http_status)
    table.add_row("HTTP Status Code", str(response.http_status_code))
    table.add_row("API Status", f"[{status_style}]{response.api_status}[/{status_style}]")
    table.add_row("Request ID", escape(response.request))

    if isinstance(response, MessageResponse) and response.receipt:
        table.add_row("Receipt", escape(response.receipt))

    if isinstance(response, ValidateResponse):
        table.add_row("Group", str(response.group))
        table.add_row("Licenses", escape(", ".join(response.licenses)))
        table.add_row("Devices", escape(", ".join(response.devices)))

    for parameter, error in sorted(response.error_parameters.items()):
        table.add_row(f"Parameter Error ({escape(parameter)})", f"[red]{escape(error)}[/red]")

    for error in response.errors:
        table.add_row("Error", f"[red]{escape(error)}[/red]")

    table.add_row("Response Body", escape(response.response_body))
    return table


def _run(call: Callable[[], Awaitable[PushoverResponse]]) -> None:
    """
    Run an API call and print its response, or print the error and exit 1.

    Only SDK and httpx errors are reported this way. The commands abort with
    the SDK's own reasons; a call aborted with any other exception as its
    reason would escape here as a traceback.
    """
    try:
        response = asyncio.run(call())
    except (PushoverError, httpx.HTTPError) as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(_response_table(response))


@cli.command(name="message")
@click.option("--token", "-t", envvar="PUSHOVER_TOKEN", required=True, help="Application's API token")
@click.option("--user", "-u", envvar="PUSHOVER_USER", required=True, help="User/Group key")
@click.option("--message", "-m", required=True, help="Notification message")
@click.option("--pushover-url", default=None, help="Pushover API URL")
@click.option("--title", default=None, help="Message title (if empty, uses app name)")
@click.option("--url", default=None, help="Supplementary URL to show with the message")
@click.option("--url-title", default=None, help="Title for the URL")
@click.option("--html", is_flag=True, help="Enable HTML formatting")
@click.option("--monospace", is_flag=True, help="Enable monospace formatting")
@click.option("--sound", default=None, help="Name of a sound to override user's default")
@click.option("--image", type=click.Path(exists=True, dir_okay=False), help="Image attachment")
@click.option("--device", default=None, help="Device name for message")
@click.option("--priority", type=int, default=None, help="Message priority")
@click.option("--retry", type=int, default=None, help="Retry interval")
@click.option("--expire", type=int, default=None, help="Message expiration length")
@click.option("--callback", default=None, help="Callback URL for acknowledgements")
@click.option("--timestamp", type=int, default=None, help="Unix timestamp for message")
@click.option("--timeout", type=float, default=None, help="Abort after this many seconds")
def send_message(
    token, user, message, pushover_url, title, url, url_title, html, monospace, sound,
    image, device, priority, retry, expire, callback, timestamp, timeout,
):
    """Send a Pushover message to a user or group"""
    request = MessageRequest(
        pushover_url=pushover_url,
        token=token,
        user=user,
        message=message,
        title=title,
        url=url,
        url_title=url_title,
        html=html,
        monospace=monospace,
        sound=sound,
        device=device,
        priority=priority,
        retry=retry,
        expire=expire,
        callback=callback,
        timestamp=timestamp,
    )

    console.print(_request_table([
        ("Pushover URL", pushover_url),
        ("Token", token),
        ("User", user),
        ("Message", message),
        ("Title", title),
        ("URL", url),
        ("URL Title", url_title),
        ("HTML", html),
        ("Monospace", monospace),
        ("Sound", sound),
        ("Image", image),
        ("Device", device),
        ("Priority", priority),
        ("Retry", retry),
        ("Expire", expire),
        ("Callback", callback),
        ("Timestamp", timestamp),
    ]))

    async def _send() -> MessageResponse:
        signal = AbortController(timeout).signal if timeout is not None else None
        async with PushoverClient() as client:
            if image is None:
                return await client.send_message(request, signal=signal)

            with open(image, "rb") as image_file:
                with_image = request.model_copy(
                    update={"attachment": image_file, "attachment_name": os.path.basename(image)}
                )
                return await client.send_message(with_image, signal=signal)

    _run(_send)


@cli.command(name="validate")
@click.option("--token", "-t", envvar="PUSHOVER_TOKEN", required=True, help="Application's API token")
@click.option("--user", "-u", envvar="PUSHOVER_USER", required=True, help="User/Group key")
@click.option("--pushover-url", default=None, help="Pushover API URL")
@click.option("--device", default=None, help="Device name to validate")
@click.option("--timeout", type=float, default=None, help="Abort after this many seconds")
def validate_user(token, user, pushover_url, device, timeout):
    """Validate a Pushover user or group key, and optionally a device name"""
    request = ValidateRequest(pushover_url=pushover_url, token=token, user=user, device=device)

    console.print(_request_table([
        ("Pushover URL", pushover_url),
        ("Token", token),
        ("User", user),
        ("Device", device),
    ]))

    async def _validate() -> ValidateResponse:
        signal = AbortController(timeout).signal if timeout is not None else None
        async with PushoverClient() as client:
            return await client.validate_user(request, signal=signal)

    _run(_validate)


if __name__ == "__main__":
    cli()
