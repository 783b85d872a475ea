"""Cooperative cancellation for Pushover API calls."""

from __future__ import annotations

import asyncio

from .exceptions import DeadlineExceededError, RequestAbortedError


class AbortSignal:
    """Read side of an :class:`AbortController`."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: BaseException | None = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> BaseException | None:
        """The exception raised in place of the call's result once aborted."""
        return self._reason

    async def wait(self) -> None:
        await self._event.wait()

    def raise_if_aborted(self) -> None:
        if self._reason is not None:
            raise self._reason


class AbortController:
    """
    Aborts in-flight calls that were given its ``signal``.

    Example:
        ```python
        controller = AbortController(timeout=2.0)
        response = await client.send_message(request, signal=controller.signal)
        ```

    A ``timeout`` of zero or less aborts immediately. Timers need a running
    event loop, so controllers with a timeout must be created inside one.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.signal = AbortSignal()
        self._timer: asyncio.TimerHandle | None = None
        if timeout is not None:
            self.abort_after(timeout)

    def abort(self, reason: BaseException | None = None) -> None:
        """Abort with ``reason`` (default :class:`RequestAbortedError`). Only the first call counts."""
        if self.signal.aborted:
            return
        self.signal._reason = reason if reason is not None else RequestAbortedError()
        self.signal._event.set()
        self._cancel_timer()

    def abort_after(self, seconds: float) -> None:
        """Abort with :class:`DeadlineExceededError` once ``seconds`` have passed."""
        self._cancel_timer()
        if seconds <= 0:
            self.abort(DeadlineExceededError())
            return
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(seconds, self.abort, DeadlineExceededError())

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
