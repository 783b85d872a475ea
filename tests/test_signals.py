"""Tests for AbortController and AbortSignal."""

import asyncio

import pytest

from pushover_sdk import AbortController, DeadlineExceededError, RequestAbortedError


@pytest.mark.asyncio
async def test_new_signal_is_not_aborted():
    """Test the initial signal state."""
    controller = AbortController()
    assert controller.signal.aborted is False
    assert controller.signal.reason is None
    controller.signal.raise_if_aborted()


@pytest.mark.asyncio
async def test_abort_default_reason():
    """Test that abort() without a reason uses RequestAbortedError."""
    controller = AbortController()
    controller.abort()

    assert controller.signal.aborted is True
    assert isinstance(controller.signal.reason, RequestAbortedError)
    with pytest.raises(RequestAbortedError):
        controller.signal.raise_if_aborted()


@pytest.mark.asyncio
async def test_abort_custom_reason_first_wins():
    """Test that the first abort reason is kept."""
    controller = AbortController()
    first = RuntimeError("shutting down")
    controller.abort(first)
    controller.abort(ValueError("ignored"))
    assert controller.signal.reason is first


@pytest.mark.asyncio
async def test_zero_timeout_aborts_immediately():
    """Test that an elapsed deadline aborts at construction."""
    controller = AbortController(timeout=0)
    assert controller.signal.aborted is True
    assert isinstance(controller.signal.reason, DeadlineExceededError)


@pytest.mark.asyncio
async def test_timeout_aborts_later():
    """Test that a timeout fires DeadlineExceededError."""
    controller = AbortController(timeout=0.01)
    assert controller.signal.aborted is False

    await asyncio.wait_for(controller.signal.wait(), timeout=1.0)

    assert isinstance(controller.signal.reason, DeadlineExceededError)


@pytest.mark.asyncio
async def test_abort_cancels_timer():
    """Test that an explicit abort wins over a pending timeout."""
    controller = AbortController(timeout=0.01)
    controller.abort()
    await asyncio.sleep(0.05)

    assert type(controller.signal.reason) is RequestAbortedError
