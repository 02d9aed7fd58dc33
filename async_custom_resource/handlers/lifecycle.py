"""
Invocation lifecycle management.

Each Lambda invocation runs in its own event loop. This module lets
applications register cleanup hooks that run at the end of every invocation,
before that loop closes, so async resources can be released on the loop that
created them.
"""

import inspect
import logging
import threading
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

CleanupHandler = Callable[[], Awaitable[None] | None]

_cleanup_handlers: list[CleanupHandler] = []
_cleanup_lock = threading.Lock()


def register_cleanup_handler(handler: CleanupHandler) -> None:
    """
    Register a cleanup hook to run after every invocation.

    Hooks may be synchronous or async; they run in registration order.

    Args:
        handler: Cleanup function to register
    """
    with _cleanup_lock:
        _cleanup_handlers.append(handler)


def unregister_cleanup_handler(handler: CleanupHandler) -> None:
    with _cleanup_lock:
        if handler in _cleanup_handlers:
            _cleanup_handlers.remove(handler)


async def run_cleanup_handlers() -> None:
    """Run all registered hooks, logging (not raising) their errors."""
    with _cleanup_lock:
        handlers = list(_cleanup_handlers)
    for handler in handlers:
        try:
            result = handler()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Error during cleanup handler execution: {e}")


@asynccontextmanager
async def invocation_lifecycle(name: str = "custom resource") -> AsyncGenerator[None]:
    """
    Context manager wrapping a single invocation.

    Runs the registered cleanup hooks even when the invocation fails.

    Example:
        async with invocation_lifecycle():
            await dispatch(request, resource, transport)
    """
    started = time.monotonic()
    try:
        yield
    finally:
        await run_cleanup_handlers()
        logger.debug(f"{name} invocation finished in {time.monotonic() - started:.3f}s")
