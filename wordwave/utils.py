import functools
import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from rich.logging import RichHandler

T = TypeVar("T")


class BadParameter(ValueError):
    """A caller-supplied argument is out of range or malformed."""


def setup_logging(name: str) -> logging.Logger:
    """
    Returns the logger for name. The rich handler is attached once, to the
    top-level package logger; module loggers reach it by propagation.
    """
    root = logging.getLogger(name.split(".")[0])
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        root.addHandler(handler)
    return logging.getLogger(name)


logger = setup_logging(__name__)


def handle_errors(
    func: Callable[..., Awaitable[T]]
) -> Callable[..., Awaitable[T]]:
    """Logs any exception raised by a coroutine and re-raises it unchanged."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except Exception as exc:
            logger.error("%s failed: %s", func.__qualname__, exc)
            raise

    return wrapper


def process_time(
    func: Callable[..., Awaitable[T]]
) -> Callable[..., Awaitable[T]]:
    """Logs the wall time spent in a coroutine."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        start = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            logger.debug(
                "%s took %.4f seconds", func.__qualname__, time.perf_counter() - start
            )

    return wrapper
