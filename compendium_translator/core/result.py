"""
Result type for explicit error handling.

Each document job of a batch returns a Result instead of raising, so one
failure never aborts the sibling jobs awaited in the same batch.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union, Callable, Awaitable

T = TypeVar('T')  # Success type
E = TypeVar('E')  # Error type


@dataclass
class Ok(Generic[T]):
    """Job finished; value is what it returned."""
    value: T

    def is_ok(self) -> bool:
        return True


@dataclass
class Err(Generic[E]):
    """Job failed; error is the exception it raised."""
    error: E

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


def wrap_async_exception(
    func: Callable[..., Awaitable[T]]
) -> Callable[..., Awaitable[Union[Ok[T], Err[Exception]]]]:
    """Wrap a coroutine function so that it returns a Result instead of raising.

    Example:
        safe_job = wrap_async_exception(translate_document)
        result = await safe_job(document)
        if not result.is_ok():
            logger.error("Failed: %s", result.error)
    """
    async def wrapper(*args, **kwargs) -> Union[Ok[T], Err[Exception]]:
        try:
            return Ok(await func(*args, **kwargs))
        except Exception as e:
            return Err(e)
    return wrapper
