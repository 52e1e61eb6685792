"""Wrap plan operations into response envelopes."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from levelup_ai.domain.errors import ErrorKind, PlanError
from levelup_ai.domain.responses import ApiResponse

_P = ParamSpec("_P")
_R = TypeVar("_R")

_logger = logging.getLogger(__name__)


def enveloped(
    *,
    failure_message: str,
    success_message: str | None = None,
    not_found_message: str | None = None,
) -> Callable[
    [Callable[_P, Awaitable[_R]]], Callable[_P, Awaitable[ApiResponse[_R]]]
]:
    """Convert an operation's result or failure into an ``ApiResponse``.

    ``PlanError`` subclasses keep their kind; any other exception is reported
    as an internal failure. The underlying error text is always passed through
    as ``error`` while ``message`` carries the fixed operation summary.
    """

    def decorator(
        func: Callable[_P, Awaitable[_R]],
    ) -> Callable[_P, Awaitable[ApiResponse[_R]]]:
        @functools.wraps(func)
        async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ApiResponse[_R]:
            try:
                result = await func(*args, **kwargs)
            except PlanError as exc:
                _logger.warning("%s: %s: %s", func.__qualname__, exc.kind.value, exc)
                message = failure_message
                if exc.kind is ErrorKind.NOT_FOUND and not_found_message:
                    message = not_found_message
                return ApiResponse.failure(str(exc), message, kind=exc.kind)
            except Exception as exc:
                _logger.exception("%s failed", func.__qualname__)
                return ApiResponse.failure(str(exc), failure_message)
            return ApiResponse.ok(result, success_message)

        return wrapper

    return decorator
