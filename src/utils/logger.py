import logging
from enum import Enum
from functools import wraps
from itertools import chain
from typing import Any, Callable, Final

from loguru import logger
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success

VERBOSE: Final[bool] = False


class FailureLevel(Enum):
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def _log_call(func: Callable[..., Any], *args, **kwargs) -> None:
    """Log the name and arguments a function is called with."""
    arguments = ", ".join(
        chain(
            (repr(arg) for arg in args),
            (f"{key}={value!r}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({arguments})")


def log_failure(failure_message: str, failure_level: FailureLevel, error: object) -> None:
    """Log the reason of a failure at DEBUG and the failure itself at `failure_level`."""
    logger.debug(f"{failure_message}: {error}")
    logger.log(failure_level.name, failure_message)


def _log_outcome(
    result: Result | IOResult,
    failure_message: str,
    success_message: str | None,
    failure_level: FailureLevel,
) -> None:
    match result:
        case Success() | IOSuccess():
            if success_message:
                logger.info(success_message)
        case Failure(error) | IOFailure(error):
            log_failure(failure_message, failure_level, error)


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """
    Log the outcome of a function returning a `Result` or `IOResult` container.

    The wrapped function's return value is passed through untouched.

    :param failure_message: Message logged at `failure_level` when the container is a failure.
    :param success_message: Message logged at INFO on success, nothing is logged when empty.
    :param failure_level: Log level used for failures.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if VERBOSE:
                _log_call(func, *args, **kwargs)
            result = func(*args, **kwargs)
            if isinstance(result, (Result, IOResult)):
                _log_outcome(result, failure_message, success_message, failure_level)
            return result

        return wrapper

    return decorator
