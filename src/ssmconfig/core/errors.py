"""
Unified error handling for ssmconfig.

Repository operations raise subclasses of ``SsmConfigError``; the CLI maps
them onto exit codes through ``main_with_error_handling``.

Exit Codes:
- 0: Success
- 10: Configuration error (including malformed client credentials)
- 11: Provider error (parameter store failure)
- 127: Unknown/internal error
"""

from __future__ import annotations

import functools
import sys
from enum import IntEnum
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Process exit status of the ssmconfig commands."""

    SUCCESS = 0
    CONFIG_ERROR = 10
    PROVIDER_ERROR = 11
    UNKNOWN_ERROR = 127


class SsmConfigError(Exception):
    """Root of the ssmconfig errors; each subclass carries its exit code."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SsmConfigError):
    """Raised for configuration-related errors."""

    exit_code = ExitCode.CONFIG_ERROR


class CredentialParseError(ConfigurationError):
    """Raised when a client supplied credentials token cannot be decoded."""


class ProviderError(SsmConfigError):
    """Raised when an external store fails."""

    exit_code = ExitCode.PROVIDER_ERROR


class StoreFetchError(ProviderError):
    """Raised when fetching parameters from the store fails."""


def sanitize_error(exc: BaseException) -> str:
    """Exception type name only; boto and pydantic messages can echo secrets."""
    return type(exc).__name__


def format_error_message(error: SsmConfigError) -> str:
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg


F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling() -> Callable[[F], F]:
    """
    Wrap a CLI command so failures become exit codes.

    ``SsmConfigError`` subclasses return their own ``exit_code`` after
    printing the message to stderr; Ctrl-C returns 130 and anything else
    returns ``ExitCode.UNKNOWN_ERROR``.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except SsmConfigError as e:
                logger.error("command_failed", error_type=type(e).__name__, exit_code=int(e.exit_code), **e.details)
                print(f"Error: {format_error_message(e)}", file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                return 130
            except Exception as e:
                logger.exception("command_crashed", error_type=type(e).__name__)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator
