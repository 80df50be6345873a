"""Centralized error handler for lincol commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from ..exceptions import LincolError
from .exit_codes import ExitCodes
from .logging import logger


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator turning library and I/O errors into click errors with exit codes."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (LincolError, OSError) as e:
            exit_code = ExitCodes.for_error(e)
            logger.opt(exception=True).debug(
                "Command '{cmd}' failed with exit code {code} ({reason}): {err}",
                cmd=func.__name__,
                code=exit_code,
                reason=ExitCodes.get_description(exit_code),
                err=str(e),
            )
            error = click.ClickException(f"{type(e).__name__}: {e}")
            error.exit_code = exit_code
            raise error from e

    return wrapper
