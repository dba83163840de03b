"""Turns fatal errors into a message on stderr and a process exit code."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from .errors import I18nKeysError, MissingArgumentError, UsageError
from .logging_config import get_logger

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class ErrorHandler:
    """Centralized error reporting for the command-line entry points."""

    @staticmethod
    def handle_error(error: BaseException, stream: TextIO | None = None) -> int:
        """Report ``error`` and return the exit code for it."""
        out = stream if stream is not None else sys.stderr

        if isinstance(error, KeyboardInterrupt):
            print("Interrupted", file=out)
            return EXIT_INTERRUPTED

        if isinstance(error, UsageError):
            log.debug("Usage error: %s", error)
            print(error.usage, file=out)
            if not isinstance(error, MissingArgumentError):
                print(f"Error: {error}", file=out)
            return EXIT_FAILURE

        if isinstance(error, I18nKeysError):
            log.debug("Invocation failed", exc_info=error)
        else:
            log.error("Unexpected error", exc_info=error)
        print(f"Error: {error}", file=out)
        return EXIT_FAILURE

    @staticmethod
    def run(func: Callable[..., int | None], *args: Any, **kwargs: Any) -> int:
        """Call ``func`` and map whatever it raises to an exit code."""
        try:
            code = func(*args, **kwargs)
        except (Exception, KeyboardInterrupt) as e:  # noqa: BLE001 - top of the process
            return ErrorHandler.handle_error(e)
        return EXIT_OK if code is None else code
