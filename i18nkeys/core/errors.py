"""Exception types raised by the i18n key tools."""

from __future__ import annotations

from pathlib import Path


class I18nKeysError(Exception):
    """Base class for every fatal error of an invocation."""


class UsageError(I18nKeysError):
    """Command line could not be parsed; ``usage`` is shown to the caller."""

    def __init__(self, usage: str, detail: str) -> None:
        self.usage = usage
        super().__init__(detail)


class MissingArgumentError(UsageError):
    def __init__(self, usage: str, missing: str | None = None) -> None:
        self.missing = missing
        detail = f"missing argument: {missing}" if missing else "missing argument"
        super().__init__(usage, detail)


class MalformedJSONError(I18nKeysError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FilesystemError(I18nKeysError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")
