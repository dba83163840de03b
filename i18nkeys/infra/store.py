"""JSON files backing each language's translation dictionary."""

from __future__ import annotations

import json
import math
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.errors import FilesystemError, MalformedJSONError
from ..core.keypath import Dictionary
from ..core.logging_config import get_logger

log = get_logger(__name__)

DEFAULT_LANG_DIR = "i18n/lang"
DEFAULT_LANGUAGES = ("en", "fr")


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not allowed in JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


@dataclass(frozen=True)
class LanguageStore:
    code: str
    path: Path


def default_stores(
    root: str | Path,
    languages: Sequence[str] = DEFAULT_LANGUAGES,
    lang_dir: str = DEFAULT_LANG_DIR,
) -> List[LanguageStore]:
    """Build the ``<root>/<lang_dir>/<code>.json`` store list for a project root."""
    base = Path(root).joinpath(*Path(lang_dir).parts)
    return [LanguageStore(code, base / f"{code}.json") for code in languages]


class DictionaryStore:
    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    @staticmethod
    def _read(path: Path) -> Optional[str]:
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedJSONError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise FilesystemError(path, e) from e

    def is_populated(self, path: Path) -> bool:
        content = self._read(path)
        return content is not None and bool(content.strip())

    def load(self, path: Path) -> Dictionary:
        """Parse the dictionary stored at ``path``.

        A missing or blank file is an empty dictionary.
        """
        content = self._read(path)
        if content is None:
            log.debug("%s does not exist, starting empty", path)
            return {}
        if not content.strip():
            log.debug("%s is blank, starting empty", path)
            return {}
        try:
            data = json.loads(content, parse_constant=_reject_constant, parse_float=_finite_float)
        except ValueError as e:
            raise MalformedJSONError(path, f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedJSONError(path, f"expected a JSON object, got {type(data).__name__}")
        log.debug("Loaded %s (%d top-level keys)", path, len(data))
        return data

    def dumps(self, data: Dictionary) -> str:
        return json.dumps(data, indent=self.indent, ensure_ascii=False, allow_nan=False) + "\n"

    def _stage(self, path: Path, data: Dictionary) -> Path:
        """Write ``data`` next to ``path`` and return the temporary file."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(path.parent, e) from e

        tmp = path.with_name(f".{path.name}.{os.getpid()}.tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(self.dumps(data))
                fh.flush()
                os.fsync(fh.fileno())
            if path.exists():
                shutil.copymode(path, tmp)
        except OSError as e:
            self._discard(tmp)
            raise FilesystemError(path, e) from e
        return tmp

    @staticmethod
    def _discard(tmp: Path) -> None:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            log.warning("Could not remove temporary file %s: %s", tmp, e)

    @staticmethod
    def _commit(tmp: Path, path: Path) -> None:
        try:
            os.replace(tmp, path)
        except OSError as e:
            raise FilesystemError(path, e) from e
        log.debug("Saved %s", path)

    def save(self, path: Path, data: Dictionary) -> None:
        tmp = self._stage(path, data)
        try:
            self._commit(tmp, path)
        except FilesystemError:
            self._discard(tmp)
            raise

    def save_all(self, items: Iterable[Tuple[Path, Dictionary]]) -> None:
        """Save several dictionaries, renaming only once every file is staged.

        A failure while staging leaves every destination untouched. A failure
        while renaming can still leave earlier files already replaced.
        """
        staged: List[Tuple[Path, Path]] = []
        try:
            for path, data in items:
                staged.append((self._stage(path, data), path))
        except FilesystemError:
            for tmp, _ in staged:
                self._discard(tmp)
            raise

        for i, (tmp, path) in enumerate(staged):
            try:
                self._commit(tmp, path)
            except FilesystemError:
                for leftover, _ in staged[i:]:
                    self._discard(leftover)
                raise
