from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...core import config
from ...core.errors import MissingArgumentError
from ...core.logging_config import get_logger
from ...core.sorting import sort_keys
from ...infra.store import DictionaryStore, LanguageStore, default_stores

log = get_logger(__name__)

USAGE = "Usage: i18n-sort <root_path>"


@dataclass
class SortResult:
    sorted_paths: List[Path] = field(default_factory=list)
    skipped_paths: List[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.sorted_paths)


def sort_all(
    stores: Sequence[LanguageStore],
    store: Optional[DictionaryStore] = None,
) -> SortResult:
    """Rewrite every existing, non-blank store with its keys sorted.

    Absent stores are skipped and never created.
    """
    store = store or DictionaryStore()
    result = SortResult()
    for lang in stores:
        if not store.is_populated(lang.path):
            log.debug("Skipping %s: missing or blank", lang.path)
            result.skipped_paths.append(lang.path)
            continue
        data = store.load(lang.path)
        store.save(lang.path, sort_keys(data))
        result.sorted_paths.append(lang.path)
    log.info("Sorted %d of %d file(s)", result.count, len(stores))
    return result


def run(args: argparse.Namespace) -> int:
    if not getattr(args, "root_path", None):
        raise MissingArgumentError(USAGE, "root_path")

    settings = config.settings
    stores = default_stores(args.root_path, settings.languages, settings.LANG_DIR)
    result = sort_all(stores, DictionaryStore(indent=settings.INDENT))
    if result.count > 0:
        print(f"Successfully sorted {result.count} i18n file(s)")
    else:
        print("No i18n files found to sort")
    return 0
