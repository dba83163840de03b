from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from ...core import config
from ...core.errors import MissingArgumentError
from ...core.keypath import set_nested_key
from ...core.logging_config import get_logger
from ...core.sorting import sort_keys
from ...infra.store import DictionaryStore, LanguageStore, default_stores

log = get_logger(__name__)

USAGE = "Usage: i18n-add <root_path> <key_path> <fr_value> <en_value>"


@dataclass
class AddKeyResult:
    key_path: str
    paths: List[Path] = field(default_factory=list)
    # language code -> dotted paths whose leaf was replaced by a dictionary
    replaced: Dict[str, List[str]] = field(default_factory=dict)


def add_key(
    stores: Sequence[LanguageStore],
    key_path: str,
    values: Mapping[str, str],
    store: Optional[DictionaryStore] = None,
) -> AddKeyResult:
    """Set ``key_path`` in every language store and write them back sorted.

    ``values`` maps each store's language code to its translation. Every
    store must have a value; nothing is read or written otherwise.
    """
    missing = [s.code for s in stores if not values.get(s.code)]
    if missing:
        raise MissingArgumentError(USAGE, ", ".join(f"{code} value" for code in missing))
    for code in set(values) - {s.code for s in stores}:
        log.debug("Ignoring value for unconfigured language %s", code)

    store = store or DictionaryStore()
    result = AddKeyResult(key_path=key_path)
    updated = []
    for lang in stores:
        data = store.load(lang.path)
        replaced = set_nested_key(data, key_path, values[lang.code])
        for path in replaced:
            log.warning("%s: value at '%s' replaced by a nested dictionary", lang.path, path)
        if replaced:
            result.replaced[lang.code] = replaced
        updated.append((lang.path, sort_keys(data)))

    store.save_all(updated)
    result.paths = [path for path, _ in updated]
    log.info("Added %s to %d file(s)", key_path, len(result.paths))
    return result


def run(args: argparse.Namespace) -> int:
    for name in ("root_path", "key_path", "fr_value", "en_value"):
        if not getattr(args, name, None):
            raise MissingArgumentError(USAGE, name)

    settings = config.settings
    stores = default_stores(args.root_path, settings.languages, settings.LANG_DIR)
    result = add_key(
        stores,
        args.key_path,
        {"fr": args.fr_value, "en": args.en_value},
        DictionaryStore(indent=settings.INDENT),
    )
    print(f"Successfully added i18n key: {result.key_path}")
    return 0
