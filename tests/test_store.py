from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from i18nkeys.core.errors import FilesystemError, MalformedJSONError
from i18nkeys.core.sorting import sort_keys
from i18nkeys.infra.store import DictionaryStore, LanguageStore, default_stores


@pytest.fixture
def store() -> DictionaryStore:
    return DictionaryStore()


def test_default_stores(tmp_path: Path) -> None:
    stores = default_stores(tmp_path)
    assert stores == [
        LanguageStore("en", tmp_path / "i18n" / "lang" / "en.json"),
        LanguageStore("fr", tmp_path / "i18n" / "lang" / "fr.json"),
    ]


def test_default_stores_custom_layout(tmp_path: Path) -> None:
    stores = default_stores(str(tmp_path), ["de"], "locales")
    assert stores == [LanguageStore("de", tmp_path / "locales" / "de.json")]


def test_load_missing_file(store: DictionaryStore, tmp_path: Path) -> None:
    assert store.load(tmp_path / "nope.json") == {}


def test_load_blank_file(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "blank.json"
    path.write_text("  \n\t\n", encoding="utf-8")
    assert store.load(path) == {}
    assert not store.is_populated(path)


def test_load_and_sort(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_text('{"b":1,"a":2}', encoding="utf-8")
    data = store.load(path)
    assert data == {"b": 1, "a": 2}
    assert list(sort_keys(data)) == ["a", "b"]
    assert store.is_populated(path)


def test_load_malformed(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_text('{"a": ', encoding="utf-8")
    with pytest.raises(MalformedJSONError) as exc:
        store.load(path)
    assert exc.value.path == path
    assert str(path) in str(exc.value)
    assert "invalid JSON" in str(exc.value)


def test_load_rejects_non_object(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(MalformedJSONError, match="expected a JSON object"):
        store.load(path)


@pytest.mark.parametrize(
    "content",
    ['{"b": NaN, "a": 1}', '{"a": Infinity}', '{"a": {"b": -Infinity}}', '{"a": 1e400}'],
)
def test_load_rejects_non_finite_numbers(store: DictionaryStore, tmp_path: Path, content: str) -> None:
    path = tmp_path / "en.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(MalformedJSONError, match="invalid JSON"):
        store.load(path)


def test_load_keeps_finite_floats(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_text('{"ratio": 1.5, "big": 1e300}', encoding="utf-8")
    assert store.load(path) == {"ratio": 1.5, "big": 1e300}


def test_dumps_refuses_non_finite_numbers(store: DictionaryStore) -> None:
    with pytest.raises(ValueError):
        store.dumps({"a": float("nan")})


def test_load_directory_is_filesystem_error(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.mkdir()
    with pytest.raises(FilesystemError) as exc:
        store.load(path)
    assert isinstance(exc.value.cause, OSError)


def test_save_creates_parents_and_formats(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "deep" / "er" / "fr.json"
    store.save(path, {"nav": {"home": "Accueil"}})
    assert path.read_text(encoding="utf-8") == '{\n  "nav": {\n    "home": "Accueil"\n  }\n}\n'


def test_save_empty_dictionary(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    store.save(path, {})
    assert path.read_text(encoding="utf-8") == "{}\n"


def test_save_keeps_non_ascii(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "fr.json"
    store.save(path, {"title": "Été à Montréal"})
    text = path.read_text(encoding="utf-8")
    assert "Été à Montréal" in text
    assert text.endswith("}\n") and not text.endswith("\n\n")


def test_save_custom_indent(tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    DictionaryStore(indent=4).save(path, {"a": "b"})
    assert path.read_text(encoding="utf-8") == '{\n    "a": "b"\n}\n'


def test_save_overwrites_and_leaves_no_temp_files(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_text('{"old": "x"}', encoding="utf-8")
    store.save(path, {"new": "y"})
    assert json.loads(path.read_text(encoding="utf-8")) == {"new": "y"}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["en.json"]


@pytest.mark.skipif(os.name != "posix", reason="file modes are POSIX only")
def test_save_preserves_mode(store: DictionaryStore, tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_text("{}", encoding="utf-8")
    path.chmod(0o640)
    store.save(path, {"a": "b"})
    assert path.stat().st_mode & 0o777 == 0o640


def test_save_parent_is_a_file(store: DictionaryStore, tmp_path: Path) -> None:
    blocker = tmp_path / "i18n"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(FilesystemError):
        store.save(blocker / "lang" / "en.json", {"a": "b"})


def test_save_all_writes_every_file(store: DictionaryStore, tmp_path: Path) -> None:
    en = tmp_path / "en.json"
    fr = tmp_path / "fr.json"
    store.save_all([(en, {"k": "Key"}), (fr, {"k": "Clé"})])
    assert json.loads(en.read_text(encoding="utf-8")) == {"k": "Key"}
    assert json.loads(fr.read_text(encoding="utf-8")) == {"k": "Clé"}


def test_save_all_stages_before_replacing(store: DictionaryStore, tmp_path: Path) -> None:
    en = tmp_path / "en.json"
    en.write_text('{"k": "old"}', encoding="utf-8")
    blocked = tmp_path / "blocker"
    blocked.write_text("", encoding="utf-8")

    with pytest.raises(FilesystemError):
        store.save_all([(en, {"k": "new"}), (blocked / "fr.json", {"k": "nouveau"})])

    assert json.loads(en.read_text(encoding="utf-8")) == {"k": "old"}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["blocker", "en.json"]
