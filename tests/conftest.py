from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from i18nkeys.core import config


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> config.Settings:
    """Run every test against default settings, whatever the environment holds."""
    for name in ("LANG_DIR", "LANGUAGES", "INDENT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"I18N_{name}", raising=False)
    settings = config.Settings(_env_file=None)
    monkeypatch.setattr(config, "settings", settings)
    return settings


@pytest.fixture
def lang_dir(tmp_path: Path) -> Path:
    return tmp_path / "i18n" / "lang"


@pytest.fixture
def write_json():
    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by setup_logging so they never outlive a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_i18nkeys", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
