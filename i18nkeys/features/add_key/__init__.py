from __future__ import annotations

import argparse

from .handlers import USAGE, AddKeyResult, add_key, run

__all__ = ["USAGE", "AddKeyResult", "add_key", "register", "run"]


def register(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root_path", help="Project root holding i18n/lang/")
    parser.add_argument("key_path", help="Dotted key, e.g. nav.home")
    parser.add_argument("fr_value", help="French translation")
    parser.add_argument("en_value", help="English translation")
    parser.set_defaults(handler=run)
