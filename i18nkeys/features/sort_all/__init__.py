from __future__ import annotations

import argparse

from .handlers import USAGE, SortResult, run, sort_all

__all__ = ["USAGE", "SortResult", "register", "run", "sort_all"]


def register(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root_path", help="Project root holding i18n/lang/")
    parser.set_defaults(handler=run)
