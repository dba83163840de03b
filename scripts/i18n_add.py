#!/usr/bin/env python3
"""Add a translation key: i18n_add.py <root_path> <key_path> <fr_value> <en_value>"""
from __future__ import annotations

import sys

from i18nkeys.main import add_key_main


if __name__ == "__main__":
    sys.exit(add_key_main())
