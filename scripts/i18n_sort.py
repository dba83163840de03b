#!/usr/bin/env python3
"""Sort both translation dictionaries: i18n_sort.py <root_path>"""
from __future__ import annotations

import sys

from i18nkeys.main import sort_all_main


if __name__ == "__main__":
    sys.exit(sort_all_main())
