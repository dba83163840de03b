from __future__ import annotations

from typing import Any


def sort_keys(node: Any) -> Any:
    """Return a copy of ``node`` with dictionary keys sorted at every level.

    Anything that is not a dict is returned as is. Lists count as leaves, so
    their order is kept and dictionaries inside them are left alone.
    """
    if not isinstance(node, dict):
        return node
    return {key: sort_keys(node[key]) for key in sorted(node)}
