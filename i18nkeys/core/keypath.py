"""Dotted key paths into nested translation dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

Dictionary = Dict[str, Any]


@dataclass(frozen=True)
class Leaf:
    value: Any


@dataclass(frozen=True)
class Node:
    children: Dictionary


def classify(value: Any) -> Union[Leaf, Node]:
    """Tag a dictionary value as a nested Node or a terminal Leaf.

    Only JSON objects are nodes. Strings, numbers, booleans, null and lists
    are all leaves.
    """
    if isinstance(value, dict):
        return Node(value)
    return Leaf(value)


def split_key_path(key_path: str) -> List[str]:
    # Empty segments are kept: "a..b" addresses d["a"][""]["b"]
    return key_path.split(".")


def set_nested_key(data: Dictionary, key_path: str, value: Any) -> List[str]:
    """Assign ``value`` at ``key_path`` inside ``data``, creating parents.

    Intermediate segments that are missing, or that hold a leaf, become
    empty dictionaries. The final segment is overwritten unconditionally.

    Returns the dotted paths of leaves that were replaced by a dictionary.
    """
    segments = split_key_path(key_path)
    current = data
    replaced: List[str] = []

    for depth, segment in enumerate(segments[:-1]):
        if segment not in current:
            current[segment] = {}
        else:
            tagged = classify(current[segment])
            if isinstance(tagged, Leaf):
                replaced.append(".".join(segments[: depth + 1]))
                current[segment] = {}
        current = current[segment]

    current[segments[-1]] = value
    return replaced
