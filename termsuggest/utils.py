"""Utilities."""

from typing import Any

__all__ = ["merge"]


def merge(merged: dict[str, Any], obj2: dict[str, Any]) -> dict[str, Any]:
    """Merge the content of obj2 into merged.

    Nested dictionaries are merged recursively and lists are concatenated,
    other values of obj2 replace those of merged.

    Eg:
        merge({"spec_paths": ["a"]}, {"spec_paths": ["b"]}) == {"spec_paths": ["a", "b"]}

    """
    for key, value in obj2.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merge(merged[key], value)
        elif key in merged and isinstance(merged[key], list) and isinstance(value, list):
            merged[key] += value
        else:
            merged[key] = value
    return merged
