"""Merging of a user's YAML settings over the built-in defaults."""

from typing import Any

# List-valued keys where user entries extend the defaults.
ADDITIVE_KEYS = frozenset({"exclude"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``; neither input is modified.

    Nested sections such as ``anchors`` merge key by key. A list in
    ``update`` replaces the default list unless its key is additive, so
    ``exclude: [drafts/**]`` keeps ``.git/**`` excluded.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(value, list):
            extended = list(current) if isinstance(current, list) else []
            for item in value:
                if item not in extended:
                    extended.append(item)
            merged[key] = extended
        else:
            merged[key] = value
    return merged
