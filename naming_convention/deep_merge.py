"""Logic for overlaying user configuration on the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return `base` overlaid with `update`, descending into nested sections.

    A key holding a mapping on both sides is merged key by key; any other value
    from `update` wins. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged
