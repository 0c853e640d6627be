"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - ``None`` in 'update' keeps the base value (an empty YAML key).
    - Everything else in 'update' replaces the base value.
    """
    result = base.copy()
    for key, value in update.items():
        if value is None and key in result:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
