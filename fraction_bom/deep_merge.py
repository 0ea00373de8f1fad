"""Overlay a user configuration onto the registry conventions."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``update`` laid over it.

    Sections such as ``properties`` or ``reserved.spi`` merge key by key, so an
    override file only names the conventions it changes. Anything that is not
    a mapping on both sides, such as the ``fraction_manifest`` segment list,
    is replaced wholesale.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
