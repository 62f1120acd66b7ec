"""
Helpers for reading structured values out of the flat configuration.
"""

from __future__ import annotations

from collections.abc import Mapping


def parse_prefixed_key_values(conf: Mapping[str, str], prefix: str) -> dict[str, str]:
    """
    Collect every entry whose key starts with ``prefix``.

    The prefix is stripped from the returned keys:

        >>> parse_prefixed_key_values({"a.b.team": "x", "c": "y"}, "a.b.")
        {'team': 'x'}
    """
    return {
        key[len(prefix):]: value
        for key, value in conf.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }


def get_list(conf: Mapping[str, str], key: str) -> list[str]:
    """Split a comma-separated configuration value, dropping blank entries."""
    raw = conf.get(key)
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]
