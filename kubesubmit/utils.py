"""
kubesubmit Utilities
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def freeze_mapping(mapping: Mapping[str, str]) -> Mapping[str, str]:
    """Read-only copy of a mapping; later edits to the source do not leak in."""
    return MappingProxyType(dict(mapping))
