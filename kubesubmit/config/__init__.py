"""
kubesubmit Configuration

Typed settings and prefix parsing over the submission configuration.
"""

from .parsing import get_list, parse_prefixed_key_values
from .schemas import SubmissionSettings

__all__ = [
    "SubmissionSettings",
    "get_list",
    "parse_prefixed_key_values",
]
