"""
Exceptions for kubesubmit.

Two kinds of failure exist:
- ValidationError: the submission itself is invalid (user input)
- DefectError: internal state is malformed (a bug, never retried)
"""
from __future__ import annotations

from collections.abc import Sequence


class SubmissionError(Exception):
    """Base class for all submission preparation errors."""

    pass


class ValidationError(SubmissionError):
    """
    Raised when submission parameters are rejected.

    Raised before any configuration step runs, so no partial spec
    is ever produced for an invalid submission.

    Attributes:
        offending: The keys or locators that caused the rejection
    """

    def __init__(self, message: str, offending: Sequence[str] = ()):
        self.offending = tuple(offending)
        super().__init__(message)


class DefectError(SubmissionError):
    """Raised when a step or the pipeline receives malformed internal state."""

    def __init__(self, component: str, message: str):
        self.component = component
        super().__init__(f"[{component}] {message}")
