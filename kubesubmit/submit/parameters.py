"""
Submission parameters.

Everything the orchestrator needs to know about one submission,
constructed once and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias

from kubesubmit.utils import freeze_mapping


@dataclass(frozen=True, slots=True)
class JavaMainAppResource:
    """A JVM primary resource (a jar, or the no-resource sentinel)."""

    primary_resource: str


@dataclass(frozen=True, slots=True)
class PythonMainAppResource:
    """A Python primary resource; never added to the jar list."""

    primary_resource: str


MainAppResource: TypeAlias = JavaMainAppResource | PythonMainAppResource


@dataclass(frozen=True, kw_only=True, slots=True)
class SubmissionParameters:
    """
    Identity and configuration of one application submission.

    Attributes:
        app_id: Generated unique application id
        resource_name_prefix: Prefix for names of created cluster resources
        app_name: Human readable application name
        main_class: Entry-point class
        app_args: Arguments passed to the entry point
        main_app_resource: Primary resource, or None when there is none
        conf: Full configuration key/value environment
    """

    app_id: str
    resource_name_prefix: str
    app_name: str
    main_class: str
    app_args: tuple[str, ...] = ()
    main_app_resource: MainAppResource | None = None
    conf: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "app_args", tuple(self.app_args))
        object.__setattr__(self, "conf", freeze_mapping(self.conf))
