"""
Configuration step abstraction.

A step is an immutable value that turns one partial driver spec into
the next. Steps capture everything they need at construction time and
share no mutable state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kubesubmit.submit.spec import KubernetesDriverSpec


class StepKind(str, Enum):
    """The closed set of configuration steps the orchestrator selects from."""

    SERVICE_BOOTSTRAP = "service_bootstrap"
    DEPENDENCY_RESOLUTION = "dependency_resolution"
    MOUNT_SECRETS = "mount_secrets"


class ConfigurationStep(ABC):
    """
    Base class for driver configuration steps.

    Subclasses must implement:
    - kind: Which step variant this is
    - apply(): The spec transformation

    Steps do not validate user input; that happens in the orchestrator
    before any step is built. A step only raises DefectError when its
    captured data is malformed.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def kind(self) -> StepKind:
        """Variant tag, used in logging and for inspecting selected steps."""
        ...

    @property
    def name(self) -> str:
        return self.kind.value

    @abstractmethod
    def apply(self, spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        """
        Transform a partial driver spec.

        Args:
            spec: Spec produced by the previous step

        Returns:
            A new spec; the input is left untouched
        """
        ...
