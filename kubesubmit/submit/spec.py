"""
The driver spec threaded through the configuration steps.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from kubesubmit import constants
from kubesubmit.k8s.model import Container, Pod, Service
from kubesubmit.utils import freeze_mapping


@dataclass(frozen=True, kw_only=True, slots=True)
class KubernetesDriverSpec:
    """
    Partial submission spec.

    Attributes:
        driver_pod: Pod-level description (labels, volumes)
        driver_container: The driver container, attached to the pod at materialization
        driver_conf: Resolved configuration handed to the driver process
        other_resources: Ancillary resources created alongside the pod
    """

    driver_pod: Pod = field(default_factory=Pod)
    driver_container: Container = field(
        default_factory=lambda: Container(name=constants.DRIVER_CONTAINER_NAME)
    )
    driver_conf: Mapping[str, str] = field(default_factory=dict, hash=False)
    other_resources: tuple[Service, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "driver_conf", freeze_mapping(self.driver_conf))

    @classmethod
    def initial_spec(cls, conf: Mapping[str, str]) -> KubernetesDriverSpec:
        """Empty spec carrying a copy of the submission configuration."""
        return cls(driver_conf=conf)

    def derive(self, **changes: Any) -> KubernetesDriverSpec:
        return replace(self, **changes)

    def with_conf(self, entries: Mapping[str, str]) -> KubernetesDriverSpec:
        """Overlay configuration entries; incoming values win."""
        return self.derive(driver_conf={**self.driver_conf, **entries})
