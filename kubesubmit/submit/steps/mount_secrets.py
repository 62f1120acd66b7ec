"""
Driver secret mounting step.
"""

from __future__ import annotations

from dataclasses import dataclass

from kubesubmit.k8s.secrets import MountSecretsBootstrap
from kubesubmit.submit.spec import KubernetesDriverSpec

from .base import ConfigurationStep, StepKind


@dataclass(frozen=True, slots=True)
class DriverMountSecretsStep(ConfigurationStep):
    """Mounts user-specified secrets into the driver pod and container."""

    bootstrap: MountSecretsBootstrap

    @property
    def kind(self) -> StepKind:
        return StepKind.MOUNT_SECRETS

    def apply(self, spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        return spec.derive(
            driver_pod=self.bootstrap.add_secret_volumes(spec.driver_pod),
            driver_container=self.bootstrap.mount_secrets(spec.driver_container),
        )
