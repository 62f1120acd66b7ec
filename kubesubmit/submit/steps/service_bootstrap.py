"""
Driver service bootstrap step.

Gives the driver a stable network identity: a headless service selecting
the driver pod, and a driver host derived from the service name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from kubesubmit import constants
from kubesubmit.clock import Clock
from kubesubmit.config import SubmissionSettings
from kubesubmit.errors import DefectError
from kubesubmit.k8s.model import Service, ServicePort
from kubesubmit.submit.spec import KubernetesDriverSpec
from kubesubmit.utils import freeze_mapping

from .base import ConfigurationStep, StepKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True, slots=True)
class DriverServiceBootstrapStep(ConfigurationStep):
    """
    Attaches the driver labels and the driver service to the driver spec.

    The service is named ``<prefix>-driver-svc``. Names longer than the
    Kubernetes limit fall back to ``spark-<millis>-driver-svc`` using the
    injected clock.
    """

    resource_name_prefix: str
    driver_labels: Mapping[str, str] = field(hash=False)
    settings: SubmissionSettings
    clock: Clock = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "driver_labels", freeze_mapping(self.driver_labels))

    @property
    def kind(self) -> StepKind:
        return StepKind.SERVICE_BOOTSTRAP

    def resolve_service_name(self) -> str:
        preferred = f"{self.resource_name_prefix}{constants.DRIVER_SVC_POSTFIX}"
        if len(preferred) <= constants.MAX_SERVICE_NAME_LENGTH:
            return preferred

        fallback = f"spark-{self.clock.get_time_millis()}{constants.DRIVER_SVC_POSTFIX}"
        logger.warning(
            f"[service_bootstrap] Driver service name '{preferred}' is too long "
            f"(must be <= {constants.MAX_SERVICE_NAME_LENGTH} characters), "
            f"falling back to '{fallback}'"
        )
        return fallback

    def apply(self, spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        if not self.resource_name_prefix:
            raise DefectError(self.name, "Resource name prefix must be non-empty")
        if not self.driver_labels:
            raise DefectError(self.name, "Driver labels must be non-empty")

        service_name = self.resolve_service_name()
        namespace = self.settings.namespace
        driver_port = self.settings.driver_port
        block_manager_port = self.settings.block_manager_port

        service = Service(
            name=service_name,
            namespace=namespace,
            selector=dict(self.driver_labels),
            ports=(
                ServicePort(
                    name=constants.DRIVER_PORT_NAME,
                    port=driver_port,
                    target_port=driver_port,
                ),
                ServicePort(
                    name=constants.BLOCK_MANAGER_PORT_NAME,
                    port=block_manager_port,
                    target_port=block_manager_port,
                ),
            ),
        )

        driver_hostname = f"{service_name}.{namespace}.svc"
        logger.debug(f"[service_bootstrap] Driver host resolved to {driver_hostname}")

        return spec.with_conf(
            {
                constants.DRIVER_HOST_KEY: driver_hostname,
                constants.DRIVER_PORT_KEY: str(driver_port),
                constants.DRIVER_BLOCK_MANAGER_PORT_KEY: str(block_manager_port),
            }
        ).derive(
            driver_pod=spec.driver_pod.with_labels(self.driver_labels),
            other_resources=spec.other_resources + (service,),
        )
