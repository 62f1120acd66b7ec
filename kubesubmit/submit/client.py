"""
Submission client facade.

Builds the final driver spec and renders it into manifests for the
cluster client. Creating the resources is left to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from kubesubmit.clock import Clock
from kubesubmit.config import SubmissionSettings
from kubesubmit.k8s.model import Pod
from kubesubmit.k8s.secrets import HADOOP_TOKEN_SECRET_MOUNT

from .orchestrator import DriverConfigOrchestrator
from .parameters import SubmissionParameters
from .spec import KubernetesDriverSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True, slots=True)
class DriverSubmission:
    """Fully resolved driver pod plus the resources created with it."""

    driver_pod: Pod
    driver_conf: dict[str, str]
    other_resources: tuple[dict[str, Any], ...] = ()

    def to_manifests(self) -> list[dict[str, Any]]:
        """Pod manifest first, then the ancillary resources."""
        return [self.driver_pod.to_dict(), *self.other_resources]


def build_driver_spec(
    params: SubmissionParameters,
    *,
    clock: Clock | None = None,
) -> KubernetesDriverSpec:
    """
    Select and apply every configuration step for a submission.

    Raises:
        ValidationError: If the submission is rejected
    """
    orchestrator = DriverConfigOrchestrator(params, clock=clock)
    pipeline = orchestrator.build_pipeline()
    return pipeline.run(KubernetesDriverSpec.initial_spec(params.conf))


def materialize(
    params: SubmissionParameters,
    spec: KubernetesDriverSpec,
) -> DriverSubmission:
    """
    Attach the driver container to the pod and render the submission.

    When a Hadoop token secret is configured it is mounted into the
    driver as well.
    """
    settings = SubmissionSettings.from_conf(params.conf)
    token_secret = settings.hadoop_token_secret_name

    container = spec.driver_container
    if settings.driver_container_image:
        container = container.with_image(settings.driver_container_image)
    container = HADOOP_TOKEN_SECRET_MOUNT.configure_container(token_secret, container)
    pod = HADOOP_TOKEN_SECRET_MOUNT.configure_pod(token_secret, spec.driver_pod)

    pod_name = pod.name or f"{params.resource_name_prefix}-driver"
    pod = pod.with_identity(pod_name, settings.namespace).with_container(container)

    if token_secret is not None:
        logger.info(f"[client] Mounting Hadoop token secret '{token_secret}' into {pod_name}")

    return DriverSubmission(
        driver_pod=pod,
        driver_conf=dict(spec.driver_conf),
        other_resources=tuple(r.to_dict() for r in spec.other_resources),
    )
