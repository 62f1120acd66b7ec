"""
Driver Configuration Orchestrator.

Works out the complete ordered list of configuration steps needed to
build the driver spec for one submission:

    DriverServiceBootstrapStep            (always)
        -> DependencyResolutionStep       (only when jars or files exist)
        -> DriverMountSecretsStep         (only when secrets are declared)

All user input is validated here, before any step is constructed.
"""
from __future__ import annotations

import logging

from kubesubmit import constants
from kubesubmit.clock import Clock, SystemClock
from kubesubmit.config import SubmissionSettings, get_list, parse_prefixed_key_values
from kubesubmit.errors import ValidationError
from kubesubmit.k8s.secrets import MountSecretsBootstrap, secret_env_name

from .parameters import JavaMainAppResource, SubmissionParameters
from .pipeline import Pipeline, PipelineBuilder
from .steps import (
    ConfigurationStep,
    DependencyResolutionStep,
    DriverMountSecretsStep,
    DriverServiceBootstrapStep,
)
from .uris import find_submission_local_files

logger = logging.getLogger(__name__)


class DriverConfigOrchestrator:
    """
    Selects the configuration steps for a submission.

    The orchestrator is a pure decision function: the same parameters
    always yield equal steps in the same order. The clock is only handed
    to the service bootstrap step for its own later use.

    Example:
        orchestrator = DriverConfigOrchestrator(params)
        steps = orchestrator.get_all_configuration_steps()
        spec = orchestrator.build_pipeline().run(
            KubernetesDriverSpec.initial_spec(params.conf)
        )
    """

    def __init__(self, params: SubmissionParameters, *, clock: Clock | None = None):
        """
        Args:
            params: The submission to plan
            clock: Clock for the service bootstrap step (system clock if omitted)
        """
        self._params = params
        self._clock = clock if clock is not None else SystemClock()

    @property
    def params(self) -> SubmissionParameters:
        return self._params

    def get_all_configuration_steps(self) -> tuple[ConfigurationStep, ...]:
        """
        Return the ordered configuration steps for this submission.

        Raises:
            ValidationError: If custom labels use a reserved key, a secret
                declaration is unusable, a dependency refers to the local
                filesystem, or a setting is invalid
        """
        steps = self._select_steps().steps
        logger.info(
            f"[orchestrator] Selected {len(steps)} steps for {self._params.app_id}: "
            f"{[s.name for s in steps]}"
        )
        return steps

    def build_pipeline(self) -> Pipeline:
        """Select the steps and wrap them in a runnable pipeline."""
        return self._select_steps().build()

    def _select_steps(self) -> PipelineBuilder:
        params = self._params
        conf = params.conf

        driver_custom_labels = parse_prefixed_key_values(
            conf, constants.KUBERNETES_DRIVER_LABEL_PREFIX
        )
        for reserved in constants.RESERVED_LABEL_KEYS:
            if reserved in driver_custom_labels:
                raise ValidationError(
                    f"Label with key {reserved} is not allowed as it is reserved "
                    "for Spark bookkeeping operations.",
                    offending=[f"{constants.KUBERNETES_DRIVER_LABEL_PREFIX}{reserved}"],
                )

        secret_names_to_mount_paths = parse_prefixed_key_values(
            conf, constants.KUBERNETES_DRIVER_SECRETS_PREFIX
        )
        _validate_secret_mounts(secret_names_to_mount_paths)

        all_driver_labels = {
            **driver_custom_labels,
            constants.SPARK_APP_ID_LABEL: params.app_id,
            constants.SPARK_ROLE_LABEL: constants.SPARK_POD_DRIVER_ROLE,
        }

        settings = SubmissionSettings.from_conf(conf)

        spark_jars = get_list(conf, constants.SPARK_JARS)
        additional_main_app_jar = self._additional_main_app_jar()
        if additional_main_app_jar is not None:
            spark_jars.append(additional_main_app_jar)
        spark_files = get_list(conf, constants.SPARK_FILES)

        local_dependencies = find_submission_local_files(spark_jars) + find_submission_local_files(
            spark_files
        )
        if local_dependencies:
            raise ValidationError(
                "Referencing application dependencies in the local file system is "
                f"not supported: {', '.join(local_dependencies)}",
                offending=local_dependencies,
            )

        return (
            PipelineBuilder()
            .add(
                DriverServiceBootstrapStep(
                    resource_name_prefix=params.resource_name_prefix,
                    driver_labels=all_driver_labels,
                    settings=settings,
                    clock=self._clock,
                )
            )
            .add_if(
                bool(spark_jars or spark_files),
                DependencyResolutionStep(
                    spark_jars=tuple(spark_jars),
                    spark_files=tuple(spark_files),
                    jars_download_path=settings.jars_download_dir,
                    files_download_path=settings.files_download_dir,
                ),
            )
            .add_if(
                bool(secret_names_to_mount_paths),
                DriverMountSecretsStep(MountSecretsBootstrap(secret_names_to_mount_paths)),
            )
        )

    def _additional_main_app_jar(self) -> str | None:
        resource = self._params.main_app_resource
        if isinstance(resource, JavaMainAppResource) and (
            resource.primary_resource != constants.NO_RESOURCE
        ):
            return resource.primary_resource
        return None


def _validate_secret_mounts(secret_names_to_mount_paths: dict[str, str]) -> None:
    """Reject secrets without a mount path and names that share an env var."""
    blank = [
        f"{constants.KUBERNETES_DRIVER_SECRETS_PREFIX}{name}"
        for name, mount_path in secret_names_to_mount_paths.items()
        if not name.strip() or not mount_path.strip()
    ]
    if blank:
        raise ValidationError(
            f"Secrets require a non-empty name and mount path: {', '.join(blank)}",
            offending=blank,
        )

    by_env_name: dict[str, list[str]] = {}
    for name in secret_names_to_mount_paths:
        by_env_name.setdefault(secret_env_name(name), []).append(
            f"{constants.KUBERNETES_DRIVER_SECRETS_PREFIX}{name}"
        )
    colliding = [key for keys in by_env_name.values() if len(keys) > 1 for key in keys]
    if colliding:
        raise ValidationError(
            "Secret names map to the same environment variable: " + ", ".join(colliding),
            offending=colliding,
        )
