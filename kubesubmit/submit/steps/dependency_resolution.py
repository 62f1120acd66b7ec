"""
Dependency resolution step.

Rewrites the driver configuration and classpath so remote and
container-local dependencies are referenced where they will live inside
the container. Nothing is fetched here.
"""

from __future__ import annotations

from dataclasses import dataclass

from kubesubmit import constants
from kubesubmit.errors import DefectError
from kubesubmit.submit.spec import KubernetesDriverSpec
from kubesubmit.submit.uris import resolve_file_path, resolve_file_uri

from .base import ConfigurationStep, StepKind


@dataclass(frozen=True, kw_only=True, slots=True)
class DependencyResolutionStep(ConfigurationStep):
    spark_jars: tuple[str, ...]
    spark_files: tuple[str, ...]
    jars_download_path: str = constants.DEFAULT_JARS_DOWNLOAD_DIR
    files_download_path: str = constants.DEFAULT_FILES_DOWNLOAD_DIR

    @property
    def kind(self) -> StepKind:
        return StepKind.DEPENDENCY_RESOLUTION

    def apply(self, spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        if not self.jars_download_path or not self.files_download_path:
            raise DefectError(self.name, "Download paths must be non-empty")

        resolved_conf: dict[str, str] = {}
        if self.spark_jars:
            resolved_conf[constants.SPARK_JARS] = ",".join(
                resolve_file_uri(uri) for uri in self.spark_jars
            )
        if self.spark_files:
            resolved_conf[constants.SPARK_FILES] = ",".join(
                resolve_file_uri(uri) for uri in self.spark_files
            )

        container = spec.driver_container
        classpath = [resolve_file_path(uri, self.jars_download_path) for uri in self.spark_jars]
        if classpath:
            container = container.with_env(
                constants.ENV_MOUNTED_CLASSPATH,
                constants.CLASSPATH_SEPARATOR.join(classpath),
            )

        return spec.with_conf(resolved_conf).derive(driver_container=container)

