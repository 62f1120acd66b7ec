"""
Secret mounting for the driver pod.

SecretMountAdapter captures the shape shared by every "optional named
secret" requirement: one pod volume backed by the secret, one matching
volume mount on the container, and one environment variable telling the
process where the secret lives. Absence of the secret is a no-op.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from kubesubmit import constants
from kubesubmit.errors import DefectError
from kubesubmit.k8s.model import Container, Pod
from kubesubmit.utils import freeze_mapping

_ENV_UNSAFE = re.compile(r"[^A-Za-z0-9_]")


@dataclass(frozen=True, kw_only=True, slots=True)
class SecretMountAdapter:
    """
    Conditionally wires one secret into a pod and container.

    Attributes:
        volume_name: Name of the pod volume backed by the secret
        mount_dir: Where the volume is mounted in the container
        env_name: Environment variable pointing at the mounted secret
        env_value: Value of env_name (defaults to mount_dir)
    """

    volume_name: str
    mount_dir: str
    env_name: str
    env_value: str | None = None

    def configure_pod(self, secret_name: str | None, pod: Pod) -> Pod:
        if secret_name is None:
            return pod
        return pod.with_volume(self.volume_name, secret_name)

    def configure_container(self, secret_name: str | None, container: Container) -> Container:
        if secret_name is None:
            return container
        env_value = self.env_value if self.env_value is not None else self.mount_dir
        return container.with_volume_mount(self.volume_name, self.mount_dir).with_env(
            self.env_name, env_value
        )


HADOOP_TOKEN_SECRET_MOUNT = SecretMountAdapter(
    volume_name=constants.SPARK_APP_HADOOP_SECRET_VOLUME_NAME,
    mount_dir=constants.SPARK_APP_HADOOP_CREDENTIALS_BASE_DIR,
    env_name=constants.ENV_HADOOP_TOKEN_FILE_LOCATION,
    env_value=constants.SPARK_APP_HADOOP_TOKEN_FILE_PATH,
)


def secret_env_name(secret_name: str) -> str:
    """Environment variable announcing where a user secret is mounted."""
    return constants.ENV_MOUNTED_SECRET_PREFIX + _ENV_UNSAFE.sub("_", secret_name).upper()


@dataclass(frozen=True, slots=True)
class MountSecretsBootstrap:
    """
    Mounts user secrets (secret name -> mount path) into the driver.

    Each entry is independent and goes through its own SecretMountAdapter.
    """

    secret_names_to_mount_paths: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "secret_names_to_mount_paths", freeze_mapping(self.secret_names_to_mount_paths)
        )

    def _adapter(self, secret_name: str, mount_path: str) -> SecretMountAdapter:
        if not secret_name or not mount_path:
            raise DefectError(
                "mount_secrets",
                f"Secret '{secret_name}' requires a non-empty name and mount path",
            )
        return SecretMountAdapter(
            volume_name=f"{secret_name}{constants.SECRET_VOLUME_SUFFIX}",
            mount_dir=mount_path,
            env_name=secret_env_name(secret_name),
        )

    def add_secret_volumes(self, pod: Pod) -> Pod:
        for secret_name, mount_path in self.secret_names_to_mount_paths.items():
            pod = self._adapter(secret_name, mount_path).configure_pod(secret_name, pod)
        return pod

    def mount_secrets(self, container: Container) -> Container:
        for secret_name, mount_path in self.secret_names_to_mount_paths.items():
            container = self._adapter(secret_name, mount_path).configure_container(
                secret_name, container
            )
        return container
