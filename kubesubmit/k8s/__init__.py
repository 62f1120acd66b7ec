"""
Kubernetes resource values and secret mounting helpers.
"""

from .model import Container, EnvVar, Pod, Service, ServicePort, Volume, VolumeMount
from .secrets import (
    HADOOP_TOKEN_SECRET_MOUNT,
    MountSecretsBootstrap,
    SecretMountAdapter,
    secret_env_name,
)

__all__ = [
    "Container",
    "EnvVar",
    "Pod",
    "Service",
    "ServicePort",
    "Volume",
    "VolumeMount",
    "SecretMountAdapter",
    "MountSecretsBootstrap",
    "HADOOP_TOKEN_SECRET_MOUNT",
    "secret_env_name",
]
