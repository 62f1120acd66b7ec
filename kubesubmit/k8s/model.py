"""
Immutable Kubernetes resource values.

Every edit returns a new value; nothing here mutates in place. Resources
render to plain manifest dictionaries with to_dict() for the cluster
client.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from kubesubmit.utils import freeze_mapping


@dataclass(frozen=True, kw_only=True, slots=True)
class EnvVar:
    name: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True, kw_only=True, slots=True)
class VolumeMount:
    name: str
    mount_path: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "mountPath": self.mount_path}


@dataclass(frozen=True, kw_only=True, slots=True)
class Volume:
    """A pod volume backed by a secret."""

    name: str
    secret_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "secret": {"secretName": self.secret_name}}


@dataclass(frozen=True, kw_only=True, slots=True)
class Container:
    name: str = ""
    image: str | None = None
    env: tuple[EnvVar, ...] = ()
    volume_mounts: tuple[VolumeMount, ...] = ()

    def with_image(self, image: str) -> Container:
        return replace(self, image=image)

    def with_env(self, name: str, value: str) -> Container:
        """Add an environment variable, replacing any existing one of the same name."""
        kept = tuple(e for e in self.env if e.name != name)
        return replace(self, env=kept + (EnvVar(name=name, value=value),))

    def with_volume_mount(self, name: str, mount_path: str) -> Container:
        return replace(
            self,
            volume_mounts=self.volume_mounts + (VolumeMount(name=name, mount_path=mount_path),),
        )

    def get_env(self, name: str) -> str | None:
        for env in self.env:
            if env.name == name:
                return env.value
        return None

    def to_dict(self) -> dict[str, Any]:
        manifest: dict[str, Any] = {"name": self.name}
        if self.image:
            manifest["image"] = self.image
        if self.env:
            manifest["env"] = [e.to_dict() for e in self.env]
        if self.volume_mounts:
            manifest["volumeMounts"] = [m.to_dict() for m in self.volume_mounts]
        return manifest


@dataclass(frozen=True, kw_only=True, slots=True)
class Pod:
    name: str = ""
    namespace: str | None = None
    labels: Mapping[str, str] = field(default_factory=dict, hash=False)
    volumes: tuple[Volume, ...] = ()
    containers: tuple[Container, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", freeze_mapping(self.labels))

    def with_identity(self, name: str, namespace: str | None) -> Pod:
        return replace(self, name=name, namespace=namespace)

    def with_labels(self, labels: Mapping[str, str]) -> Pod:
        """Merge labels into the pod; incoming values win."""
        return replace(self, labels={**self.labels, **labels})

    def with_volume(self, name: str, secret_name: str) -> Pod:
        return replace(self, volumes=self.volumes + (Volume(name=name, secret_name=secret_name),))

    def with_container(self, container: Container) -> Pod:
        return replace(self, containers=self.containers + (container,))

    def to_dict(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {"name": self.name, "labels": dict(self.labels)}
        if self.namespace:
            metadata["namespace"] = self.namespace
        spec: dict[str, Any] = {"containers": [c.to_dict() for c in self.containers]}
        if self.volumes:
            spec["volumes"] = [v.to_dict() for v in self.volumes]
        return {"apiVersion": "v1", "kind": "Pod", "metadata": metadata, "spec": spec}


@dataclass(frozen=True, kw_only=True, slots=True)
class ServicePort:
    name: str
    port: int
    target_port: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "port": self.port, "targetPort": self.target_port}


@dataclass(frozen=True, kw_only=True, slots=True)
class Service:
    """A headless service fronting the driver pod."""

    name: str
    namespace: str | None = None
    selector: Mapping[str, str] = field(default_factory=dict, hash=False)
    ports: tuple[ServicePort, ...] = ()
    cluster_ip: str = "None"

    def __post_init__(self) -> None:
        object.__setattr__(self, "selector", freeze_mapping(self.selector))

    def to_dict(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {"name": self.name}
        if self.namespace:
            metadata["namespace"] = self.namespace
        return {
            "apiVersion": "v1",
            "kind": "Service",
            "metadata": metadata,
            "spec": {
                "clusterIP": self.cluster_ip,
                "selector": dict(self.selector),
                "ports": [p.to_dict() for p in self.ports],
            },
        }
