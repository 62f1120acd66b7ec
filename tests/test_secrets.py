"""
Tests for SecretMountAdapter and the Hadoop token mount.
"""
import pytest

from kubesubmit import constants
from kubesubmit.k8s import HADOOP_TOKEN_SECRET_MOUNT, Container, Pod, SecretMountAdapter


@pytest.fixture
def pod():
    return Pod(name="driver", labels={"team": "x"})


@pytest.fixture
def container():
    return Container(name=constants.DRIVER_CONTAINER_NAME)


class TestSecretMountAdapter:
    def test_absent_secret_leaves_pod_unchanged(self, pod):
        assert HADOOP_TOKEN_SECRET_MOUNT.configure_pod(None, pod) is pod

    def test_absent_secret_leaves_container_unchanged(self, container):
        assert HADOOP_TOKEN_SECRET_MOUNT.configure_container(None, container) is container

    def test_adds_secret_volume_to_pod(self, pod):
        result = HADOOP_TOKEN_SECRET_MOUNT.configure_pod("token-secret", pod)

        assert len(result.volumes) == 1
        assert result.volumes[0].name == constants.SPARK_APP_HADOOP_SECRET_VOLUME_NAME
        assert result.volumes[0].secret_name == "token-secret"
        assert result.labels == {"team": "x"}
        assert pod.volumes == ()

    def test_adds_mount_and_env_to_container(self, container):
        result = HADOOP_TOKEN_SECRET_MOUNT.configure_container("token-secret", container)

        assert result.volume_mounts[0].name == constants.SPARK_APP_HADOOP_SECRET_VOLUME_NAME
        assert result.volume_mounts[0].mount_path == "/mnt/secrets/hadoop-credentials"
        assert result.get_env(constants.ENV_HADOOP_TOKEN_FILE_LOCATION) == (
            "/mnt/secrets/hadoop-credentials/hadoop-token-file"
        )
        assert container.env == ()

    def test_env_defaults_to_mount_dir(self, container):
        adapter = SecretMountAdapter(volume_name="creds", mount_dir="/mnt/creds", env_name="CREDS")

        result = adapter.configure_container("creds-secret", container)

        assert result.get_env("CREDS") == "/mnt/creds"

    def test_manifest_rendering(self, pod, container):
        pod = HADOOP_TOKEN_SECRET_MOUNT.configure_pod("token-secret", pod)
        container = HADOOP_TOKEN_SECRET_MOUNT.configure_container("token-secret", container)

        manifest = pod.with_container(container).to_dict()

        assert manifest["spec"]["volumes"] == [
            {"name": "hadoop-secret", "secret": {"secretName": "token-secret"}}
        ]
        assert manifest["spec"]["containers"][0]["volumeMounts"] == [
            {"name": "hadoop-secret", "mountPath": "/mnt/secrets/hadoop-credentials"}
        ]

    def test_is_immutable(self):
        with pytest.raises(Exception):  # frozen dataclass
            HADOOP_TOKEN_SECRET_MOUNT.mount_dir = "/elsewhere"


class TestPodLabels:
    def test_labels_are_read_only(self, pod):
        with pytest.raises(TypeError):
            pod.labels["team"] = "y"

    def test_with_labels_copies_source(self, pod):
        labels = {"team": "y"}
        result = pod.with_labels(labels)
        labels["team"] = "z"

        assert result.labels == {"team": "y"}
        assert pod.labels == {"team": "x"}
