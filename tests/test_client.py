"""
End-to-end tests: step selection, pipeline run, and materialization.
"""
import pytest

from kubesubmit import build_driver_spec, constants, materialize
from kubesubmit.errors import ValidationError
from kubesubmit.submit import JavaMainAppResource


class TestBuildDriverSpec:
    def test_minimal_submission(self, make_params, clock, app_id):
        spec = build_driver_spec(make_params(), clock=clock)

        assert spec.driver_pod.labels == {
            constants.SPARK_APP_ID_LABEL: app_id,
            constants.SPARK_ROLE_LABEL: constants.SPARK_POD_DRIVER_ROLE,
        }
        assert [r.name for r in spec.other_resources] == ["job1-a1b2c3-driver-svc"]
        assert spec.driver_pod.volumes == ()

    def test_full_submission(self, make_params, clock):
        params = make_params(
            {
                f"{constants.KUBERNETES_DRIVER_LABEL_PREFIX}team": "x",
                f"{constants.KUBERNETES_DRIVER_SECRETS_PREFIX}db": "/mnt/db",
                constants.SPARK_JARS: "hdfs:///libs/dep.jar",
            },
            main_app_resource=JavaMainAppResource("local:///opt/app.jar"),
        )

        spec = build_driver_spec(params, clock=clock)

        assert spec.driver_pod.labels["team"] == "x"
        assert spec.driver_conf[constants.SPARK_JARS] == "hdfs:///libs/dep.jar,/opt/app.jar"
        assert spec.driver_container.get_env(constants.ENV_MOUNTED_CLASSPATH) == (
            "/var/spark-data/spark-jars/dep.jar:/opt/app.jar"
        )
        assert [v.name for v in spec.driver_pod.volumes] == ["db-volume"]

    def test_rebuilding_yields_equal_spec(self, make_params, clock):
        params = make_params({constants.SPARK_FILES: "hdfs:///f.txt"})

        assert build_driver_spec(params, clock=clock) == build_driver_spec(params, clock=clock)

    def test_invalid_submission_raises(self, make_params, clock):
        params = make_params(main_app_resource=JavaMainAppResource("app.jar"))

        with pytest.raises(ValidationError):
            build_driver_spec(params, clock=clock)


class TestMaterialize:
    def test_attaches_container_and_identity(self, make_params, clock):
        params = make_params(
            {
                constants.KUBERNETES_NAMESPACE: "spark",
                constants.DRIVER_CONTAINER_IMAGE: "spark:3.5",
            }
        )
        submission = materialize(params, build_driver_spec(params, clock=clock))

        pod = submission.driver_pod
        assert pod.name == "job1-a1b2c3-driver"
        assert pod.namespace == "spark"
        assert [c.image for c in pod.containers] == ["spark:3.5"]
        assert submission.driver_conf[constants.DRIVER_HOST_KEY] == (
            "job1-a1b2c3-driver-svc.spark.svc"
        )

    def test_mounts_hadoop_token_when_configured(self, make_params, clock):
        params = make_params({constants.KERBEROS_TOKEN_SECRET_NAME: "tokens"})
        submission = materialize(params, build_driver_spec(params, clock=clock))

        pod = submission.driver_pod
        assert [(v.name, v.secret_name) for v in pod.volumes] == [("hadoop-secret", "tokens")]
        assert pod.containers[0].get_env(constants.ENV_HADOOP_TOKEN_FILE_LOCATION) == (
            constants.SPARK_APP_HADOOP_TOKEN_FILE_PATH
        )

    def test_no_hadoop_token_by_default(self, make_params, clock):
        params = make_params()
        submission = materialize(params, build_driver_spec(params, clock=clock))

        assert submission.driver_pod.volumes == ()
        assert submission.driver_pod.containers[0].env == ()

    def test_to_manifests(self, make_params, clock):
        params = make_params()
        manifests = materialize(params, build_driver_spec(params, clock=clock)).to_manifests()

        assert [m["kind"] for m in manifests] == ["Pod", "Service"]
        assert manifests[1]["spec"]["clusterIP"] == "None"
        assert manifests[0]["spec"]["containers"][0]["name"] == constants.DRIVER_CONTAINER_NAME
