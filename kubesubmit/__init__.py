"""
kubesubmit - driver spec preparation for submitting applications to Kubernetes.

Given a submission (application identity plus its configuration), kubesubmit:

- **Validates** reserved labels and dependency locations up front
- **Selects** the ordered configuration steps the submission needs
- **Folds** those immutable steps over an initial driver spec
- **Renders** the result into pod and service manifests for a cluster client

Quick Start:
    >>> from kubesubmit import SubmissionParameters, build_driver_spec, materialize
    >>>
    >>> params = SubmissionParameters(
    ...     app_id="spark-1234",
    ...     resource_name_prefix="job1-1234",
    ...     app_name="job1",
    ...     main_class="org.example.Main",
    ...     conf={"spark.jars": "hdfs:///libs/dep.jar"},
    ... )
    >>> spec = build_driver_spec(params)
    >>> manifests = materialize(params, spec).to_manifests()
"""

__version__ = "0.1.0"
__license__ = "MIT"

from kubesubmit.errors import DefectError, SubmissionError, ValidationError
from kubesubmit.submit import (
    DriverConfigOrchestrator,
    KubernetesDriverSpec,
    Pipeline,
    SubmissionParameters,
    build_driver_spec,
    materialize,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core
    "SubmissionParameters",
    "DriverConfigOrchestrator",
    "KubernetesDriverSpec",
    "Pipeline",
    "build_driver_spec",
    "materialize",
    # Errors
    "SubmissionError",
    "ValidationError",
    "DefectError",
]
