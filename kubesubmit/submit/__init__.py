"""
Driver submission preparation.

Core Components:
- SubmissionParameters: Immutable description of one submission
- DriverConfigOrchestrator: Decides which configuration steps are needed
- ConfigurationStep: Immutable spec transformations (bootstrap, dependencies, secrets)
- Pipeline: Folds the steps over the initial driver spec
- build_driver_spec / materialize: End-to-end facade for the cluster client
"""

from .client import DriverSubmission, build_driver_spec, materialize
from .orchestrator import DriverConfigOrchestrator
from .parameters import (
    JavaMainAppResource,
    MainAppResource,
    PythonMainAppResource,
    SubmissionParameters,
)
from .pipeline import Pipeline, PipelineBuilder
from .spec import KubernetesDriverSpec
from .steps import (
    ConfigurationStep,
    DependencyResolutionStep,
    DriverMountSecretsStep,
    DriverServiceBootstrapStep,
    StepKind,
)

__all__ = [
    # Parameters
    "SubmissionParameters",
    "MainAppResource",
    "JavaMainAppResource",
    "PythonMainAppResource",
    # Orchestration
    "DriverConfigOrchestrator",
    "Pipeline",
    "PipelineBuilder",
    "KubernetesDriverSpec",
    # Steps
    "ConfigurationStep",
    "StepKind",
    "DriverServiceBootstrapStep",
    "DependencyResolutionStep",
    "DriverMountSecretsStep",
    # Client
    "DriverSubmission",
    "build_driver_spec",
    "materialize",
]
