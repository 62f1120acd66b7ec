"""
Driver configuration steps.

Steps in the order the orchestrator applies them:
- DriverServiceBootstrapStep: labels and driver service (always first)
- DependencyResolutionStep: jar/file locations and classpath
- DriverMountSecretsStep: user secret volumes
"""

from .base import ConfigurationStep, StepKind
from .dependency_resolution import DependencyResolutionStep
from .mount_secrets import DriverMountSecretsStep
from .service_bootstrap import DriverServiceBootstrapStep

__all__ = [
    "ConfigurationStep",
    "StepKind",
    "DriverServiceBootstrapStep",
    "DependencyResolutionStep",
    "DriverMountSecretsStep",
]
