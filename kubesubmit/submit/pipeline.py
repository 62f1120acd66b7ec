"""
Step pipeline for kubesubmit.

The Pipeline folds an ordered sequence of configuration steps over an
initial driver spec, threading each step's output into the next.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from kubesubmit.errors import DefectError
from kubesubmit.submit.spec import KubernetesDriverSpec
from kubesubmit.submit.steps import ConfigurationStep

logger = logging.getLogger(__name__)


class Pipeline:
    """
    Applies configuration steps in order.

    Execution Model:
    - Every step runs exactly once, in the given order
    - No short-circuiting; the pipeline never adds or removes steps
    - Exceptions raised by a step propagate and abort the submission

    Example:
        pipeline = Pipeline([
            DriverServiceBootstrapStep(...),
            DependencyResolutionStep(...),
        ])
        spec = pipeline.run(KubernetesDriverSpec.initial_spec(conf))
    """

    def __init__(self, steps: Sequence[ConfigurationStep]):
        self.steps = tuple(steps)

    @property
    def step_names(self) -> list[str]:
        """Get names of all steps in order."""
        return [s.name for s in self.steps]

    def run(self, initial_spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        """
        Run every step over the initial spec.

        Args:
            initial_spec: The starting spec (typically KubernetesDriverSpec.initial_spec)

        Returns:
            The spec produced by the last step

        Raises:
            DefectError: If a step returns something other than a driver spec
        """
        logger.info(f"[pipeline] Running {len(self.steps)} steps: {self.step_names}")

        spec = initial_spec
        for step in self.steps:
            step_start = time.perf_counter()
            try:
                result = step.apply(spec)
            except Exception as e:
                logger.error(f"[pipeline] Step '{step.name}' failed: {e}")
                raise

            if not isinstance(result, KubernetesDriverSpec):
                raise DefectError(
                    "pipeline",
                    f"Step '{step.name}' returned {type(result).__name__}, "
                    "expected KubernetesDriverSpec",
                )

            step_duration = (time.perf_counter() - step_start) * 1000
            logger.debug(f"[pipeline] Step '{step.name}' applied in {step_duration:.2f}ms")
            spec = result

        return spec

    def __len__(self) -> int:
        return len(self.steps)

    def __repr__(self) -> str:
        return f"Pipeline(steps={self.step_names})"


class PipelineBuilder:
    """
    Builder for composing step sequences with a fluent API.

    Example:
        pipeline = (
            PipelineBuilder()
            .add(service_bootstrap_step)
            .add_if(has_dependencies, dependency_step)
            .build()
        )
    """

    def __init__(self) -> None:
        self._steps: list[ConfigurationStep] = []

    def add(self, step: ConfigurationStep) -> PipelineBuilder:
        """Add a step to the pipeline."""
        self._steps.append(step)
        return self

    def add_if(self, condition: bool, step: ConfigurationStep) -> PipelineBuilder:
        """Conditionally add a step."""
        if condition:
            self._steps.append(step)
        return self

    @property
    def steps(self) -> tuple[ConfigurationStep, ...]:
        return tuple(self._steps)

    def build(self) -> Pipeline:
        """Build and return the pipeline."""
        if not self._steps:
            raise DefectError("pipeline", "Pipeline must have at least one step")
        return Pipeline(self._steps)
