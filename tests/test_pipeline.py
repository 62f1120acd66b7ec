"""
Tests for step pipeline execution.

Tests Pipeline, PipelineBuilder, and step integration.
"""
from dataclasses import dataclass

import pytest

from kubesubmit.errors import DefectError
from kubesubmit.submit import (
    ConfigurationStep,
    KubernetesDriverSpec,
    Pipeline,
    PipelineBuilder,
    StepKind,
)


@dataclass(frozen=True)
class RecordingStep(ConfigurationStep):
    """Test step that appends its marker to the configuration."""

    marker: str
    execution_order: list

    @property
    def kind(self) -> StepKind:
        return StepKind.SERVICE_BOOTSTRAP

    @property
    def name(self) -> str:
        return self.marker

    def apply(self, spec):
        self.execution_order.append(self.marker)
        seen = spec.driver_conf.get("seen", "")
        return spec.with_conf({"seen": f"{seen}{self.marker}"})


class BrokenStep(ConfigurationStep):
    """Test step that returns the wrong type."""

    @property
    def kind(self) -> StepKind:
        return StepKind.MOUNT_SECRETS

    def apply(self, spec):
        return {"not": "a spec"}


class FailingStep(ConfigurationStep):
    """Test step that raises an error."""

    @property
    def kind(self) -> StepKind:
        return StepKind.DEPENDENCY_RESOLUTION

    def apply(self, spec):
        raise ValueError("Test error")


class TestPipeline:
    def test_pipeline_applies_steps_in_order(self):
        order = []
        pipeline = Pipeline([
            RecordingStep("a", order),
            RecordingStep("b", order),
            RecordingStep("c", order),
        ])

        spec = pipeline.run(KubernetesDriverSpec.initial_spec({}))

        assert order == ["a", "b", "c"]
        assert spec.driver_conf["seen"] == "abc"

    def test_pipeline_threads_spec_without_mutating_input(self):
        initial = KubernetesDriverSpec.initial_spec({"k": "v"})
        pipeline = Pipeline([RecordingStep("a", [])])

        spec = pipeline.run(initial)

        assert spec.driver_conf == {"k": "v", "seen": "a"}
        assert initial.driver_conf == {"k": "v"}

    def test_empty_pipeline_returns_initial_spec(self):
        initial = KubernetesDriverSpec.initial_spec({})

        assert Pipeline([]).run(initial) is initial

    def test_step_errors_propagate(self):
        order = []
        pipeline = Pipeline([FailingStep(), RecordingStep("after", order)])

        with pytest.raises(ValueError, match="Test error"):
            pipeline.run(KubernetesDriverSpec.initial_spec({}))

        assert order == []

    def test_wrong_return_type_is_a_defect(self):
        pipeline = Pipeline([BrokenStep()])

        with pytest.raises(DefectError, match="mount_secrets"):
            pipeline.run(KubernetesDriverSpec.initial_spec({}))

    def test_step_names_and_repr(self):
        pipeline = Pipeline([RecordingStep("a", []), FailingStep()])

        assert pipeline.step_names == ["a", "dependency_resolution"]
        assert len(pipeline) == 2
        assert repr(pipeline) == "Pipeline(steps=['a', 'dependency_resolution'])"


class TestPipelineBuilder:
    def test_builder_fluent_api(self):
        pipeline = (
            PipelineBuilder()
            .add(RecordingStep("a", []))
            .add(RecordingStep("b", []))
            .build()
        )

        assert pipeline.step_names == ["a", "b"]

    def test_builder_add_if(self):
        builder = (
            PipelineBuilder()
            .add(RecordingStep("a", []))
            .add_if(False, RecordingStep("skipped", []))
            .add_if(True, RecordingStep("b", []))
        )

        assert [s.name for s in builder.steps] == ["a", "b"]

    def test_builder_requires_a_step(self):
        with pytest.raises(DefectError, match="at least one step"):
            PipelineBuilder().build()
