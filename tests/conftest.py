"""
Pytest configuration and fixtures for kubesubmit tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
# This allows `from kubesubmit.submit import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from kubesubmit.clock import ManualClock  # noqa: E402
from kubesubmit.submit import SubmissionParameters  # noqa: E402


@pytest.fixture
def clock():
    """Deterministic clock for the service bootstrap step."""
    return ManualClock(time_millis=1_700_000_000_000)


@pytest.fixture
def app_id():
    return "spark-a1b2c3"


@pytest.fixture
def make_params(app_id):
    """Factory for submission parameters with sensible defaults."""

    def _make(conf=None, main_app_resource=None, **overrides):
        values = {
            "app_id": app_id,
            "resource_name_prefix": "job1-a1b2c3",
            "app_name": "job1",
            "main_class": "org.example.Main",
            "app_args": ("--input", "hdfs:///data"),
            "main_app_resource": main_app_resource,
            "conf": dict(conf or {}),
        }
        values.update(overrides)
        return SubmissionParameters(**values)

    return _make
