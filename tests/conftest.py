"""Shared fixtures for the vectorplayground test-suite."""
import pytest

from vectorplayground.controller.synchronizer import SceneSynchronizer
from vectorplayground.model.vector import Vector3


@pytest.fixture
def sync():
    """Synchronizer after its first render (default operands)."""
    s = SceneSynchronizer()
    s.initialize()
    return s


@pytest.fixture
def sample_vectors():
    """A spread of finite operands, including zero and mixed signs."""
    return [
        Vector3(1.0, 0.0, 0.0),
        Vector3(0.0, 1.0, 0.0),
        Vector3(3.0, 4.0, 0.0),
        Vector3(-2.5, 7.25, 1.0),
        Vector3(0.1, -0.2, 0.3),
        Vector3(0.0, 0.0, 0.0),
        Vector3(1e3, -1e-3, 42.0),
    ]
