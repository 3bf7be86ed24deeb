"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from state import StateBuffer  # noqa: E402


class RecordingRenderer:
    """Captures reload() calls instead of uploading them."""

    def __init__(self):
        self.calls = []

    def reload(self, data, offset=0):
        self.calls.append((np.array(data, dtype=np.float32), offset))


@pytest.fixture
def make_state():
    """Build a StateBuffer from a list of (position, velocity, mass) tuples."""
    def _make(particles):
        state = StateBuffer(len(particles))
        for i, (position, velocity, mass) in enumerate(particles):
            state.set_position(i, position)
            state.set_velocity(i, velocity)
            state.set_mass(i, mass)
        return state
    return _make


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture(scope="session")
def project_root_path():
    """Provide the project root path."""
    return project_root
