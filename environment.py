# environment.py
"""
Explicit per-frame context shared by forces that react to the wider scene.

The flocking force avoids a "predator" and seeks a "goal". Rather than
looking those up from fixed particle indices or other forces, the frame
driver builds an Environment and passes it into every `apply` call.
"""
import numpy as np
from typing import Optional, Sequence

from state import StateBuffer


def _as_vec3(value: Optional[Sequence[float]]) -> Optional[np.ndarray]:
    if value is None:
        return None
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {vec.shape}.")
    return vec


class Environment:
    """
    Scene positions a force may react to. Either may be absent.
    """
    def __init__(self, predator: Optional[Sequence[float]] = None,
                 goal: Optional[Sequence[float]] = None):
        self.predator = _as_vec3(predator)
        self.goal = _as_vec3(goal)

    @classmethod
    def from_state(cls, state: StateBuffer, predator_index: Optional[int] = None,
                   goal: Optional[Sequence[float]] = None) -> "Environment":
        """Reads the predator's current position out of the State Buffer."""
        predator = state.position(predator_index) if predator_index is not None else None
        return cls(predator=predator, goal=goal)

    def __repr__(self) -> str:
        return f"Environment(predator={self.predator}, goal={self.goal})"
