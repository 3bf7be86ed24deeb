# state.py
"""
Manages the shared State Buffer for all particles in the simulation.

This module defines the StateBuffer class, a flat float64 NumPy array holding
every particle's position, velocity, accumulated force and mass, laid out
particle-major with a fixed stride (see constants.STATE_SIZE). The force
engine adds into the force slots; the integrator consumes them and resets
them before the next frame.
"""
import logging
import numpy as np
from typing import Iterable, Sequence

from constants import P_X, V_X, F_X, MASS, STATE_SIZE

# --- Data Contracts ---
#
# class StateBuffer:
#   - __init__(self, particle_count: int):
#     - Inputs: particle_count, number of particles N (>= 0).
#     - Side Effects: Allocates a zeroed float64 array of N * STATE_SIZE.
#     - Invariants:
#       - self.data is 1-D, C-contiguous, float64, length N * STATE_SIZE.
#       - Field k of particle i lives at self.data[i * STATE_SIZE + k].
#
#   - check_indices(self, indices) -> None:
#     - Raises IndexError if any index lies outside [0, N).
#
#   - clear_forces(self) -> None:
#     - Side Effects: Zeroes every force slot. Called by the integrator,
#       never by a Force.


class StateBuffer:
    """
    A flat, particle-major array of per-particle physical quantities.
    """
    def __init__(self, particle_count: int):
        if particle_count < 0:
            raise ValueError(f"particle_count must be non-negative, got {particle_count}.")
        self.particle_count = int(particle_count)
        self.data = np.zeros(self.particle_count * STATE_SIZE, dtype=np.float64)

        logging.debug(
            f"StateBuffer allocated for {self.particle_count} particles "
            f"({self.data.size} slots)."
        )

    @classmethod
    def from_array(cls, data: Sequence[float]) -> "StateBuffer":
        """Wraps a copy of an existing flat array as a StateBuffer."""
        array = np.ascontiguousarray(data, dtype=np.float64)
        if array.ndim != 1 or array.size % STATE_SIZE != 0:
            raise ValueError(
                f"State array must be 1-D with a length divisible by {STATE_SIZE}, "
                f"got shape {array.shape}."
            )
        state = cls(array.size // STATE_SIZE)
        state.data[:] = array
        return state

    def __len__(self) -> int:
        return self.particle_count

    def copy(self) -> "StateBuffer":
        return StateBuffer.from_array(self.data)

    def index(self, particle: int, field: int) -> int:
        """Returns the flat index of `field` for `particle`."""
        self.check_indices((particle,))
        if not 0 <= field < STATE_SIZE:
            raise IndexError(f"Field offset {field} is outside [0, {STATE_SIZE}).")
        return particle * STATE_SIZE + field

    def check_indices(self, indices: Iterable[int]) -> None:
        """
        Fails fast on particle indices outside [0, N).

        An out-of-range index would otherwise read or write a neighbouring
        particle's record.
        """
        indices = np.asarray(indices)
        if indices.size == 0:
            return
        if not np.issubdtype(indices.dtype, np.integer):
            raise ValueError(f"Particle indices must be integers, got dtype {indices.dtype}.")
        low, high = indices.min(), indices.max()
        if low < 0 or high >= self.particle_count:
            bad = low if low < 0 else high
            raise IndexError(
                f"Particle index {bad} is outside [0, {self.particle_count})."
            )

    # --- Per-particle vector access (copies) ---

    def _vector(self, particle: int, offset: int) -> np.ndarray:
        start = self.index(particle, offset)
        return self.data[start:start + 3].copy()

    def position(self, particle: int) -> np.ndarray:
        return self._vector(particle, P_X)

    def velocity(self, particle: int) -> np.ndarray:
        return self._vector(particle, V_X)

    def force(self, particle: int) -> np.ndarray:
        return self._vector(particle, F_X)

    def mass(self, particle: int) -> float:
        return float(self.data[self.index(particle, MASS)])

    def set_position(self, particle: int, value: Sequence[float]) -> None:
        start = self.index(particle, P_X)
        self.data[start:start + 3] = value

    def set_velocity(self, particle: int, value: Sequence[float]) -> None:
        start = self.index(particle, V_X)
        self.data[start:start + 3] = value

    def set_mass(self, particle: int, value: float) -> None:
        self.data[self.index(particle, MASS)] = value

    # --- Whole-buffer views (writes go through to the buffer) ---

    def _records(self) -> np.ndarray:
        return self.data.reshape(self.particle_count, STATE_SIZE)

    def positions(self) -> np.ndarray:
        return self._records()[:, P_X:P_X + 3]

    def velocities(self) -> np.ndarray:
        return self._records()[:, V_X:V_X + 3]

    def forces(self) -> np.ndarray:
        return self._records()[:, F_X:F_X + 3]

    def masses(self) -> np.ndarray:
        return self._records()[:, MASS]

    def clear_forces(self) -> None:
        """Zeroes all force accumulators ahead of the next frame."""
        self.forces()[:] = 0.0

    def scatter(self, rng: np.random.Generator, low: Sequence[float],
                high: Sequence[float], mass: float = 1.0) -> None:
        """
        Places every particle uniformly at random inside the box [low, high).

        Velocities and forces are zeroed and every particle gets `mass`.
        """
        self.positions()[:] = rng.uniform(low=low, high=high, size=(self.particle_count, 3))
        self.velocities()[:] = 0.0
        self.clear_forces()
        self.masses()[:] = mass
        logging.debug(
            f"Scattered {self.particle_count} particles in box {list(low)} - {list(high)} "
            f"with mass {mass}."
        )
