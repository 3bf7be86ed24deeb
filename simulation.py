# simulation.py
"""
Drives the per-frame force accumulation and integration.

The force engine only accumulates; it never integrates and never resets
the force slots. This module plays the integrator's role for the demo:
after every force has applied, it integrates velocity and position with
semi-implicit Euler and then zeroes the force slots for the next frame.
It also moves the flock's goal around at runtime.
"""
import logging
import numpy as np
from typing import Any, Dict, Optional

from engine import ForceEngine
from environment import Environment
from forces import AttractorForce
from state import StateBuffer

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, state, engine, params, predator_index=None, goal_force=None):
#     - Inputs:
#       - params: "simulation_parameters" config section.
#         - "seed": int
#         - "delta_time": float
#         - "friction": float
#         - "max_velocity": float
#         - "goal_interval": int, steps between goal moves (0 disables)
#         - "goal_bounds": {"low": [x, y, z], "high": [x, y, z]}
#
#   - step(self) -> None:
#     - Side Effects: Applies every force, integrates velocities and
#       positions, then zeroes all force slots.
#     - Invariants: Force slots are zero when step() returns. Particles with
#       mass <= 0 never move.


class Simulation:
    """
    Owns the frame loop: forces, then integration, then force reset.
    """
    def __init__(self, state: StateBuffer, engine: ForceEngine, params: Dict[str, Any],
                 predator_index: Optional[int] = None,
                 goal_force: Optional[AttractorForce] = None):
        self.state = state
        self.engine = engine
        self.predator_index = predator_index
        self.goal_force = goal_force

        self.delta_time = float(params.get('delta_time', 0.016))
        self.friction = float(params.get('friction', 0.0))
        self.max_velocity = float(params.get('max_velocity', 10.0))
        self.goal_interval = int(params.get('goal_interval', 0))
        goal_bounds = params.get('goal_bounds', {})
        self.goal_low = np.asarray(goal_bounds.get('low', [-1.0, -1.0, 0.0]), dtype=np.float64)
        self.goal_high = np.asarray(goal_bounds.get('high', [1.0, 1.0, 2.0]), dtype=np.float64)
        self.rng = np.random.default_rng(params.get('seed'))
        self.step_count = 0

        if self.delta_time <= 0:
            msg = f"Configuration error: delta_time must be positive, got {self.delta_time}."
            logging.critical(msg)
            raise ValueError(msg)

        logging.info(
            f"Simulation initialized: dt={self.delta_time}, friction={self.friction}, "
            f"max_velocity={self.max_velocity}, {len(self.engine)} forces."
        )

    def environment(self) -> Environment:
        """Snapshot of the predator and goal positions for this frame."""
        goal = self.goal_force.anchor if self.goal_force is not None else None
        return Environment.from_state(self.state, self.predator_index, goal)

    def integrate(self) -> None:
        """
        Semi-implicit Euler on every particle, then resets the force slots.
        """
        velocities = self.state.velocities()
        positions = self.state.positions()
        masses = self.state.masses()

        # 1. Accelerate the free particles; mass <= 0 pins a particle in place
        free = masses > 0
        velocities[free] += (
            self.state.forces()[free] / masses[free, np.newaxis]
        ) * self.delta_time
        velocities[~free] = 0.0

        # 2. Apply friction
        velocities *= (1.0 - self.friction)

        # 3. Apply velocity cap
        speed = np.linalg.norm(velocities, axis=1)
        over_speed_mask = speed > self.max_velocity
        velocities[over_speed_mask] = (
            velocities[over_speed_mask] / speed[over_speed_mask, np.newaxis]
        ) * self.max_velocity

        # 4. Update positions
        positions += velocities * self.delta_time

        # 5. Frame boundary: force accumulators start the next frame at zero
        self.state.clear_forces()

    def move_goal(self) -> None:
        """Relocates the goal attractor to a random point inside the goal bounds."""
        if self.goal_force is None:
            return
        self.goal_force.anchor = self.rng.uniform(self.goal_low, self.goal_high)
        logging.debug(f"Goal moved to {self.goal_force.anchor}.")

    def step(self):
        """
        Executes one frame of the simulation.
        """
        self.engine.apply_all(self.state, self.environment())
        self.integrate()
        self.step_count += 1
        if self.goal_interval > 0 and self.step_count % self.goal_interval == 0:
            self.move_goal()
