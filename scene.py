# scene.py
"""
Builds a State Buffer and its Force Engine from the `scene` config section.

The scene declares how many particles exist, where they start, which
particle (if any) acts as the flock's predator, which force's anchor acts as
the flock's goal, and the list of forces with their parameters.
"""
import logging
import numpy as np
from typing import Any, Dict, List, Optional

from engine import ForceEngine
from forces import BUILDERS, AttractorForce, Force
from state import StateBuffer

# --- Data Contracts ---
#
# build_scene(scene_cfg: Dict[str, Any], seed: int) -> Scene:
#   - Inputs:
#     - scene_cfg: the "scene" config section.
#       - "particle_count": int
#       - "spawn": {"low": [x, y, z], "high": [x, y, z]}
#       - "mass": float
#       - "particles": optional list of {"index", "position", "velocity", "mass"}
#       - "predator": optional particle index
#       - "goal": optional label of an attractor force entry
#       - "forces": list of {"type", "particles", "label"?, "enabled"?, **params}
#     - seed: master seed for particle placement.
#   - Outputs: a Scene.
#   - Raises: ValueError on unknown force types, bad parameters, or
#     predator/goal references that do not resolve.

_RESERVED_KEYS = ("type", "particles", "label", "enabled")


class Scene:
    """
    Everything the frame driver needs: buffer, engine and predator/goal wiring.
    """
    def __init__(self, state: StateBuffer, engine: ForceEngine,
                 labels: Dict[str, Force], predator_index: Optional[int] = None,
                 goal_force: Optional[AttractorForce] = None):
        self.state = state
        self.engine = engine
        self.labels = labels
        self.predator_index = predator_index
        self.goal_force = goal_force


def _fail(msg: str) -> None:
    logging.critical(msg)
    raise ValueError(msg)


def resolve_particles(spec: Any, particle_count: int) -> List[int]:
    """
    Expands a force's `particles` entry.

    Accepts an explicit list of indices, {"range": [start, stop]}, or "all".
    """
    if spec == "all":
        return list(range(particle_count))
    if isinstance(spec, dict):
        if "range" not in spec:
            _fail(f"Configuration error: particle spec {spec} has no 'range' key.")
        bounds = spec["range"]
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            _fail(f"Configuration error: 'range' must be [start, stop], got {bounds!r}.")
        start, stop = bounds
        return list(range(int(start), int(stop)))
    if isinstance(spec, (list, tuple)):
        return [int(i) for i in spec]
    _fail(f"Configuration error: cannot interpret particle spec {spec!r}.")


def build_force(entry: Dict[str, Any], particle_count: int) -> Force:
    """Creates one force from its config entry."""
    force_type = entry.get("type")
    builder = BUILDERS.get(force_type)
    if builder is None:
        _fail(
            f"Configuration error: unknown force type {force_type!r}. "
            f"Expected one of {sorted(BUILDERS)}."
        )
    particles = resolve_particles(entry.get("particles", "all"), particle_count)
    params = {key: value for key, value in entry.items() if key not in _RESERVED_KEYS}
    try:
        force = builder(particles, **params)
    except (TypeError, ValueError) as e:
        _fail(f"Configuration error in {force_type} force: {e}")
    if not entry.get("enabled", True):
        force.disable()
    return force


def build_scene(scene_cfg: Dict[str, Any], seed: int) -> Scene:
    """
    Creates the particles and forces described by `scene_cfg`.
    """
    particle_count = int(scene_cfg["particle_count"])
    state = StateBuffer(particle_count)

    rng = np.random.default_rng(seed)
    spawn = scene_cfg.get("spawn", {})
    state.scatter(
        rng,
        low=spawn.get("low", [-1.0, -1.0, -1.0]),
        high=spawn.get("high", [1.0, 1.0, 1.0]),
        mass=float(scene_cfg.get("mass", 1.0))
    )

    for override in scene_cfg.get("particles", []):
        index = int(override["index"])
        if "position" in override:
            state.set_position(index, override["position"])
        if "velocity" in override:
            state.set_velocity(index, override["velocity"])
        if "mass" in override:
            state.set_mass(index, override["mass"])

    engine = ForceEngine()
    labels: Dict[str, Force] = {}
    for entry in scene_cfg.get("forces", []):
        force = build_force(entry, particle_count)
        state.check_indices(force.particles)
        engine.add(force)
        if "label" in entry:
            labels[entry["label"]] = force

    predator_index = scene_cfg.get("predator")
    if predator_index is not None:
        predator_index = int(predator_index)
        if not 0 <= predator_index < particle_count:
            _fail(f"Configuration error: predator index {predator_index} is out of range.")

    goal_force = None
    goal_label = scene_cfg.get("goal")
    if goal_label is not None:
        goal_force = labels.get(goal_label)
        if not isinstance(goal_force, AttractorForce):
            _fail(
                f"Configuration error: goal {goal_label!r} must label an attractor force."
            )

    logging.info(
        f"Scene built: {particle_count} particles, {len(engine)} forces, "
        f"predator={predator_index}, goal={goal_label}."
    )
    return Scene(state, engine, labels, predator_index, goal_force)
