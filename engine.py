# engine.py
"""
The Force Engine: an ordered collection of forces applied once per frame.

Forces are applied strictly in insertion order, one after another, on the
calling thread. Every write is an in-place addition into the shared State
Buffer, so the engine must never apply two forces concurrently.
"""
import logging
from typing import Any, Iterator, List, Optional

from environment import Environment
from forces import Force
from state import StateBuffer

# --- Data Contracts ---
#
# class ForceEngine:
#   - apply_all(self, state: StateBuffer, env: Optional[Environment] = None) -> None:
#     - Side Effects: Calls force.apply(state, env) for every force in order.
#     - Invariants: Never clears force slots. The integrator runs only after
#       apply_all has returned.
#
#   - draw_all(self, renderer, state: StateBuffer, enabled: bool = True) -> None:
#     - Side Effects: Calls force.draw(renderer, slot, enabled, p0, p1) with the
#       positions of each force's first two targets.


class ForceEngine:
    """
    Owns the scene's forces and applies them to a State Buffer.
    """
    def __init__(self, forces: Optional[List[Force]] = None):
        self._forces: List[Force] = []
        for force in forces or []:
            self.add(force)

    def add(self, force: Force) -> int:
        """Appends a force and returns its slot index."""
        self._forces.append(force)
        logging.debug(f"Force slot {len(self._forces) - 1}: {force!r}")
        return len(self._forces) - 1

    def remove(self, force: Force) -> None:
        self._forces.remove(force)

    def __len__(self) -> int:
        return len(self._forces)

    def __iter__(self) -> Iterator[Force]:
        return iter(self._forces)

    def __getitem__(self, index: int) -> Force:
        return self._forces[index]

    def find(self, name: str) -> Optional[Force]:
        """First force whose variant tag is `name`, or None."""
        for force in self._forces:
            if force.name == name:
                return force
        return None

    def set_enabled(self, index: int, enabled: bool) -> None:
        force = self._forces[index]
        if enabled:
            force.enable()
        else:
            force.disable()
        logging.info(f"Force {index} ({force.name}) {'enabled' if enabled else 'disabled'}.")

    def toggle(self, index: int) -> bool:
        """Flips a force's enabled flag and returns the new value."""
        enabled = not self._forces[index].enabled
        self.set_enabled(index, enabled)
        return enabled

    def apply_all(self, state: StateBuffer, env: Optional[Environment] = None) -> None:
        for force in self._forces:
            force.apply(state, env)

    def draw_all(self, renderer: Any, state: StateBuffer, enabled: bool = True) -> None:
        """
        Refreshes the debug geometry of every force that has some.

        Each force draws into its own slot (its index in this engine).
        """
        for index, force in enumerate(self._forces):
            if force.particles.size < 2:
                continue
            p0 = state.position(int(force.particles[0]))
            p1 = state.position(int(force.particles[1]))
            force.draw(renderer, index, enabled, p0, p1)
