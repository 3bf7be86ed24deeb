# forces.py
"""
Force generators that accumulate contributions into the State Buffer.

Each force targets an ordered list of particle indices and, when enabled,
adds its contribution into those particles' force slots. The set of
variants is closed: gravity, drag, wind, spring, flock, line attractor,
vortex, uniform point attractor and point attractor. Each variant is its own
class carrying exactly the parameters it needs, and each delegates the
per-particle arithmetic to a Numba-jitted kernel operating on the raw flat
state array.

The vortex is the one variant that writes velocity instead of force.
"""
import abc
import logging
import math
import numpy as np
from numba import jit
from typing import Any, Optional, Sequence, Tuple

from constants import (
    P_X, P_Y, P_Z, V_X, V_Y, V_Z, F_X, F_Y, F_Z, MASS, STATE_SIZE,
    SPRING_FORCE_LIMIT, ZERO_DISTANCE, FIELD_EPSILON, LINE_ATTRACTOR_STRENGTH,
    VORTEX_EDGE_FREQUENCY, VORTEX_MAX_FREQUENCY, FLOATS_PER_LINE,
    SPRING_REST_EPSILON
)
from environment import Environment
from state import StateBuffer

# --- Data Contracts ---
#
# class Force:
#   - apply(self, state: StateBuffer, env: Optional[Environment] = None) -> None:
#     - Inputs:
#       - state: the shared State Buffer. Not retained past the call.
#       - env: predator/goal context, read only by Flock.
#     - Side Effects: Adds into the force slots (velocity slots for Vortex)
#       of self.particles only. No-op when self.enabled is False.
#     - Raises: IndexError if any target index lies outside the buffer.
#
#   - draw(self, renderer, index: int, enabled: bool, p0, p1) -> None:
#     - Side Effects: Spring only. Calls renderer.reload(data, index * 14)
#       with 14 float32 values: two vertices of (x, y, z, r, g, b, flag).


# ==============================================================================
# Kernels
# ==============================================================================

@jit(nopython=True)
def _gravity_numba(state, particles, magnitude):
    """Mass-scaled uniform pull along z."""
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        state[base + F_Z] += state[base + MASS] * magnitude


@jit(nopython=True)
def _drag_numba(state, particles, magnitude, direction):
    """Linear drag opposing each velocity component."""
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        for axis in range(3):
            state[base + F_X + axis] -= state[base + V_X + axis] * (direction[axis] * magnitude)


@jit(nopython=True)
def _wind_numba(state, particles, magnitude, direction):
    """Independent uniform gust in [-1, 1] per axis, per particle, per frame."""
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        for axis in range(3):
            state[base + F_X + axis] += direction[axis] * magnitude * np.random.uniform(-1.0, 1.0)


@jit(nopython=True)
def _spring_numba(state, p0, p1, k, natural_length):
    """
    Hooke's law between two particles, saturated per axis.

    The force on p0 points towards p1 when stretched; p1 receives the exact
    negation.
    """
    b0 = p0 * STATE_SIZE
    b1 = p1 * STATE_SIZE
    lx = state[b1 + P_X] - state[b0 + P_X]
    ly = state[b1 + P_Y] - state[b0 + P_Y]
    lz = state[b1 + P_Z] - state[b0 + P_Z]
    distance = math.sqrt(lx * lx + ly * ly + lz * lz)
    if distance < ZERO_DISTANCE:
        return
    stretch = distance - natural_length
    fx = min(k * stretch * lx / distance, SPRING_FORCE_LIMIT)
    fy = min(k * stretch * ly / distance, SPRING_FORCE_LIMIT)
    fz = min(k * stretch * lz / distance, SPRING_FORCE_LIMIT)
    state[b0 + F_X] += fx
    state[b0 + F_Y] += fy
    state[b0 + F_Z] += fz
    state[b1 + F_X] -= fx
    state[b1 + F_Y] -= fy
    state[b1 + F_Z] -= fz


@jit(nopython=True)
def _flock_numba(state, particles, params, predator, goal, has_predator, has_goal):
    """
    Reynolds-style flocking over every pair of target particles.

    params = [min_rad, max_rad, binocular_angle, monocular_angle,
              k_a, k_v, k_c, k_oa, k_gs]

    A neighbour j contributes to boid i only if it is within max_rad and
    within half the monocular angle, measured between x_ij and j's
    heading. Its contribution is scaled by a distance weight k_d and a
    view weight k_t, both 1 in the inner region and falling linearly to 0
    at the outer edge.
    """
    r1 = params[0]
    r2 = params[1]
    half_t1 = 0.5 * params[2]
    half_t2 = 0.5 * params[3]
    k_a = params[4]
    k_v = params[5]
    k_c = params[6]
    k_oa = params[7]
    k_gs = params[8]

    count = particles.shape[0]
    accel = np.zeros((count, 3))

    for i in range(count):
        bi = particles[i] * STATE_SIZE
        xi0 = state[bi + P_X]
        xi1 = state[bi + P_Y]
        xi2 = state[bi + P_Z]
        vi0 = state[bi + V_X]
        vi1 = state[bi + V_Y]
        vi2 = state[bi + V_Z]
        a0 = 0.0
        a1 = 0.0
        a2 = 0.0

        for j in range(count):
            if i == j:
                continue
            bj = particles[j] * STATE_SIZE
            x0 = state[bj + P_X] - xi0
            x1 = state[bj + P_Y] - xi1
            x2 = state[bj + P_Z] - xi2
            d_ij = math.sqrt(x0 * x0 + x1 * x1 + x2 * x2)
            if d_ij < ZERO_DISTANCE or d_ij > r2:
                continue

            vj0 = state[bj + V_X]
            vj1 = state[bj + V_Y]
            vj2 = state[bj + V_Z]
            speed_j = math.sqrt(vj0 * vj0 + vj1 * vj1 + vj2 * vj2)
            if speed_j < ZERO_DISTANCE:
                # No heading to measure against.
                t_ij = 0.0
            else:
                cos_t = (x0 * vj0 + x1 * vj1 + x2 * vj2) / (d_ij * speed_j)
                t_ij = math.acos(max(-1.0, min(1.0, cos_t)))
            if t_ij > half_t2:
                continue

            if d_ij < r1:
                k_d = 1.0
            else:
                k_d = (r2 - d_ij) / (r2 - r1)
            if t_ij < half_t1 or half_t2 <= half_t1:
                k_t = 1.0
            else:
                k_t = (half_t2 - t_ij) / (half_t2 - half_t1)
            w = k_d * k_t

            # Collision avoidance: -(k_a / d_ij) * x_hat
            s = -w * k_a / (d_ij * d_ij)
            a0 += x0 * s
            a1 += x1 * s
            a2 += x2 * s
            # Velocity matching: k_v * (v_j - v_i)
            a0 += w * k_v * (vj0 - vi0)
            a1 += w * k_v * (vj1 - vi1)
            a2 += w * k_v * (vj2 - vi2)
            # Centering: k_c * x_ij
            a0 += w * k_c * x0
            a1 += w * k_c * x1
            a2 += w * k_c * x2

        if has_predator:
            # Obstacle avoidance: inverse-square push away from the predator
            p0 = predator[0] - xi0
            p1 = predator[1] - xi1
            p2 = predator[2] - xi2
            d_ip = math.sqrt(p0 * p0 + p1 * p1 + p2 * p2)
            if d_ip >= ZERO_DISTANCE:
                s = -k_oa / (d_ip * d_ip * d_ip)
                a0 += p0 * s
                a1 += p1 * s
                a2 += p2 * s

        if has_goal:
            # Goal seeking: constant-strength pull towards the goal
            g0 = goal[0] - xi0
            g1 = goal[1] - xi1
            g2 = goal[2] - xi2
            d_ig = math.sqrt(g0 * g0 + g1 * g1 + g2 * g2)
            if d_ig >= ZERO_DISTANCE:
                s = k_gs / d_ig
                a0 += g0 * s
                a1 += g1 * s
                a2 += g2 * s

        accel[i, 0] = a0
        accel[i, 1] = a1
        accel[i, 2] = a2

    for i in range(count):
        bi = particles[i] * STATE_SIZE
        state[bi + F_X] += accel[i, 0]
        state[bi + F_Y] += accel[i, 1]
        state[bi + F_Z] += accel[i, 2]


@jit(nopython=True)
def _line_attractor_numba(state, particles, anchor, axis, power, length):
    """Pulls particles on the forward segment [eps, length) towards the line."""
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        d0 = state[base + P_X] - anchor[0]
        d1 = state[base + P_Y] - anchor[1]
        d2 = state[base + P_Z] - anchor[2]
        axial = d0 * axis[0] + d1 * axis[1] + d2 * axis[2]
        if axial < FIELD_EPSILON or axial >= length:
            continue
        r0 = d0 - axis[0] * axial
        r1 = d1 - axis[1] * axial
        r2 = d2 - axis[2] * axial
        r = math.sqrt(r0 * r0 + r1 * r1 + r2 * r2)
        if r < ZERO_DISTANCE:
            continue
        s = -LINE_ATTRACTOR_STRENGTH * r ** (power + 1.0) / r
        state[base + F_X] += r0 * s
        state[base + F_Y] += r1 * s
        state[base + F_Z] += r2 * s


@jit(nopython=True)
def _vortex_numba(state, particles, anchor, axis, power, length, radius):
    """
    Spins particles around the axis by adding a finite-difference rotational
    velocity: the particle's offset rotated by w about the axis, minus the
    offset itself.
    """
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        d0 = state[base + P_X] - anchor[0]
        d1 = state[base + P_Y] - anchor[1]
        d2 = state[base + P_Z] - anchor[2]
        axial = d0 * axis[0] + d1 * axis[1] + d2 * axis[2]
        if axial < FIELD_EPSILON or axial >= length:
            continue
        r0 = d0 - axis[0] * axial
        r1 = d1 - axis[1] * axial
        r2 = d2 - axis[2] * axial
        r = math.sqrt(r0 * r0 + r1 * r1 + r2 * r2)
        if r < ZERO_DISTANCE or r >= radius:
            continue
        frequency = min(VORTEX_MAX_FREQUENCY, (radius / r) ** power * VORTEX_EDGE_FREQUENCY)
        omega = 2.0 * math.pi * frequency
        c = math.cos(omega)
        s = math.sin(omega)
        # Rodrigues: d cos w + (k x d) sin w + k (k . d)(1 - cos w)
        c0 = axis[1] * d2 - axis[2] * d1
        c1 = axis[2] * d0 - axis[0] * d2
        c2 = axis[0] * d1 - axis[1] * d0
        q0 = d0 * c + c0 * s + axis[0] * axial * (1.0 - c)
        q1 = d1 * c + c1 * s + axis[1] * axial * (1.0 - c)
        q2 = d2 * c + c2 * s + axis[2] * axial * (1.0 - c)
        state[base + V_X] += q0 - d0
        state[base + V_Y] += q1 - d1
        state[base + V_Z] += q2 - d2


@jit(nopython=True)
def _uniform_point_attractor_numba(state, particles, anchor):
    """Unscaled pull towards the anchor; grows with distance."""
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        state[base + F_X] += anchor[0] - state[base + P_X]
        state[base + F_Y] += anchor[1] - state[base + P_Y]
        state[base + F_Z] += anchor[2] - state[base + P_Z]


@jit(nopython=True)
def _point_attractor_numba(state, particles, anchor, power, length, radius):
    """Inverse-power pull towards the anchor with a hard cutoff at `length`."""
    for n in range(particles.shape[0]):
        base = particles[n] * STATE_SIZE
        d0 = anchor[0] - state[base + P_X]
        d1 = anchor[1] - state[base + P_Y]
        d2 = anchor[2] - state[base + P_Z]
        distance = math.sqrt(d0 * d0 + d1 * d1 + d2 * d2)
        if distance > length or distance < ZERO_DISTANCE:
            continue
        s = radius / distance ** (power + 1.0)
        state[base + F_X] += d0 * s
        state[base + F_Y] += d1 * s
        state[base + F_Z] += d2 * s


# ==============================================================================
# Helpers
# ==============================================================================

def _vec3(value: Sequence[float], name: str) -> np.ndarray:
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"{name} must be a 3-vector, got shape {vec.shape}.")
    return vec


def _unit(value: Sequence[float], name: str) -> np.ndarray:
    vec = _vec3(value, name)
    norm = np.linalg.norm(vec)
    if norm < ZERO_DISTANCE:
        raise ValueError(f"{name} must be non-zero.")
    return vec / norm


def strain_color(current_length: float, natural_length: float) -> Tuple[float, float, float]:
    """
    Colour for a spring's debug line.

    White near the natural length. Compression fades green to red and
    extension fades blue to red as the strain approaches 100%.
    """
    deviation = current_length - natural_length
    if abs(deviation) < SPRING_REST_EPSILON:
        return (1.0, 1.0, 1.0)
    if natural_length > 0:
        strain = min(abs(deviation) / natural_length, 1.0)
    else:
        strain = 1.0
    if deviation < 0:
        return (strain, 1.0 - strain, 0.0)
    return (strain, 0.0, 1.0 - strain)


# ==============================================================================
# Force variants
# ==============================================================================

class Force(abc.ABC):
    """
    Abstract base class for every force generator.
    """
    name = "force"

    def __init__(self, particles: Sequence[int]):
        """
        Args:
            particles (Sequence[int]): Target particle indices. Order is kept;
                pairwise variants give index 0 and 1 distinct roles.
        """
        particles = np.asarray(particles).reshape(-1)
        if particles.size and not np.issubdtype(particles.dtype, np.integer):
            raise ValueError(f"Particle indices must be integers, got {particles.tolist()}.")
        self.particles = particles.astype(np.int64)
        self.enabled = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def apply(self, state: StateBuffer, env: Optional[Environment] = None) -> None:
        """
        Adds this force's contribution into `state` for its target particles.
        """
        if not self.enabled:
            return
        state.check_indices(self.particles)
        self._accumulate(state.data, env)

    @abc.abstractmethod
    def _accumulate(self, data: np.ndarray, env: Optional[Environment]) -> None:
        """
        Runs the variant's kernel on the raw flat state array.

        Args:
            data (np.ndarray): The State Buffer's backing array.
            env (Optional[Environment]): Scene context for this frame.
        """

    def draw(self, renderer: Any, index: int, enabled: bool,
             p0: Sequence[float], p1: Sequence[float]) -> None:
        """Most forces have no debug geometry."""

    def __repr__(self) -> str:
        status = "on" if self.enabled else "off"
        return f"{type(self).__name__}({len(self.particles)} particles, {status})"


class ConstantVectorForce(Force):
    """
    Shared shape of gravity, drag and wind: a magnitude and a direction.

    `magnitude` may be reassigned at runtime; the direction is fixed.
    """
    def __init__(self, particles: Sequence[int], magnitude: float,
                 direction: Sequence[float]):
        super().__init__(particles)
        self.magnitude = float(magnitude)
        self._direction = _vec3(direction, "direction")

    @property
    def direction(self) -> np.ndarray:
        return self._direction.copy()

    @property
    def x(self) -> float:
        return float(self._direction[0])

    @property
    def y(self) -> float:
        return float(self._direction[1])

    @property
    def z(self) -> float:
        return float(self._direction[2])


class Gravity(ConstantVectorForce):
    """Uniform gravity along z: F_Z += MASS * magnitude."""
    name = "gravity"

    def __init__(self, particles: Sequence[int], magnitude: float):
        super().__init__(particles, magnitude, (0.0, 0.0, 1.0))

    def _accumulate(self, data, env):
        _gravity_numba(data, self.particles, self.magnitude)


class Drag(ConstantVectorForce):
    """Linear drag, scaled per axis by the direction components."""
    name = "drag"

    def _accumulate(self, data, env):
        _drag_numba(data, self.particles, self.magnitude, self._direction)


class Wind(ConstantVectorForce):
    """Random per-frame gusts bounded by direction * magnitude per axis."""
    name = "wind"

    def _accumulate(self, data, env):
        _wind_numba(data, self.particles, self.magnitude, self._direction)


class Spring(Force):
    """
    A Hooke's-law spring between exactly two particles.

    `damp` is stored but not applied to the accumulation.
    """
    name = "spring"

    def __init__(self, particles: Sequence[int], k: float, length: float, damp: float = 0.0):
        super().__init__(particles)
        if self.particles.size != 2:
            raise ValueError(
                f"A spring needs exactly 2 particles, got {self.particles.size}."
            )
        self.k = float(k)
        self.length = float(length)
        self.damp = float(damp)

    def _accumulate(self, data, env):
        _spring_numba(data, self.particles[0], self.particles[1], self.k, self.length)

    def draw(self, renderer, index, enabled, p0, p1):
        """
        Pushes this spring's line, coloured by strain, into the renderer.
        """
        p0 = np.asarray(p0, dtype=np.float64)
        p1 = np.asarray(p1, dtype=np.float64)
        r, g, b = strain_color(float(np.linalg.norm(p1 - p0)), self.length)
        flag = 1.0 if (enabled and self.enabled) else 0.0
        vertices = np.array([
            p0[0], p0[1], p0[2], r, g, b, flag,
            p1[0], p1[1], p1[2], r, g, b, flag,
        ], dtype=np.float32)
        renderer.reload(vertices, index * FLOATS_PER_LINE)


class Flock(Force):
    """
    Boids: collision avoidance, velocity matching and centering between
    the target particles, plus obstacle avoidance from the environment's
    predator and goal seeking towards its goal.

    Cost is O(k^2) in the number of targets.
    """
    name = "flock"

    def __init__(self, particles: Sequence[int], min_rad: float, max_rad: float,
                 binocular_angle: float, monocular_angle: float,
                 k_a: float, k_v: float, k_c: float, k_oa: float, k_gs: float):
        """
        Args:
            min_rad (float): Focused visual radius; full weight inside it.
            max_rad (float): Boundary visual radius; no weight beyond it.
            binocular_angle (float): Full-weight field of view (radians).
            monocular_angle (float): Total field of view (radians).
            k_a (float): Avoidance coefficient.
            k_v (float): Velocity-matching coefficient.
            k_c (float): Centering coefficient.
            k_oa (float): Obstacle-avoidance coefficient.
            k_gs (float): Goal-seeking coefficient.
        """
        super().__init__(particles)
        if not 0 <= min_rad < max_rad:
            raise ValueError(f"Flock radii must satisfy 0 <= min_rad < max_rad, got {min_rad}, {max_rad}.")
        if not 0 <= binocular_angle <= monocular_angle:
            raise ValueError(
                f"Flock angles must satisfy 0 <= binocular <= monocular, "
                f"got {binocular_angle}, {monocular_angle}."
            )
        self.min_rad = float(min_rad)
        self.max_rad = float(max_rad)
        self.binocular_angle = float(binocular_angle)
        self.monocular_angle = float(monocular_angle)
        self.k_a = float(k_a)
        self.k_v = float(k_v)
        self.k_c = float(k_c)
        self.k_oa = float(k_oa)
        self.k_gs = float(k_gs)

    def _params(self) -> np.ndarray:
        return np.array([
            self.min_rad, self.max_rad, self.binocular_angle, self.monocular_angle,
            self.k_a, self.k_v, self.k_c, self.k_oa, self.k_gs,
        ], dtype=np.float64)

    def _accumulate(self, data, env):
        predator = env.predator if env is not None else None
        goal = env.goal if env is not None else None
        _flock_numba(
            data, self.particles, self._params(),
            predator if predator is not None else np.zeros(3),
            goal if goal is not None else np.zeros(3),
            predator is not None, goal is not None
        )


class AttractorForce(Force):
    """
    Base for forces anchored at a point in space.

    `anchor` is the single source of truth for the attractor position; the
    scalar `x`, `y`, `z` accessors are read-only views of it. Assigning
    `anchor` moves the attractor, e.g. to track another simulated entity.
    """
    def __init__(self, particles: Sequence[int], anchor: Sequence[float]):
        super().__init__(particles)
        self._anchor = _vec3(anchor, "anchor")

    @property
    def anchor(self) -> np.ndarray:
        return self._anchor.copy()

    @anchor.setter
    def anchor(self, value: Sequence[float]) -> None:
        self._anchor = _vec3(value, "anchor")

    @property
    def x(self) -> float:
        return float(self._anchor[0])

    @property
    def y(self) -> float:
        return float(self._anchor[1])

    @property
    def z(self) -> float:
        return float(self._anchor[2])


class LineAttractor(AttractorForce):
    """
    Pulls particles towards the half-line from `anchor` along `axis`.

    Only particles whose axial offset lies in [0.01, length) are affected;
    they receive 9.8 * r^(power + 1) along the negative radial direction.

    `radius` is stored for configuration symmetry with Vortex but is not
    used by the kernel.
    """
    name = "line_attractor"

    def __init__(self, particles: Sequence[int], anchor: Sequence[float],
                 axis: Sequence[float], power: float = 2.0, length: float = 0.0,
                 radius: float = 0.0):
        super().__init__(particles, anchor)
        self.axis = _unit(axis, "axis")
        self.power = float(power)
        self.length = float(length)
        self.radius = float(radius)

    def _accumulate(self, data, env):
        _line_attractor_numba(data, self.particles, self._anchor, self.axis,
                              self.power, self.length)


class Vortex(AttractorForce):
    """
    Spins particles about the axis through `anchor`.

    Writes velocity, not force. Rotation frequency rises towards the core as
    (radius / r)^power * 2, capped at 1000.
    """
    name = "vortex"

    def __init__(self, particles: Sequence[int], anchor: Sequence[float],
                 axis: Sequence[float], power: float = 2.0, length: float = 0.0,
                 radius: float = 0.0):
        super().__init__(particles, anchor)
        self.axis = _unit(axis, "axis")
        self.power = float(power)
        self.length = float(length)
        self.radius = float(radius)

    def _accumulate(self, data, env):
        _vortex_numba(data, self.particles, self._anchor, self.axis,
                      self.power, self.length, self.radius)


class UniformPointAttractor(AttractorForce):
    """F += anchor - position, with no falloff."""
    name = "uniform_point_attractor"

    def _accumulate(self, data, env):
        _uniform_point_attractor_numba(data, self.particles, self._anchor)


class PointAttractor(AttractorForce):
    """
    Inverse-power pull towards `anchor`, cut off beyond `length`.

    The contribution is (anchor - x) * radius / |anchor - x|^(power + 1).
    """
    name = "point_attractor"

    def __init__(self, particles: Sequence[int], anchor: Sequence[float],
                 power: float = 2.0, length: float = 0.0, radius: float = 0.0):
        super().__init__(particles, anchor)
        self.power = float(power)
        self.length = float(length)
        self.radius = float(radius)

    def _accumulate(self, data, env):
        _point_attractor_numba(data, self.particles, self._anchor, self.power,
                               self.length, self.radius)


# ==============================================================================
# Builders
# ==============================================================================

def _built(force: Force) -> Force:
    logging.debug(f"Created {force!r}.")
    return force


def init_gravity(particles: Sequence[int], magnitude: float = 1.0) -> Gravity:
    return _built(Gravity(particles, magnitude))


def init_drag(particles: Sequence[int], magnitude: float = 1.0,
              direction: Sequence[float] = (1.0, 1.0, 1.0)) -> Drag:
    return _built(Drag(particles, magnitude, direction))


def init_wind(particles: Sequence[int], magnitude: float = 1.0,
              direction: Sequence[float] = (1.0, 1.0, 1.0)) -> Wind:
    return _built(Wind(particles, magnitude, direction))


def init_spring(particles: Sequence[int], k: float, length: float,
                damp: float = 0.0) -> Spring:
    return _built(Spring(particles, k, length, damp))


def init_flock(particles: Sequence[int], min_rad: float, max_rad: float,
               binocular_angle: float, monocular_angle: float, k_a: float,
               k_v: float, k_c: float, k_oa: float, k_gs: float) -> Flock:
    return _built(Flock(particles, min_rad, max_rad, binocular_angle,
                        monocular_angle, k_a, k_v, k_c, k_oa, k_gs))


def init_line_attractor(particles: Sequence[int], anchor: Sequence[float],
                        axis: Sequence[float], power: float = 2.0,
                        length: float = 0.0, radius: float = 0.0) -> LineAttractor:
    return _built(LineAttractor(particles, anchor, axis, power, length, radius))


def init_vortex(particles: Sequence[int], anchor: Sequence[float],
                axis: Sequence[float], power: float = 2.0, length: float = 0.0,
                radius: float = 0.0) -> Vortex:
    return _built(Vortex(particles, anchor, axis, power, length, radius))


def init_uniform_point_attractor(particles: Sequence[int],
                                 anchor: Sequence[float]) -> UniformPointAttractor:
    return _built(UniformPointAttractor(particles, anchor))


def init_point_attractor(particles: Sequence[int], anchor: Sequence[float],
                         power: float = 2.0, length: float = 0.0,
                         radius: float = 0.0) -> PointAttractor:
    return _built(PointAttractor(particles, anchor, power, length, radius))


# Variant tag -> builder, the closed set of forces a scene may declare.
BUILDERS = {
    Gravity.name: init_gravity,
    Drag.name: init_drag,
    Wind.name: init_wind,
    Spring.name: init_spring,
    Flock.name: init_flock,
    LineAttractor.name: init_line_attractor,
    Vortex.name: init_vortex,
    UniformPointAttractor.name: init_uniform_point_attractor,
    PointAttractor.name: init_point_attractor,
}
