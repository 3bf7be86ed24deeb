"""Tests for the demo frame driver and its integrator."""

import numpy as np
import pytest

from engine import ForceEngine
from forces import init_flock, init_gravity, init_point_attractor, init_spring
from simulation import Simulation


PARAMS = {"delta_time": 0.1, "friction": 0.0, "max_velocity": 100.0, "seed": 0}


@pytest.fixture
def hanging_pair(make_state):
    state = make_state([
        ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 0.0),
        ((0.0, 0.0, -2.0), (0.0, 0.0, 0.0), 1.0),
    ])
    engine = ForceEngine([init_spring([0, 1], k=1.0, length=1.0), init_gravity([1], -9.8)])
    return state, engine


def test_step_leaves_force_slots_zeroed(hanging_pair):
    state, engine = hanging_pair
    Simulation(state, engine, PARAMS).step()
    assert not state.forces().any()


def test_step_integrates_semi_implicit_euler(hanging_pair):
    state, engine = hanging_pair
    Simulation(state, engine, PARAMS).step()
    # spring pulls particle 1 up by 1, gravity pulls it down by 9.8
    expected_v = (1.0 - 9.8) * 0.1
    assert state.velocity(1)[2] == pytest.approx(expected_v)
    assert state.position(1)[2] == pytest.approx(-2.0 + expected_v * 0.1)


def test_massless_particles_are_pinned(hanging_pair):
    state, engine = hanging_pair
    sim = Simulation(state, engine, PARAMS)
    for _ in range(5):
        sim.step()
    np.testing.assert_array_equal(state.position(0), [0.0, 0.0, 0.0])
    np.testing.assert_array_equal(state.velocity(0), [0.0, 0.0, 0.0])


def test_velocity_cap(make_state):
    state = make_state([((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 1.0)])
    engine = ForceEngine([init_gravity([0], -1000.0)])
    Simulation(state, engine, dict(PARAMS, max_velocity=2.0)).step()
    assert np.linalg.norm(state.velocity(0)) == pytest.approx(2.0)


def test_friction_scales_velocity(make_state):
    state = make_state([((0.0, 0.0, 0.0), (4.0, 0.0, 0.0), 1.0)])
    Simulation(state, ForceEngine(), dict(PARAMS, friction=0.25)).step()
    assert state.velocity(0)[0] == pytest.approx(3.0)


def test_environment_reads_predator_and_goal(make_state):
    state = make_state([
        ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 1.0),
        ((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), 1.0),
    ])
    goal = init_point_attractor([1], anchor=(5.0, 5.0, 5.0))
    sim = Simulation(state, ForceEngine([goal]), PARAMS, predator_index=1, goal_force=goal)
    env = sim.environment()
    np.testing.assert_array_equal(env.predator, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(env.goal, [5.0, 5.0, 5.0])


def test_goal_moves_on_interval_within_bounds(make_state):
    state = make_state([((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 1.0)])
    goal = init_point_attractor([0], anchor=(100.0, 100.0, 100.0))
    params = dict(PARAMS, goal_interval=2,
                  goal_bounds={"low": [-1, -1, -1], "high": [1, 1, 1]})
    sim = Simulation(state, ForceEngine([goal]), params, goal_force=goal)
    sim.step()
    np.testing.assert_array_equal(goal.anchor, [100.0, 100.0, 100.0])
    sim.step()
    assert (np.abs(goal.anchor) <= 1.0).all()


def test_flock_follows_the_goal(make_state):
    state = make_state([((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 1.0)])
    goal = init_point_attractor([], anchor=(0.0, 10.0, 0.0))
    flock = init_flock([0], min_rad=1.0, max_rad=2.0, binocular_angle=1.0,
                       monocular_angle=2.0, k_a=0.0, k_v=0.0, k_c=0.0, k_oa=0.0, k_gs=1.0)
    sim = Simulation(state, ForceEngine([flock, goal]), PARAMS, goal_force=goal)
    sim.step()
    assert state.velocity(0)[1] > 0
    assert state.velocity(0)[0] == 0.0


def test_rejects_non_positive_time_step(hanging_pair):
    state, engine = hanging_pair
    with pytest.raises(ValueError):
        Simulation(state, engine, dict(PARAMS, delta_time=0.0))
