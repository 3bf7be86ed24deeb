"""Tests for the line, vortex and point attractors."""

import math

import numpy as np
import pytest

from constants import LINE_ATTRACTOR_STRENGTH, VORTEX_MAX_FREQUENCY
from forces import (
    LineAttractor, PointAttractor, Vortex, init_line_attractor,
    init_point_attractor, init_uniform_point_attractor, init_vortex
)


def single(make_state, position, velocity=(0.0, 0.0, 0.0)):
    return make_state([(position, velocity, 1.0)])


class TestAnchor:

    def test_scalar_accessors_view_the_anchor(self):
        force = init_point_attractor([0], anchor=(1.0, 2.0, 3.0))
        assert (force.x, force.y, force.z) == (1.0, 2.0, 3.0)

    def test_moving_the_anchor_moves_every_view(self, make_state):
        force = init_uniform_point_attractor([0], anchor=(0.0, 0.0, 0.0))
        force.anchor = (4.0, -1.0, 2.0)
        assert force.x == 4.0
        state = single(make_state, (1.0, 1.0, 1.0))
        force.apply(state)
        np.testing.assert_allclose(state.force(0), [3.0, -2.0, 1.0])

    def test_scalar_accessors_are_read_only(self):
        force = init_point_attractor([0], anchor=(1.0, 2.0, 3.0))
        with pytest.raises(AttributeError):
            force.x = 5.0

    def test_anchor_getter_returns_a_copy(self):
        force = init_point_attractor([0], anchor=(1.0, 2.0, 3.0))
        force.anchor[0] = 99.0
        assert force.x == 1.0

    def test_anchor_must_be_three_dimensional(self):
        with pytest.raises(ValueError):
            init_point_attractor([0], anchor=(1.0, 2.0))


class TestUniformPointAttractor:

    def test_pull_grows_with_distance(self, make_state):
        state = make_state([
            ((1.0, 0.0, 0.0), (0, 0, 0), 1.0),
            ((10.0, 0.0, 0.0), (0, 0, 0), 1.0),
        ])
        init_uniform_point_attractor([0, 1], anchor=(0.0, 0.0, 0.0)).apply(state)
        np.testing.assert_allclose(state.force(0), [-1.0, 0.0, 0.0])
        np.testing.assert_allclose(state.force(1), [-10.0, 0.0, 0.0])


class TestPointAttractor:

    def test_beyond_cutoff_is_unchanged(self, make_state):
        state = single(make_state, (2.5, 0.0, 0.0))
        init_point_attractor([0], anchor=(0.0, 0.0, 0.0), power=2.0, length=2.0, radius=3.0).apply(state)
        assert not state.forces().any()

    def test_inside_cutoff_scales_by_inverse_power(self, make_state):
        state = single(make_state, (1.9, 0.0, 0.0))
        init_point_attractor([0], anchor=(0.0, 0.0, 0.0), power=2.0, length=2.0, radius=3.0).apply(state)
        # dir * r / |dir|^(pow + 1) = -1.9 * 3 / 1.9^3
        assert state.force(0)[0] == pytest.approx(-3.0 / 1.9 ** 2)
        assert state.force(0)[1] == 0.0

    def test_at_anchor_is_skipped(self, make_state):
        state = single(make_state, (1.0, 1.0, 1.0))
        init_point_attractor([0], anchor=(1.0, 1.0, 1.0), length=5.0, radius=1.0).apply(state)
        assert np.isfinite(state.data).all()
        assert not state.forces().any()


class TestLineAttractor:

    @pytest.fixture
    def line(self):
        # Axis is normalised on construction.
        return init_line_attractor([0], anchor=(0.0, 0.0, 0.0), axis=(0.0, 0.0, 2.0),
                                   power=1.0, length=5.0)

    def test_pulls_towards_the_line(self, make_state, line):
        state = single(make_state, (2.0, 0.0, 1.0))
        line.apply(state)
        # unit radial (1, 0, 0), magnitude 9.8 * r^(pow + 1) = 9.8 * 4
        np.testing.assert_allclose(state.force(0), [-LINE_ATTRACTOR_STRENGTH * 4.0, 0.0, 0.0])

    @pytest.mark.parametrize("position", [
        (2.0, 0.0, -1.0),   # behind the anchor
        (2.0, 0.0, 0.005),  # inside the epsilon band
        (2.0, 0.0, 5.0),    # at the far end
        (2.0, 0.0, 6.0),    # beyond the far end
        (0.0, 0.0, 1.0),    # on the line itself
    ])
    def test_outside_influence_is_unchanged(self, make_state, line, position):
        state = single(make_state, position)
        line.apply(state)
        assert np.isfinite(state.data).all()
        assert not state.forces().any()

    def test_rejects_zero_axis(self):
        with pytest.raises(ValueError):
            LineAttractor([0], (0, 0, 0), (0, 0, 0))

    def test_radius_does_not_limit_reach(self, make_state, line):
        narrow = init_line_attractor([0], anchor=(0.0, 0.0, 0.0), axis=(0.0, 0.0, 1.0),
                                     power=1.0, length=5.0, radius=0.5)
        a = single(make_state, (2.0, 0.0, 1.0))
        b = single(make_state, (2.0, 0.0, 1.0))
        line.apply(a)
        narrow.apply(b)
        np.testing.assert_array_equal(a.data, b.data)


class TestVortex:

    @pytest.fixture
    def vortex(self):
        return init_vortex([0], anchor=(0.0, 0.0, 0.0), axis=(0.0, 0.0, 1.0),
                           power=0.5, length=5.0, radius=2.0)

    def test_on_axis_is_unaffected(self, make_state, vortex):
        state = single(make_state, (0.0, 0.0, 1.0))
        vortex.apply(state)
        assert np.isfinite(state.data).all()
        assert not state.velocities().any()

    def test_inside_radius_gets_rotational_velocity(self, make_state, vortex):
        # r = radius / 2
        state = single(make_state, (1.0, 0.0, 1.0))
        vortex.apply(state)
        frequency = min(VORTEX_MAX_FREQUENCY, (2.0 / 1.0) ** 0.5 * 2.0)
        omega = 2 * math.pi * frequency
        expected = [math.cos(omega) - 1.0, math.sin(omega), 0.0]
        velocity = state.velocity(0)
        np.testing.assert_allclose(velocity, expected, atol=1e-12)
        assert np.linalg.norm(velocity) > 0
        # A rotation moves the point at most one diameter.
        assert np.linalg.norm(velocity) <= 2.0 * 1.0 + 1e-12
        assert np.linalg.norm(velocity) < VORTEX_MAX_FREQUENCY

    def test_writes_velocity_not_force(self, make_state, vortex):
        state = single(make_state, (1.0, 0.0, 1.0))
        vortex.apply(state)
        assert not state.forces().any()
        np.testing.assert_array_equal(state.position(0), [1.0, 0.0, 1.0])

    def test_adds_onto_existing_velocity(self, make_state, vortex):
        still = single(make_state, (1.0, 0.0, 1.0))
        moving = single(make_state, (1.0, 0.0, 1.0), velocity=(0.0, 0.0, 3.0))
        vortex.apply(still)
        vortex.apply(moving)
        np.testing.assert_allclose(moving.velocity(0), still.velocity(0) + [0.0, 0.0, 3.0])

    def test_rotation_preserves_axial_offset(self, make_state):
        vortex = init_vortex([0], anchor=(1.0, 1.0, 1.0), axis=(1.0, 1.0, 0.0),
                             power=1.3, length=5.0, radius=3.0)
        state = single(make_state, (2.5, 1.5, 2.0))
        vortex.apply(state)
        axis = np.array([1.0, 1.0, 0.0]) / math.sqrt(2.0)
        assert np.dot(state.velocity(0), axis) == pytest.approx(0.0, abs=1e-12)
        assert np.linalg.norm(state.velocity(0)) > 0

    @pytest.mark.parametrize("position", [
        (2.0, 0.0, 1.0),   # at the influence radius
        (3.0, 0.0, 1.0),   # beyond it
        (1.0, 0.0, -1.0),  # behind the anchor
        (1.0, 0.0, 6.0),   # past the far end
    ])
    def test_outside_influence_is_unaffected(self, make_state, vortex, position):
        state = single(make_state, position)
        vortex.apply(state)
        assert not state.velocities().any()

    def test_rejects_zero_axis(self):
        with pytest.raises(ValueError):
            Vortex([0], (0, 0, 0), (0, 0, 0))


def test_point_attractor_defaults_have_no_reach(make_state):
    state = single(make_state, (1.0, 0.0, 0.0))
    PointAttractor([0], (0.0, 0.0, 0.0)).apply(state)
    assert not state.forces().any()
