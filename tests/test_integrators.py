import numpy as np
import pytest

from alifesim.integrators import DiscreteIntegrator, EulerIntegrator
from alifesim.simulation import Field
from alifesim.state import State


def _random_state(seed, rows=5, cols=6):
    state = State(rows, cols)
    state.randomise_continuous(rng=seed)
    return state


def _random_field(seed, rows=5, cols=6):
    field = Field(rows, cols)
    field.data[:, :, 0] = np.random.default_rng(seed).uniform(-1.0, 1.0, (rows, cols))
    return field


def test_discrete_replaces_state():
    state = _random_state(1)
    update = _random_field(2)
    DiscreteIntegrator().integrate(state, update)
    np.testing.assert_array_equal(state.data, update.data)


def test_euler_with_zero_dt_is_identity():
    state = _random_state(3)
    before = state.data.copy()
    EulerIntegrator(0.0).integrate(state, _random_field(4))
    np.testing.assert_array_equal(state.data, before)


def test_euler_half_steps_match_full_step():
    update = _random_field(6)
    halves = _random_state(5)
    full = _random_state(5)
    EulerIntegrator(0.5).integrate(halves, update)
    EulerIntegrator(0.5).integrate(halves, update)
    EulerIntegrator(1.0).integrate(full, update)
    np.testing.assert_allclose(halves.data, full.data)


def test_euler_forward_then_backward_returns():
    state = _random_state(7)
    before = state.data.copy()
    update = _random_field(8)
    EulerIntegrator(0.25).integrate(state, update)
    EulerIntegrator(-0.25).integrate(state, update)
    np.testing.assert_allclose(state.data, before, atol=1e-12)


@pytest.mark.parametrize("integrator", [DiscreteIntegrator(), EulerIntegrator(1.0)])
def test_mismatched_update_is_rejected(integrator):
    with pytest.raises(ValueError):
        integrator.integrate(State(3, 3), Field(4, 3))