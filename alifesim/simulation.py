"""The simulation pipeline: observe, derive an update, integrate, constrain."""

from __future__ import annotations

from abc import ABC, abstractmethod

from alifesim.grid import Grid
from alifesim.state import State

# A field holds spatial information derived from a state, such as
# neighbour counts or convolution potentials.
Field = Grid


class Observation(ABC):
    """Derives a field of spatial information from the current state."""

    @abstractmethod
    def observe(self, state: State) -> Field:
        """Return the observed field for ``state``."""


class UpdateRule(ABC):
    """Turns an observed field into an update field."""

    @abstractmethod
    def apply(self, state: State, observed: Field) -> Field:
        """Return the update for ``state`` given what was observed."""


class Integrator(ABC):
    """Applies an update field to the state in place."""

    @abstractmethod
    def integrate(self, state: State, update: Field) -> None:
        """Advance ``state`` by ``update``."""


class Constraint(ABC):
    """Restricts the values of a state in place."""

    @abstractmethod
    def apply(self, state: State) -> None:
        """Bring ``state`` back within the allowed values."""


class ALife:
    """An artificial-life system assembled from its four stages."""

    def __init__(
        self,
        initial_state: State,
        observation: Observation,
        update_rule: UpdateRule,
        integrator: Integrator,
        constraint: Constraint,
    ) -> None:
        self._state = initial_state
        self._observation = observation
        self._update_rule = update_rule
        self._integrator = integrator
        self._constraint = constraint

    @property
    def state(self) -> State:
        return self._state

    def step(self) -> None:
        """Advance the world by one time step."""
        observed = self._observation.observe(self._state)
        update = self._update_rule.apply(self._state, observed)
        self._integrator.integrate(self._state, update)
        self._constraint.apply(self._state)