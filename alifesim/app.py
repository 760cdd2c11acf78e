"""The main loop that steps a simulation and draws it."""

from __future__ import annotations

import argparse
import time

from alifesim.renderer import PygameRenderer, Renderer
from alifesim.simulation import ALife
from alifesim.state import State
from alifesim.systems import LargerThanLife


class App:
    """Runs a simulation until the renderer closes or ``stop`` is called."""

    def __init__(self, simulation: ALife, renderer: Renderer, delay: float = 0.1) -> None:
        if delay < 0:
            raise ValueError("Delay must not be negative.")
        self._simulation = simulation
        self._renderer = renderer
        self._delay = delay
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        """Handle events, draw, step and pause, for as long as the loop runs."""
        self._running = True
        while self._running and self._renderer.is_open():
            self._renderer.handle_events()
            self._renderer.render(self._simulation)
            self._simulation.step()
            if self._delay:
                time.sleep(self._delay)
        self._running = False

    def stop(self) -> None:
        """Make ``run`` return after the current iteration."""
        self._running = False


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="alifesim", description="Run a Larger than Life simulation in a window."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the initial state")
    parser.add_argument(
        "--delay", type=float, default=0.1, help="seconds to pause between steps"
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    state = State(150, 150, 1)
    state.randomise_binary(0.4, rng=args.seed)
    simulation = LargerThanLife(state, 5, 35, 45, 34, 58)

    with PygameRenderer(200, 200, 5) as renderer:
        App(simulation, renderer, args.delay).run()
    return 0