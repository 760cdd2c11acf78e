from unittest import mock

import numpy as np
import pygame
import pytest

from alifesim.app import App, main
from alifesim.renderer import Renderer
from alifesim.state import State
from alifesim.systems import Conway


class FakeRenderer(Renderer):
    def __init__(self, frames):
        self.frames_left = frames
        self.rendered = []
        self.events_handled = 0
        self.on_render = None

    def render(self, sim):
        self.rendered.append(sim.state.data.copy())
        self.frames_left -= 1
        if self.on_render is not None:
            self.on_render()

    def handle_events(self):
        self.events_handled += 1

    def is_open(self):
        return self.frames_left > 0


def _blinker():
    state = State(5, 5)
    for c in (1, 2, 3):
        state[2, c] = 1.0
    return state


def test_run_renders_then_steps_until_closed():
    state = _blinker()
    initial = state.data.copy()
    sim = Conway(state)
    renderer = FakeRenderer(2)
    App(sim, renderer, delay=0).run()
    assert renderer.events_handled == 2
    assert len(renderer.rendered) == 2
    assert np.array_equal(renderer.rendered[0], initial)
    assert not np.array_equal(renderer.rendered[1], initial)
    # two steps of a blinker bring it back
    assert np.array_equal(sim.state.data, initial)


def test_stop_ends_the_loop_after_current_iteration():
    state = _blinker()
    initial = state.data.copy()
    sim = Conway(state)
    renderer = FakeRenderer(10)
    app = App(sim, renderer, delay=0)
    renderer.on_render = app.stop
    app.run()
    assert len(renderer.rendered) == 1
    assert not app.running
    assert not np.array_equal(sim.state.data, initial)


def test_closed_renderer_runs_nothing():
    state = _blinker()
    initial = state.data.copy()
    renderer = FakeRenderer(0)
    App(Conway(state), renderer, delay=0).run()
    assert renderer.rendered == []
    assert np.array_equal(state.data, initial)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        App(Conway(State(3, 3)), FakeRenderer(1), delay=-1)


def test_main_negative_delay_exits(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with pytest.raises(SystemExit):
        main(["--delay", "-1"])


def test_main_runs_until_window_closed(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]) as get_events:
        result = main(["--seed", "1", "--delay", "0"])
    assert result == 0
    assert get_events.call_count == 1