# alifesim

A small framework for artificial life simulations on a wrap-around
(toroidal) grid. It has four systems built in, in `alifesim.systems`:

- **`Conway`**: the classic Game of Life with a radius-1 Moore neighbourhood.
- **`LargerThanLife`**: Game of Life with a larger square neighbourhood and
  separate, inclusive birth and survival ranges.
- **`SmoothLife`**: a continuous-state system driven by the mean density of
  an inner disc (radius `r`) and of the ring around it (out to `3r`).
- **`Lenia`**: a continuous-state system that convolves the world with a
  kernel (computed through FFTs) and then applies a Gaussian growth function.

Every system splits a single time step into four stages, each an abstract
class in `alifesim.simulation`:

1. an `Observation` measures the world: neighbour counts, disc densities or
   a convolution (`alifesim.observations`: `NbrObservation`,
   `SmoothObservation`, `ConvObservation`, `FFTConvObservation`);
2. an `UpdateRule` turns that observation into an update field
   (`alifesim.rules`: `ConwayRule`, `LargerThanLifeRule`, `SmoothLifeRule`,
   `LeniaRule`);
3. an `Integrator` applies the update, either replacing the state
   (`DiscreteIntegrator`) or taking an Euler step scaled by `dt`
   (`EulerIntegrator`), in `alifesim.integrators`;
4. a `Constraint` keeps the state valid, either making it binary
   (`BinaryConstraint`, threshold 0.5) or clamping it (`ClampConstraint`),
   in `alifesim.constraints`.

Pass one of each to `ALife` to build your own system; `ALife.step()` runs
the four stages once and `ALife.state` is the world.

## Installation

```
pip install .
```

This installs `numpy` and `pygame`. Install the test extra with
`pip install .[test]`.

## Running the demo

```
alifesim
```

This opens a window titled "ALife" and runs a Larger than Life world. The
world is a 150 × 150 grid, filled at random with a 40% chance that each cell
is alive. The rule uses neighbourhood radius 5, birth range 35–45 and
survival range 34–58. The window is 200 × 200 cells of 5 pixels each, and
the world is centred in it with a faint border. Close the window to stop.

Options:

- `--seed N`: seed the random initial state, so runs can be repeated.
- `--delay SECONDS`: pause between steps (default `0.1`; must not be
  negative).

## Using the library

### A Conway world

```python
from alifesim.state import State
from alifesim.systems import Conway

state = State(64, 64, 1)
state.randomise_binary(0.4, rng=1)

sim = Conway(state)
for _ in range(100):
    sim.step()
```

`State` offers `randomise_binary`, `randomise_continuous` and
`randomise_continuous_disc` (which fills only the cells within a radius of
the centre). Each fills channel 0 and takes an optional `rng`: `None`, a
seed, or a `numpy.random.Generator`. Cells are read and written as
`state[row, col]` or `state[row, col, channel]`; `state.data` is the live
`(rows, cols, channels)` array.

### Lenia with a custom kernel

```python
from alifesim.kernel import Kernel
from alifesim.state import State
from alifesim.systems import Lenia

state = State(128, 128, 1)
state.randomise_continuous_disc(20, 0.0, 1.0)

kernel = Kernel.gaussian_rings(13, 0.5, 0.15, [1.0])
sim = Lenia(state, kernel, 0.15, 0.015, 0.1)
sim.step()
```

There are four kernel builders. Each returns a kernel whose weights are
normalised to sum to one:

- `Kernel.uniform_square(side_length)`: every cell has the same weight.
- `Kernel.gaussian(radius, sigma)`: the weight falls off as a Gaussian of the
  distance from the centre.
- `Kernel.multi_ring(radius, beta, alpha=4.0)`: concentric smooth rings.
  Each value in `beta` sets the strength of one ring.
- `Kernel.gaussian_rings(radius, mu, sigma, beta)`: concentric rings whose
  profile is a Gaussian.

### Placing patterns

```python
from alifesim.pattern import Pattern
from alifesim.state import State

glider = Pattern(3, 3, 1, [0, 1, 0,
                           0, 0, 1,
                           1, 1, 1])
state = State(32, 32, 1)
state.place_pattern_centred(glider)
```

`place_pattern_at(pattern, start_row, start_col)` places it at a given
cell. Both raise `ValueError` if the channel counts differ or the pattern
does not fit.

Patterns can also be loaded from JSON with
`alifesim.patterns.load_pattern_preset(path)`, which returns a
`PatternPreset` with `name`, `system`, `desc` and `pattern`:

```json
{
  "name": "glider",
  "system": "conway",
  "desc": "The smallest spaceship",
  "rows": 3,
  "cols": 3,
  "channels": 1,
  "values": [0, 1, 0, 0, 0, 1, 1, 1, 1]
}
```

### Simulation presets

`alifesim.config.load_simulation_preset(path)` reads a preset file into a
`SimulationPreset`. The `parameters` section is read according to the
system (`LeniaConfig`, `LargerThanLifeConfig` or `SmoothLifeConfig`);
`alifesim.config.kernel_from_config(config)` builds a `Kernel` from the
kernel section of a Lenia preset.

```json
{
  "name": "orbium-like",
  "system": "lenia",
  "desc": "A Lenia world with a single-ring kernel",
  "world": { "rows": 128, "cols": 128, "channels": 1 },
  "parameters": {
    "kernel": { "type": "gaussian_rings", "radius": 13, "mu": 0.5, "sigma": 0.15, "beta": [1.0] },
    "growth": { "mu": 0.15, "sigma": 0.015 },
    "dt": 0.1
  }
}
```

The valid system names are `conway`, `larger_than_life`, `smoothlife` and
`lenia` (see `alifesim.system_type.SystemType`). The valid kernel types are
`gaussian_rings`, `multi_ring`, `gaussian` and `uniform_square`.

An unknown system name or kernel type, or a value of the wrong kind, raises
`ValueError`; a missing required key raises `KeyError`. A file that cannot
be opened raises `OSError` naming the path.

### Showing a simulation

```python
from alifesim.app import App
from alifesim.renderer import PygameRenderer

with PygameRenderer(200, 200, 5) as renderer:
    App(sim, renderer, 0.1).run()
```

`App.run()` handles window events, draws, steps and pauses until the window
is closed or `App.stop()` is called. Cells are drawn in shades of grey, and
the brightness follows the cell value; cells with a value of zero or below
are not drawn. Any class implementing `alifesim.renderer.Renderer`
(`render`, `handle_events`, `is_open`) can take the place of
`PygameRenderer`.

## What it does not do

The `alifesim` command always runs the built-in Larger than Life demo. It
does not take a preset or pattern file; loading presets and building the
matching system from them is left to your own code.