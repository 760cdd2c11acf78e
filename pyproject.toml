[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alifesim"
version = "0.1.0"
description = "Artificial life simulations on a toroidal grid: Conway, Larger than Life, SmoothLife and Lenia"
requires-python = ">=3.10"
keywords = [
    "artificial life",
    "cellular automata",
    "game of life",
    "larger than life",
    "smoothlife",
    "lenia",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
alifesim = "alifesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["alifesim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
