"""Artificial life simulations on a toroidal grid: Conway, Larger than Life, SmoothLife and Lenia."""

__version__ = "0.1.0"