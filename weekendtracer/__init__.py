"""A small Monte Carlo ray tracer with materials, volumes, noise and sampling experiments."""

__version__ = "0.1.0"