"""Escape-time fractal rendering, view state and key handling, with small text utilities."""

__version__ = "0.1.0"