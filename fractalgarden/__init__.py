"""Recursive motif fractals grown on an interactive canvas."""

__version__ = "0.1.0"
