"""Dining philosophers simulation: argument parsing, threaded table and command line."""

__version__ = "0.1.0"
__all__ = ["parsing", "simulation", "cli"]