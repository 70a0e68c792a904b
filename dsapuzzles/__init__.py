"""Algorithm exercises and puzzle-event solvers."""

__version__ = "1.0.0"