"""Client and convergence helpers for the GleSYS DNS API."""

__version__ = "0.1.0"
