"""
Top-level package for commitgate.

This package exposes the main CLI entry point via the
``commitgate.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
