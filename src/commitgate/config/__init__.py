"""
Configuration loading for commitgate.

Provides the immutable :class:`Settings` value built from environment
variables. See :mod:`commitgate.config.loader` for implementation details.
"""

from .loader import ConfigError, Settings, load_settings  # noqa: F401
