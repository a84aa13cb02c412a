"""
Configuration package.

This package provides application configuration management
via Settings class loaded from environment variables.
"""

from .settings import Settings, env_bool, env_file

__all__ = ['Settings', 'env_bool', 'env_file']
