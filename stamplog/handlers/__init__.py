"""
Command handlers package.

This package provides the command-line handlers and
centralized error handling.
"""

from .commands import register_commands
from .error_handler import handle_error

__all__ = [
    'register_commands',
    'handle_error',
]
