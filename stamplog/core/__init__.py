"""
Core utilities package.

This package provides essential utilities for the application,
including logging configuration and the exception hierarchy.
"""

from .logger import setup_logger, make_tracer
from .exceptions import StampLogError, RecordNotFoundError, NothingToExportError, StorageError

__all__ = [
    'setup_logger',
    'make_tracer',
    'StampLogError',
    'RecordNotFoundError',
    'NothingToExportError',
    'StorageError',
]
