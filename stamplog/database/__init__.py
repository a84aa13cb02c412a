"""
Database package.

This package provides the record model and local-file
repositories for the timestamp log and preferences.
"""

from .models import TimestampRecord
from .repositories import TimestampRepository, PreferencesRepository

__all__ = [
    'TimestampRecord',
    'TimestampRepository',
    'PreferencesRepository',
]
