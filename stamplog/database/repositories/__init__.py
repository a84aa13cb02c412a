"""
Data repositories package.

This package provides data access layer repositories for
the timestamp log and persisted display preferences.
"""

from .timestamp_repo import TimestampRepository
from .prefs_repo import PreferencesRepository

__all__ = [
    'TimestampRepository',
    'PreferencesRepository',
]
