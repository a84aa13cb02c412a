"""
Services package.

This package provides business logic services for recording
timestamps and exporting the log.
"""

from .tracker import TimestampTracker, TimestampRow, elapsed_ms
from .exporter import CsvExporter

__all__ = [
    'TimestampTracker',
    'TimestampRow',
    'elapsed_ms',
    'CsvExporter',
]
