"""
Utility functions package.

Exposes helpers for interval and timestamp formatting.
"""

from .formatters import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    FormatOptions,
    IntervalFormatter,
    format_display,
    format_export,
    format_interval,
    format_timestamp,
    parse_instant,
)

__all__ = [
    'MS_PER_SECOND',
    'MS_PER_MINUTE',
    'MS_PER_HOUR',
    'MS_PER_DAY',
    'FormatOptions',
    'IntervalFormatter',
    'format_display',
    'format_export',
    'format_interval',
    'format_timestamp',
    'parse_instant',
]
