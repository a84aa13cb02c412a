"""
Timestamp logger.

Records instants on demand, shows them newest first with the interval
between consecutive entries, keeps optional notes and exports the log as CSV.
"""

__version__ = "1.0.0"
