"""
Utility functions for interval and timestamp formatting.

- format_interval / IntervalFormatter: millisecond delta to "1d 2h 3m 4s 500ms".
- format_display: ISO instant to a locale-aware, 12-hour display string.
- format_export: ISO instant to a sortable "YYYY-MM-DD HH:MM:SS[.mmm]" string.
- format_timestamp: dispatch between the two using FormatOptions.

All functions are pure: no I/O and no state kept between calls.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Callable, List, Optional, Union

from babel import Locale, UnknownLocaleError
from babel.dates import format_skeleton, get_datetime_format

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

DEFAULT_LOCALE = "en_US"

Tracer = Callable[[str], None]
DurationLike = Union[int, float, Decimal, str, None]
InstantLike = Union[str, datetime]


def _no_trace(message: str) -> None:
    return None


class IntervalFormatter:
    """
    Render a millisecond count as space-separated unit segments.

    Rendering rules:
        - Once days, hours or minutes are non-zero, every smaller unit down
          to seconds is rendered even when zero ("1h 0m 0s").
        - Seconds are always rendered, so sub-second values give "0s".
        - include_milliseconds=True appends "Xms" (always, even "0ms") and
          seconds are floor-truncated.
        - include_milliseconds=False rounds the whole value half-up to the
          nearest second first; the carry propagates through every unit.

    Invalid input (None, NaN, infinity, bools, non-numeric values) returns
    an empty string, meaning "no previous entry to compare against".

    Args:
        trace: Optional callback receiving one diagnostic message per
            decomposition step. Defaults to a no-op.

    Example:
        >>> IntervalFormatter().format(90061001)
        '1d 1h 1m 1s 1ms'
        >>> IntervalFormatter().format(3599500, include_milliseconds=False)
        '1h 0m 0s'
    """

    def __init__(self, trace: Optional[Tracer] = None) -> None:
        self._trace = trace or _no_trace

    def format(self, total_milliseconds: DurationLike, include_milliseconds: bool = True) -> str:
        self._trace(f"format called with total_milliseconds={total_milliseconds!r}, "
                    f"include_milliseconds={include_milliseconds}")

        value = _to_milliseconds(total_milliseconds)
        if value is None:
            self._trace("input is not a valid number, returning empty string")
            return ""

        negative = value < 0
        magnitude = abs(value)

        if not include_milliseconds:
            # Round half-up to whole seconds before splitting so carries land in higher units
            magnitude = (magnitude + MS_PER_SECOND // 2) // MS_PER_SECOND * MS_PER_SECOND
            self._trace(f"rounded to whole seconds: {magnitude}ms")

        days, remainder = divmod(magnitude, MS_PER_DAY)
        self._trace(f"days={days}, remainder={remainder}ms")
        hours, remainder = divmod(remainder, MS_PER_HOUR)
        self._trace(f"hours={hours}, remainder={remainder}ms")
        minutes, remainder = divmod(remainder, MS_PER_MINUTE)
        self._trace(f"minutes={minutes}, remainder={remainder}ms")
        seconds, millis = divmod(remainder, MS_PER_SECOND)
        self._trace(f"seconds={seconds}, milliseconds={millis}")

        segments: List[str] = []
        if days > 0:
            segments.append(f"{days}d")
        if segments or hours > 0:
            segments.append(f"{hours}h")
        if segments or minutes > 0:
            segments.append(f"{minutes}m")
        segments.append(f"{seconds}s")
        if include_milliseconds:
            segments.append(f"{millis}ms")

        result = " ".join(segments)
        if negative and magnitude > 0:
            result = f"-{result}"

        self._trace(f"formatted result: {result!r}")
        return result

    __call__ = format


def _to_milliseconds(value: DurationLike) -> Optional[int]:
    """Coerce a duration to whole milliseconds, or None when it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number)


_default_interval_formatter = IntervalFormatter()


def format_interval(
    total_milliseconds: DurationLike,
    include_milliseconds: bool = True,
    trace: Optional[Tracer] = None,
) -> str:
    """
    Format a millisecond duration, e.g. 3661000 -> "1h 1m 1s 0ms".

    Thin wrapper over IntervalFormatter for callers that do not keep an
    instance around.
    """
    formatter = IntervalFormatter(trace) if trace else _default_interval_formatter
    return formatter.format(total_milliseconds, include_milliseconds)


@dataclass(frozen=True)
class FormatOptions:
    """Per-call timestamp rendering options."""

    include_milliseconds: bool = True
    locale: str = DEFAULT_LOCALE
    export_mode: bool = False
    tz: Optional[tzinfo] = None


def parse_instant(instant: InstantLike) -> datetime:
    """
    Parse an ISO-8601 instant into a datetime.

    - Accepts a trailing 'Z' (Zulu/UTC) suffix.
    - Datetime objects are passed through unchanged.
    - Naive results are left naive; they are interpreted in the target
      zone when localized.

    Raises:
        ValueError: if the string is not a valid ISO-8601 date-time
    """
    if isinstance(instant, datetime):
        return instant
    if not isinstance(instant, str):
        raise ValueError(f"Invalid instant: {instant!r}")

    # Normalize 'Z' (Zulu/UTC) suffix to '+00:00' for fromisoformat compatibility
    s = instant.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)


def _localize(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    """Express dt in tz, or in the host's local zone when tz is None."""
    if tz is None:
        # astimezone() on a naive value treats it as host local time
        return dt.astimezone()
    if dt.tzinfo is None:
        # pytz-style timezone (has .localize) vs zoneinfo (no .localize)
        if hasattr(tz, "localize"):
            return tz.localize(dt)
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def _resolve_locale(locale: Optional[str]) -> Locale:
    identifier = (locale or DEFAULT_LOCALE).strip().replace("-", "_")
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Unknown locale '{locale}', falling back to {DEFAULT_LOCALE}: {e}")
        return Locale.parse(DEFAULT_LOCALE)


def format_display(
    instant: InstantLike,
    include_milliseconds: bool = True,
    locale: str = DEFAULT_LOCALE,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Format an instant for on-screen display.

    Uses the locale's conventions for numeric year, abbreviated month,
    numeric day and a 12-hour clock with seconds, joined by the locale's
    medium date-time pattern. With milliseconds the value is appended as
    " (NNNms)".

    Example:
        >>> format_display("2025-06-20T14:03:05.123Z", True, "en_US", pytz.UTC)
        'Jun 20, 2025, 2:03:05 PM (123ms)'
    """
    local = _localize(parse_instant(instant), tz)
    babel_locale = _resolve_locale(locale)

    date_part = format_skeleton("yMMMd", local, locale=babel_locale)
    time_part = format_skeleton("hms", local, locale=babel_locale)
    pattern = get_datetime_format("medium", locale=babel_locale)
    text = pattern.replace("'", "").replace("{0}", time_part).replace("{1}", date_part)

    if include_milliseconds:
        text = f"{text} ({local.microsecond // 1000:03d}ms)"
    return text


def format_export(
    instant: InstantLike,
    include_milliseconds: bool = True,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Format an instant as a fixed, locale-independent, sortable string.

    Example:
        >>> format_export("2025-06-20T14:03:05.123Z", True, pytz.UTC)
        '2025-06-20 14:03:05.123'
    """
    d = _localize(parse_instant(instant), tz)
    text = f"{d.year:04d}-{d.month:02d}-{d.day:02d} {d.hour:02d}:{d.minute:02d}:{d.second:02d}"
    if include_milliseconds:
        text += f".{d.microsecond // 1000:03d}"
    return text


def format_timestamp(instant: InstantLike, options: FormatOptions = FormatOptions()) -> str:
    if options.export_mode:
        return format_export(instant, options.include_milliseconds, options.tz)
    return format_display(instant, options.include_milliseconds, options.locale, options.tz)
