"""Pure time helpers for the trim form: parse typed timestamps, format
seconds back for fields and labels, and check a range against a clip.

Nothing here raises on bad input. Parsing returns ``None`` when the text is
not a time, formatting clamps negative values, and range validation returns
a :class:`RangeValidationResult`.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

ERR_NEGATIVE_START = 'Start time cannot be negative'
ERR_END_NOT_AFTER_START = 'End time must be greater than start time'
ERR_START_EXCEEDS_DURATION = 'Start time exceeds video duration'
ERR_END_EXCEEDS_DURATION = 'End time exceeds video duration'

INVALID_RANGE_DESCRIPTION = 'Invalid time range'

# ASCII digits only, so locale numerals and "1_0" are rejected.
_SEGMENT_RE = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class RangeValidationResult:
    """Outcome of :func:`validate_time_range`.

    ``error`` is ``None`` exactly when ``is_valid`` is true.
    """

    is_valid: bool
    error: Optional[str] = None

    def raise_for_error(self) -> None:
        """Raise ``ValidationError`` if the range was rejected."""
        if not self.is_valid:
            from video_trimmer.services.errors import ValidationError
            raise ValidationError(self.error)


def _split_hms(seconds: float):
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return hours, minutes, secs


def _parse_segment(segment: str) -> Optional[int]:
    if not _SEGMENT_RE.fullmatch(segment):
        return None
    return int(segment)


def parse_time_input(text: Optional[str]) -> Optional[int]:
    """Convert ``SS``, ``MM:SS`` or ``HH:MM:SS`` text to seconds.

    ``"30"`` -> 30, ``"1:30"`` -> 90, ``"1:30:45"`` -> 5445. Returns ``None``
    for empty input, non-numeric segments (``"12abc:30"``), out-of-range
    minutes/seconds, negative values or a wrong number of segments.
    """
    if text is None or not text.strip():
        return None

    parts = [_parse_segment(p) for p in text.strip().split(':')]
    if any(p is None for p in parts):
        return None

    if len(parts) == 1:
        (secs,) = parts
        return secs if secs >= 0 else None
    if len(parts) == 2:
        minutes, secs = parts
        if minutes >= 0 and 0 <= secs < 60:
            return minutes * 60 + secs
        return None
    if len(parts) == 3:
        hours, minutes, secs = parts
        if hours >= 0 and 0 <= minutes < 60 and 0 <= secs < 60:
            return hours * 3600 + minutes * 60 + secs
        return None
    return None


def is_valid_time_input(text: Optional[str]) -> bool:
    return parse_time_input(text) is not None


def safe_parse_time_input(text: Optional[str], default: float = 0) -> float:
    """Like :func:`parse_time_input` but falls back to ``default``."""
    parsed = parse_time_input(text)
    return parsed if parsed is not None else default


def format_time_input(seconds: float) -> str:
    """Format seconds for an editable field: ``M:SS`` or ``H:MM:SS``.

    Hours and minutes are not padded, fractions are floored, negative
    values give ``"00:00"``.
    """
    if seconds < 0:
        return '00:00'

    hours, minutes, secs = _split_hms(seconds)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_time_display(seconds: float, include_milliseconds: bool = False) -> str:
    """Format seconds as zero-padded ``HH:MM:SS`` (optionally ``.mmm``).

    Negative values give ``"00:00:00"``.
    """
    if seconds < 0:
        return '00:00:00'

    hours, minutes, secs = _split_hms(seconds)
    result = f"{hours:02d}:{minutes:02d}:{secs:02d}"

    if include_milliseconds:
        millis = math.floor((seconds % 1) * 1000)
        result += f".{millis:03d}"
    return result


def calculate_duration(start_time: float, end_time: float) -> float:
    return max(0, end_time - start_time)


def validate_time_range(start_time: float, end_time: float,
                        duration: float) -> RangeValidationResult:
    """Check a ``[start, end]`` selection against the clip ``duration``.

    The first failing check is reported; ``duration`` itself is trusted.
    """
    if start_time < 0:
        return RangeValidationResult(False, ERR_NEGATIVE_START)
    if end_time <= start_time:
        return RangeValidationResult(False, ERR_END_NOT_AFTER_START)
    if start_time > duration:
        return RangeValidationResult(False, ERR_START_EXCEEDS_DURATION)
    if end_time > duration:
        return RangeValidationResult(False, ERR_END_EXCEEDS_DURATION)
    return RangeValidationResult(True, None)


def format_duration_description(start_time: float, end_time: float) -> str:
    """Describe the span between two times, e.g. ``"1h2m5s"`` or ``"45s"``.

    Zero-valued hours and minutes are omitted; seconds are kept when nothing
    else was emitted. An empty or reversed span gives
    :data:`INVALID_RANGE_DESCRIPTION`.
    """
    duration = calculate_duration(start_time, end_time)
    if duration == 0:
        return INVALID_RANGE_DESCRIPTION

    hours, minutes, secs = _split_hms(duration)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return ''.join(parts)
