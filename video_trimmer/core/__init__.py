"""
Core utilities and domain helpers for the video trimmer.

This package hosts pure, side‑effect‑free logic: time parsing/formatting,
range validation and output naming. I/O lives in ``video_trimmer.services``.
"""

__all__ = [
    "RangeValidationResult",
    "parse_time_input",
    "is_valid_time_input",
    "safe_parse_time_input",
    "format_time_input",
    "format_time_display",
    "calculate_duration",
    "validate_time_range",
    "format_duration_description",
    "VideoInfo",
    "parse_frame_rate",
    "bytes_to_gb",
    "sanitize_filename",
    "parse_filename_pattern",
    "build_versioned_name",
]

from .timeutils import (
    RangeValidationResult,
    parse_time_input,
    is_valid_time_input,
    safe_parse_time_input,
    format_time_input,
    format_time_display,
    calculate_duration,
    validate_time_range,
    format_duration_description,
)
from .media import VideoInfo, parse_frame_rate, bytes_to_gb
from .naming import sanitize_filename, parse_filename_pattern, build_versioned_name
