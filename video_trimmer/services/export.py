"""Export service: cut a validated range into a new versioned file.

Output naming is pure (``core.naming``); this module adds the directory scan,
the disk space check and the actual ffmpeg call via the rendering facade.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional
import logging
import os
import shutil

from video_trimmer.core import bytes_to_gb, validate_time_range
from video_trimmer.core.naming import (
    build_versioned_name,
    extract_version,
    parse_filename_pattern,
    version_prefix,
)
from video_trimmer.rendering.facade import extract_clip
from .errors import FilesystemError, InsufficientSpaceError, PathError
from .probe import get_video_duration, validate_input_path

logger = logging.getLogger(__name__)

DEFAULT_SIZE_BUFFER = 0.1
DEFAULT_SPACE_MARGIN = 0.2


def find_max_version(directory, base: str, ext: str, prefix: str = '') -> int:
    """Return the highest version already used in ``directory`` (0 if none)."""
    max_version = 0
    try:
        entries = list(os.scandir(directory))
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return 0
    for entry in entries:
        if not entry.is_file():
            continue
        version = extract_version(entry.name, base, ext, prefix)
        if version is not None and version > max_version:
            max_version = version
    return max_version


def generate_next_filename(input_path, notes: Optional[str] = None,
                           output_dir=None) -> Path:
    """Pick the next free versioned name for a trim of ``input_path``."""
    src = Path(input_path)
    directory = Path(output_dir) if output_dir else src.parent
    try:
        base, ext, versions = parse_filename_pattern(str(src))
    except ValueError as e:
        raise PathError(str(e))

    prefix = version_prefix(versions)
    next_version = find_max_version(directory, base, ext, prefix) + 1
    name = build_versioned_name(base, ext, versions, next_version, notes)
    return directory / name


def estimate_output_size(input_path, start_time: float, end_time: float,
                         total_duration: float,
                         size_buffer: float = DEFAULT_SIZE_BUFFER) -> int:
    """Estimate the trimmed file size as the duration share of the input."""
    try:
        input_size = os.path.getsize(input_path)
    except OSError as e:
        raise FilesystemError(f"Cannot read file size: {e}")
    if total_duration <= 0:
        return input_size
    ratio = (end_time - start_time) / total_duration
    return int(input_size * ratio * (1 + size_buffer))


def check_disk_space(output_path, estimated_size: int,
                     margin: float = DEFAULT_SPACE_MARGIN) -> None:
    """Raise ``InsufficientSpaceError`` unless the output disk has room."""
    parent = Path(output_path).parent
    try:
        available = shutil.disk_usage(parent).free
    except OSError as e:
        raise FilesystemError(f"Cannot read free disk space: {e}")

    required = estimated_size + int(estimated_size * margin)
    logger.debug("Disk space for %s: required=%d available=%d", parent, required, available)
    if available < required:
        raise InsufficientSpaceError(
            needed_gb=bytes_to_gb(required),
            available_gb=bytes_to_gb(available),
            path=str(parent),
        )


def cut_video(input_path, start_time: float, end_time: float,
              notes: Optional[str] = None, output_dir=None,
              size_buffer: float = DEFAULT_SIZE_BUFFER,
              space_margin: float = DEFAULT_SPACE_MARGIN) -> Path:
    """Trim ``[start_time, end_time]`` of ``input_path`` into a new file.

    Returns the path of the created file. Raises a ``TrimmerError`` subclass
    on any failure; nothing is written if validation fails.
    """
    src = validate_input_path(input_path)
    total = get_video_duration(src)
    validate_time_range(start_time, end_time, total).raise_for_error()

    output_path = generate_next_filename(src, notes, output_dir)
    try:
        os.makedirs(output_path.parent, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Cannot create output directory: {e}")
    estimated = estimate_output_size(src, start_time, end_time, total, size_buffer)
    check_disk_space(output_path, estimated, space_margin)

    extract_clip(src, start_time, end_time, output_path)

    if not output_path.exists():
        raise FilesystemError(f"Trim finished but output file is missing: {output_path}")
    logger.info("Trimmed %s -> %s", src, output_path)
    return output_path
