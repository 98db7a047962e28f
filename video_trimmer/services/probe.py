"""Media probing services (ffmpeg via moviepy).

Reads duration and stream details of a local file. Everything that touches
the ffmpeg binary is isolated here so the CLI and tests can mock it.
"""
from __future__ import annotations

from pathlib import Path
import logging
import subprocess

from moviepy.config import FFMPEG_BINARY
from moviepy.video.io.ffmpeg_reader import ffmpeg_parse_infos

from video_trimmer.core import VideoInfo
from .errors import FFmpegError, PathError, ProbeError

logger = logging.getLogger(__name__)


def validate_input_path(path) -> Path:
    """Return ``path`` as a ``Path`` if it points at an existing file."""
    p = Path(path)
    if not p.exists():
        raise PathError(f"File does not exist: {p}")
    if not p.is_file():
        raise PathError(f"Path is not a file: {p}")
    return p


def check_ffmpeg_installed(timeout: int = 10) -> bool:
    """Run ``ffmpeg -version`` with the binary moviepy is configured with.

    Returns True on success. Raises ``FFmpegError`` if it cannot be run.
    """
    logger.debug("Checking ffmpeg binary: %s", FFMPEG_BINARY)
    try:
        subprocess.run(
            [FFMPEG_BINARY, '-version'],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.error("ffmpeg is not available (%s): %s", FFMPEG_BINARY, e)
        raise FFmpegError(f"ffmpeg is not installed or not runnable: {e}")
    return True


def _parse_infos(path: Path) -> dict:
    try:
        return ffmpeg_parse_infos(str(path))
    except Exception as e:
        logger.error("Failed to probe %s: %s", path, e)
        raise ProbeError(str(e))


def get_video_info(path) -> VideoInfo:
    """Probe ``path`` and return its :class:`VideoInfo`.

    Raises ``PathError`` for a missing file and ``ProbeError`` when ffmpeg
    cannot read it or it has no video stream.
    """
    p = validate_input_path(path)
    logger.info("Probing video: %s", p)
    infos = _parse_infos(p)

    if not infos.get('video_found'):
        raise ProbeError(f"No video stream found in {p}")

    size = infos.get('video_size') or (0, 0)
    info = VideoInfo(
        duration=float(infos.get('duration') or 0.0),
        width=int(size[0]),
        height=int(size[1]),
        fps=float(infos.get('video_fps') or 0.0),
        codec=infos.get('video_codec_name') or 'unknown',
        format=p.suffix[1:].lower() or 'unknown',
    )
    logger.debug("Probe result for %s: %s", p, info)
    return info


def get_video_duration(path) -> float:
    """Return only the duration of ``path`` in seconds."""
    p = validate_input_path(path)
    infos = _parse_infos(p)
    duration = infos.get('duration')
    if not duration:
        raise ProbeError(f"Could not read video duration of {p}")
    return float(duration)
