"""Thin wrapper around moviepy's ffmpeg tools for cutting a range."""
from __future__ import annotations

import logging

from moviepy.video.io.ffmpeg_tools import ffmpeg_extract_subclip

from video_trimmer.services.errors import FFmpegError

logger = logging.getLogger(__name__)


def extract_clip(input_path, start_time: float, end_time: float, output_path) -> str:
    """Stream-copy ``[start_time, end_time]`` of ``input_path`` to ``output_path``.

    No re-encoding happens, so cut points snap to the nearest keyframes.
    Returns ``output_path`` as a string.
    """
    logger.info("Extracting %.3fs-%.3fs from %s -> %s",
                start_time, end_time, input_path, output_path)
    try:
        ffmpeg_extract_subclip(str(input_path), start_time, end_time,
                               str(output_path), logger=None)
    except Exception as e:
        logger.error("ffmpeg failed to cut %s: %s", input_path, e)
        raise FFmpegError(str(e))
    return str(output_path)
