"""Media description types and small numeric helpers."""
from __future__ import annotations

from dataclasses import dataclass, asdict


@dataclass
class VideoInfo:
    """Probe result for a loaded clip."""

    duration: float     # seconds
    width: int
    height: int
    fps: float
    codec: str
    format: str         # container

    def to_dict(self):
        return asdict(self)


def parse_frame_rate(text: str) -> float:
    """Convert an ffmpeg rational frame rate to a float.

    ``"30000/1001"`` -> ``29.97...``, ``"25/1"`` -> ``25.0``. Returns ``0.0``
    for anything that is not ``num/den`` with a non-zero denominator.
    """
    parts = text.split('/')
    if len(parts) != 2:
        return 0.0
    try:
        num = float(parts[0])
        den = float(parts[1])
    except ValueError:
        return 0.0
    if den == 0:
        return 0.0
    return num / den


def bytes_to_gb(size: int) -> float:
    return size / (1024 * 1024 * 1024)
