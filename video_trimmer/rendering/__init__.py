"""Rendering layer facade(s).

Thin wrappers around moviepy's ffmpeg helpers so the export service does not
depend on low-level details and tests can patch a single seam.
"""

__all__ = [
    "facade",
]
