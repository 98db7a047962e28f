"""Service layer modules (ffmpeg and filesystem I/O).

Currently includes probing and export helpers.
"""

__all__ = [
    "errors",
    "probe",
    "export",
]
