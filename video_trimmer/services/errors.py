"""Custom exceptions for service layer operations."""


class TrimmerError(Exception):
    """Base class for failures while probing or trimming a video."""

    prefix = 'Error'

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.prefix}: {self.message}"


class FFmpegError(TrimmerError):
    """Raised when ffmpeg is missing or an ffmpeg run fails."""

    prefix = 'FFmpeg error'


class ProbeError(TrimmerError):
    """Raised when reading stream information from a file fails."""

    prefix = 'Probe error'


class FilesystemError(TrimmerError):
    """Raised when reading or writing files on disk fails."""

    prefix = 'Filesystem error'


class ValidationError(TrimmerError):
    """Raised when a requested trim range is rejected."""

    prefix = 'Validation error'


class PathError(TrimmerError):
    """Raised when an input or output path is unusable."""

    prefix = 'Path error'


class InsufficientSpaceError(TrimmerError):
    """Raised when the output disk cannot hold the trimmed file."""

    def __init__(self, needed_gb: float, available_gb: float, path: str):
        self.needed_gb = needed_gb
        self.available_gb = available_gb
        self.path = path
        super().__init__(
            f"Insufficient disk space. Needed: {needed_gb:.2f} GB, "
            f"available: {available_gb:.2f} GB, path: {path}"
        )

    def __str__(self):
        return self.message
