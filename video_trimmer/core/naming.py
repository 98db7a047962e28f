"""Pure helpers for naming trimmed outputs.

Trims are saved next to the source with a version suffix:
``video.mp4`` -> ``video_1.mp4``, ``video_2.mp4``; trimming ``video_1.mp4``
again gives ``video_1_1.mp4``. Optional notes are appended after the version.
"""
from __future__ import annotations

import os
import re
from typing import List, Optional, Tuple

_DIGITS_RE = re.compile(r"[0-9]+")
_FORBIDDEN = set('<>"|?*/\\')


def _is_number(part: str) -> bool:
    return bool(_DIGITS_RE.fullmatch(part))


def sanitize_filename(name: str) -> str:
    """Replace characters that break file names with ``_``.

    Only Windows-reserved characters, path separators and control characters
    are touched; colons and spaces are kept.
    """
    cleaned = ''.join(
        '_' if (ch in _FORBIDDEN or ord(ch) < 32 or ord(ch) == 127) else ch
        for ch in name
    )
    return cleaned.strip()


def parse_filename_pattern(path: str) -> Tuple[str, str, List[int]]:
    """Split ``path`` into ``(base, ext, versions)``.

    ``"video_1_2.mp4"`` -> ``("video", "mp4", [1, 2])``. A single-part stem or
    an all-numeric stem (``"1_2.mp4"``) has no versions. The extension
    defaults to ``mp4``.
    """
    stem, ext = os.path.splitext(os.path.basename(path))
    ext = ext[1:] if ext else 'mp4'
    if not stem:
        raise ValueError(f'Cannot determine file name: {path}')

    parts = stem.split('_')
    if len(parts) == 1 or all(_is_number(p) for p in parts):
        return stem, ext, []

    # Trailing run of numeric parts is the version chain
    base_parts = list(parts)
    versions: List[int] = []
    while base_parts and _is_number(base_parts[-1]):
        versions.insert(0, int(base_parts.pop()))
    return '_'.join(base_parts), ext, versions


def version_prefix(versions: List[int]) -> str:
    return '_'.join(str(v) for v in versions)


def _clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    cleaned = sanitize_filename(notes)
    if not cleaned:
        return None
    return cleaned.replace('_', '-')


def build_versioned_name(base: str, ext: str, versions: List[int],
                         next_version: int, notes: Optional[str] = None) -> str:
    """Compose the output file name for the next trim."""
    parts = [base]
    if versions:
        parts.append(version_prefix(versions))
    parts.append(str(next_version))
    cleaned = _clean_notes(notes)
    if cleaned:
        parts.append(cleaned)
    return f"{'_'.join(parts)}.{ext}"


def extract_version(filename: str, base: str, ext: str, prefix: str = '') -> Optional[int]:
    """Return the version number of ``filename`` for the given family.

    ``extract_version("video_3_notes.mp4", "video", "mp4")`` -> ``3``.
    Returns ``None`` when the file does not belong to the family.
    """
    expected = f"{base}_{prefix}_" if prefix else f"{base}_"
    suffix = f".{ext}"
    if not (filename.startswith(expected) and filename.endswith(suffix)):
        return None

    middle = filename[len(expected):len(filename) - len(suffix)]
    if not middle:
        return None
    first = middle.split('_')[0]
    if not _is_number(first):
        return None
    return int(first)
