"""Command-line path mapping.

Rules, applied in order:
1. Normalize NFD to NFC.
2. Reject NUL characters.
3. Reject Windows rooted-not-qualified forms (\\name, C:name).
4. Expand a leading ~ to the home directory.
5. Join relative paths onto base_dir.
6. Resolve dot segments.
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import PathMappingError

_WINDOWS_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:[^/\\]")
_SEPARATORS_RE = re.compile(r"[\\/]+")


def map_path(raw: str, *, base_dir: Path) -> Path:
    """Map a user-provided path string to an absolute resolved Path."""
    if not base_dir.is_absolute():
        raise PathMappingError("base_dir must be an absolute path.")

    normalized = unicodedata.normalize("NFC", raw)
    if not normalized.strip():
        raise PathMappingError("Path is empty.")
    if "\0" in normalized:
        raise PathMappingError("Path contains NUL (\\0) character.")
    if _is_windows_rooted_not_fully_qualified(normalized):
        raise PathMappingError(
            "Unsupported Windows rooted-not-qualified path form "
            "(e.g. \\name or C:name)."
        )

    mapped = Path(_SEPARATORS_RE.sub("/", normalized))
    if normalized.startswith("~"):
        mapped = mapped.expanduser()
    if not mapped.is_absolute():
        mapped = base_dir / mapped

    return mapped.resolve()


def _is_windows_rooted_not_fully_qualified(path_text: str) -> bool:
    # \name (not \\unc)
    if path_text.startswith("\\") and not path_text.startswith("\\\\"):
        return True
    # C:name (drive-relative, not C:\name or C:/name)
    return _WINDOWS_DRIVE_RELATIVE_RE.match(path_text) is not None
