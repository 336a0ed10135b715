"""User-supplied path resolution for CLI arguments."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import StartupValidationError

_WINDOWS_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:[^/\\]")
_SEPARATORS_RE = re.compile(r"[\\/]+")


def map_path(raw: str, *, app_root_abs: Path) -> Path:
    """Map a CLI path string to an absolute resolved Path.

    ``~`` expands to the home directory and ``@`` to app_root_abs. Any other
    path must already be absolute; relative paths and Windows
    rooted-not-qualified forms (``\\name``, ``C:name``) are rejected.
    """
    normalized = unicodedata.normalize("NFC", raw)
    if not normalized:
        raise StartupValidationError("Path is empty.")
    if "\0" in normalized:
        raise StartupValidationError("Path contains NUL (\\0) character.")
    if _WINDOWS_DRIVE_RELATIVE_RE.match(normalized) or (
        normalized.startswith("\\") and not normalized.startswith("\\\\")
    ):
        raise StartupValidationError(
            "Unsupported Windows rooted-not-qualified path form "
            "(e.g. \\name or C:name)."
        )

    if normalized.startswith("@"):
        segments = [s for s in _SEPARATORS_RE.split(normalized[1:]) if s]
        return app_root_abs.joinpath(*segments).resolve()

    mapped = Path(_SEPARATORS_RE.sub("/", normalized)).expanduser()
    if not mapped.is_absolute():
        raise StartupValidationError(
            "Relative paths are not supported. "
            "Use ~ (home), @ (app root), or an absolute path."
        )
    return mapped.resolve()
