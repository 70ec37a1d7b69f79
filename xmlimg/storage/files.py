"""Image file writing."""

from __future__ import annotations

import sys
from pathlib import Path, PurePath

from .schema import WriteError


def is_name_safe(name: str) -> bool:
    """
    Check that an image name stays inside its output directory.

    Rejects empty names, absolute paths and any ``..`` component, using
    the path rules of the running platform.
    """
    if not name or not name.strip():
        return False

    pure = PurePath(name)
    if pure.is_absolute() or pure.anchor:
        return False
    if ".." in pure.parts:
        return False

    return True


def write_image(path: str | Path, data: bytes, *, verbose: bool = True, detail: str = "") -> int:
    """
    Write decoded image bytes to a file, truncating any existing file.

    Args:
        path: Destination file path
        data: Decoded image bytes
        verbose: Print a progress line
        detail: Extra text for the progress line (format, dimensions)

    Returns:
        Number of bytes written

    Raises:
        WriteError: On any I/O error or a short write
    """
    path = Path(path)
    try:
        with open(path, "wb") as fo:
            wrote = fo.write(data)
    except OSError as e:
        raise WriteError(f"Cannot write image to {path}: {e}") from e

    if wrote != len(data):
        raise WriteError(
            f"Short write to {path}: wrote {wrote} of {len(data)} bytes"
        )

    if verbose:
        info = f"{detail}, " if detail else ""
        print(f"  [written] {path} ({info}{wrote} bytes)", file=sys.stderr)
    return wrote
