"""Output directory naming and creation."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .schema import DirectoryError

# Permission bits used when creating output directories (umask still applies)
DIR_MODE = 0o766

# Appended when the input base name has no extension to strip
NO_EXTENSION_SUFFIX = "_images"


def target_dir_name(filename: str) -> str:
    """
    Derive the output directory name for an input file.

    The base name loses its final extension only, so ``a/b/report.v2.xml``
    maps to ``report.v2``. Names without an extension (including dot-files
    such as ``.catalog``) get ``_images`` appended instead.

    Args:
        filename: Input file path

    Returns:
        Directory name (no parent components)
    """
    base = os.path.basename(filename)
    stem, ext = os.path.splitext(base)
    if not ext or not stem:
        return f"{base}{NO_EXTENSION_SUFFIX}"
    return stem


def ensure_dir(path: str | Path, *, verbose: bool = True) -> Path:
    """
    Create a directory if it does not already exist.

    Raises:
        DirectoryError: If the directory cannot be created
    """
    path = Path(path)
    if path.is_dir():
        return path

    if verbose:
        print(f"Creating a directory to store images: {path}", file=sys.stderr)
    try:
        os.mkdir(path, DIR_MODE)
    except OSError as e:
        raise DirectoryError(f"Cannot create directory {path}: {e}") from e
    return path


class OutputDirectory:
    """
    Lazily created output directory for one input file.

    The directory is created on first use of ``path()`` and reused for
    every later image from the same file.
    """

    def __init__(self, filename: str, root: str | Path = ".", *, verbose: bool = True) -> None:
        self.filename = filename
        self.target = Path(root) / target_dir_name(filename)
        self.verbose = verbose
        self._created = False

    @property
    def created(self) -> bool:
        return self._created

    def path(self) -> Path:
        if not self._created:
            ensure_dir(self.target, verbose=self.verbose)
            self._created = True
        return self.target
