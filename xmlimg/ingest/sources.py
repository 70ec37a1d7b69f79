"""
Input file selection.

Either the explicit list given on the command line, or every ``.xml``
entry of the current working directory.
"""

from __future__ import annotations

import os
import sys
from typing import Iterable

from xmlimg.storage.schema import DiscoveryError

XML_SUFFIX = ".xml"


def split_filenames(values: Iterable[str] | None) -> list[str]:
    """
    Flatten repeated and comma-separated filename arguments.

    Order and duplicates are kept; empty segments are dropped.

    Example:
        split_filenames(["a.xml,b.xml", "a.xml"]) -> ["a.xml", "b.xml", "a.xml"]
    """
    filenames: list[str] = []
    for value in values or ():
        for name in value.split(","):
            name = name.strip()
            if name:
                filenames.append(name)
    return filenames


def list_xml_files(directory: str = ".") -> list[str]:
    """
    List entries of a directory whose names end with ``.xml``.

    Non-recursive. Entries are returned sorted by name.

    Raises:
        DiscoveryError: If the directory cannot be read
    """
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise DiscoveryError(f"Cannot list directory {directory}: {e}") from e
    return sorted(name for name in names if name.endswith(XML_SUFFIX))


def select_input_files(explicit: Iterable[str] | None = None, *, verbose: bool = True) -> list[str]:
    """Return the explicit filenames, or discover XML files in the cwd."""
    filenames = list(explicit or ())
    if filenames:
        return filenames

    if verbose:
        print("No files specified. Parse all XML files in the current directory", file=sys.stderr)
    return list_xml_files(".")
