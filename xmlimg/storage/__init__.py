"""
xmlimg storage layer.

Everything that touches the output side of the filesystem lives here:
per-input output directories and decoded image files. The exception
hierarchy shared by the whole package is defined in ``schema``.

Usage:
    from xmlimg.storage import OutputDirectory, write_image

    out = OutputDirectory("catalog.xml")
    write_image(out.path() / "cover.png", data)
"""

from .dirs import DIR_MODE, OutputDirectory, ensure_dir, target_dir_name
from .files import is_name_safe, write_image
from .schema import (
    ConfigError,
    DecodeError,
    DirectoryError,
    DiscoveryError,
    ExtractError,
    FatalError,
    InputFileError,
    InvalidXPathError,
    MalformedXMLError,
    WriteError,
)

__all__ = [
    # Directories
    "DIR_MODE",
    "OutputDirectory",
    "ensure_dir",
    "target_dir_name",
    # Files
    "is_name_safe",
    "write_image",
    # Exceptions
    "ExtractError",
    "FatalError",
    "ConfigError",
    "DiscoveryError",
    "InputFileError",
    "MalformedXMLError",
    "InvalidXPathError",
    "DirectoryError",
    "WriteError",
    "DecodeError",
]
