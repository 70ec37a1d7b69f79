"""Exceptions for extraction and output storage."""

from __future__ import annotations


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class ExtractError(Exception):
    """Base exception for xmlimg operations."""

    pass


class FatalError(ExtractError):
    """An error that halts the whole run."""

    pass


# -----------------------------------------------------------------------------
# Fatal
# -----------------------------------------------------------------------------


class ConfigError(FatalError):
    """Raised when the run configuration is invalid."""

    pass


class DiscoveryError(FatalError):
    """Raised when the working directory cannot be listed."""

    pass


class InputFileError(FatalError):
    """Raised when an input XML file cannot be read."""

    pass


class MalformedXMLError(FatalError):
    """Raised when an input file is not well-formed XML."""

    pass


class InvalidXPathError(FatalError):
    """Raised when the node selector cannot be evaluated."""

    pass


class DirectoryError(FatalError):
    """Raised when an output directory cannot be created."""

    pass


class WriteError(FatalError):
    """Raised when an image cannot be written in full."""

    pass


# -----------------------------------------------------------------------------
# Recoverable
# -----------------------------------------------------------------------------


class DecodeError(ExtractError):
    """
    Raised when a payload is not valid base64.

    Attributes:
        partial: Bytes decoded before the first invalid quantum
    """

    def __init__(self, message: str, partial: bytes = b"") -> None:
        super().__init__(message)
        self.partial = partial
