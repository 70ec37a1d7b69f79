"""Base types for image extraction."""

from __future__ import annotations

from dataclasses import dataclass

from .scheme import strip_scheme


@dataclass
class ImageNode:
    """A matched XML element that may carry an image payload."""

    index: int  # Position within the document's matched set
    tag: str
    data: str | None  # Raw attribute value, possibly data-URI prefixed
    name: str

    @property
    def has_data(self) -> bool:
        """True when something is left to decode after the data URI header."""
        if not self.data:
            return False
        return bool(strip_scheme(self.data).strip())


@dataclass
class DecodedImage:
    """Decoded bytes of one node, ready to be written."""

    name: str
    data: bytes
    node_index: int = 0
