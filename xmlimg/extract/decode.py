"""
Base64 decoding with diagnostics.

Payloads are standard (RFC 4648) padded base64. Whitespace is removed
first since XML attribute normalization turns wrapped lines into spaces.
"""

from __future__ import annotations

import base64
import re
import sys

from xmlimg.storage.schema import DecodeError

_WHITESPACE = re.compile(r"\s+")
_ALPHABET = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)

# Diagnostic dump geometry
DEFAULT_DUMP_WIDTH = 30
DEFAULT_DUMP_ROWS = 2


def decode_base64(data: str) -> bytes:
    """
    Decode a standard base64 string.

    Raises:
        DecodeError: On invalid characters or malformed padding. The
            exception's ``partial`` holds whatever decoded cleanly before
            the bad input.
    """
    cleaned = _WHITESPACE.sub("", data)
    if len(cleaned) % 4:
        raise DecodeError(
            f"Incorrect padding: length {len(cleaned)} is not a multiple of 4",
            partial=_decode_prefix(cleaned),
        )
    try:
        return base64.b64decode(cleaned, validate=True)
    except ValueError as e:
        raise DecodeError(str(e), partial=_decode_prefix(cleaned)) from e


def _decode_prefix(data: str) -> bytes:
    """Decode the complete 4-character quanta before the first bad character."""
    end = 0
    for ch in data:
        if ch not in _ALPHABET:
            break
        end += 1
    end -= end % 4
    if end == 0:
        return b""
    return base64.b64decode(data[:end])


def dump_rows(data: bytes, width: int = DEFAULT_DUMP_WIDTH, rows: int = DEFAULT_DUMP_ROWS) -> list[str]:
    """Render up to ``rows`` rows of ``width`` bytes as uppercase hex."""
    lines: list[str] = []
    for r in range(rows):
        chunk = data[r * width:(r + 1) * width]
        if not chunk:
            break
        lines.append(chunk.hex().upper())
    return lines


def dump_error_bytes(data: bytes, width: int = DEFAULT_DUMP_WIDTH, rows: int = DEFAULT_DUMP_ROWS) -> None:
    """Print the length and leading bytes of a failed decode to stderr."""
    print(f"Decoded data: {len(data)} bytes", file=sys.stderr)
    for line in dump_rows(data, width, rows):
        print(line, file=sys.stderr)
