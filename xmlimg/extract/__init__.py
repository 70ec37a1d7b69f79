"""Payload extraction: XPath node selection, data URI stripping, base64 decoding."""

from __future__ import annotations

from .base import DecodedImage, ImageNode
from .decode import DEFAULT_DUMP_ROWS, DEFAULT_DUMP_WIDTH, decode_base64, dump_error_bytes, dump_rows
from .image import ImageInfo, describe_image
from .scheme import DATA_URI_PREFIX, strip_scheme
from .xpath import SYNTHETIC_NAME, find_nodes, iter_image_nodes, load_document, normalize_xpath


def decode_payload(data: str) -> bytes:
    """
    Strip an optional data URI header and decode the base64 payload.

    Raises:
        DecodeError: If the payload is not valid base64
    """
    return decode_base64(strip_scheme(data))


__all__ = [
    "ImageNode",
    "DecodedImage",
    "ImageInfo",
    "DATA_URI_PREFIX",
    "SYNTHETIC_NAME",
    "DEFAULT_DUMP_WIDTH",
    "DEFAULT_DUMP_ROWS",
    "strip_scheme",
    "decode_base64",
    "decode_payload",
    "dump_rows",
    "dump_error_bytes",
    "describe_image",
    "load_document",
    "normalize_xpath",
    "find_nodes",
    "iter_image_nodes",
]
