"""RFC 2397 data URI prefix handling."""

from __future__ import annotations

import re

# data:<type>/<subtype>[;key=value]*;base64,
# http://www.ietf.org/rfc/rfc2397.txt
DATA_URI_PREFIX = re.compile(
    r"^data:\w+/[\w.+-]+(?:;\w+=[\w.+-]+)*;base64,",
    re.ASCII,
)


def strip_scheme(data: str) -> str:
    """Remove a leading ``data:...;base64,`` header, if present."""
    match = DATA_URI_PREFIX.match(data)
    if match is None:
        return data
    return data[match.end():]
