# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
HPACK static table (RFC 7541 Appendix A).

Entries are addressed with the 1-based index used on the wire. The table
is read-only and shared by every decoding context.
"""

from typing import Optional, Tuple

from .errors import InvalidTableIndex

STATIC_TABLE: Tuple[Tuple[str, str], ...] = (
    (":authority", ""),
    (":method", "GET"),
    (":method", "POST"),
    (":path", "/"),
    (":path", "/index.html"),
    (":scheme", "http"),
    (":scheme", "https"),
    (":status", "200"),
    (":status", "204"),
    (":status", "206"),
    (":status", "304"),
    (":status", "400"),
    (":status", "404"),
    (":status", "500"),
    ("accept-charset", ""),
    ("accept-encoding", "gzip, deflate"),
    ("accept-language", ""),
    ("accept-ranges", ""),
    ("accept", ""),
    ("access-control-allow-origin", ""),
    ("age", ""),
    ("allow", ""),
    ("authorization", ""),
    ("cache-control", ""),
    ("content-disposition", ""),
    ("content-encoding", ""),
    ("content-language", ""),
    ("content-length", ""),
    ("content-location", ""),
    ("content-range", ""),
    ("content-type", ""),
    ("cookie", ""),
    ("date", ""),
    ("etag", ""),
    ("expect", ""),
    ("expires", ""),
    ("from", ""),
    ("host", ""),
    ("if-match", ""),
    ("if-modified-since", ""),
    ("if-none-match", ""),
    ("if-range", ""),
    ("if-unmodified-since", ""),
    ("last-modified", ""),
    ("link", ""),
    ("location", ""),
    ("max-forwards", ""),
    ("proxy-authenticate", ""),
    ("proxy-authorization", ""),
    ("range", ""),
    ("referer", ""),
    ("refresh", ""),
    ("retry-after", ""),
    ("server", ""),
    ("set-cookie", ""),
    ("strict-transport-security", ""),
    ("transfer-encoding", ""),
    ("user-agent", ""),
    ("vary", ""),
    ("via", ""),
    ("www-authenticate", ""),
)


def get(index: int) -> Tuple[str, str]:
    """
    Look up a static table entry.

    Args:
        index: 1-based HPACK index

    Returns:
        Tuple of (name, value)

    Raises:
        InvalidTableIndex: If index is outside 1..61
    """
    if not 1 <= index <= len(STATIC_TABLE):
        raise InvalidTableIndex(f"Static table index out of range: {index}")
    return STATIC_TABLE[index - 1]


def find(name: str, value: Optional[str] = None) -> Optional[int]:
    """
    Find the lowest index of an entry.

    With value=None only the name has to match.
    """
    for index, (entry_name, entry_value) in enumerate(STATIC_TABLE, start=1):
        if entry_name == name and (value is None or entry_value == value):
            return index
    return None
