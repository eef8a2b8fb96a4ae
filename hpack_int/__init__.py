# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
HPACK integer codec - Python library.

This package implements the prefixed variable-length integers used by
HTTP/2 header compression (RFC 7541 section 5.1), plus the HPACK static
table.

Example usage:
    from hpack_int import encode_integer, decode_integer

    data = encode_integer(1337, 5)          # b"\\x1f\\x9a\\x0a"
    value, offset = decode_integer(data, 5)  # (1337, 3)

    # Indexed header field: 0x80 flag above a 7-bit prefix
    header = encode_integer(2, 7, flags=0x80)
"""

from .cursor import ByteReader, StreamReader
from .errors import (
    HPACKError,
    IntegerError,
    InvalidPrefixWidth,
    InsufficientInput,
    TooManyOctets,
    IntegerOverflow,
    InvalidTableIndex,
)
from .integers import (
    MAX_INTEGER,
    MAX_CONTINUATION_OCTETS,
    MAX_ENCODED_LENGTH,
    prefix_mask,
    read_integer,
    decode_integer,
    write_integer,
    encode_integer,
    size_integer,
)
from . import static_table

__version__ = "0.1.0"

__all__ = [
    # Cursors
    "ByteReader",
    "StreamReader",
    # Errors
    "HPACKError",
    "IntegerError",
    "InvalidPrefixWidth",
    "InsufficientInput",
    "TooManyOctets",
    "IntegerOverflow",
    "InvalidTableIndex",
    # Integer codec
    "MAX_INTEGER",
    "MAX_CONTINUATION_OCTETS",
    "MAX_ENCODED_LENGTH",
    "prefix_mask",
    "read_integer",
    "decode_integer",
    "write_integer",
    "encode_integer",
    "size_integer",
    # Static table
    "static_table",
]
