# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
HPACK integer representation (RFC 7541 section 5.1).

An integer starts in the low N bits of a prefix octet. Values smaller
than 2^N - 1 fit there directly; larger values set all prefix bits and
continue in octets carrying 7 bits each, least significant group first,
with the high bit flagging that more octets follow:

      0   1   2   3   4   5   6   7
    +---+---+---+---+---+---+---+---+
    | ? | ? | ? | 1   1   1   1   1 |
    +---+---+---+-------------------+
    | 1 |    Value-(2^N-1) LSB      |
    +---+---------------------------+
                   ...
    +---+---------------------------+
    | 0 |    Value-(2^N-1) MSB      |
    +---+---------------------------+

The bits above the prefix belong to the caller (field type flags).
"""

import logging
from typing import Tuple

from .cursor import ByteReader
from .errors import IntegerOverflow, InvalidPrefixWidth, TooManyOctets

logger = logging.getLogger(__name__)

# Largest value accepted by the encoder and returned by the decoder
MAX_INTEGER = 0xFFFFFFFF

# Five 7-bit groups carry 35 bits, enough for any 32-bit value after the
# mask is subtracted. Anything longer is rejected as malformed.
MAX_CONTINUATION_OCTETS = 5

# Prefix octet plus continuation octets
MAX_ENCODED_LENGTH = 1 + MAX_CONTINUATION_OCTETS


def prefix_mask(prefix_width: int) -> int:
    """
    Return the all-ones value of an N-bit prefix.

    Raises:
        InvalidPrefixWidth: If prefix_width is not an integer in 1..8
    """
    if (
        not isinstance(prefix_width, int)
        or isinstance(prefix_width, bool)
        or not 1 <= prefix_width <= 8
    ):
        raise InvalidPrefixWidth(
            f"HPACK integer: invalid prefix width {prefix_width!r}"
        )
    return (1 << prefix_width) - 1


def read_integer(reader, prefix_width: int) -> int:
    """
    Read one integer from a cursor.

    Args:
        reader: Object with a read_byte() method (ByteReader, StreamReader)
        prefix_width: Number of prefix bits in the first octet (1-8)

    Returns:
        Decoded integer

    Raises:
        InvalidPrefixWidth: If prefix_width is out of range (nothing is read)
        InsufficientInput: If the reader runs out before the integer ends
        TooManyOctets: If the integer uses more than 5 continuation octets
        IntegerOverflow: If the value does not fit in 32 bits
    """
    mask = prefix_mask(prefix_width)

    value = reader.read_byte() & mask
    if value < mask:
        return value

    for index in range(MAX_CONTINUATION_OCTETS):
        byte = reader.read_byte()
        value += (byte & 0x7F) << (7 * index)

        if not (byte & 0x80):
            if value > MAX_INTEGER:
                logger.debug("HPACK integer overflow: %d", value)
                raise IntegerOverflow(
                    f"HPACK integer: value {value} exceeds 32 bits"
                )
            return value

    logger.debug(
        "HPACK integer not terminated after %d continuation octets",
        MAX_CONTINUATION_OCTETS,
    )
    raise TooManyOctets("HPACK integer: too many octets")


def decode_integer(
    data: bytes, prefix_width: int, offset: int = 0
) -> Tuple[int, int]:
    """
    Decode an integer from bytes.

    Args:
        data: Bytes containing the integer
        prefix_width: Number of prefix bits in the first octet (1-8)
        offset: Offset of the prefix octet in data

    Returns:
        Tuple of (decoded value, new offset after the integer)

    Raises:
        IntegerError: See read_integer()
    """
    reader = ByteReader(data, offset)
    value = read_integer(reader, prefix_width)
    return value, reader.tell()


def write_integer(
    value: int, prefix_width: int, sink: bytearray, flags: int = 0
) -> int:
    """
    Append the encoding of an integer to a buffer.

    Args:
        value: Integer to encode (0 to 2^32 - 1)
        prefix_width: Number of prefix bits in the first octet (1-8)
        sink: Buffer the octets are appended to
        flags: Bits to set above the prefix in the first octet

    Returns:
        Number of octets written

    Raises:
        InvalidPrefixWidth: If prefix_width is out of range
        IntegerOverflow: If value exceeds 2^32 - 1
        ValueError: If value is negative or flags overlap the prefix
    """
    mask = prefix_mask(prefix_width)

    if value < 0:
        raise ValueError("Cannot encode negative value as HPACK integer")
    if value > MAX_INTEGER:
        raise IntegerOverflow(f"HPACK integer: value {value} exceeds 32 bits")
    if flags < 0 or flags > 0xFF or flags & mask:
        raise ValueError(
            f"Flags 0x{flags:02x} do not fit above a {prefix_width}-bit prefix"
        )

    if value < mask:
        sink.append(flags | value)
        return 1

    sink.append(flags | mask)
    remainder = value - mask
    written = 1

    while remainder >= 0x80:
        sink.append(0x80 | (remainder & 0x7F))
        remainder >>= 7
        written += 1
    sink.append(remainder)
    return written + 1


def encode_integer(value: int, prefix_width: int, flags: int = 0) -> bytes:
    """
    Encode an integer with an N-bit prefix.

    Args:
        value: Integer to encode (0 to 2^32 - 1)
        prefix_width: Number of prefix bits in the first octet (1-8)
        flags: Bits to set above the prefix in the first octet

    Returns:
        Encoded bytes
    """
    out = bytearray()
    write_integer(value, prefix_width, out, flags)
    return bytes(out)


def size_integer(value: int, prefix_width: int) -> int:
    """Return the number of octets encode_integer() produces for value."""
    mask = prefix_mask(prefix_width)
    if value < 0:
        raise ValueError("Cannot encode negative value as HPACK integer")
    if value > MAX_INTEGER:
        raise IntegerOverflow(f"HPACK integer: value {value} exceeds 32 bits")
    if value < mask:
        return 1

    remainder = value - mask
    count = 2
    while remainder >= 0x80:
        remainder >>= 7
        count += 1
    return count
