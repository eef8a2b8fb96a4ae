# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte cursors consumed by the integer decoder.

The decoder only needs one octet at a time, so any source works as long
as it provides ``read_byte()``: an in-memory buffer or a stream such as
a file or a serial port.
"""

from .errors import InsufficientInput


class ByteReader:
    """
    Position-tracking reader over a bytes-like buffer.

    Use tell()/seek() to checkpoint before a read that may need to be
    retried once more data is available:
        reader = ByteReader(data)
        mark = reader.tell()
        try:
            value = read_integer(reader, 7)
        except InsufficientInput:
            reader.seek(mark)
    """

    def __init__(self, data: bytes, offset: int = 0):
        self._data = data
        self._pos = 0
        self.seek(offset)

    def read_byte(self) -> int:
        """
        Read the next octet.

        Raises:
            InsufficientInput: If no data is left
        """
        if self._pos >= len(self._data):
            raise InsufficientInput("HPACK integer: not enough octets")
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def tell(self) -> int:
        """Return the current position."""
        return self._pos

    def seek(self, pos: int) -> None:
        """Move to an absolute position."""
        if pos < 0:
            raise ValueError("Cannot seek to a negative position")
        self._pos = pos

    @property
    def remaining(self) -> int:
        """Number of octets left to read."""
        return max(len(self._data) - self._pos, 0)


class StreamReader:
    """
    Pull reader over a file-like object with a read(size) method.

    An empty read is treated as end of input, which also covers a serial
    port read that hit its timeout.
    """

    def __init__(self, stream):
        self._stream = stream
        self.consumed = 0

    def read_byte(self) -> int:
        """
        Read the next octet from the stream.

        Raises:
            InsufficientInput: If the stream returned no data
        """
        byte = self._stream.read(1)
        if not byte:
            raise InsufficientInput("HPACK integer: stream ended")
        self.consumed += 1
        return byte[0]
