# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the HPACK integer codec and static table."""


class HPACKError(Exception):
    """Base exception for HPACK errors."""
    pass


class IntegerError(HPACKError, ValueError):
    """Base exception for integer encoding/decoding errors."""
    pass


class InvalidPrefixWidth(IntegerError):
    """Prefix width outside 1..8 bits."""
    pass


class InsufficientInput(IntegerError):
    """Input ended before a complete integer was read."""
    pass


class TooManyOctets(IntegerError):
    """Integer representation uses more continuation octets than allowed."""
    pass


class IntegerOverflow(TooManyOctets):
    """Integer value does not fit in 32 bits."""
    pass


class InvalidTableIndex(HPACKError, IndexError):
    """Static table index out of range."""
    pass
