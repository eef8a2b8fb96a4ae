#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for HPACK integers and the static table.

Usage:
    python hpack_tool.py encode 1337 --prefix 5
    python hpack_tool.py decode "1f 9a 0a" --prefix 5
    python hpack_tool.py decode --port /dev/ttyACM0 --prefix 7
    python hpack_tool.py table 2

Requirements:
    pip install pyserial
"""

import argparse
import logging
import sys

import serial

from hpack_int import (
    HPACKError,
    StreamReader,
    decode_integer,
    encode_integer,
    prefix_mask,
    read_integer,
    static_table,
)

logger = logging.getLogger("hpack_tool")


def cmd_encode(value: int, prefix: int, flags: int):
    """Encode an integer and print the octets as hex."""
    data = encode_integer(value, prefix, flags)
    logger.debug("Encoded %d with %d-bit prefix into %d octets", value, prefix, len(data))
    print(data.hex(" "))


def cmd_decode(data: bytes, prefix: int):
    """Decode back-to-back integers from a buffer."""
    prefix_mask(prefix)
    offset = 0
    while offset < len(data):
        value, new_offset = decode_integer(data, prefix, offset)
        print(f"{value}  ({data[offset:new_offset].hex(' ')})")
        offset = new_offset


def cmd_decode_port(port: str, prefix: int, baudrate: int, timeout: float):
    """Read one integer from a serial port."""
    with serial.Serial(port, baudrate, timeout=timeout) as ser:
        reader = StreamReader(ser)
        value = read_integer(reader, prefix)
        logger.debug("Read %d octets from %s", reader.consumed, port)
    print(value)


def cmd_table(index=None):
    """Print one static table entry, or all of them."""
    if index is not None:
        name, value = static_table.get(index)
        print(f"{index:2d}  {name}: {value}")
        return

    for i, (name, value) in enumerate(static_table.STATIC_TABLE, start=1):
        print(f"{i:2d}  {name}: {value}")


def _parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer."""
    return int(text, 0)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="HPACK integer codec and static table tool"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode an integer")
    encode_parser.add_argument("value", type=_parse_int, help="Integer to encode")
    encode_parser.add_argument("--prefix", "-n", type=int, default=8,
                               help="Prefix width in bits (1-8)")
    encode_parser.add_argument("--flags", "-f", type=_parse_int, default=0,
                               help="Bits to set above the prefix (e.g., 0x80)")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode integers")
    decode_parser.add_argument("hex", nargs="?", help="Hex octets (e.g., \"1f 9a 0a\")")
    decode_parser.add_argument("--prefix", "-n", type=int, default=8,
                               help="Prefix width in bits (1-8)")
    decode_parser.add_argument("--port", "-p",
                               help="Read from a serial port instead (e.g., /dev/ttyACM0)")
    decode_parser.add_argument("--baudrate", type=int, default=115200,
                               help="Serial baud rate (default 115200)")
    decode_parser.add_argument("--timeout", type=float, default=5.0,
                               help="Serial read timeout in seconds (default 5.0)")

    # table command
    table_parser = subparsers.add_parser("table", help="Show the static table")
    table_parser.add_argument("index", type=int, nargs="?",
                              help="1-based table index")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            cmd_encode(args.value, args.prefix, args.flags)
        elif args.command == "decode":
            if args.port:
                cmd_decode_port(args.port, args.prefix, args.baudrate, args.timeout)
            elif args.hex is not None:
                try:
                    data = bytes.fromhex(args.hex)
                except ValueError:
                    print(f"Error: Invalid hex string: {args.hex}")
                    sys.exit(1)
                cmd_decode(data, args.prefix)
            else:
                parser.error("decode needs hex octets or --port")
        elif args.command == "table":
            cmd_table(args.index)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        sys.exit(1)
    except (HPACKError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
