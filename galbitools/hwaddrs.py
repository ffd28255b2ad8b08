"""Copy the Bluetooth address stored in the misc partition to a text file."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, Union

MISC_PARTITION = "/dev/block/platform/msm_sdcc.1/by-name/misc"
BDADDR_FILE = "/data/misc/bdaddr"
MAC_OFFSET = 0x4000
MAC_LENGTH = 6

PathLike = Union[str, os.PathLike]


def read_mac_bytes(misc_path: PathLike, offset: int = MAC_OFFSET) -> bytes:
    """Read the six address bytes found at ``offset`` in ``misc_path``."""
    with open(misc_path, "rb") as handle:
        handle.seek(offset)
        data = handle.read(MAC_LENGTH)
    if len(data) != MAC_LENGTH:
        raise ValueError(f"{misc_path}: address truncated at offset {offset:#x}")
    return data


def format_bdaddr(mac: bytes) -> str:
    """Format address bytes as lower-case colon-separated hex."""
    return ":".join(f"{byte:02x}" for byte in mac)


def write_bdaddr(misc_path: PathLike = MISC_PARTITION, out_path: PathLike = BDADDR_FILE) -> str:
    """Write the address from ``misc_path`` to ``out_path`` and return it."""
    text = format_bdaddr(read_mac_bytes(misc_path))
    fd = os.open(out_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with os.fdopen(fd, "w", encoding="ascii") as handle:
        handle.write(text)
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="hwaddrs", description="Store the Bluetooth address from NV storage."
    )
    parser.add_argument("--misc", default=MISC_PARTITION, help="partition to read")
    parser.add_argument("--output", default=BDADDR_FILE, help="file to write")
    args = parser.parse_args(argv)
    try:
        write_bdaddr(args.misc, args.output)
    except (OSError, ValueError) as exc:
        print(f"hwaddrs: {exc}", file=sys.stderr)
        return 1
    return 0