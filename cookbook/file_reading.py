"""Finding a marker byte in a file by memory mapping or by reading chunks."""

from __future__ import annotations

import argparse
import functools
import mmap
import os
import sys
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_SIZE = 1024 * 1024
DEFAULT_FILE = "test_file.txt"
CHUNK_SIZE = 1024
FILLER = b"\x03"
MARKER = b"\x01"


def create_file(path: PathLike, size: int = DEFAULT_SIZE) -> None:
    """Write ``size - 1`` filler bytes followed by one marker byte."""
    if size < 1:
        raise ValueError("size must be at least 1")
    with open(path, "wb") as stream:
        stream.write(FILLER * (size - 1))
        stream.write(MARKER)


def find_marker_mapped(path: PathLike) -> int | None:
    """Return the offset of the first marker byte using a memory map, or None."""
    with open(path, "rb") as stream:
        if os.fstat(stream.fileno()).st_size == 0:
            return None
        with mmap.mmap(stream.fileno(), 0, access=mmap.ACCESS_READ) as region:
            position = region.find(MARKER)
    return None if position < 0 else position


def find_marker_chunks(path: PathLike, chunk_size: int = CHUNK_SIZE) -> int | None:
    """Return the offset of the first marker byte reading ``chunk_size`` bytes at a time, or None."""
    if chunk_size <= 0:
        raise ValueError("chunk size must be positive")
    with open(path, "rb") as stream:
        chunks = iter(functools.partial(stream.read, chunk_size), b"")
        for index, chunk in enumerate(chunks):
            position = chunk.find(MARKER)
            if position >= 0:
                return index * chunk_size + position
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="c: create the file; m: search mapped; r, a: search by chunks."
    )
    parser.add_argument("mode")
    parser.add_argument("--file", default=DEFAULT_FILE)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)

    mode = args.mode[:1]
    if mode == "c":
        create_file(args.file, args.size)
        return 0
    searches = {
        "m": ("mapped_region:", find_marker_mapped),
        "r": ("buffered:", find_marker_chunks),
        "a": ("chunked:", find_marker_chunks),
    }
    if mode not in searches:
        return 42
    label, search = searches[mode]
    sys.stdout.write(label)
    try:
        position = search(args.file)
    except OSError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    if position != args.size - 1 or os.path.getsize(args.file) != args.size:
        print("\nmarker not at the end of the file", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())