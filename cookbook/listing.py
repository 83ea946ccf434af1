"""Listing a directory with entry kinds and write permission, and creating links."""

from __future__ import annotations

import argparse
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

FILE_TEXT = "Filesystem is fun!"


def _kind(mode: int) -> str:
    if stat.S_ISLNK(mode):
        return "SYMLINK"
    if stat.S_ISREG(mode):
        return "FILE"
    if stat.S_ISDIR(mode):
        return "DIRECTORY"
    return "OTHER"


def describe_entry(entry: PathLike) -> str:
    """Return a line giving the entry's kind, owner write permission and quoted path."""
    display = os.fspath(entry)
    path = Path(display)
    try:
        kind = _kind(path.lstat().st_mode)
    except OSError:
        kind = "OTHER"
    try:
        writable = bool(path.stat().st_mode & stat.S_IWUSR)
    except OSError:
        writable = False
    flag = "W " if writable else "  "
    return f'{kind:<11}{flag}"{display}"'


def list_directory(path: PathLike = "./") -> list[str]:
    """Describe every entry of the directory at ``path``, ordered by name."""
    with os.scandir(path) as entries:
        return [describe_entry(entry) for entry in sorted(entries, key=lambda e: e.name)]


def create_and_link(base: PathLike = ".") -> bool:
    """Create ``dir/subdir/file.txt`` under ``base`` and a ``symlink`` to it.

    If the link cannot be made, the created directory and any existing
    ``symlink`` are removed and False is returned.
    """
    base = Path(base)
    subdir = base / "dir" / "subdir"
    subdir.mkdir(parents=True, exist_ok=True)
    (subdir / "file.txt").write_text(FILE_TEXT)

    link = base / "symlink"
    try:
        os.symlink("dir/subdir/file.txt", link)
    except OSError:
        print("Failed to create a symlink", file=sys.stderr)
        shutil.rmtree(base / "dir", ignore_errors=True)
        try:
            link.unlink()
        except FileNotFoundError:
            pass
        return False
    print("Symlink created", file=sys.stderr)
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List a directory.")
    parser.add_argument("path", nargs="?", default="./")
    parser.add_argument("--make-link", action="store_true", help="create a file and a link to it first")
    args = parser.parse_args(argv)
    if args.make_link:
        create_and_link(args.path)
    for line in list_directory(args.path):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())