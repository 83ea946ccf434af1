"""Positional string formatting with %N% placeholders."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_DIRECTIVE = re.compile(r"%(\d+)%|%%|%")


class TooFewArgsError(ValueError):
    """The format string refers to more arguments than were given."""


def _parse(fmt: str) -> list[str | int]:
    pieces: list[str | int] = []
    position = 0
    for directive in _DIRECTIVE.finditer(fmt):
        pieces.append(fmt[position:directive.start()])
        position = directive.end()
        if directive.group(1) is not None:
            index = int(directive.group(1))
            if index == 0:
                raise ValueError(f"bad format string: argument number 0 at {directive.start()}")
            pieces.append(index)
        elif directive.group(0) == "%%":
            pieces.append("%")
        else:
            raise ValueError(f"bad format string: stray '%' at {directive.start()}")
    pieces.append(fmt[position:])
    return pieces


def format_positional(fmt: str, *args: Any) -> str:
    """Replace ``%N%`` with the N-th argument (from 1) and ``%%`` with ``%``.

    Extra arguments are ignored; referring to a missing one raises
    :class:`TooFewArgsError`.
    """
    pieces = _parse(fmt)
    needed = max((piece for piece in pieces if isinstance(piece, int)), default=0)
    if needed > len(args):
        raise TooFewArgsError(
            f"format-string referred to more arguments than were passed "
            f"({needed} referred, {len(args)} passed)"
        )
    return "".join(
        str(args[piece - 1]) if isinstance(piece, int) else piece for piece in pieces
    )


@dataclass
class Internals:
    """Holds a number, a name and a character that a format string can show.

    ``%1%`` is the number, ``%2%`` the name and ``%3%`` the character.
    """

    i: int = 100
    s: str = "Reader"
    c: str = "!"

    def to_string(self, fmt: str) -> str:
        return format_positional(fmt, self.i, self.s, self.c)