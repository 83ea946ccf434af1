"""Greeters chosen by plugin name."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

Greeter = Callable[[str], str]

_DECORATION_SUFFIXES = (".so", ".dll", ".dylib")


def greet_hello(name: str) -> str:
    return "Good to meet you, " + name + "."


def greet_do_not(name: str) -> str:
    return (
        "They are fast. Faster than you can believe. "
        "Don't turn your back, don't look away, "
        "and don't blink. Good luck, " + name + "."
    )


_PLUGINS: dict[str, Greeter] = {
    "plugin_hello": greet_hello,
    "plugin_do_not": greet_do_not,
}


def _plugin_name(plugin: str) -> str:
    name = Path(plugin).name
    for suffix in _DECORATION_SUFFIXES:
        if name.endswith(suffix):
            name = name[: -len(suffix)]
            break
    if name.startswith("lib"):
        name = name[3:]
    return name


def load_greeter(plugin: str) -> Greeter:
    """Return the greeter of ``plugin``, given by name or by library path.

    Raises :class:`LookupError` for an unknown plugin.
    """
    name = _plugin_name(plugin)
    try:
        return _PLUGINS[name]
    except KeyError:
        raise LookupError(f"no greeter in plugin {plugin!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Greet with a chosen plugin.")
    parser.add_argument("plugin")
    args = parser.parse_args(argv)
    try:
        greeter = load_greeter(args.plugin)
    except LookupError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(greeter("Sally Sparrow"))
    return 0


if __name__ == "__main__":
    sys.exit(main())