"""Inverting images: each channel value becomes its maximum minus itself."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]

_UINT16_MAX = 65535


def negate_array(pixels: np.ndarray) -> np.ndarray:
    """Return ``max - pixels`` for an array of unsigned integer channel values."""
    array = np.asarray(pixels)
    if array.dtype.kind != "u":
        raise TypeError(f"unsigned integer pixels required, got {array.dtype}")
    top = array.dtype.type(np.iinfo(array.dtype).max)
    return (top - array).astype(array.dtype, copy=False)


def _load(path: Path) -> np.ndarray:
    with Image.open(path) as image:
        image.load()
        mode = image.mode
        pixels = np.asarray(image)
    if mode in ("L", "RGB"):
        return pixels.astype(np.uint8, copy=False)
    if mode.startswith("I;16"):
        return pixels.astype(np.uint16)
    if mode == "I":
        if pixels.size and (pixels.min() < 0 or pixels.max() > _UINT16_MAX):
            raise ValueError("image values do not fit 16-bit grayscale")
        return pixels.astype(np.uint16)
    raise ValueError(f"unsupported image mode {mode!r}")


def negate_file(path: PathLike) -> Path:
    """Negate an 8-bit gray, 16-bit gray or 8-bit RGB image.

    The result is written as PNG next to the input, named ``negate_<name>``,
    and its path is returned.
    """
    source = Path(path)
    negated = negate_array(_load(source))
    target = source.with_name("negate_" + source.name)
    Image.fromarray(negated).save(target, format="PNG")
    return target


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write the negative of a PNG image.")
    parser.add_argument("path")
    args = parser.parse_args(argv)
    try:
        negate_file(args.path)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())