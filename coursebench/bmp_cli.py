"""Command line that cuts a 24-bit bitmap into parts and applies every filter."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from .bmp import Bitmap, BMPError, StrPath

_PROGRAM = "cutbmp"
USAGE = "\n".join(
    [
        "Unsuitable arguments!",
        f"Usage: {_PROGRAM} <filename> -h <hParts> -w <wParts>",
        f"Example: {_PROGRAM} ./img.bmp -h 2",
        f"Example: {_PROGRAM} ./img.bmp -h 2 -w 2",
    ]
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _UsageError(ValueError):
    def __init__(self) -> None:
        super().__init__(USAGE)


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; anything unreadable counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv) -> argparse.Namespace:
    """Parse ``<filename> -h <hParts> [-w <wParts>]``.

    Raises ValueError carrying the usage text when the arguments do not fit.
    """
    args = list(argv)
    if len(args) not in (3, 5):
        raise _UsageError()

    source = None
    h_parts = w_parts = 1
    tokens = iter(args)
    for token in tokens:
        if token in ("-h", "-w"):
            value = next(tokens, None)
            if value is None:
                raise _UsageError()
            if token == "-h":
                h_parts = _atoi(value)
            else:
                w_parts = _atoi(value)
        elif source is None:
            source = token
        else:
            raise _UsageError()
    if source is None:
        raise _UsageError()
    return argparse.Namespace(source=source, h_parts=h_parts, w_parts=w_parts)


def process(source: StrPath, out_dir: StrPath = "dist", h_parts: int = 1, w_parts: int = 1) -> list[Path]:
    """Write the parts and every filtered copy of ``source`` into ``out_dir``.

    Returns the paths written, in order.
    """
    bitmap = Bitmap.read(source)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    outputs: list[tuple[str, Bitmap]] = [
        (f"part-{i}-{j}.bmp", part) for (i, j), part in bitmap.cut(h_parts, w_parts).items()
    ]
    outputs += [
        ("output.blacknwhite.bmp", bitmap.black_and_white()),
        ("output.equalization.bmp", bitmap.equalize()),
        ("output.grayScaleTozero.bmp", bitmap.gray_to_zero()),
        ("output.invert.bmp", bitmap.invert()),
        ("output.scale-2.bmp", bitmap.scale(2)),
        ("output.censor.bmp", bitmap.down_resolution(20)),
        ("output.flip-horizontal.bmp", bitmap.flip_horizontal()),
        ("output.flip-vertical.bmp", bitmap.flip_vertical()),
    ]

    written = []
    for name, image in outputs:
        path = out / name
        image.write(path)
        written.append(path)
    return written


def main(argv=None) -> int:
    """Run the bitmap tool; results go to ``./dist``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        process(options.source, "dist", options.h_parts, options.w_parts)
    except (BMPError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())