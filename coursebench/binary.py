"""Conversion between 32-bit signed integers and their binary patterns."""

import sys
from collections.abc import Iterable, Iterator

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def format_int32(n: int) -> str:
    """Return the 32-bit two's complement pattern of ``n`` in groups of four bits."""
    bits = format(n & _MASK, f"0{_WIDTH}b")
    return " ".join(bits[start:start + 4] for start in range(0, _WIDTH, 4))


def parse_int32(bits: str) -> int:
    """Interpret a 32-character string of 0s and 1s as a signed 32-bit integer."""
    if len(bits) != _WIDTH or any(c not in "01" for c in bits):
        raise ValueError(f"expected {_WIDTH} binary digits, got {bits!r}")
    value = int(bits, 2)
    if value >> (_WIDTH - 1):
        value -= 1 << _WIDTH
    return value


def main(argv=None) -> int:
    """Read an integer and a 32-bit pattern from standard input and convert both.

    No command-line options are defined; ``argv`` is accepted for entry points.
    """
    tokens = _tokens(sys.stdin)

    print("Nhap so nguyen (32-bit): ", end="", flush=True)
    token = next(tokens, None)
    try:
        n = int(token)
    except (TypeError, ValueError):
        print(f"invalid integer: {token!r}", file=sys.stderr)
        return 1
    print(f"Day nhi phan cua {n} la:")
    print(format_int32(n))
    print()

    print("Nhap day nhi phan (32-bit): ", end="", flush=True)
    token = next(tokens, "")
    try:
        value = parse_int32(token)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"So nguyen tuong ung la: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())