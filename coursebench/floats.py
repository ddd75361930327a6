"""Inspecting and building IEEE 754 single-precision values bit by bit."""

import math
import struct
import sys
from collections.abc import Iterable, Iterator

_F32 = struct.Struct(">f")
_U32 = struct.Struct(">I")
_WIDTH = 32

_INF_BITS = "01111111100000000000000000000000"
_NAN_BITS = "01111111110000000000000000000000"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _pack(value: float) -> bytes:
    try:
        return _F32.pack(value)
    except OverflowError:
        return _F32.pack(math.copysign(math.inf, value))


def _format(value: float) -> str:
    if math.isnan(value):
        return "nan"
    return "%g" % value


def _divide(x: float, y: float) -> float:
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _sqrt(x: float) -> float:
    return math.nan if x < 0 else math.sqrt(x)


def float_to_bits(value: float) -> str:
    """Return the 32-bit pattern of ``value`` rounded to single precision."""
    (word,) = _U32.unpack(_pack(value))
    return format(word, f"0{_WIDTH}b")


def describe_float_bits(value: float) -> str:
    """Return the sign, exponent and significand fields of ``value``, one per line."""
    bits = float_to_bits(value)
    return f"Sign:\t\t{bits[0]}\nExponent:\t{bits[1:9]}\nSignificand:\t{bits[9:]}"


def bits_to_float(bits: str) -> float:
    """Build a single-precision value from up to 32 binary digits.

    Shorter patterns are right-aligned; digits after the 32nd are ignored.
    """
    digits = bits[:_WIDTH]
    if any(c not in "01" for c in digits):
        raise ValueError(f"not a binary pattern: {bits!r}")
    word = int(digits, 2) if digits else 0
    (value,) = _F32.unpack(_U32.pack(word))
    return value


def special_values_report() -> str:
    """Describe the extreme and special single-precision values and how they arise."""
    large = describe_float_bits(1.3e20)
    smallest = bits_to_float("1")
    inf = bits_to_float(_INF_BITS)
    nan = bits_to_float(_NAN_BITS)
    negative = bits_to_float("10101010000000000000000000000000")
    positive = bits_to_float("00001000010000000000000000000000")
    zero = bits_to_float("0" * _WIDTH)

    cases = [
        ("inf + inf", inf + inf),
        ("nan + nan", nan + nan),
        ("inf - inf", inf - inf),
        ("1 - inf", 1 - inf),
        ("nan - nan", nan - nan),
        ("inf * inf", inf * inf),
        ("nan * nan", nan * nan),
        ("inf / inf", _divide(inf, inf)),
        ("nan / nan", _divide(nan, nan)),
        ("sqrt(p) (p < 0)", _sqrt(negative)),
        ("p / 0", _divide(positive, 0.0)),
        ("0 / 0", _divide(zero, zero)),
    ]

    lines = [
        "- Bieu dien nhi phan cua 1.3e+20:",
        large,
        "",
        "- So float nho nhat > 0 la:",
        _format(smallest),
        f"- Bieu dien nhi phan cua {_format(smallest)}:",
        describe_float_bits(smallest),
        "",
        f"So vo cung (inf): {_format(inf)} (0 11111111 00000000000000000000000)",
        f"So bao loi (nan): {_format(nan)} (0 11111111 10000000000000000000000)",
        "",
        "Nhung truong hop tao ra cac so dac biet tren:",
    ]
    lines.extend(f"{label} = {_format(result)}" for label, result in cases)
    return "\n".join(lines)


def main_dump(argv=None) -> int:
    """Read a number from standard input and print its single-precision fields."""
    print("Nhap so cham dong (32-bit): ", end="", flush=True)
    token = next(_tokens(sys.stdin), None)
    try:
        value = float(token)
    except (TypeError, ValueError):
        print(f"invalid number: {token!r}", file=sys.stderr)
        return 1
    print(describe_float_bits(value))
    return 0


def main_force(argv=None) -> int:
    """Read a binary pattern from standard input and print the value it encodes."""
    print("Nhap day nhi phan: ", end="", flush=True)
    token = next(_tokens(sys.stdin), "")
    try:
        value = bits_to_float(token)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"So cham dong tuong ung la: {_format(value)}")
    return 0


def main_special(argv=None) -> int:
    """Print the special-values report."""
    print(special_values_report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main_dump())