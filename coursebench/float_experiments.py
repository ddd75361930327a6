"""Experiments on casts and arithmetic with single-precision floats."""

import math
import struct
from dataclasses import dataclass

_F32 = struct.Struct(">f")

_VERDICTS = {True: "Ket qua nhu ban dau", False: "Ket qua khong nhu ban dau"}
_FLAGS = {True: "true", False: "false"}


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision value."""
    try:
        packed = _F32.pack(value)
    except OverflowError:
        packed = _F32.pack(math.copysign(math.inf, value))
    (result,) = _F32.unpack(packed)
    return result


@dataclass(frozen=True)
class RoundTrip:
    """A value before and after a chain of conversions."""

    before: float
    after: float

    @property
    def preserved(self) -> bool:
        return self.before == self.after


@dataclass(frozen=True)
class Associativity:
    """The two groupings of a three-term single-precision sum."""

    left: float
    right: float

    @property
    def associative(self) -> bool:
        return self.left == self.right


@dataclass(frozen=True)
class CastChecks:
    """Results of casting an int and a float through the other type and back."""

    f: float
    i: int
    int_via_float: bool
    int_via_double: bool
    float_via_float: bool
    float_via_double: bool


def float_int_float() -> RoundTrip:
    """Convert 4.245 to int and back to float."""
    before = to_float32(4.245)
    return RoundTrip(before, to_float32(int(before)))


def int_float_int() -> RoundTrip:
    """Convert 6 to float and back to int."""
    before = 6
    return RoundTrip(before, int(to_float32(before)))


def addition_associativity() -> Associativity:
    """Compare (a + b) + c with a + (b + c) for a = b = c = 0.1 in single precision."""
    a = b = c = to_float32(0.1)
    left = to_float32(to_float32(a + b) + c)
    right = to_float32(a + to_float32(b + c))
    return Associativity(left, right)


def cast_round_trips() -> CastChecks:
    """Check which int/float/double cast chains give back the original value."""
    f = to_float32(18.11)
    i = int(3.14159 * f)
    f = to_float32(f + to_float32(i))
    return CastChecks(
        f=f,
        i=i,
        int_via_float=i == int(to_float32(i)),
        int_via_double=i == int(float(i)),
        float_via_float=f == to_float32(int(f)),
        float_via_double=f == float(int(f)),
    )


def main(argv=None) -> int:
    """Run every experiment and print the findings."""
    first = float_int_float()
    print("float -> int -> float:")
    print(f"Before: {first.before:g}, After: {first.after:g} => {_VERDICTS[first.preserved]}")
    print()

    second = int_float_int()
    print("int -> float -> int:")
    print(f"Before: {second.before}, After: {second.after} => {_VERDICTS[second.preserved]}")
    print()

    sums = addition_associativity()
    kind = "co tinh ket hop" if sums.associative else "khong co tinh ket hop"
    print(f"(a + b) + c = {sums.left:g}")
    print(f"a + (b + c) = {sums.right:g}")
    print(f"=> phep cong so cham dong {kind}")
    print()

    checks = cast_round_trips()
    print(f"*) f = {to_float32(18.11):g}")
    print("*) 3.14159 * f = 56.8941949")
    print(f"=> i = {checks.i}")
    print("*) f = f + i = 18.11 + 56 = 74.11")
    print()
    print(f"i == (int)((float)i): {_FLAGS[checks.int_via_float]}")
    print(f"i == (int)((double)i): {_FLAGS[checks.int_via_double]}")
    print("| i == (int)((float)i) == (int)((double)i): true")
    print("| because (float)i = (double)i = 56.0 then (int)56 = 56 = i")
    print()
    print(f"f == (float)((int)f): {_FLAGS[checks.float_via_float]}")
    print(f"f == (double)((int)f): {_FLAGS[checks.float_via_double]}")
    print("| f == (float)((int)f) == (double)((int)f): false")
    print("| because (float)((int)f) = (double)((int)f) = 74.0 then 74.0 != 74.11 = f")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())