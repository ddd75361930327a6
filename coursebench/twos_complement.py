"""Eight-bit two's complement arithmetic carried out bit by bit.

Addition uses a ripple-carry adder, multiplication uses Booth's algorithm
and division uses restoring division on the magnitudes.
"""

import sys
from collections.abc import Iterable, Iterator

_WORD = 8
_ACC_SHIFT = 9
_ACC_SIGN = 16


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _digits(bits: str, width: int) -> str:
    if width <= 0:
        raise ValueError("width must be positive")
    digits = bits[:width]
    if len(digits) < width or any(c not in "01" for c in digits):
        raise ValueError(f"expected at least {width} binary digits, got {bits!r}")
    return digits


def bits_to_unsigned(bits: str, width: int = _WORD) -> int:
    """Read the first ``width`` digits of ``bits`` as an unsigned number."""
    return int(_digits(bits, width), 2)


def bits_to_signed(bits: str, width: int = _WORD) -> int:
    """Read the first ``width`` digits of ``bits`` as a two's complement number."""
    value = bits_to_unsigned(bits, width)
    if bits[0] == "1":
        value -= 1 << width
    return value


def to_bits(n: int, width: int = _WORD) -> str:
    """Return the low ``width`` bits of ``n``, most significant first."""
    if width <= 0:
        raise ValueError("width must be positive")
    return format(n & ((1 << width) - 1), f"0{width}b")


def invert_bits(bits: str, width: int = _WORD) -> str:
    """Flip every one of the first ``width`` digits."""
    return "".join("0" if c == "1" else "1" for c in _digits(bits, width))


def add(a: str, b: str, width: int = _WORD) -> int:
    """Add two bit patterns with a ripple-carry adder; the carry out is dropped."""
    a_digits = _digits(a, width)
    b_digits = _digits(b, width)
    result = 0
    carry = 0
    for position, (x_char, y_char) in enumerate(zip(reversed(a_digits), reversed(b_digits))):
        x = int(x_char)
        y = int(y_char)
        result |= (x ^ y ^ carry) << position
        carry = (x & y) | (carry & x) | (carry & y)
    return bits_to_signed(to_bits(result, width), width)


def subtract(a: str, b: str) -> int:
    """Subtract by adding the two's complement of ``b``."""
    negated_b = add(invert_bits(b), to_bits(1))
    return add(a, to_bits(negated_b))


def _set_bit(n: int, index: int, value: int) -> int:
    return n | (1 << index) if value else n & ~(1 << index)


def _add_to_accumulator(pattern: int, operand: int) -> int:
    """Add the low eight bits of ``operand`` into bits 9..16 of ``pattern``."""
    total = 0
    carry = 0
    for i in range(_WORD):
        x = (pattern >> (i + _ACC_SHIFT)) & 1
        y = (operand >> i) & 1
        total |= (x ^ y ^ carry) << i
        carry = (x & y) | (carry & x) | (carry & y)
    for i in range(_WORD):
        pattern = _set_bit(pattern, i + _ACC_SHIFT, (total >> i) & 1)
    return pattern


def _negate(value: int) -> int:
    return add(invert_bits(to_bits(value)), to_bits(1))


def booth_multiply(a: str, b: str) -> int:
    """Multiply two 8-bit patterns with Booth's algorithm; the product is 16-bit."""
    multiplicand = bits_to_unsigned(a)
    negated = _negate(multiplicand)
    pattern = bits_to_unsigned(b) << 1

    for _ in range(_WORD):
        q1 = (pattern >> 1) & 1
        q0 = pattern & 1
        if q1 != q0:
            pattern = _add_to_accumulator(pattern, negated if q1 else multiplicand)
        sign = (pattern >> _ACC_SIGN) & 1
        pattern >>= 1
        pattern |= sign << _ACC_SIGN

    return bits_to_signed(to_bits(pattern, 32)[15:31], 2 * _WORD)


def divide(a: str, b: str) -> tuple[int, int]:
    """Divide ``a`` by ``b`` with restoring division.

    Returns ``(quotient, remainder)``; the quotient is truncated toward zero
    and the remainder takes the sign of the dividend.
    """
    divisor = bits_to_unsigned(b)
    dividend = bits_to_unsigned(a)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")

    divisor_negative = (divisor >> 7) & 1
    dividend_negative = (dividend >> 7) & 1
    negated_divisor = _negate(divisor)
    negated_dividend = _negate(dividend)

    subtrahend = divisor if divisor_negative else negated_divisor
    restorer = negated_divisor if divisor_negative else divisor

    pattern = (negated_dividend if dividend_negative else dividend) << 1
    for _ in range(_WORD):
        pattern <<= 1
        pattern = _add_to_accumulator(pattern, subtrahend)
        if (pattern >> _ACC_SIGN) & 1:
            pattern = _set_bit(pattern, 1, 0)
            pattern = _add_to_accumulator(pattern, restorer)
        else:
            pattern = _set_bit(pattern, 1, 1)

    word = to_bits(pattern, 32)
    remainder_sign = -1 if dividend_negative else 1
    quotient_sign = -1 if dividend_negative ^ divisor_negative else 1
    remainder = remainder_sign * bits_to_signed(word[15:23])
    quotient = quotient_sign * bits_to_signed(word[23:31])
    return quotient, remainder


def main(argv=None) -> int:
    """Read two 8-bit patterns from standard input and print their arithmetic.

    No command-line options are defined; ``argv`` is accepted for entry points.
    """
    tokens = _tokens(sys.stdin)
    print("Nhap a: ", end="", flush=True)
    a = next(tokens, "")
    print("Nhap b: ", end="", flush=True)
    b = next(tokens, "")

    if len(a) != _WORD or len(b) != _WORD:
        print("Nhap day nhi phan 8 bit!")
        return 0

    try:
        print(f"a: {bits_to_signed(a)}")
        print(f"b: {bits_to_signed(b)}")
        print()
        print(f"a+b: {add(a, b)}")
        print(f"a-b: {subtract(a, b)}")
        print(f"a*b: {booth_multiply(a, b)}")
        quotient, remainder = divide(a, b)
    except (ValueError, ZeroDivisionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"a/b: r={remainder}, q={quotient}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())