# coursebench

A small collection of classic coursework exercises, packaged as a Python
library with console commands. It needs nothing beyond the standard library.

- **Bit patterns** (`coursebench.binary`, `coursebench.twos_complement`) –
  print a 32-bit integer as binary and parse it back; 8-bit two's-complement
  addition with a ripple-carry adder, subtraction, Booth multiplication and
  restoring division.
- **Floating point** (`coursebench.floats`, `coursebench.float_experiments`) –
  show the sign, exponent and significand of a single-precision float, build
  a float from a bit string, report on special values (inf, nan, the smallest
  denormal) and run cast and associativity experiments.
- **Stacks and queues** (`coursebench.stacks`, `coursebench.queues`) –
  bounded array-backed and unbounded linked implementations, each with a
  loop-based and a recursive variant; an interactive menu
  (`coursebench.menu`) and a timing report (`coursebench.metrics`).
- **BMP processor** (`coursebench.bmp`, `coursebench.bmp_cli`) – read and
  write uncompressed 24-bit bitmaps, cut them into tiles, flip, scale,
  pixelate, convert to black and white, invert, equalise and threshold.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `coursebench-binary` | Reads an integer and prints its 32-bit pattern in groups of four, then reads a 32-digit pattern and prints the signed integer. |
| `coursebench-twos` | Reads two 8-bit patterns and prints both values, their sum, difference, product, and quotient with remainder. |
| `coursebench-float-dump` | Reads a number and prints its single-precision sign, exponent and significand bits. |
| `coursebench-float-force` | Reads up to 32 binary digits (right-aligned) and prints the float they encode. |
| `coursebench-float-special` | Prints the bits of 1.3e20 and of the smallest positive float, and the results of operations giving inf and nan. |
| `coursebench-float-experiments` | Runs the float/int round-trip and addition associativity experiments. |
| `coursebench-menu [STRUCTURE]` | Interactive push/pop or enqueue/dequeue menu on standard input. |
| `coursebench-metrics STRUCTURE [-n N] [-m M] [--seed SEED]` | Times adding, copying and releasing with the loop and recursive variants. |
| `coursebench-bmp FILE -h H [-w W]` | Cuts a 24-bit BMP into parts and writes filtered copies to `./dist`. |

The prompts of the interactive commands are in Vietnamese, as in the
exercises they come from. Example sessions:

```
$ coursebench-binary
Nhap so nguyen (32-bit): 12345
...

$ coursebench-twos
Nhap a: 01011000
Nhap b: 00010101
...
```

`STRUCTURE` is one of `stack-array`, `stack-linked`, `queue-array` or
`queue-linked`; the menu defaults to `stack-array`. The metrics command uses
large element counts by default (up to thirty million), so pass `-n` and
`-m` for a quick run:

```
coursebench-metrics stack-linked -n 1000 -m 1000 --seed 1
```

The bitmap command takes the image and the number of row and column parts
to cut it into (three or five arguments in all):

```
coursebench-bmp ./img.bmp -h 2 -w 2
```

It writes into `./dist` (created if needed) the tiles `part-<row>-<col>.bmp`
and `output.blacknwhite.bmp`, `output.equalization.bmp`,
`output.grayScaleTozero.bmp`, `output.invert.bmp`, `output.scale-2.bmp`,
`output.censor.bmp` (20-pixel blocks), `output.flip-horizontal.bmp` and
`output.flip-vertical.bmp`.

## Library use

```python
from coursebench.binary import format_int32, parse_int32
from coursebench.twos_complement import add, booth_multiply, divide
from coursebench.floats import float_to_bits, bits_to_float
from coursebench.stacks import ArrayStack, StackFullError
from coursebench.queues import LinkedQueue
from coursebench.bmp import Bitmap

value = parse_int32("11111111111111110100110110010010")
print(format_int32(12345))
print(booth_multiply("00000111", "11111101"))   # -21
print(divide("00000111", "11111101"))           # (quotient, remainder)
print(bits_to_float("00111101110011001100110011001101"))

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackFullError as exc:
    print(exc)

queue = LinkedQueue()
queue.enqueue(10)
print(queue.dequeue())

image = Bitmap.read("img.bmp")
inverted = image.invert()        # editing methods return a new Bitmap
inverted.write("inverted.bmp")
for (row, col), part in image.cut(2, 2).items():
    part.write(f"part-{row}-{col}.bmp")
```

Empty stacks and queues raise `StackEmptyError` / `QueueEmptyError`
(subclasses of `IndexError`); full bounded ones raise `StackFullError` /
`QueueFullError`. Malformed or non-24-bit bitmaps raise `BMPError`.

## Limits

- Only uncompressed 24-bit BMP files are read; palette, 16-bit, 32-bit and
  compressed bitmaps are rejected. Pixel rows are kept in the order they are
  stored in the file.
- The bitmap command always writes to `./dist`; there is no option to choose
  the output directory (the `process` function takes one).
- The twos-complement functions work on fixed 8-bit operands only.