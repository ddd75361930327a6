"""Reading, editing and writing uncompressed 24-bit BMP images.

Rows are kept in the order they are stored in the file; for an ordinary
bottom-up bitmap the first row is the bottom line of the picture.
"""

from __future__ import annotations

import struct
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, replace
from itertools import accumulate
from os import PathLike
from pathlib import Path
from typing import Union

_FILE_HEADER = struct.Struct("<2sIHHI")
_DIB_HEADER = struct.Struct("<IIIHHIIIIII")
_HEADERS_SIZE = _FILE_HEADER.size + _DIB_HEADER.size
_BYTES_PER_PIXEL = 3
_GRAY_THRESHOLD = 80

SIGNATURE = b"BM"
COMPRESSION_ALGORITHMS = ("No", "RLE", "Huffman", "JPEG", "PNG")

StrPath = Union[str, "PathLike[str]"]


class BMPError(ValueError):
    """Raised when a file is missing, malformed or not a 24-bit BMP."""


@dataclass(frozen=True, slots=True)
class RGBColor:
    """One pixel colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __str__(self) -> str:
        return f"RGB({self.r}, {self.g}, {self.b})"


Rows = tuple[tuple[RGBColor, ...], ...]


def row_padding(width: int) -> int:
    """Return the number of zero bytes that pad a row of ``width`` pixels to 4 bytes."""
    return (4 - (width * _BYTES_PER_PIXEL) % 4) % 4


def pixel_array_size(width: int, height: int) -> int:
    """Return the size in bytes of the padded pixel array."""
    return height * (width * _BYTES_PER_PIXEL + row_padding(width))


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte file header that opens every BMP file."""

    signature: bytes = SIGNATURE
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    pixel_offset: int = _HEADERS_SIZE

    def describe(self) -> str:
        return "\n".join(
            [
                "==== BMP HEADER ====",
                f"+ Signature  : {self.signature.decode('latin-1')}",
                f"+ File Size  : {self.file_size} byte(s)",
                f"+ Reserved1  : {self.reserved1}",
                f"+ Reserved2  : {self.reserved2}",
                f"+ Data Offset: {self.pixel_offset} byte(s)",
            ]
        )


@dataclass(frozen=True)
class DIBHeader:
    """The 40-byte information header that follows the file header."""

    header_size: int = _DIB_HEADER.size
    width: int = 0
    height: int = 0
    color_planes: int = 1
    color_depth: int = 24
    compression: int = 0
    pixel_array_size: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    color_table_size: int = 0
    color_table_important: int = 0

    @property
    def compression_name(self) -> str:
        if 0 <= self.compression < len(COMPRESSION_ALGORITHMS):
            return COMPRESSION_ALGORITHMS[self.compression]
        return f"Unknown ({self.compression})"

    def describe(self) -> str:
        return "\n".join(
            [
                "==== BMP DIB ====",
                f"+ DIB Size  : {self.header_size}",
                f"+ Img Width : {self.width} pixel(s)",
                f"+ Img Height: {self.height} pixel(s)",
                f"+ Color Plan: {self.color_planes}",
                f"+ Color Depth: {self.color_depth} bit(s)",
                f"+ Compression: {self.compression_name}",
                f"+ Pixel Array Size: {self.pixel_array_size} byte(s)",
                f"+ X Pixels/m: {self.x_pixels_per_meter}",
                f"+ Y Pixels/m: {self.y_pixels_per_meter}",
            ]
        )


@dataclass(frozen=True)
class Bitmap:
    """A 24-bit bitmap: its headers and its pixel rows.

    Every editing method returns a new bitmap and leaves this one untouched.
    """

    header: FileHeader
    dib: DIBHeader
    pixels: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.pixels)
        if len(rows) != self.dib.height or any(len(row) != self.dib.width for row in rows):
            raise BMPError("pixel rows do not match the image size")
        object.__setattr__(self, "pixels", rows)

    @property
    def width(self) -> int:
        return self.dib.width

    @property
    def height(self) -> int:
        return self.dib.height

    @classmethod
    def from_bytes(cls, data: bytes) -> Bitmap:
        """Parse the contents of a BMP file."""
        if len(data) < _HEADERS_SIZE:
            raise BMPError("truncated BMP header")
        signature, file_size, reserved1, reserved2, offset = _FILE_HEADER.unpack_from(data, 0)
        header = FileHeader(signature, file_size, reserved1, reserved2, offset)
        dib = DIBHeader(*_DIB_HEADER.unpack_from(data, _FILE_HEADER.size))
        if signature != SIGNATURE or dib.color_depth != 24:
            raise BMPError("Invalid BMP 24-bit file")

        width, height = dib.width, dib.height
        stride = width * _BYTES_PER_PIXEL + row_padding(width)
        if offset + stride * height > len(data):
            raise BMPError("truncated pixel array")

        def read_row(start: int) -> tuple[RGBColor, ...]:
            end = start + width * _BYTES_PER_PIXEL
            return tuple(
                RGBColor(data[k + 2], data[k + 1], data[k])
                for k in range(start, end, _BYTES_PER_PIXEL)
            )

        rows = tuple(read_row(offset + y * stride) for y in range(height))
        return cls(header, dib, rows)

    @classmethod
    def read(cls, path: StrPath) -> Bitmap:
        """Load a bitmap from a file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise BMPError(f"Could not open file: {path}") from exc
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        """Serialise the bitmap.

        The pixel array follows the two headers directly, so the offset, the
        file size, the information header size and the pixel array size are
        written as they follow from the layout.
        """
        padding = bytes(row_padding(self.width))
        body = b"".join(
            b"".join(bytes((p.b, p.g, p.r)) for p in row) + padding for row in self.pixels
        )
        header = _FILE_HEADER.pack(
            self.header.signature,
            _HEADERS_SIZE + len(body),
            self.header.reserved1,
            self.header.reserved2,
            _HEADERS_SIZE,
        )
        dib = self.dib
        info = _DIB_HEADER.pack(
            _DIB_HEADER.size,
            dib.width,
            dib.height,
            dib.color_planes,
            dib.color_depth,
            dib.compression,
            len(body),
            dib.x_pixels_per_meter,
            dib.y_pixels_per_meter,
            dib.color_table_size,
            dib.color_table_important,
        )
        return header + info + body

    def write(self, path: StrPath) -> None:
        """Save the bitmap to a file."""
        Path(path).write_bytes(self.to_bytes())

    def describe(self, include_pixels: bool = False) -> str:
        """Return a readable summary of the headers and, optionally, the pixels."""
        parts = [self.header.describe(), self.dib.describe()]
        if include_pixels:
            raw = self.to_bytes()[_HEADERS_SIZE:]
            lines = [
                "==== PIXEL ARRAY INFO ====",
                f"+ Size  : {len(raw)} byte(s)",
                f"+ Width : {self.width} pixel(s)",
                f"+ Height: {self.height} pixel(s)",
                "+ Pixel Array:",
                " ".join(map(str, raw)),
            ]
            lines.extend(str(pixel) for row in self.pixels for pixel in row)
            parts.append("\n".join(lines))
        return "\n".join(parts)

    def _with_pixels(self, rows: Rows, width: int) -> Bitmap:
        height = len(rows)
        size = pixel_array_size(width, height)
        dib = replace(self.dib, width=width, height=height, pixel_array_size=size)
        header = replace(self.header, file_size=_HEADERS_SIZE + size, pixel_offset=_HEADERS_SIZE)
        return Bitmap(header, dib, rows)

    def _map(self, change: Callable[[RGBColor], RGBColor]) -> Bitmap:
        rows = tuple(tuple(change(p) for p in row) for row in self.pixels)
        return self._with_pixels(rows, self.width)

    def cut(self, h_parts: int, w_parts: int) -> dict[tuple[int, int], Bitmap]:
        """Split the image into a grid of parts keyed by ``(row part, column part)``.

        The last column part takes the leftover columns and the first row part
        takes the leftover rows; counts below one are treated as one.
        """
        h_parts = max(h_parts, 1)
        w_parts = max(w_parts, 1)
        part_height, height_rest = divmod(self.height, h_parts)
        part_width, width_rest = divmod(self.width, w_parts)

        parts: dict[tuple[int, int], Bitmap] = {}
        for i in range(h_parts):
            this_height = part_height + (height_rest if i == 0 else 0)
            band = self.pixels[i * part_height:i * part_height + this_height]
            for j in range(w_parts):
                this_width = part_width + (width_rest if j == w_parts - 1 else 0)
                left = j * part_width
                rows = tuple(row[left:left + this_width] for row in band)
                parts[(i, j)] = self._with_pixels(rows, this_width)
        return parts

    def flip_horizontal(self) -> Bitmap:
        """Mirror every row."""
        return self._with_pixels(tuple(tuple(reversed(row)) for row in self.pixels), self.width)

    def flip_vertical(self) -> Bitmap:
        """Reverse the order of the rows."""
        return self._with_pixels(tuple(reversed(self.pixels)), self.width)

    def scale(self, factor: int) -> Bitmap:
        """Enlarge the image ``factor`` times by repeating pixels."""
        if factor < 1:
            raise ValueError("scale factor must be at least 1")
        expanded = [tuple(p for p in row for _ in range(factor)) for row in self.pixels]
        rows = tuple(row for row in expanded for _ in range(factor))
        return self._with_pixels(rows, self.width * factor)

    def down_resolution(self, intensity: int = 2) -> Bitmap:
        """Pixelate: each ``intensity`` by ``intensity`` block takes its first pixel."""
        if intensity < 1:
            raise ValueError("intensity must be at least 1")
        rows = tuple(
            tuple(block_row[j - j % intensity] for j in range(len(block_row)))
            for block_row in (self.pixels[i - i % intensity] for i in range(self.height))
        )
        return self._with_pixels(rows, self.width)

    def black_and_white(self) -> Bitmap:
        """Replace every pixel by the average of its channels."""

        def gray(p: RGBColor) -> RGBColor:
            level = (p.r + p.g + p.b) // 3
            return RGBColor(level, level, level)

        return self._map(gray)

    def invert(self) -> Bitmap:
        """Invert every channel."""
        return self._map(lambda p: RGBColor(255 - p.r, 255 - p.g, 255 - p.b))

    def equalize(self) -> Bitmap:
        """Equalise the histogram; the mapping is built from the red channel."""
        total = self.width * self.height
        if total == 0:
            return self._with_pixels(self.pixels, self.width)
        histogram = Counter(p.r for row in self.pixels for p in row)
        cdf = list(accumulate(histogram.get(level, 0) for level in range(256)))

        def level(value: int) -> int:
            return 255 * cdf[value] // total

        return self._map(lambda p: RGBColor(level(p.r), level(p.g), level(p.b)))

    def gray_to_zero(self) -> Bitmap:
        """Convert to gray and blacken every pixel whose level is 80 or less."""
        black = RGBColor(0, 0, 0)
        return self.black_and_white()._map(lambda p: p if p.r > _GRAY_THRESHOLD else black)