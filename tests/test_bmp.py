import struct

import pytest

from coursebench.bmp import (
    BMPError,
    Bitmap,
    RGBColor,
    pixel_array_size,
    row_padding,
)

SAMPLE = [
    [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
    [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
]


def bmp_bytes(rows, depth=24, signature=b"BM"):
    height = len(rows)
    width = len(rows[0]) if rows else 0
    padding = bytes(row_padding(width))
    body = b"".join(
        b"".join(bytes((b, g, r)) for r, g, b in row) + padding for row in rows
    )
    header = struct.pack("<2sIHHI", signature, 54 + len(body), 0, 0, 54)
    dib = struct.pack("<IIIHHIIIIII", 40, width, height, 1, depth, 0, len(body), 2835, 2835, 0, 0)
    return header + dib + body


def make(rows):
    return Bitmap.from_bytes(bmp_bytes(rows))


def grid(width, height):
    return [[((x * 37) % 256, (y * 53) % 256, (x + y) % 256) for x in range(width)] for y in range(height)]


def test_row_padding_aligns_rows():
    for width in range(20):
        padding = row_padding(width)
        assert 0 <= padding < 4
        assert (width * 3 + padding) % 4 == 0


def test_pixel_array_size_matches_written_body():
    for width, height in [(1, 1), (2, 3), (3, 2), (4, 4), (5, 1)]:
        bitmap = make(grid(width, height))
        assert len(bitmap.to_bytes()) - 54 == pixel_array_size(width, height)


def test_round_trip_bytes():
    data = bmp_bytes(SAMPLE)
    assert Bitmap.from_bytes(data).to_bytes() == data


def test_pixels_are_stored_blue_green_red():
    data = bmp_bytes([[(30, 20, 10)]])
    assert data[54:57] == b"\x0a\x14\x1e"
    assert Bitmap.from_bytes(data).pixels[0][0] == RGBColor(30, 20, 10)


def test_rejects_bad_signature():
    with pytest.raises(BMPError):
        Bitmap.from_bytes(bmp_bytes(SAMPLE, signature=b"XX"))


def test_rejects_other_depth():
    with pytest.raises(BMPError, match="24-bit"):
        Bitmap.from_bytes(bmp_bytes(SAMPLE, depth=32))


def test_rejects_truncated_data():
    data = bmp_bytes(SAMPLE)
    with pytest.raises(BMPError):
        Bitmap.from_bytes(data[:-5])
    with pytest.raises(BMPError):
        Bitmap.from_bytes(data[:20])


def test_write_and_read_file(tmp_path):
    bitmap = make(SAMPLE)
    path = tmp_path / "image.bmp"
    bitmap.write(path)
    assert Bitmap.read(path).pixels == bitmap.pixels


def test_read_missing_file(tmp_path):
    with pytest.raises(BMPError, match="Could not open file"):
        Bitmap.read(tmp_path / "missing.bmp")


def test_flip_horizontal():
    bitmap = make(SAMPLE)
    flipped = bitmap.flip_horizontal()
    assert [list(reversed(row)) for row in flipped.pixels] == [list(row) for row in bitmap.pixels]
    assert flipped.flip_horizontal().pixels == bitmap.pixels


def test_flip_vertical():
    bitmap = make(SAMPLE)
    flipped = bitmap.flip_vertical()
    assert flipped.pixels == tuple(reversed(bitmap.pixels))
    assert flipped.flip_vertical().pixels == bitmap.pixels


def test_invert_is_an_involution():
    bitmap = make(SAMPLE)
    inverted = bitmap.invert()
    for row, inverted_row in zip(bitmap.pixels, inverted.pixels):
        for p, q in zip(row, inverted_row):
            assert (p.r + q.r, p.g + q.g, p.b + q.b) == (255, 255, 255)
    assert inverted.invert().pixels == bitmap.pixels


def test_black_and_white():
    result = make(SAMPLE).black_and_white()
    assert all(p.r == p.g == p.b for row in result.pixels for p in row)
    assert result.pixels[1][0] == RGBColor(20, 20, 20)


def test_gray_to_zero():
    bitmap = make(SAMPLE)
    gray = bitmap.black_and_white()
    result = bitmap.gray_to_zero()
    for gray_row, row in zip(gray.pixels, result.pixels):
        for g, p in zip(gray_row, row):
            assert p == (g if g.r > 80 else RGBColor(0, 0, 0))
    assert result.pixels[0][0] == RGBColor(85, 85, 85)
    assert result.pixels[1][0] == RGBColor(0, 0, 0)


def test_scale_repeats_pixels():
    bitmap = make(SAMPLE)
    scaled = bitmap.scale(2)
    assert (scaled.width, scaled.height) == (bitmap.width * 2, bitmap.height * 2)
    for i, row in enumerate(scaled.pixels):
        for j, pixel in enumerate(row):
            assert pixel == bitmap.pixels[i // 2][j // 2]
    assert scaled.header.file_size == len(scaled.to_bytes())
    assert scaled.dib.pixel_array_size == len(scaled.to_bytes()) - 54


def test_scale_rejects_zero():
    with pytest.raises(ValueError):
        make(SAMPLE).scale(0)


def test_down_resolution_blocks():
    bitmap = make(grid(4, 4))
    result = bitmap.down_resolution(2)
    assert result.pixels[1][1] == bitmap.pixels[0][0]
    assert result.pixels[2][3] == bitmap.pixels[2][2]
    assert result.pixels[3][0] == bitmap.pixels[2][0]
    whole = bitmap.down_resolution(20)
    assert all(p == bitmap.pixels[0][0] for row in whole.pixels for p in row)


def test_down_resolution_rejects_zero():
    with pytest.raises(ValueError):
        make(SAMPLE).down_resolution(0)


def test_equalize_single_colour_becomes_white():
    result = make([[(40, 40, 40)] * 3] * 2).equalize()
    assert all(p == RGBColor(255, 255, 255) for row in result.pixels for p in row)


def test_equalize_maps_brightest_red_to_top():
    bitmap = make(SAMPLE)
    result = bitmap.equalize()
    brightest = max(p.r for row in bitmap.pixels for p in row)
    for row, new_row in zip(bitmap.pixels, result.pixels):
        for p, q in zip(row, new_row):
            if p.r == brightest:
                assert q.r == 255


def test_cut_gives_remainder_to_last_column():
    bitmap = make(SAMPLE)
    parts = bitmap.cut(1, 2)
    assert sorted(parts) == [(0, 0), (0, 1)]
    left, right = parts[(0, 0)], parts[(0, 1)]
    assert left.width + right.width == bitmap.width
    assert right.width > left.width
    joined = tuple(a + b for a, b in zip(left.pixels, right.pixels))
    assert joined == bitmap.pixels


def test_cut_with_non_positive_counts_keeps_image():
    bitmap = make(SAMPLE)
    parts = bitmap.cut(0, -3)
    assert list(parts) == [(0, 0)]
    assert parts[(0, 0)].pixels == bitmap.pixels


def test_cut_parts_are_valid_files():
    bitmap = make(grid(5, 4))
    for part in bitmap.cut(2, 2).values():
        assert Bitmap.from_bytes(part.to_bytes()).pixels == part.pixels


def test_describe():
    bitmap = make(SAMPLE)
    text = bitmap.describe()
    assert "+ Signature  : BM" in text
    assert "+ Compression: No" in text
    assert "PIXEL ARRAY INFO" not in text
    full = bitmap.describe(include_pixels=True)
    assert "RGB(255, 0, 0)" in full
    assert "==== PIXEL ARRAY INFO ====" in full


def test_operations_leave_original_untouched():
    bitmap = make(SAMPLE)
    before = bitmap.pixels
    bitmap.invert()
    bitmap.flip_vertical()
    bitmap.scale(3)
    assert bitmap.pixels == before