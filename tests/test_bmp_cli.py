import struct

import pytest

from coursebench.bmp import BMPError, Bitmap, row_padding
from coursebench.bmp_cli import main, parse_args, process

ROWS = [
    [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
    [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
]

FILTER_OUTPUTS = {
    "output.blacknwhite.bmp",
    "output.equalization.bmp",
    "output.grayScaleTozero.bmp",
    "output.invert.bmp",
    "output.scale-2.bmp",
    "output.censor.bmp",
    "output.flip-horizontal.bmp",
    "output.flip-vertical.bmp",
}


def bmp_bytes(rows):
    height = len(rows)
    width = len(rows[0])
    padding = bytes(row_padding(width))
    body = b"".join(
        b"".join(bytes((b, g, r)) for r, g, b in row) + padding for row in rows
    )
    header = struct.pack("<2sIHHI", b"BM", 54 + len(body), 0, 0, 54)
    dib = struct.pack("<IIIHHIIIIII", 40, width, height, 1, 24, 0, len(body), 0, 0, 0, 0)
    return header + dib + body


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "img.bmp"
    path.write_bytes(bmp_bytes(ROWS))
    return path


def test_parse_args_height_only():
    options = parse_args(["img.bmp", "-h", "2"])
    assert (options.source, options.h_parts, options.w_parts) == ("img.bmp", 2, 1)


def test_parse_args_both_counts_any_order():
    options = parse_args(["-w", "3", "img.bmp", "-h", "2"])
    assert (options.source, options.h_parts, options.w_parts) == ("img.bmp", 2, 3)


@pytest.mark.parametrize("argv", [[], ["img.bmp"], ["img.bmp", "-h"], ["img.bmp", "-h", "2", "-w"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(ValueError, match="Unsuitable arguments!"):
        parse_args(argv)


def test_parse_args_unreadable_number_is_zero():
    options = parse_args(["img.bmp", "-h", "abc"])
    assert options.h_parts == 0


def test_process_writes_every_output(source, tmp_path):
    out = tmp_path / "out"
    written = process(source, out, 1, 2)
    names = {path.name for path in written}
    assert names == FILTER_OUTPUTS | {"part-0-0.bmp", "part-0-1.bmp"}
    for path in written:
        assert path.parent == out
        assert Bitmap.read(path).height >= 1


def test_process_outputs_match_filters(source, tmp_path):
    out = tmp_path / "out"
    process(source, out)
    original = Bitmap.read(source)
    assert Bitmap.read(out / "output.invert.bmp").pixels == original.invert().pixels
    assert Bitmap.read(out / "output.scale-2.bmp").pixels == original.scale(2).pixels
    assert Bitmap.read(out / "part-0-0.bmp").pixels == original.pixels


def test_process_rejects_invalid_file(tmp_path):
    bad = tmp_path / "bad.bmp"
    bad.write_bytes(b"not a bitmap at all" * 4)
    with pytest.raises(BMPError):
        process(bad, tmp_path / "out")


def test_main_success(source, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(source), "-h", "2", "-w", "2"]) == 0
    dist = tmp_path / "dist"
    names = {path.name for path in dist.iterdir()}
    assert {"part-0-0.bmp", "part-1-1.bmp"} <= names
    assert FILTER_OUTPUTS <= names


def test_main_bad_arguments(source, capsys):
    assert main([str(source)]) == 1
    assert "Unsuitable arguments!" in capsys.readouterr().err


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing.bmp", "-h", "2"]) == 1
    assert "Could not open file" in capsys.readouterr().err