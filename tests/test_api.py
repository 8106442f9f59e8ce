# tests/test_api.py
from __future__ import annotations

from pathlib import Path

import bomsniff
from bomsniff import BOM, Encoding


def test_public_names():
    for name in bomsniff.__all__:
        assert hasattr(bomsniff, name)


def test_max_bom_bytes():
    assert bomsniff.MAX_BOM_BYTES == 4


def test_version():
    assert isinstance(bomsniff.__version__, str)


def test_detect_utf8_bom():
    result = bomsniff.detect(b"\xef\xbb\xbfHello")
    assert result == BOM(Encoding.UTF_8)
    assert result.to_dict() == {"encoding": "utf-8", "length": 3}


def test_detect_no_bom():
    assert bomsniff.detect(b"Test") is None


def test_mark_length():
    assert bomsniff.mark_length(Encoding.UTF_32_BE) == 4


def test_detect_file_then_decode(tmp_path: Path):
    f = tmp_path / "notes.txt"
    f.write_bytes(b"\xfe\xff" + "Größe".encode("utf-16-be"))
    bom = bomsniff.detect_file(f)
    assert bom is not None
    text = f.read_bytes()[bom.length :].decode(bom.encoding.value)
    assert text == "Größe"
