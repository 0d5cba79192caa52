from __future__ import annotations

from pathlib import Path

import pytest

from hufftree.errors import BadMagic, CorruptPayload, MalformedHeader, MissingTerminator
from hufftree.processor import compress_file
from hufftree.verify import describe_compressed_file, verify_compressed_file


def test_verify_ok(tmp_path: Path) -> None:
    inp = tmp_path / "a.txt"
    out = tmp_path / "a.huff"
    inp.write_text("FATTURA N. 1\nTOTALE 12.00\n", encoding="utf-8")
    compress_file(inp, out)

    rep = verify_compressed_file(out)
    assert rep.bytes_out == inp.stat().st_size
    assert rep.leaves == len(set(inp.read_bytes())) + 1
    # verify never writes anything next to the input
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.huff", "a.txt"]


@pytest.mark.parametrize(
    "blob_hex, exc",
    [
        ("00000000", BadMagic),
        ("face820124", MalformedHeader),
        ("face8201242c0241", MissingTerminator),
    ],
)
def test_verify_detects_corruption(tmp_path: Path, blob_hex: str, exc: type) -> None:
    p = tmp_path / "x.huff"
    p.write_bytes(bytes.fromhex(blob_hex))
    with pytest.raises(exc):
        verify_compressed_file(p)


def test_verify_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CorruptPayload, match="not found"):
        verify_compressed_file(tmp_path / "missing.huff")


def test_describe_aaab(tmp_path: Path) -> None:
    inp = tmp_path / "aaab.txt"
    out = tmp_path / "aaab.huff"
    inp.write_bytes(b"AAAB")
    compress_file(inp, out)

    info = describe_compressed_file(out)
    assert info["magic"] == "0xface8201"
    assert info["header_bits"] == 32
    assert info["depth"] == 2
    assert info["codes"] == {"65": "1", "66": "00", "256": "01"}
