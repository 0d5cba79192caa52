"""Verification helpers.

verify: decode a compressed file end to end into a discarding sink,
so every format error surfaces with its own type without writing output.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hufftree.core.alphabet import BITS_PER_INT
from hufftree.core.bitio import BitReader
from hufftree.core.codes import code_to_str, make_codings_from_tree
from hufftree.core.header import read_header
from hufftree.core.tree import tree_depth
from hufftree.errors import CorruptPayload
from hufftree.processor import HuffProcessor, read_magic


class _NullSink(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, b: Any) -> int:
        return len(b)


@dataclass(frozen=True)
class VerifyReport:
    path: Path
    bytes_out: int
    leaves: int
    bits_read: int


def verify_compressed_file(path: Path) -> VerifyReport:
    p = Path(path)
    if not p.is_file():
        raise CorruptPayload(f"file not found: {p}")

    with p.open("rb") as fin:
        stats = HuffProcessor().decompress(BitReader(fin), _NullSink())

    return VerifyReport(
        path=p,
        bytes_out=stats.bytes_out,
        leaves=stats.leaves,
        bits_read=stats.bits_read,
    )


def describe_compressed_file(path: Path) -> dict[str, Any]:
    """Magic + tree shape + code table, for `hufftree show`."""
    p = Path(path)
    if not p.is_file():
        raise CorruptPayload(f"file not found: {p}")

    with p.open("rb") as fin:
        reader = BitReader(fin)
        magic = read_magic(reader)
        root = read_header(reader)
        header_bits = reader.bits_read - BITS_PER_INT

    codings = make_codings_from_tree(root)
    return {
        "path": str(p),
        "magic": f"0x{magic:08x}",
        "header_bits": header_bits,
        "leaves": len(codings),
        "depth": tree_depth(root),
        "codes": {str(sym): code_to_str(code) for sym, code in sorted(codings.items())},
    }
