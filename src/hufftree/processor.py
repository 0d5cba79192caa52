"""Compress / decompress orchestration.

Compress (two passes over the input):
  counts -> tree -> codings -> [HUFF_TREE(32) | tree header | body | pad]

Decompress (one pass):
  magic -> tree header -> body, stop at PSEUDO_EOF.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from hufftree.core.alphabet import BITS_PER_INT, HUFF_NUMBER, HUFF_TREE, PSEUDO_EOF
from hufftree.core.bitio import BitReader, BitWriter
from hufftree.core.codes import make_codings_from_tree
from hufftree.core.freq import read_for_counts
from hufftree.core.header import read_header, write_header
from hufftree.core.stream import read_compressed_bits, write_compressed_bits
from hufftree.core.tree import iter_leaves, make_tree_from_counts
from hufftree.errors import BadMagic, UnsupportedVersion, UsageError


@dataclass(frozen=True)
class CompressStats:
    bytes_in: int
    distinct_symbols: int  # leaves, PSEUDO_EOF included
    header_bits: int
    body_bits: int

    @property
    def bits_out(self) -> int:
        return BITS_PER_INT + self.header_bits + self.body_bits

    @property
    def bytes_out(self) -> int:
        return (self.bits_out + 7) // 8


@dataclass(frozen=True)
class DecompressStats:
    bytes_out: int
    leaves: int
    bits_read: int


def read_magic(reader: BitReader) -> int:
    """Read and check the 32-bit tag. Nothing past it is consumed."""
    magic = reader.read_bits(BITS_PER_INT)
    if magic is None:
        raise BadMagic("input too short for the 32-bit magic")
    if magic != HUFF_TREE:
        if (magic & ~0xFF) == HUFF_NUMBER:
            raise UnsupportedVersion(f"unsupported Huffman header variant 0x{magic:08x}")
        raise BadMagic(f"illegal header starts with 0x{magic:08x}")
    return magic


class HuffProcessor:
    def compress(self, reader: BitReader, writer: BitWriter) -> CompressStats:
        counts = read_for_counts(reader)
        root = make_tree_from_counts(counts)
        codings = make_codings_from_tree(root)

        writer.write_bits(BITS_PER_INT, HUFF_TREE)
        start = writer.bits_written
        write_header(root, writer)
        header_bits = writer.bits_written - start

        body_bits = write_compressed_bits(codings, reader, writer)
        writer.close()

        return CompressStats(
            bytes_in=sum(counts) - counts[PSEUDO_EOF],
            distinct_symbols=len(codings),
            header_bits=header_bits,
            body_bits=body_bits,
        )

    def decompress(self, reader: BitReader, out: BinaryIO) -> DecompressStats:
        read_magic(reader)
        root = read_header(reader)
        n = read_compressed_bits(root, reader, out)
        return DecompressStats(
            bytes_out=n,
            leaves=sum(1 for _ in iter_leaves(root)),
            bits_read=reader.bits_read,
        )


# -------------------
# bytes / file helpers
# -------------------
def compress_bytes(data: bytes) -> bytes:
    out = io.BytesIO()
    HuffProcessor().compress(BitReader(io.BytesIO(bytes(data))), BitWriter(out))
    return out.getvalue()


def decompress_bytes(blob: bytes) -> bytes:
    out = io.BytesIO()
    HuffProcessor().decompress(BitReader(io.BytesIO(bytes(blob))), out)
    return out.getvalue()


def _check_distinct_paths(input_path: str | Path, output_path: str | Path) -> None:
    if Path(input_path).resolve() == Path(output_path).resolve():
        raise UsageError(f"input and output are the same file: {input_path}")


def compress_file(input_path: str | Path, output_path: str | Path) -> CompressStats:
    _check_distinct_paths(input_path, output_path)
    # output is written only once compression has succeeded
    buf = io.BytesIO()
    with Path(input_path).open("rb") as fin:
        stats = HuffProcessor().compress(BitReader(fin), BitWriter(buf))
    Path(output_path).write_bytes(buf.getvalue())
    return stats


def decompress_file(input_path: str | Path, output_path: str | Path) -> DecompressStats:
    _check_distinct_paths(input_path, output_path)
    # decode in memory first: a corrupt input must not leave a half-written output
    buf = io.BytesIO()
    with Path(input_path).open("rb") as fin:
        stats = HuffProcessor().decompress(BitReader(fin), buf)
    Path(output_path).write_bytes(buf.getvalue())
    return stats
