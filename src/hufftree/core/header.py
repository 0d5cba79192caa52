from __future__ import annotations

from hufftree.errors import MalformedHeader

from .alphabet import ALPH_SIZE, PSEUDO_EOF, SYMBOL_BITS
from .bitio import BitReader, BitWriter
from .tree import Internal, Leaf, Node

# 257 foglie al massimo => profondita' massima 256
MAX_DEPTH = ALPH_SIZE + 1


# -------------------
# Header "tagged tree"
#   node := '0' node node | '1' value9
# -------------------
def write_header(root: Node, writer: BitWriter) -> None:
    if isinstance(root, Leaf):
        writer.write_bits(1, 1)
        writer.write_bits(SYMBOL_BITS, root.symbol)
        return
    writer.write_bits(1, 0)
    write_header(root.left, writer)
    write_header(root.right, writer)


def read_header(reader: BitReader, _depth: int = 0) -> Node:
    if _depth > MAX_DEPTH:
        raise MalformedHeader(f"header: albero troppo profondo (> {MAX_DEPTH})")

    bit = reader.read_bits(1)
    if bit is None:
        raise MalformedHeader("header troncato (bit di nodo mancante)")

    if bit == 0:
        left = read_header(reader, _depth + 1)
        right = read_header(reader, _depth + 1)
        return Internal(left=left, right=right)

    value = reader.read_bits(SYMBOL_BITS)
    if value is None:
        raise MalformedHeader("header troncato (valore foglia mancante)")
    if value > PSEUDO_EOF:
        raise MalformedHeader(f"header: simbolo foglia fuori range: {value}")
    return Leaf(symbol=value)


def header_bit_length(root: Node) -> int:
    if isinstance(root, Leaf):
        return 1 + SYMBOL_BITS
    return 1 + header_bit_length(root.left) + header_bit_length(root.right)
