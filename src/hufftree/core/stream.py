from __future__ import annotations

from typing import BinaryIO, Dict

from hufftree.errors import MissingTerminator

from .alphabet import BITS_PER_WORD, PSEUDO_EOF
from .bitio import BitReader, BitWriter
from .codes import Code, code_value
from .tree import Leaf, Node


def write_compressed_bits(codings: Dict[int, Code], reader: BitReader, writer: BitWriter) -> int:
    """
    Seconda passata: riparte dall'inizio dell'input, scrive il codice di ogni
    byte e infine quello di PSEUDO_EOF. Ritorna il numero di bit del body.
    """
    # (lunghezza, valore) calcolati una volta sola
    table = {sym: (len(code), code_value(code)) for sym, code in codings.items()}

    reader.reset()
    start = writer.bits_written
    while True:
        value = reader.read_bits(BITS_PER_WORD)
        if value is None:
            break
        n, v = table[value]
        writer.write_bits(n, v)

    n, v = table[PSEUDO_EOF]
    writer.write_bits(n, v)
    return writer.bits_written - start


def read_compressed_bits(root: Node, reader: BitReader, out: BinaryIO) -> int:
    """
    Cammina l'albero un bit alla volta; a ogni foglia emette il byte e
    riparte dalla radice, si ferma su PSEUDO_EOF. Ritorna i byte scritti.
    """
    if isinstance(root, Leaf):
        # albero degenere: il codice del sentinel ha zero bit
        if root.symbol == PSEUDO_EOF:
            return 0
        raise MissingTerminator(f"albero con una sola foglia ({root.symbol}) senza PSEUDO_EOF")

    buf = bytearray()
    current: Node = root
    while True:
        bit = reader.read_bits(1)
        if bit is None:
            raise MissingTerminator("bad input, no PSEUDO_EOF")

        current = current.left if bit == 0 else current.right

        if isinstance(current, Leaf):
            if current.symbol == PSEUDO_EOF:
                break
            buf.append(current.symbol)
            current = root

    out.write(bytes(buf))
    return len(buf)
