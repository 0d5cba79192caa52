from __future__ import annotations

from typing import List

from .alphabet import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF
from .bitio import BitReader


def _empty_counts() -> List[int]:
    freq = [0] * (ALPH_SIZE + 1)
    freq[PSEUDO_EOF] = 1  # il sentinel ha sempre una foglia
    return freq


def read_for_counts(reader: BitReader) -> List[int]:
    """
    Prima passata: conta le occorrenze di ogni byte fino a fine stream.
    Ritorna 257 slot (0..255 + PSEUDO_EOF=1).
    """
    freq = _empty_counts()
    while True:
        value = reader.read_bits(BITS_PER_WORD)
        if value is None:
            break
        freq[value] += 1
    return freq


def counts_from_bytes(data: bytes) -> List[int]:
    freq = _empty_counts()
    for b in data:
        freq[b] += 1
    return freq
