from __future__ import annotations

# -------------------
# Wire format constants
# -------------------
BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD  # 256 literal byte values
PSEUDO_EOF = ALPH_SIZE  # sentinel, never a literal byte
SYMBOL_BITS = BITS_PER_WORD + 1  # leaf field in the tree header, fits PSEUDO_EOF

HUFF_NUMBER = 0xFACE8200  # Huffman magic family
HUFF_TREE = HUFF_NUMBER | 1  # tagged-tree header (this format)
