"""hufftree: Huffman byte compressor with a self-describing tree header."""

__version__ = "0.1.0"
