from __future__ import annotations

from typing import BinaryIO


class BitReader:
    """
    Lettura a bit (MSB-first) sopra un file binario.

    read_bits(n) ritorna None quando lo stream non ha altri n bit:
    decidere se e' un errore spetta al chiamante.
    """

    def __init__(self, fp: BinaryIO) -> None:
        self._fp = fp
        self._start = fp.tell() if fp.seekable() else None
        self._buffer = 0
        self._nbits = 0
        self.bits_read = 0

    def read_bits(self, n: int) -> int | None:
        if n < 0:
            raise ValueError(f"read_bits: n negativo ({n})")
        while self._nbits < n:
            b = self._fp.read(1)
            if not b:
                return None
            self._buffer = (self._buffer << 8) | b[0]
            self._nbits += 8

        self._nbits -= n
        value = (self._buffer >> self._nbits) & ((1 << n) - 1)
        self._buffer &= (1 << self._nbits) - 1
        self.bits_read += n
        return value

    def reset(self) -> None:
        """Torna alla posizione iniziale (serve per la seconda passata di compress)."""
        if self._start is None:
            raise ValueError("reset: lo stream sottostante non supporta seek")
        self._fp.seek(self._start)
        self._buffer = 0
        self._nbits = 0
        self.bits_read = 0


class BitWriter:
    """
    Scrittura a bit (MSB-first). L'ultimo byte parziale viene completato
    con zeri da flush()/close(); il file sottostante resta aperto.
    """

    def __init__(self, fp: BinaryIO) -> None:
        self._fp = fp
        self._current = 0
        self._nbits = 0
        self.bits_written = 0

    def write_bits(self, n: int, value: int) -> None:
        if n < 0:
            raise ValueError(f"write_bits: n negativo ({n})")
        if value < 0 or value >> n:
            raise ValueError(f"write_bits: valore {value} non sta in {n} bit")

        for shift in range(n - 1, -1, -1):
            self._current = (self._current << 1) | ((value >> shift) & 1)
            self._nbits += 1
            if self._nbits == 8:
                self._fp.write(bytes((self._current,)))
                self._current = 0
                self._nbits = 0
        self.bits_written += n

    def flush(self) -> None:
        if self._nbits > 0:
            self._fp.write(bytes((self._current << (8 - self._nbits),)))
            self._current = 0
            self._nbits = 0
        self._fp.flush()

    def close(self) -> None:
        self.flush()
