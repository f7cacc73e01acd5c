from typing import Iterable, Tuple

import numpy as np

from errors import MalformedPadding


def padding_for(nbits: int) -> int:
    return (8 - nbits % 8) % 8


class BitWriter:
    def __init__(self):
        self._bits = bytearray()  # one 0/1 value per bit

    def write_path(self, path: Iterable[int]):
        """Append the bits of one path (root to leaf)."""
        self._bits.extend(path)

    def __len__(self):
        return len(self._bits)

    def finish(self) -> Tuple[bytes, int]:
        """Pack MSB-first, zero-pad the last byte. Returns (payload, padding)."""
        if not self._bits:
            return b"", 0
        bits = np.frombuffer(bytes(self._bits), dtype=np.uint8)
        return np.packbits(bits).tobytes(), padding_for(bits.size)


class BitReader:
    def __init__(self, data: bytes, padding: int):
        if not (0 <= padding <= 7):
            raise MalformedPadding(f"Padding count {padding} out of range 0..7")
        if padding and not data:
            raise MalformedPadding(f"Padding count {padding} with an empty payload")
        self.data = data
        self.padding = padding
        self.nbits = len(data) * 8 - padding

    def bits(self) -> np.ndarray:
        """Significant bits as a uint8 0/1 array (trailing padding dropped)."""
        if not self.data:
            return np.zeros(0, dtype=np.uint8)
        raw = np.unpackbits(np.frombuffer(self.data, dtype=np.uint8))
        return raw[:self.nbits]


def pack_bits(bits: Iterable[int]) -> Tuple[bytes, int]:
    bw = BitWriter()
    bw.write_path(bits)
    return bw.finish()


def unpack_bits(data: bytes, padding: int) -> np.ndarray:
    return BitReader(data, padding).bits()
