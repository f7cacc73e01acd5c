import struct
from typing import List

from errors import UnsupportedUnit

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def _valid_code_point(p: int) -> bool:
    return p <= MAX_CODE_POINT and p not in SURROGATES


class UnitCodec:
    """
    Fixed-width serialization of one unit.
    Every unit of a codec occupies exactly `size` bytes in the tree table.
    """
    name = ""
    size = 0

    def pack(self, unit) -> bytes:
        raise NotImplementedError

    def unpack(self, buf: bytes, offset: int = 0):
        raise NotImplementedError


class IntCodec(UnitCodec):
    def __init__(self, name: str, fmt: str, lo: int, hi: int):
        self.name = name
        self.fmt = fmt
        self.size = struct.calcsize(fmt)
        self.lo = lo
        self.hi = hi

    def pack(self, unit) -> bytes:
        if isinstance(unit, bool) or not isinstance(unit, int):
            raise UnsupportedUnit(f"{self.name}: expected int, got {type(unit).__name__}")
        if not (self.lo <= unit <= self.hi):
            raise UnsupportedUnit(f"{self.name}: {unit} out of range ({self.lo}..{self.hi})")
        return struct.pack(self.fmt, unit)

    def unpack(self, buf: bytes, offset: int = 0):
        return struct.unpack_from(self.fmt, buf, offset)[0]


class CharCodec(UnitCodec):
    """N characters per unit, each stored as a little-endian u32 code point."""

    def __init__(self, n: int = 1):
        self.n = n
        self.name = "char" if n == 1 else f"char{n}"
        self.fmt = f"<{n}I"
        self.size = struct.calcsize(self.fmt)

    def pack(self, unit) -> bytes:
        if not isinstance(unit, str) or len(unit) != self.n:
            raise UnsupportedUnit(f"{self.name}: expected str of length {self.n}, got {unit!r}")
        if not all(_valid_code_point(ord(ch)) for ch in unit):
            raise UnsupportedUnit(f"{self.name}: surrogate code point in {unit!r}")
        return struct.pack(self.fmt, *(ord(ch) for ch in unit))

    def unpack(self, buf: bytes, offset: int = 0):
        points = struct.unpack_from(self.fmt, buf, offset)
        if not all(_valid_code_point(p) for p in points):
            raise UnsupportedUnit(f"{self.name}: invalid code point in {points}")
        return "".join(chr(p) for p in points)


CODECS = {
    "byte": IntCodec("byte", "B", 0, 0xFF),
    "u16": IntCodec("u16", "<H", 0, 0xFFFF),
    "i16": IntCodec("i16", "<h", -0x8000, 0x7FFF),
    "u32": IntCodec("u32", "<I", 0, 0xFFFFFFFF),
    "i32": IntCodec("i32", "<i", -0x80000000, 0x7FFFFFFF),
    "char": CharCodec(1),
    "char2": CharCodec(2),
    "char3": CharCodec(3),
    "char4": CharCodec(4),
}


def get_codec(unit) -> UnitCodec:
    """Accepts a codec instance or one of the names in CODECS."""
    if isinstance(unit, UnitCodec):
        return unit
    try:
        return CODECS[unit]
    except KeyError:
        raise UnsupportedUnit(f"Unknown unit type: {unit!r}") from None


def group_text(text: str, n: int, fill: str = "\n") -> List[str]:
    """Split text into n-character units; the last one is padded with `fill`."""
    if n < 1:
        raise ValueError("group size must be >= 1")
    rem = len(text) % n
    if rem:
        text = text + fill * (n - rem)
    return [text[i:i + n] for i in range(0, len(text), n)]
