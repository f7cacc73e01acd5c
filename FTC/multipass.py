from typing import Tuple

from codec import compress, decompress
from errors import TruncatedInput

MAX_LEVEL = 0xFF


def multipass_compress(data: bytes, cap: int = MAX_LEVEL) -> Tuple[bytes, int]:
    """
    Compress byte-wise again and again while each pass still shrinks the data.
    Returns ([level u8][data], level). Level 0 stores `data` as is.
    """
    cap = max(0, min(cap, MAX_LEVEL))
    level = 0
    cur = bytes(data)
    while level < cap:
        nxt = compress(cur, "byte")
        if len(nxt) >= len(cur):
            break
        cur = nxt
        level += 1
    return bytes([level]) + cur, level


def multipass_decompress(buf: bytes) -> bytes:
    if not buf:
        raise TruncatedInput("Malformed stream: missing compression level")
    level = buf[0]
    cur = bytes(buf[1:])
    for _ in range(level):
        cur = bytes(decompress(cur, "byte"))
    return cur
