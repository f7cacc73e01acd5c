from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from bitpack import BitReader, BitWriter
from bitstream import read_padding, read_tree, write_padding, write_tree
from errors import CorruptEncoding
from freq import Unit, frequency_table
from freqtree import Node, Path, build_codebook, build_tree
from units import get_codec


def encode_units(units: Sequence[Unit]) -> Tuple[Optional[Node], bytes, int]:
    """
    Returns:
      root: code tree built from `units` (None for empty input)
      payload: packed path bits
      padding: number of zero bits at the end of payload (0..7)
    """
    root = build_tree(frequency_table(units))
    paths: Dict[Unit, Path] = build_codebook(root)
    bw = BitWriter()
    for u in units:
        bw.write_path(paths[u])
    payload, padding = bw.finish()
    return root, payload, padding


def decode_bits(root: Optional[Node], bits: np.ndarray) -> List[Unit]:
    """Walk the tree once per bit, emitting a unit at each leaf."""
    if root is None:
        if bits.size:
            raise CorruptEncoding(f"{bits.size} payload bits with an empty tree")
        return []
    if root.is_leaf:
        if bits.any():
            raise CorruptEncoding("Single-unit stream contains a 1 bit")
        return [root.unit] * int(bits.size)

    out = []
    node = root
    for b in bits.tolist():
        node = node.right if b else node.left
        if node.is_leaf:
            out.append(node.unit)
            node = root
    if node is not root:
        raise CorruptEncoding("Bit stream ends in the middle of a path")
    return out


def compress(units: Sequence[Unit], unit="byte") -> bytes:
    """
    [tree][padding u8][payload]
    `unit` is a codec name from units.CODECS or a UnitCodec instance.
    """
    codec = get_codec(unit)
    root, payload, padding = encode_units(units)
    buf = bytearray()
    write_tree(buf, root, codec)
    write_padding(buf, padding)
    buf += payload
    return bytes(buf)


def decompress(data: bytes, unit="byte") -> List[Unit]:
    codec = get_codec(unit)
    root, pos = read_tree(data, codec)
    padding, pos = read_padding(data, pos)
    bits = BitReader(data[pos:], padding).bits()
    return decode_bits(root, bits)


def compress_text(text: str) -> bytes:
    return compress(text, "char")


def decompress_text(data: bytes) -> str:
    return "".join(decompress(data, "char"))
