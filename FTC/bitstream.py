import struct
from typing import List, Optional, Tuple

from errors import CorruptEncoding, TruncatedInput
from freqtree import Node, count_nodes
from units import UnitCodec

# Compressed buffer:
#   tree      pre-order, one tag(u8) per node, leaf tag followed by codec.size unit bytes
#   padding   u8, number of zero bits appended to the last payload byte (0..7)
#   payload   packed path bits, MSB-first
TAG_LEAF = 0
TAG_BRANCH = 1
TAG_EMPTY = 2  # whole tree only (empty input)

TAG_FMT = "B"
TAG_SIZE = struct.calcsize(TAG_FMT)
PAD_FMT = "B"
PAD_SIZE = struct.calcsize(PAD_FMT)


def tree_size(root: Optional[Node], codec: UnitCodec) -> int:
    """Exact number of bytes write_tree produces."""
    if root is None:
        return TAG_SIZE
    leaves, branches = count_nodes(root)
    return leaves * (TAG_SIZE + codec.size) + branches * TAG_SIZE


def write_tree(buf: bytearray, root: Optional[Node], codec: UnitCodec):
    if root is None:
        buf += struct.pack(TAG_FMT, TAG_EMPTY)
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            buf += struct.pack(TAG_FMT, TAG_LEAF)
            buf += codec.pack(node.unit)
        else:
            buf += struct.pack(TAG_FMT, TAG_BRANCH)
            stack.append(node.right)
            stack.append(node.left)


def _read_tag(data: bytes, pos: int) -> int:
    if pos + TAG_SIZE > len(data):
        raise TruncatedInput(f"Malformed stream: tree truncated (node tag at byte {pos})")
    return struct.unpack_from(TAG_FMT, data, pos)[0]


def read_tree(data: bytes, codec: UnitCodec, offset: int = 0) -> Tuple[Optional[Node], int]:
    """
    Rebuild the tree written by write_tree.
    Returns (root, position just past the tree). Weights are not stored and come back as 0.
    """
    pos = offset
    if _read_tag(data, pos) == TAG_EMPTY:
        return None, pos + TAG_SIZE

    root = None
    pending: List[Node] = []  # branches still waiting for a right child
    while True:
        tag = _read_tag(data, pos)
        pos += TAG_SIZE
        if tag == TAG_LEAF:
            if pos + codec.size > len(data):
                raise TruncatedInput(f"Malformed stream: tree truncated (unit data at byte {pos})")
            node = Node(weight=0, unit=codec.unpack(data, pos))
            pos += codec.size
        elif tag == TAG_BRANCH:
            node = Node(weight=0)
        else:
            raise CorruptEncoding(f"Invalid node tag {tag} at byte {pos - TAG_SIZE}")

        if root is None:
            root = node
        else:
            parent = pending[-1]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
                pending.pop()

        if tag == TAG_BRANCH:
            pending.append(node)
        if not pending:
            return root, pos


def write_padding(buf: bytearray, padding: int):
    buf += struct.pack(PAD_FMT, padding)


def read_padding(data: bytes, pos: int) -> Tuple[int, int]:
    if pos + PAD_SIZE > len(data):
        raise TruncatedInput("Malformed stream: padding byte missing")
    return struct.unpack_from(PAD_FMT, data, pos)[0], pos + PAD_SIZE
