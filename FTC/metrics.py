from typing import Dict, Hashable, Optional, Sequence

import numpy as np

from bitstream import PAD_SIZE, tree_size
from freq import unit_frequencies
from freqtree import Node, build_codebook, count_nodes, tree_depth
from units import UnitCodec


def compression_ratio(original_size: int, compressed_size: int) -> float:
    if compressed_size == 0:
        return float("inf")
    return float(original_size) / float(compressed_size)


def entropy_bits(units: Sequence[Hashable]) -> float:
    """Shannon entropy of the unit distribution, bits per unit."""
    counts = np.array(list(unit_frequencies(units).values()), dtype=np.float64)
    if counts.size == 0:
        return 0.0
    p = counts / counts.sum()
    return float(-(p * np.log2(p)).sum())


def total_code_bits(root: Optional[Node], units: Sequence[Hashable]) -> int:
    freqs = unit_frequencies(units)
    code = build_codebook(root)
    return sum(count * len(code[u]) for u, count in freqs.items())


def mean_code_length(root: Optional[Node], units: Sequence[Hashable]) -> float:
    """Average path length in bits per unit when `units` is coded with `root`."""
    if len(units) == 0:
        return 0.0
    return total_code_bits(root, units) / len(units)


def tree_report(root: Optional[Node], units: Sequence[Hashable], codec: UnitCodec) -> Dict[str, float]:
    """Sizes and statistics of one compressed buffer, without building it."""
    leaves, branches = count_nodes(root)
    nbits = total_code_bits(root, units)
    tree_bytes = tree_size(root, codec)
    payload_bytes = (nbits + 7) // 8
    return dict(
        units=len(units),
        leaves=leaves,
        branches=branches,
        depth=tree_depth(root),
        tree_bytes=tree_bytes,
        payload_bytes=payload_bytes,
        compressed_bytes=tree_bytes + PAD_SIZE + payload_bytes,
        entropy=entropy_bits(units),
        mean_length=mean_code_length(root, units),
    )
