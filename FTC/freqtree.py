from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from freq import FrequencyEntry, Unit, frequency_table

Path = Tuple[int, ...]

# Path of the root when the tree is a single leaf
SINGLE_LEAF_PATH: Path = (0,)


@dataclass
class Node:
    weight: int
    unit: Optional[Unit] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def insert(root: Optional[Node], unit: Unit, weight: int) -> Node:
    """
    Place a new leaf by descending from the root:
      - leaf: split it, the old leaf goes left and the new one right
      - branch: go into the lighter child (ties go right)
    Branch weights along the way grow by `weight`.
    """
    leaf = Node(weight=weight, unit=unit)
    if root is None:
        return leaf
    node = root
    while not node.is_leaf:
        node.weight += weight
        node = node.left if node.left.weight < node.right.weight else node.right
    node.left = Node(weight=node.weight, unit=node.unit)
    node.right = leaf
    node.unit = None
    node.weight += weight
    return root


def build_tree(entries: Iterable[FrequencyEntry]) -> Optional[Node]:
    """Insert (unit, count) pairs in the given order (highest count first)."""
    root = None
    for unit, count in entries:
        root = insert(root, unit, count)
    return root


def build_tree_from_units(units: Iterable[Unit]) -> Optional[Node]:
    return build_tree(frequency_table(units))


def find_path(root: Optional[Node], target: Unit) -> Optional[Path]:
    """Depth-first search, left before right. None if the unit is not in the tree."""
    if root is None:
        return None
    if root.is_leaf:
        return SINGLE_LEAF_PATH if root.unit == target else None
    stack: List[Tuple[Node, Path]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            if node.unit == target:
                return path
            continue
        stack.append((node.right, path + (1,)))
        stack.append((node.left, path + (0,)))
    return None


def build_codebook(root: Optional[Node]) -> Dict[Unit, Path]:
    code: Dict[Unit, Path] = {}
    if root is None:
        return code
    if root.is_leaf:
        code[root.unit] = SINGLE_LEAF_PATH
        return code
    stack: List[Tuple[Node, Path]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            code[node.unit] = path
        else:
            stack.append((node.right, path + (1,)))
            stack.append((node.left, path + (0,)))
    return code


def count_nodes(root: Optional[Node]) -> Tuple[int, int]:
    """(leaves, branches)"""
    leaves = branches = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf:
            leaves += 1
        else:
            branches += 1
            stack.append(node.right)
            stack.append(node.left)
    return leaves, branches


def tree_depth(root: Optional[Node]) -> int:
    if root is None:
        return 0
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, d = stack.pop()
        if node.is_leaf:
            depth = max(depth, d)
        else:
            stack.append((node.left, d + 1))
            stack.append((node.right, d + 1))
    return depth
