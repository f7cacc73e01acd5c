import random

from freq import frequency_table
from freqtree import (SINGLE_LEAF_PATH, build_codebook, build_tree, build_tree_from_units,
                      count_nodes, find_path, insert, tree_depth)


def _leaf_weights_ok(node):
    if node.is_leaf:
        return node.weight
    left = _leaf_weights_ok(node.left)
    right = _leaf_weights_ok(node.right)
    assert node.weight == left + right
    return node.weight


def test_known_shape():
    # a:4 b:2 c:1 -> a goes left of the root, b and c share the right subtree
    root = build_tree_from_units("aaaabbc")
    assert build_codebook(root) == {"a": (0,), "b": (1, 0), "c": (1, 1)}
    assert root.weight == 7


def test_ties_descend_right():
    root = build_tree([("a", 1), ("b", 1), ("c", 1), ("d", 1)])
    assert build_codebook(root) == {"a": (0, 0), "d": (0, 1), "b": (1, 0), "c": (1, 1)}


def test_not_bottom_up_merge():
    # a bottom-up merge codes c in 2 bits and d in 3 (33 bits total)
    root = build_tree([("a", 5), ("b", 4), ("c", 3), ("d", 2), ("e", 1)])
    code = build_codebook(root)
    assert code == {"a": (0, 0), "d": (0, 1), "b": (1, 0), "c": (1, 1, 0), "e": (1, 1, 1)}
    weights = {"a": 5, "b": 4, "c": 3, "d": 2, "e": 1}
    assert sum(w * len(code[u]) for u, w in weights.items()) == 34


def test_weights_are_sums():
    rng = random.Random(1)
    units = [rng.choice("abcdefghij") for _ in range(500)]
    _leaf_weights_ok(build_tree_from_units(units))


def test_deterministic():
    rng = random.Random(2)
    units = [rng.randrange(50) for _ in range(2000)]
    entries = frequency_table(units)
    assert build_codebook(build_tree(entries)) == build_codebook(build_tree(entries))


def test_prefix_free():
    rng = random.Random(3)
    units = [int(rng.expovariate(0.1)) for _ in range(5000)]
    code = build_codebook(build_tree_from_units(units))
    paths = list(code.values())
    for i, p in enumerate(paths):
        for j, q in enumerate(paths):
            if i != j:
                assert q[:len(p)] != p


def test_find_path_matches_codebook():
    root = build_tree_from_units("the quick brown fox jumps over the lazy dog")
    for unit, path in build_codebook(root).items():
        assert find_path(root, unit) == path
    assert find_path(root, "#") is None


def test_single_leaf():
    root = build_tree_from_units("aaaa")
    assert root.is_leaf
    assert find_path(root, "a") == SINGLE_LEAF_PATH
    assert build_codebook(root) == {"a": SINGLE_LEAF_PATH}
    assert count_nodes(root) == (1, 0)
    assert tree_depth(root) == 0


def test_empty():
    assert build_tree_from_units("") is None
    assert build_codebook(None) == {}
    assert find_path(None, "a") is None
    assert count_nodes(None) == (0, 0)


def test_insert_splits_leaf_old_left():
    root = insert(None, "x", 5)
    root = insert(root, "y", 2)
    assert root.left.unit == "x" and root.right.unit == "y"
    assert root.weight == 7
    assert count_nodes(root) == (2, 1)


def test_deep_tree_no_recursion_limit():
    entries = [(i, 2 ** (3000 - i)) for i in range(3000)]
    root = build_tree(entries)
    assert tree_depth(root) > 1000
    code = build_codebook(root)
    assert len(code) == 3000
