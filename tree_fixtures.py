# tree_fixtures.py
"""Deterministic samplers and hand-built trees for the test modules."""

import itertools

from pose import MotionPrimitive, Pose
from tree import Tree


class ScriptedSampler:
    """Returns the given primitives in order, cycling forever."""

    def __init__(self, *primitives):
        self._it = itertools.cycle([MotionPrimitive(*p) for p in primitives])

    def sample(self):
        return next(self._it)


def build_chain(sampler, length):
    """Tree whose nodes form a single chain of `length` edges."""
    tree = Tree(Pose(0.0, 0.0, 0.0), sampler)
    nodes = [tree.root]
    for _ in range(length):
        nodes.append(nodes[-1].expand(sampler).child)
    return tree, nodes
