# tree.py

import logging
from collections import deque

from node_module import Node

logger = logging.getLogger(__name__)


class Tree:
    """
    Search tree of reachable poses.

    Holds the root (every other node is owned through its parent's edges),
    a FIFO frontier of nodes awaiting expansion and the node closest to
    the most recent target.
    """

    def __init__(self, x0, sampler=None):
        primitive = sampler.sample() if sampler is not None else None
        self.root = Node(x0, primitive=primitive)
        self.queue = deque([self.root])
        self.closest = self.root

    def enqueue(self, node):
        self.queue.append(node)

    def pop(self):
        return self.queue.popleft()

    def refill(self):
        """Re-seed an empty frontier with the root and restart closest tracking there."""
        self.queue = deque([self.root])
        self.closest = self.root

    def set_root(self, new_root):
        if new_root is self.root:
            return
        new_root.detach()
        self.root = new_root

    def prune(self, target_node, up):
        """
        Keep only frontier nodes that have target_node within `up` ancestors.

        Returns the number of dropped entries.
        """
        before = len(self.queue)
        self.queue = deque(n for n in self.queue if n.descends_from(target_node, up))
        dropped = before - len(self.queue)
        if dropped:
            logger.debug("Pruned %d of %d frontier nodes", dropped, before)
        return dropped

    def chop_trunk(self, trunk_node, up):
        """Make trunk_node the root and drop frontier nodes outside its window."""
        self.prune(trunk_node, up)
        self.set_root(trunk_node)

    def path_between(self, start, stop):
        """
        Nodes from start up toward stop via parent links, stop excluded.

        The walk ends early at a node without parent, which happens when
        stop is no longer an ancestor of start.
        """
        path = []
        node = start
        while node is not stop:
            path.append(node)
            node = node.parent
            if node is None:
                break
        return path

    def iter_nodes(self):
        return self.root.iter_subtree()

    def iter_edges(self):
        return self.root.iter_edges()

    def count_nodes(self):
        return sum(1 for _ in self.iter_nodes())

    def check_frontier(self, up):
        """Assert every frontier node descends from the root within `up` hops."""
        for node in self.queue:
            if not node.descends_from(self.root, up):
                raise AssertionError(
                    f"Frontier node {node!r} does not descend from root "
                    f"{self.root!r} within {up} hops")
