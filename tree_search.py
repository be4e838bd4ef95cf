# tree_search.py

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from node_module import Node
from sampler import MotionSampler
from scheduler import StepOutcome
from steer import distance
from tree import Tree

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    """Status of the tree search."""
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class ExpansionReport:
    """What a single expansion did to the tree."""
    parent: Node
    child: Node
    dist_to_closest: float
    dist_to_child: float
    improved: bool = False
    enqueued: bool = False
    parent_requeued: bool = False
    finished: bool = False
    pruned: int = 0
    new_root: Optional[Node] = None
    refilled: bool = False


class TreeSearch:
    """
    Incremental target-biased expansion of a kinodynamic tree.

    Nodes are expanded in FIFO order. A child is kept on the frontier when
    it improves on the closest node or lands within explore_margin of it,
    and the expanded node goes back on the frontier while it stays inside
    that band. The tree is re-rooted at the ancestor draw_depth hops above
    the closest node so the search window never grows without bound.
    """

    def __init__(self, config, x_start, target, sampler=None, history_size=1000):
        self.config = config
        self.target = target
        self.sampler = sampler if sampler is not None else MotionSampler(config)
        self.tree = Tree(x_start, self.sampler)
        self.status = SearchStatus.IDLE

        self.expansions = 0
        self.refills = 0
        self.prunes = 0
        self.history = deque(maxlen=history_size)
        self.last_report = None

    @property
    def root(self):
        return self.tree.root

    @property
    def closest(self):
        return self.tree.closest

    @property
    def running(self):
        return self.status is SearchStatus.RUNNING

    def start(self):
        """Begin a run unless one is already in progress."""
        if self.status is SearchStatus.RUNNING:
            return False
        if not self.tree.queue:
            self.tree.refill()
        self.status = SearchStatus.RUNNING
        logger.info("Search started toward (%.1f, %.1f)",
                    self.target.pose.x, self.target.pose.y)
        return True

    def step(self, budget=1):
        """Run up to `budget` expansions."""
        if self.status is not SearchStatus.RUNNING:
            return StepOutcome.WAITING
        for _ in range(budget):
            self.expand_once()
            if self.status is SearchStatus.FINISHED:
                return StepOutcome.DONE
        return StepOutcome.PROGRESSED

    def expand_once(self):
        cfg = self.config
        tree = self.tree
        goal = self.target.pose

        refilled = False
        if not tree.queue:
            # emptied by an external reroot since the last step
            tree.refill()
            self.refills += 1
            refilled = True
        node = tree.pop()
        child = node.expand(self.sampler).child

        dist_to_closest = distance(tree.closest.pose, goal)
        dist_to_child = distance(child.pose, goal)
        report = ExpansionReport(node, child, dist_to_closest, dist_to_child,
                                 refilled=refilled)

        if dist_to_child < dist_to_closest:
            tree.closest = child
            tree.enqueue(child)
            report.improved = report.enqueued = True
        elif dist_to_child < dist_to_closest + cfg.explore_margin:
            tree.enqueue(child)
            report.enqueued = True

        if distance(node.pose, goal) < dist_to_closest + cfg.explore_margin:
            tree.enqueue(node)
            report.parent_requeued = True

        self.expansions += 1
        self.history.append(distance(tree.closest.pose, goal))
        self.last_report = report

        if dist_to_child < cfg.finish_distance and not self.target.orbiting:
            self.status = SearchStatus.FINISHED
            report.finished = True
            logger.info("Search finished after %d expansions, %.2f from target",
                        self.expansions, dist_to_child)
            return report

        trunk = tree.closest.ancestor(cfg.draw_depth)
        if trunk is not None and trunk.parent is not None:
            report.pruned = tree.prune(trunk, cfg.draw_depth)
            tree.set_root(trunk)
            report.new_root = trunk
            self.prunes += 1

        if not tree.queue:
            tree.refill()
            self.refills += 1
            report.refilled = True
            logger.debug("Frontier empty, re-seeded with root %r", tree.root)

        return report

    def reroot(self, node):
        """Drop history above node: prune the frontier to its window and make it the root."""
        self.tree.chop_trunk(node, self.config.draw_depth)
