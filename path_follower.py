# path_follower.py
"""
Pure-pursuit agent that walks the search tree.

The agent always aims at a single target node and re-solves the tangent
arc toward it every tick, since the path below it keeps changing while
the search runs.
"""

import logging
from enum import Enum

from scheduler import StepOutcome
from steer import curvature_toward, distance, step_arc
from tree_search import SearchStatus

logger = logging.getLogger(__name__)


class FollowerStatus(Enum):
    IDLE = "idle"
    MOVING = "moving"


class PathFollower:
    def __init__(self, config, x0, search):
        """
        Parameters
        ----------
        config : PlannerConfig
            Supplies agent_step and finish_move_distance.
        x0 : Pose
            Initial agent pose.
        search : TreeSearch
            Search whose tree the agent follows.
        """
        self.config = config
        self.pose = x0
        self.search = search
        self.target_node = search.root
        self.path = []
        self.status = FollowerStatus.IDLE

    @property
    def moving(self):
        return self.status is FollowerStatus.MOVING

    def at_target_node(self):
        return distance(self.target_node.pose, self.pose) < self.config.finish_move_distance

    def need_to_move(self):
        return self.search.closest is not self.target_node

    def update(self):
        """Start moving when the search has an active run and a node to chase."""
        if self.moving:
            return False
        if self.search.status is SearchStatus.IDLE or not self.need_to_move():
            return False
        self.status = FollowerStatus.MOVING
        logger.info("Agent moving from (%.1f, %.1f)", self.pose.x, self.pose.y)
        return True

    def construct_path(self):
        """Nodes from the closest node up to (not including) the target node."""
        self.path = self.search.tree.path_between(self.search.closest, self.target_node)
        return self.path

    def step(self, budget=1):
        if not self.moving and not self.update():
            return StepOutcome.WAITING
        for _ in range(budget):
            if self.move_once() is StepOutcome.DONE:
                return StepOutcome.DONE
        return StepOutcome.PROGRESSED

    def move_once(self):
        self.construct_path()

        # advance to the next node once the current one is reached
        if self.at_target_node() and self.path:
            self.target_node = self.path.pop()
            self.search.reroot(self.target_node)

        dist = self.config.agent_step
        if self.at_target_node() and not self.path:
            dist = 0.0
            if not self.search.target.orbiting:
                self.status = FollowerStatus.IDLE
                logger.info("Agent reached (%.1f, %.1f)", self.pose.x, self.pose.y)
                return StepOutcome.DONE

        curvature = curvature_toward(self.pose, self.target_node.pose)
        if curvature is None:
            curvature = 0.0
        self.pose = step_arc(self.pose, curvature, dist)
        return StepOutcome.PROGRESSED
