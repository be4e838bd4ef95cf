# simulation.py

import logging
from typing import NamedTuple

from node_module import Node
from path_follower import FollowerStatus, PathFollower
from pose import Pose
from sampler import MotionSampler
from scheduler import Scheduler
from target import TargetProvider
from tree_search import SearchStatus, TreeSearch

logger = logging.getLogger(__name__)


class FrameView(NamedTuple):
    """Read-only snapshot handed to the renderer between ticks."""
    root: Node
    closest: Node
    agent_pose: Pose
    target_node_pose: Pose
    target_pose: Pose
    orbiting: bool
    search_status: SearchStatus
    follower_status: FollowerStatus
    time: int


class Simulation:
    """
    Target, search and agent running as cooperative tasks.

    The target, the search and the follower are stepped by one Scheduler
    at their configured intervals. Without a target pose the target orbits.
    """

    def __init__(self, config, x_start, seed=None, target_pose=None):
        self.config = config
        self.target = TargetProvider(config, target_pose)
        self.sampler = MotionSampler(config, seed)
        self.search = TreeSearch(config, x_start, self.target, self.sampler)
        self.agent = PathFollower(config, x_start, self.search)

        self.scheduler = Scheduler()
        self.scheduler.add("target", self.target, config.target_interval)
        self.scheduler.add("search", self.search, config.search_interval)
        self.scheduler.add("agent", self.agent, config.controller_interval)

        self.search.start()
        self.agent.update()

    @property
    def time(self):
        return self.scheduler.now

    def click(self, x, y):
        """Fix the target at (x, y) and restart the search and the agent if they stopped."""
        logger.info("Target fixed at (%.1f, %.1f)", x, y)
        self.target.set_fixed(Pose(x, y, 0.0))
        self.search.start()
        self.agent.update()

    def orbit(self):
        self.target.set_orbiting()
        self.search.start()
        self.agent.update()

    def run_for(self, duration):
        return self.scheduler.run_for(duration)

    def run_until(self, predicate, limit):
        return self.scheduler.run_until(predicate, limit)

    def frame(self):
        return FrameView(
            root=self.search.root,
            closest=self.search.closest,
            agent_pose=self.agent.pose,
            target_node_pose=self.agent.target_node.pose,
            target_pose=self.target.pose,
            orbiting=self.target.orbiting,
            search_status=self.search.status,
            follower_status=self.agent.status,
            time=self.scheduler.now,
        )
