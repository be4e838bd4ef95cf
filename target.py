# target.py

import numpy as np

from pose import Pose
from scheduler import StepOutcome


class TargetProvider:
    """
    Target pose for the search, either fixed or orbiting.

    In orbiting mode the phase advances by orbit_step on every step() and
    the target moves along a circle of orbit_radius around the orbit
    center. set_fixed() switches to a fixed target.
    """

    def __init__(self, config, pose=None):
        self.config = config
        self.phase = float(config.orbit_start_phase)
        if pose is None:
            self.orbiting = True
            self.pose = self._orbit_pose()
        else:
            self.orbiting = False
            self.pose = Pose(float(pose.x), float(pose.y), 0.0)

    def _orbit_pose(self):
        cfg = self.config
        x = cfg.orbit_center_x + cfg.orbit_radius * np.sin(self.phase)
        y = cfg.orbit_center_y + cfg.orbit_radius * np.cos(self.phase)
        return Pose(float(x), float(y), 0.0)

    def set_fixed(self, pose):
        """External target input; only the position is used."""
        self.pose = Pose(float(pose.x), float(pose.y), 0.0)
        self.orbiting = False

    def set_orbiting(self):
        """Resume orbiting from the current phase."""
        self.orbiting = True
        self.pose = self._orbit_pose()

    def step(self):
        if not self.orbiting:
            return StepOutcome.WAITING
        self.phase += self.config.orbit_step
        self.pose = self._orbit_pose()
        return StepOutcome.PROGRESSED
