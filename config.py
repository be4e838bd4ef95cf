# config.py

from dataclasses import dataclass, fields, asdict

import numpy as np

# Sampling parameters
CURVATURE_SAMPLE = 0.02   # curvature drawn uniformly in [-CURVATURE_SAMPLE, CURVATURE_SAMPLE]
DISTANCE_SAMPLE = 40.0    # arc length drawn uniformly in [DISTANCE_OFFSET, DISTANCE_OFFSET + DISTANCE_SAMPLE]
DISTANCE_OFFSET = 45.0

# Search acceptance
EXPLORE_MARGIN = 75.0     # keep expanding nodes within this much of the closest distance
FINISH_DISTANCE = 40.0    # stop searching when a child lands this close to a fixed target

# Trunk pruning: ancestors kept above the closest node
DRAW_DEPTH = 30

# Task intervals [ms]
SEARCH_INTERVAL = 80
RENDER_INTERVAL = 50
CONTROLLER_INTERVAL = 40
TARGET_INTERVAL = 40

# Agent motion
FINISH_MOVE_DISTANCE = 5.0
AGENT_STEP = 2.0

# Orbiting target
ORBIT_CENTER_X = 400.0
ORBIT_CENTER_Y = 300.0
ORBIT_RADIUS = 180.0
ORBIT_STEP = np.pi / 500
ORBIT_START_PHASE = np.pi / 8


@dataclass(frozen=True)
class PlannerConfig:
    """Tunable constants shared by the search, the follower and the target."""
    curvature_sample: float = CURVATURE_SAMPLE
    distance_sample: float = DISTANCE_SAMPLE
    distance_offset: float = DISTANCE_OFFSET
    explore_margin: float = EXPLORE_MARGIN
    finish_distance: float = FINISH_DISTANCE
    draw_depth: int = DRAW_DEPTH
    search_interval: int = SEARCH_INTERVAL
    render_interval: int = RENDER_INTERVAL
    controller_interval: int = CONTROLLER_INTERVAL
    target_interval: int = TARGET_INTERVAL
    finish_move_distance: float = FINISH_MOVE_DISTANCE
    agent_step: float = AGENT_STEP
    orbit_center_x: float = ORBIT_CENTER_X
    orbit_center_y: float = ORBIT_CENTER_Y
    orbit_radius: float = ORBIT_RADIUS
    orbit_step: float = ORBIT_STEP
    orbit_start_phase: float = ORBIT_START_PHASE

    def __post_init__(self):
        for name in ("curvature_sample", "distance_sample", "distance_offset",
                     "explore_margin", "finish_distance", "finish_move_distance",
                     "agent_step", "orbit_radius"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.draw_depth < 1:
            raise ValueError(f"draw_depth must be at least 1, got {self.draw_depth}")
        for name in ("search_interval", "render_interval",
                     "controller_interval", "target_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_dict(cls, values):
        """Build a config from a flat mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**values)

    def to_dict(self):
        return asdict(self)


DEFAULT_CONFIG = PlannerConfig()
