# conftest.py
"""Shared pytest fixtures: a small-step planner config and seeded samplers."""

import matplotlib
matplotlib.use("Agg")

import pytest

from config import PlannerConfig
from pose import Pose
from sampler import MotionSampler
from target import TargetProvider
from tree_fixtures import ScriptedSampler


@pytest.fixture
def small_config():
    """Short arcs, tight tolerances and 1-2 ms task intervals."""
    return PlannerConfig(
        curvature_sample=0.05,
        distance_sample=10.0,
        distance_offset=5.0,
        explore_margin=20.0,
        finish_distance=5.0,
        draw_depth=30,
        search_interval=1,
        render_interval=10,
        controller_interval=2,
        target_interval=1,
        finish_move_distance=1.0,
        agent_step=1.0,
        orbit_center_x=50.0,
        orbit_center_y=50.0,
        orbit_radius=40.0,
    )


@pytest.fixture
def seeded_sampler(small_config):
    return MotionSampler(small_config, seed=7)


@pytest.fixture
def straight_sampler():
    return ScriptedSampler((0.0, 10.0))


@pytest.fixture
def origin():
    return Pose(0.0, 0.0, 0.0)


@pytest.fixture
def fixed_target(small_config):
    return TargetProvider(small_config, Pose(100.0, 0.0))
