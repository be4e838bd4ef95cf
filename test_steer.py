# test_steer.py

import numpy as np
import pytest

from pose import CURVATURE_EPS, Pose
from steer import curvature_toward, distance, heading_step, step_arc


class TestStepArc:

    @pytest.mark.parametrize("curvature", [0.0, CURVATURE_EPS, -CURVATURE_EPS, 0.5 * CURVATURE_EPS])
    def test_small_curvature_is_straight(self, curvature):
        p = step_arc(Pose(1.0, 2.0, np.pi / 3), curvature, 10.0)
        assert p.x == pytest.approx(1.0 + 10.0 * np.cos(np.pi / 3))
        assert p.y == pytest.approx(2.0 + 10.0 * np.sin(np.pi / 3))
        assert p.heading == pytest.approx(np.pi / 3)

    def test_no_jump_across_epsilon(self):
        start = Pose(0.0, 0.0, 0.3)
        inside = step_arc(start, CURVATURE_EPS, 1.0)
        outside = step_arc(start, CURVATURE_EPS * 1.01, 1.0)
        assert distance(inside, outside) < 1e-3
        assert abs(inside.heading - outside.heading) < 1e-3

    def test_quarter_circle_left(self):
        # radius 10, swept angle pi/2
        p = step_arc(Pose(0.0, 0.0, 0.0), 0.1, 10.0 * np.pi / 2)
        assert p.x == pytest.approx(10.0)
        assert p.y == pytest.approx(10.0)
        assert p.heading == pytest.approx(np.pi / 2)

    def test_right_turn_with_rotated_heading(self):
        p = step_arc(Pose(5.0, 5.0, np.pi / 2), -0.1, 10.0 * np.pi / 2)
        assert p.x == pytest.approx(15.0)
        assert p.y == pytest.approx(15.0)
        assert p.heading == pytest.approx(0.0)

    def test_zero_distance(self):
        start = Pose(3.0, 4.0, 1.0)
        assert step_arc(start, 0.3, 0.0) == pytest.approx(start)

    def test_returns_new_pose(self):
        start = Pose(0.0, 0.0, 0.0)
        end = step_arc(start, 0.01, 5.0)
        assert start == Pose(0.0, 0.0, 0.0)
        assert end is not start


class TestHeadingStep:

    def test_moves_along_heading(self):
        p = heading_step(Pose(1.0, 1.0, 0.0), np.pi / 2, 3.0)
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(4.0)
        assert p.heading == pytest.approx(np.pi / 2)

    def test_matches_straight_arc(self):
        start = Pose(2.0, -1.0, 0.7)
        assert heading_step(start, 0.7, 12.0) == pytest.approx(step_arc(start, 0.0, 12.0))


class TestCurvatureToward:

    def test_straight_ahead(self):
        assert curvature_toward(Pose(0.0, 0.0, 0.0), Pose(10.0, 0.0)) == pytest.approx(0.0)

    def test_point_to_the_left(self):
        assert curvature_toward(Pose(0.0, 0.0, 0.0), Pose(0.0, 10.0)) == pytest.approx(0.2)

    def test_point_to_the_right_is_negative(self):
        assert curvature_toward(Pose(0.0, 0.0, 0.0), Pose(5.0, -5.0)) < 0

    def test_arc_reaches_target(self):
        start = Pose(1.0, 2.0, 0.4)
        target = Pose(8.0, 9.0)
        c = curvature_toward(start, target)
        # arc length to the target along the circle of radius 1/c
        chord = distance(start, target)
        swept = 2.0 * np.arcsin(chord * abs(c) / 2.0)
        end = step_arc(start, c, swept / abs(c))
        assert distance(end, target) < 1e-9

    def test_same_position_is_degenerate(self):
        p = Pose(3.0, 3.0, 1.2)
        assert curvature_toward(p, p) is None
        assert curvature_toward(p, Pose(3.0, 3.0, -2.0)) is None


def test_distance_ignores_heading():
    assert distance(Pose(0.0, 0.0, 1.0), Pose(3.0, 4.0, -2.0)) == pytest.approx(5.0)

