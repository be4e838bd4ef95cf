# pose.py

from typing import NamedTuple

# Below this curvature an arc is integrated as a straight line
CURVATURE_EPS = 1e-4


class Pose(NamedTuple):
    """2D position plus heading (radians)."""
    x: float
    y: float
    heading: float = 0.0


class MotionPrimitive(NamedTuple):
    """Constant-curvature motion: signed curvature (1/R) and arc length."""
    curvature: float
    distance: float
