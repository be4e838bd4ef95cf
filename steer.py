# steer.py
"""
Constant-curvature kinematics.

step_arc is the only motion model used by the tree, the path replay and
the agent, so replaying a stored primitive reproduces the stored pose.
"""

import numpy as np

from pose import Pose, CURVATURE_EPS


def step_arc(pose, curvature, distance):
    """
    Integrate constant-curvature motion from pose.

    Parameters
    ----------
    pose : Pose
        Start pose.
    curvature : float
        Signed curvature (1/R). Positive turns toward increasing heading.
    distance : float
        Arc length travelled.

    Returns
    -------
    Pose
        Pose at the end of the arc.
    """
    dx_local = distance
    dy_local = 0.0
    theta = 0.0
    if abs(curvature) > CURVATURE_EPS:
        R = 1.0 / curvature
        theta = distance * curvature
        dx_local = R * np.sin(theta)
        dy_local = R * (1.0 - np.cos(theta))

    c = np.cos(-pose.heading)
    s = np.sin(-pose.heading)
    x = dx_local * c + dy_local * s + pose.x
    y = -dx_local * s + dy_local * c + pose.y
    return Pose(float(x), float(y), float(pose.heading + theta))


def heading_step(pose, heading, distance):
    """Move distance along a fixed absolute heading; the new pose takes that heading."""
    x = pose.x + distance * np.cos(heading)
    y = pose.y + distance * np.sin(heading)
    return Pose(float(x), float(y), float(heading))


def curvature_toward(pose, target):
    """
    Curvature of the arc tangent to pose's heading that passes through target.

    target only needs .x and .y. Returns None when target sits on pose's
    position, where no arc is defined; callers treat that as no turn.
    """
    s = np.sin(pose.heading)
    c = np.cos(pose.heading)

    dx_global = target.x - pose.x
    dy_global = target.y - pose.y

    dx = dx_global * c + dy_global * s
    dy = -dx_global * s + dy_global * c

    d2 = dx * dx + dy * dy
    if d2 < 1e-12:
        return None
    return float(2.0 * dy / d2)


def distance(a, b):
    """Euclidean distance between the positions of a and b (heading ignored)."""
    return float(np.hypot(b.x - a.x, b.y - a.y))
