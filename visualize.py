# visualize.py
"""
Matplotlib view of a simulation frame.

Reads the frame only: the tree below the root, the branch from the
closest node back to the root, the agent and the target.
"""

import numpy as np
import matplotlib.pyplot as plt

COLOR_TREE = "0.6"
COLOR_PATH = "gold"
COLOR_AGENT = "tab:blue"
COLOR_TARGET = "tab:green"
COLOR_TARGET_NODE = "tab:red"


def edge_polyline(edge, ds=1.0):
    """(n x 2) array of points along the edge's arc."""
    return np.array([[p.x, p.y] for p in edge.replay(ds)])


def branch_edges(node):
    """Incoming edges from node up to the first node without one."""
    edges = []
    while node is not None:
        edge = node.incoming
        if edge is None:
            break
        edges.append(edge)
        node = node.parent
    return edges


def draw_arrow(ax, pose, length, color):
    ax.arrow(pose.x, pose.y,
             length * np.cos(pose.heading), length * np.sin(pose.heading),
             head_width=length * 0.3, head_length=length * 0.4,
             fc=color, ec=color, length_includes_head=True)


def plot_frame(frame, ax=None, ds=2.0, arrow_length=15.0):
    """Draw one FrameView onto ax (a new figure when None) and return ax."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))
    ax.clear()

    for edge in frame.root.iter_edges():
        pts = edge_polyline(edge, ds)
        ax.plot(pts[:, 0], pts[:, 1], color=COLOR_TREE, linewidth=0.8)

    for edge in branch_edges(frame.closest):
        pts = edge_polyline(edge, ds)
        ax.plot(pts[:, 0], pts[:, 1], color=COLOR_PATH, linewidth=2)

    ax.plot(frame.root.pose.x, frame.root.pose.y, "ko", markersize=5, label="Root")
    ax.plot(frame.target_node_pose.x, frame.target_node_pose.y, "s",
            color=COLOR_TARGET_NODE, markersize=6, label="Target node")
    ax.plot(frame.target_pose.x, frame.target_pose.y, "o",
            color=COLOR_TARGET, markersize=10, label="Target")
    draw_arrow(ax, frame.agent_pose, arrow_length, COLOR_AGENT)

    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    ax.set_title(f"t={frame.time} ms  search={frame.search_status.value}  "
                 f"agent={frame.follower_status.value}")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    return ax
