# demo.py

import json
import sys

import numpy as np
import matplotlib.pyplot as plt

from config import PlannerConfig
from pose import Pose
from simulation import Simulation
from visualize import plot_frame

WORLD_WIDTH = 800
WORLD_HEIGHT = 600
AGENT_LENGTH = 40

# Switch the orbiting target to a fixed one at this time [ms]
CLICK_TIME = 8000
CLICK_POSITION = (150.0, 120.0)
DURATION = 16000


def load_config(filename=None):
    """Load a PlannerConfig from a flat JSON object, defaults when no file is given."""
    if filename is None:
        return PlannerConfig()
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Config file {filename} not found, using defaults")
        return PlannerConfig()
    config = PlannerConfig.from_dict(data)
    print(f"Loaded {len(data)} config values from {filename}")
    return config


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config = load_config(argv[0] if argv else None)

    start = Pose(0.5 * WORLD_WIDTH, WORLD_HEIGHT - AGENT_LENGTH, 1.5 * np.pi)
    sim = Simulation(config, start, seed=0)

    plt.ion()
    _, ax = plt.subplots(figsize=(8, 6))
    clicked = False
    while sim.time < DURATION:
        sim.run_for(config.render_interval)
        if not clicked and sim.time >= CLICK_TIME:
            sim.click(*CLICK_POSITION)
            clicked = True

        frame = sim.frame()
        plot_frame(frame, ax)
        ax.set_xlim(0, WORLD_WIDTH)
        ax.set_ylim(0, WORLD_HEIGHT)
        plt.pause(0.001)

        if sim.time % 1000 == 0:
            print(f"t={sim.time} ms: agent at ({frame.agent_pose.x:.1f}, {frame.agent_pose.y:.1f}), "
                  f"{sim.search.expansions} expansions, {sim.search.tree.count_nodes()} nodes, "
                  f"search {frame.search_status.value}")

    plt.ioff()
    plt.show()


if __name__ == "__main__":
    main()
