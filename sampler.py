# sampler.py

import numpy as np

from pose import MotionPrimitive


class MotionSampler:
    """
    Draws motion primitives for node expansion.

    Curvature is uniform in [-curvature_sample, +curvature_sample] and arc
    length is uniform in [distance_offset, distance_offset + distance_sample].
    Pass a seed for reproducible runs.
    """

    def __init__(self, config, seed=None):
        self.config = config
        self.rng = np.random.default_rng(seed)

    def sample_curvature(self):
        c = self.config.curvature_sample
        return float(self.rng.uniform(-c, c))

    def sample_distance(self):
        lo = self.config.distance_offset
        return float(self.rng.uniform(lo, lo + self.config.distance_sample))

    def sample(self):
        return MotionPrimitive(self.sample_curvature(), self.sample_distance())
