"""
Segment Samplers — pick one wheel segment out of an outcome's candidates.

The outcome of a spin tells us *what* landed, never *where*. Every outcome
maps to several physical segments, so zone attribution has to pick one.
Production picks uniformly at random, which means two analyses of the same
history can attribute hits to different zones. Tests inject a seeded or
deterministic sampler instead.
"""

import numpy as np


class SegmentSampler:
    """Strategy interface: choose one segment from a candidate list."""

    def pick(self, segments):
        raise NotImplementedError


class RandomSegmentSampler(SegmentSampler):
    """Uniform random pick. Pass a seed for reproducible runs."""

    def __init__(self, seed=None):
        self._rng = np.random.default_rng(seed)

    def pick(self, segments):
        if not segments:
            raise ValueError("Cannot sample from an empty segment list")
        return int(segments[self._rng.integers(len(segments))])


class FirstSegmentSampler(SegmentSampler):
    """Always the first candidate. Deterministic, used for testing."""

    def pick(self, segments):
        if not segments:
            raise ValueError("Cannot sample from an empty segment list")
        return int(segments[0])
