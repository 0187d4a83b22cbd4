"""Per-worker random generators and the unit circle test."""

from __future__ import annotations

import time
from typing import Optional, Tuple

import numpy as np


def generator_pool(size: int, seed: Optional[int] = None, key: Tuple[int, ...] = ()) -> list[np.random.Generator]:
    """Return ``size`` independent generators, one for each worker.

    Each child stream is spawned from a single SeedSequence, so the generator
    at index ``i`` is keyed by ``key + (i,)`` on top of the shared entropy.
    Runs that share a seed must pass different keys to get unrelated streams.
    The entropy is the wall clock in nanoseconds unless ``seed`` is given.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    entropy = seed if seed is not None else time.time_ns()
    children = np.random.SeedSequence(entropy, spawn_key=tuple(key)).spawn(size)
    return [np.random.default_rng(child) for child in children]


def sample_points(rng: np.random.Generator, count: int) -> Tuple[np.ndarray, np.ndarray]:
    xs = rng.random(count)
    ys = rng.random(count)
    return xs, ys


def is_inside(x, y):
    # element-wise for arrays
    return x * x + y * y <= 1.0
