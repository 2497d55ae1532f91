"""
Landmark visibility model.

Each landmark is seen independently with a fixed probability, so the
number of visible landmarks is Binomial(N, visible_rate): its expectation
is visible_rate * N, not an exact count.
"""

from __future__ import annotations

import numpy as np


def sample_visibility(rng: np.random.Generator, n: int,
                      visible_rate: float) -> np.ndarray:
    """Draw one Bernoulli visibility trial per landmark.

    Landmark i is visible iff u_i < visible_rate with u_i ~ U[0, 1).
    The rate is not clamped: >= 1 makes every landmark visible and
    <= 0 makes none visible.

    Args:
        rng: Random generator; consumes exactly n uniform draws.
        n: Number of landmarks.
        visible_rate: Visibility probability.

    Returns:
        Boolean mask, shape (n,).
    """
    return rng.random(n) < visible_rate


def visible_indices(mask: np.ndarray) -> np.ndarray:
    """Row indices of visible landmarks in ascending (map) order."""
    return np.flatnonzero(mask)
