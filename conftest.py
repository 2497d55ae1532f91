import numpy as np
import pytest


@pytest.fixture
def scenario_map():
    """Three landmarks 5 m above the ground plane, no rotation."""
    return np.array([
        [0., 0., 5., 0., 0., 0.],
        [5., 0., 5., 0., 0., 0.],
        [5., 5., 5., 0., 0., 0.],
    ])


@pytest.fixture
def scenario_pose():
    """Observer at (3, 2, 9) yawed by +90 degrees."""
    return np.array([3., 2., 9., 0., 0., np.pi / 2])


@pytest.fixture
def random_map():
    """Fifty landmarks with orientations away from gimbal lock."""
    rng = np.random.default_rng(1234)
    n = 50
    positions = rng.uniform(-20.0, 20.0, size=(n, 3))
    orientations = np.column_stack([
        rng.uniform(-3.0, 3.0, n),
        rng.uniform(-1.2, 1.2, n),
        rng.uniform(-3.0, 3.0, n),
    ])
    return np.hstack([positions, orientations])
