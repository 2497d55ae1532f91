"""
Measurement noise models.

Additive zero-mean Gaussian noise on sensor outputs, and the matching
measurement covariance for consumers that weight observations.
"""

from __future__ import annotations

import numpy as np
from scipy.linalg import block_diag

from ..core.constants import POSE_DIM, POSITION_DIM, ORIENTATION_DIM
from ..core.types import NoiseStd


def pose_noise_covariance(noise_std: NoiseStd) -> np.ndarray:
    """Measurement covariance of one relative pose observation.

    R = [[σt^2 * I_3, 0         ],
         [0,          σr^2 * I_3]]

    Args:
        noise_std: Translational [m] and rotational [rad] 1 sigma.

    Returns:
        R: 6x6 diagonal covariance [m^2, rad^2].
    """
    I3 = np.eye(3)
    return block_diag(noise_std.translation**2 * I3,
                      noise_std.rotation**2 * I3)


def isotropic_noise_covariance(std: float, dim: int) -> np.ndarray:
    """dim x dim covariance std^2 * I for single-sigma sensors."""
    return std**2 * np.eye(dim)


def sample_gaussian(rng: np.random.Generator, std: float,
                    shape: tuple) -> np.ndarray:
    """Zero-mean Gaussian samples scaled by std.

    A negative std is accepted; it only flips the sign of the draws.

    Args:
        rng: Random generator.
        std: Standard deviation.
        shape: Output shape.

    Returns:
        std * N(0, 1) samples of the given shape.
    """
    return std * rng.standard_normal(shape)


def sample_pose_noise(rng: np.random.Generator, n: int,
                      noise_std: NoiseStd) -> np.ndarray:
    """Additive noise for n relative pose observations.

    Translational draws are taken before rotational draws.

    Args:
        rng: Random generator; consumes 6 * n standard normal draws.
        n: Number of observations.
        noise_std: Translational and rotational 1 sigma.

    Returns:
        Noise, shape (n, 6).
    """
    noise = np.empty((n, POSE_DIM))
    noise[:, 0:3] = sample_gaussian(rng, noise_std.translation, (n, POSITION_DIM))
    noise[:, 3:6] = sample_gaussian(rng, noise_std.rotation, (n, ORIENTATION_DIM))
    return noise
