"""
Landmark sensors.

Simulates measurements of a landmark map taken from an observer pose:
    - PoseObserver: relative 6-DOF pose of each landmark
    - DisplacementObserver: relative position in the observer frame
    - DistanceObserver: range to each landmark
    - BearingObserver: azimuth and elevation in the observer frame

Every sensor runs one independent visibility trial per landmark, keeps
the visible landmarks in map order, measures them and adds zero-mean
Gaussian noise. When nothing is visible the outputs are empty (0, D)
and (0, K) arrays, which is a normal result and not an error.
"""

from __future__ import annotations

import logging

import numpy as np
from typing import Optional, Union

from ..core.config import ObserverConfig
from ..core.constants import (
    POSE_DIM, POSITION_DIM, POSITION_SLICE, ORIENTATION_SLICE,
    DISPLACEMENT_DIM, DISTANCE_DIM, BEARING_DIM
)
from ..core.frames import world_to_local
from ..core.types import (
    Observation, PoseLike, NoiseLike, RotationConvention,
    as_landmark_map, as_pose_vector
)
from ..attitude.rotation import rad2rot, rot2rad, wrap_to_pi
from .noise import (
    sample_pose_noise, sample_gaussian, pose_noise_covariance,
    isotropic_noise_covariance
)
from .visibility import sample_visibility, visible_indices

logger = logging.getLogger(__name__)

RngLike = Optional[Union[np.random.Generator, int]]


class LandmarkSensor:
    """Common visibility, noise and random generator handling.

    Subclasses set measurement_dim and map_columns and implement
    _measure (noise-free measurement of the visible rows) and _add_noise.

    Attributes:
        config: Sensor configuration.
    """

    measurement_dim: int = POSE_DIM
    map_columns: tuple = (POSE_DIM,)

    def __init__(self, config: Optional[ObserverConfig] = None):
        """Initialize with a sensor configuration.

        Args:
            config: Sensor configuration. Defaults to a noise-free sensor
                that sees every landmark.
        """
        self.config = config if config is not None else ObserverConfig()
        self._rng = None
        if self.config.seed is not None:
            self._rng = np.random.default_rng(self.config.seed)

    @property
    def convention(self) -> RotationConvention:
        return self.config.convention

    def _generator(self, rng: RngLike) -> np.random.Generator:
        if rng is not None:
            return np.random.default_rng(rng)
        if self._rng is not None:
            return self._rng
        return np.random.default_rng()

    def observe(self, landmarks, pose: PoseLike,
                rng: RngLike = None) -> Observation:
        """Measure a landmark map from the given observer pose.

        Args:
            landmarks: Landmark map, shape (N, K) with K in map_columns.
            pose: Observer pose (x, y, z, r_x, r_y, r_z), shape (6,).
            rng: Generator or seed for this call. Overrides the
                configured seed.

        Returns:
            Observation with data (M, D), the visible landmarks (M, K)
            and their row indices (M,), all in map order.

        Raises:
            DimensionMismatch: If landmarks or pose are malformed.
        """
        landmarks = as_landmark_map(landmarks, self.map_columns)
        pose = as_pose_vector(pose)
        gen = self._generator(rng)

        n = landmarks.shape[0]
        idx = visible_indices(
            sample_visibility(gen, n, self.config.visible_rate)
        )
        visible = landmarks[idx]

        if idx.size == 0:
            logger.debug("%s: no visible landmarks out of %d",
                         type(self).__name__, n)
            return Observation(
                data=np.zeros((0, self.measurement_dim)),
                landmarks=visible,
                indices=idx
            )

        data = self._measure(visible, pose)
        data = self._add_noise(gen, data)

        logger.debug("%s: %d of %d landmarks visible",
                     type(self).__name__, idx.size, n)
        return Observation(data=data, landmarks=visible, indices=idx)

    def measurement_covariance(self) -> np.ndarray:
        """Covariance of the additive noise on one measurement row."""
        return isotropic_noise_covariance(self.config.noise_std.translation,
                                          self.measurement_dim)

    def _measure(self, visible: np.ndarray, pose: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _add_noise(self, rng: np.random.Generator,
                   data: np.ndarray) -> np.ndarray:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Relative pose
# ---------------------------------------------------------------------------

class PoseObserver(LandmarkSensor):
    """Measures the pose of each visible landmark in the observer frame.

    For observer pose (p, r) and landmark (l_p, l_r):
        position    = R(r)^T (l_p - p)
        orientation = rot2rad(R(r)^T R(l_r))
    Noise is N(0, σt^2) on each position component and N(0, σr^2) on
    each orientation component.
    """

    measurement_dim = POSE_DIM
    map_columns = (POSE_DIM,)

    def _measure(self, visible: np.ndarray, pose: np.ndarray) -> np.ndarray:
        conv = self.convention
        R_obs = rad2rot(pose[ORIENTATION_SLICE], conv)

        data = np.zeros((visible.shape[0], POSE_DIM))
        data[:, 0:3] = world_to_local(visible[:, POSITION_SLICE], pose, conv)

        # Rotation composition does not vectorize across rows
        for i, landmark in enumerate(visible):
            R_rel = R_obs.T @ rad2rot(landmark[ORIENTATION_SLICE], conv)
            data[i, 3:6] = rot2rad(R_rel, conv)

        return data

    def _add_noise(self, rng, data):
        return data + sample_pose_noise(rng, data.shape[0],
                                        self.config.noise_std)

    def measurement_covariance(self) -> np.ndarray:
        return pose_noise_covariance(self.config.noise_std)


# ---------------------------------------------------------------------------
# Position-only sensors
# ---------------------------------------------------------------------------

class DisplacementObserver(LandmarkSensor):
    """Measures landmark positions in the observer frame, R(r)^T (l_p - p).

    Accepts (N, 3) position maps or (N, 6) pose maps; landmark
    orientation is ignored. Noise uses the translational sigma.
    """

    measurement_dim = DISPLACEMENT_DIM
    map_columns = (POSITION_DIM, POSE_DIM)

    def _measure(self, visible, pose):
        return world_to_local(visible[:, POSITION_SLICE], pose, self.convention)

    def _add_noise(self, rng, data):
        return data + sample_gaussian(rng, self.config.noise_std.translation,
                                      data.shape)


class DistanceObserver(LandmarkSensor):
    """Measures the Euclidean distance |l_p - p| to each landmark [m]."""

    measurement_dim = DISTANCE_DIM
    map_columns = (POSITION_DIM, POSE_DIM)

    def _measure(self, visible, pose):
        delta = visible[:, POSITION_SLICE] - pose[POSITION_SLICE]
        return np.linalg.norm(delta, axis=1, keepdims=True)

    def _add_noise(self, rng, data):
        return data + sample_gaussian(rng, self.config.noise_std.translation,
                                      data.shape)


class BearingObserver(LandmarkSensor):
    """Measures azimuth and elevation of each landmark in the observer frame.

    For the local displacement (x, y, z):
        azimuth   = atan2(y, x), wrapped to [-pi, pi) after noise
        elevation = atan2(z, hypot(x, y))
    Noise uses the rotational sigma.
    """

    measurement_dim = BEARING_DIM
    map_columns = (POSITION_DIM, POSE_DIM)

    def _measure(self, visible, pose):
        local = world_to_local(visible[:, POSITION_SLICE], pose, self.convention)
        azimuth = np.arctan2(local[:, 1], local[:, 0])
        elevation = np.arctan2(local[:, 2], np.hypot(local[:, 0], local[:, 1]))
        return np.column_stack([azimuth, elevation])

    def _add_noise(self, rng, data):
        data = data + sample_gaussian(rng, self.config.noise_std.rotation,
                                      data.shape)
        data[:, 0] = wrap_to_pi(data[:, 0])
        return data

    def measurement_covariance(self) -> np.ndarray:
        return isotropic_noise_covariance(self.config.noise_std.rotation,
                                          self.measurement_dim)


# ---------------------------------------------------------------------------
# Functional interface
# ---------------------------------------------------------------------------

def _observe(sensor_cls, landmarks, pose, visible_rate, noise_std, rng,
             convention):
    config = ObserverConfig(visible_rate=visible_rate, noise_std=noise_std,
                            convention=convention)
    return sensor_cls(config).observe(landmarks, pose, rng=rng).as_tuple()


def observe_pose(landmarks, pose: PoseLike, visible_rate: float = 1.0,
                 noise_std: NoiseLike = (0.0, 0.0), rng: RngLike = None,
                 convention: RotationConvention = RotationConvention.EULER_ZYX
                 ) -> tuple[np.ndarray, np.ndarray]:
    """Measure the relative pose from pose to each visible landmark.

    Args:
        landmarks: Landmark map in the world frame, shape (N, 6).
        pose: Observer pose (x, y, z, r_x, r_y, r_z), shape (6,).
        visible_rate: Probability that each landmark is observed.
        noise_std: Scalar, or (translation [m], rotation [rad]) pair.
        rng: Random generator or seed. None draws fresh entropy.
        convention: Orientation convention of all poses.

    Returns:
        obs_data: Relative poses of the visible landmarks, shape (M, 6).
        obs_map: The visible landmarks, shape (M, 6). Row i of obs_data
            is the measurement of row i of obs_map.

    Raises:
        DimensionMismatch: If landmarks is not (N, 6) or pose is not 6 values.
    """
    return _observe(PoseObserver, landmarks, pose, visible_rate, noise_std,
                    rng, convention)


def observe_displacement(landmarks, pose: PoseLike, visible_rate: float = 1.0,
                         noise_std: float = 0.0, rng: RngLike = None,
                         convention: RotationConvention = RotationConvention.EULER_ZYX
                         ) -> tuple[np.ndarray, np.ndarray]:
    """Measure landmark positions in the observer frame.

    Returns:
        obs_data: Local displacements, shape (M, 3).
        obs_map: The visible landmarks, shape (M, K).
    """
    return _observe(DisplacementObserver, landmarks, pose, visible_rate,
                    noise_std, rng, convention)


def observe_distance(landmarks, pose: PoseLike, visible_rate: float = 1.0,
                     noise_std: float = 0.0, rng: RngLike = None,
                     convention: RotationConvention = RotationConvention.EULER_ZYX
                     ) -> tuple[np.ndarray, np.ndarray]:
    """Measure distances to landmarks; obs_data has shape (M, 1)."""
    return _observe(DistanceObserver, landmarks, pose, visible_rate,
                    noise_std, rng, convention)


def observe_bearing(landmarks, pose: PoseLike, visible_rate: float = 1.0,
                    noise_std: float = 0.0, rng: RngLike = None,
                    convention: RotationConvention = RotationConvention.EULER_ZYX
                    ) -> tuple[np.ndarray, np.ndarray]:
    """Measure (azimuth, elevation) of landmarks; obs_data has shape (M, 2)."""
    return _observe(BearingObserver, landmarks, pose, visible_rate,
                    noise_std, rng, convention)
