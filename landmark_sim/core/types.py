"""
Foundational data types for the landmark sensor simulation.

All pose and measurement data flows through these dataclasses and plain
numpy arrays.
Convention:
    - Distances: meters
    - Angles: radians
    - Poses: (x, y, z, r_x, r_y, r_z), shape (6,)
    - Landmark maps: one pose per row, shape (N, 6)
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union, Sequence

from .constants import (
    POSE_DIM, POSITION_DIM, POSITION_SLICE, ORIENTATION_SLICE
)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class DimensionMismatch(ValueError):
    """Input array does not have the shape a sensor requires.

    Attributes:
        name: Name of the offending argument.
        expected: Human-readable description of the accepted shape(s).
        actual: Shape that was received.
    """

    def __init__(self, name: str, expected: str, actual: tuple):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name}: expected {expected}, got shape {actual}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RotationConvention(Enum):
    """Interpretation of the three orientation values of a pose."""
    EULER_ZYX = auto()          # R = Rz(r_z) @ Ry(r_y) @ Rx(r_x)
    ROTATION_VECTOR = auto()    # Axis-angle, |r| = angle [rad]


# ---------------------------------------------------------------------------
# Poses
# ---------------------------------------------------------------------------

@dataclass
class Pose:
    """Position and orientation of an object in a reference frame.

    Attributes:
        position: Position [m], shape (3,).
        orientation: Orientation [rad], shape (3,). Interpreted according
            to a RotationConvention.
    """
    position: np.ndarray                # (3,) m
    orientation: np.ndarray = field(
        default_factory=lambda: np.zeros(3)
    )  # (3,) rad

    @classmethod
    def from_array(cls, values) -> Pose:
        """Build from a 6-vector (x, y, z, r_x, r_y, r_z)."""
        v = as_pose_vector(values)
        return cls(position=v[POSITION_SLICE].copy(),
                   orientation=v[ORIENTATION_SLICE].copy())

    def as_array(self) -> np.ndarray:
        """Combined [position, orientation] vector, shape (6,)."""
        return np.concatenate([self.position, self.orientation]).astype(float)


PoseLike = Union[Pose, np.ndarray, Sequence[float]]


def as_pose_vector(pose: PoseLike, name: str = "pose") -> np.ndarray:
    """Coerce a pose to a float array of shape (6,).

    Raises:
        DimensionMismatch: If the pose does not contain exactly 6 values.
    """
    if isinstance(pose, Pose):
        return pose.as_array()
    v = np.asarray(pose, dtype=float)
    if v.size != POSE_DIM or v.ndim > 2 or (v.ndim == 2 and POSE_DIM not in v.shape):
        raise DimensionMismatch(name, "6 values", v.shape)
    return v.reshape(POSE_DIM)


def as_landmark_map(landmarks, allowed_cols: tuple = (POSE_DIM,),
                    name: str = "landmarks") -> np.ndarray:
    """Coerce a landmark map to a 2-D float array.

    Empty inputs of shape (0,) are returned as (0, allowed_cols[0]).

    Args:
        landmarks: Array-like, shape (N, K).
        allowed_cols: Accepted values of K.
        name: Argument name used in error messages.

    Returns:
        Float array, shape (N, K).

    Raises:
        DimensionMismatch: If the map is not 2-D or K is not allowed.
    """
    m = np.asarray(landmarks, dtype=float)
    if m.size == 0 and m.ndim == 1:
        return np.zeros((0, allowed_cols[0]))
    if m.ndim != 2 or m.shape[1] not in allowed_cols:
        cols = " or ".join(str(c) for c in allowed_cols)
        raise DimensionMismatch(name, f"(N, {cols})", m.shape)
    return m


# ---------------------------------------------------------------------------
# Measurement noise
# ---------------------------------------------------------------------------

@dataclass
class NoiseStd:
    """Standard deviations of additive Gaussian measurement noise.

    Attributes:
        translation: 1 sigma of each translational component [m].
        rotation: 1 sigma of each rotational component [rad].
    """
    translation: float = 0.0
    rotation: float = 0.0

    @classmethod
    def from_value(cls, value) -> NoiseStd:
        """Build from a scalar (applied to both parts) or a pair.

        Raises:
            DimensionMismatch: If more than two values are given.
        """
        if isinstance(value, NoiseStd):
            return value
        v = np.atleast_1d(np.asarray(value, dtype=float)).ravel()
        if v.size == 1:
            return cls(translation=float(v[0]), rotation=float(v[0]))
        if v.size == 2:
            return cls(translation=float(v[0]), rotation=float(v[1]))
        raise DimensionMismatch("noise_std", "a scalar or 2 values", v.shape)

    @property
    def is_zero(self) -> bool:
        return self.translation == 0.0 and self.rotation == 0.0


NoiseLike = Union[NoiseStd, float, Sequence[float], np.ndarray]


# ---------------------------------------------------------------------------
# Observations
# ---------------------------------------------------------------------------

@dataclass
class Observation:
    """Result of a single sensor measurement over a landmark map.

    Row i of data is the measurement of landmarks[i], which is row
    indices[i] of the input map. Rows keep the input map order.

    Attributes:
        data: Measured values, shape (M, D).
        landmarks: Visible subset of the input map, shape (M, K).
        indices: Row indices of the visible landmarks, shape (M,).
    """
    data: np.ndarray                # (M, D)
    landmarks: np.ndarray           # (M, K)
    indices: np.ndarray             # (M,) int

    @property
    def n_visible(self) -> int:
        return int(self.data.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.n_visible == 0

    @property
    def positions(self) -> np.ndarray:
        """Visible landmark positions, shape (M, 3)."""
        return self.landmarks[:, 0:POSITION_DIM]

    def as_tuple(self) -> tuple[np.ndarray, np.ndarray]:
        """(data, landmarks) pair."""
        return self.data, self.landmarks
