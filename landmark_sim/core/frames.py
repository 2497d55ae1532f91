"""
Rigid-body pose transformations.

Provides composition and inversion of 6-DOF poses and the batch
world-to-local transform used by the landmark sensors.

Convention: a pose P = (p, r) maps local vectors into the world frame,
    v_world = R(r) @ v_local + p
so the world-frame pose of a relative pose Q given in P's frame is
    P ⊕ Q = (p + R(r) @ q_p, rot2rad(R(r) @ R(q_r)))
"""

from __future__ import annotations

import numpy as np

from .constants import POSITION_SLICE, ORIENTATION_SLICE
from .types import RotationConvention, PoseLike, as_pose_vector
from ..attitude.rotation import rad2rot, rot2rad


def pose_to_matrix(pose: PoseLike,
                   convention: RotationConvention = RotationConvention.EULER_ZYX
                   ) -> np.ndarray:
    """4x4 homogeneous transform of a pose.

    Args:
        pose: Pose (x, y, z, r_x, r_y, r_z), shape (6,).
        convention: Orientation convention.

    Returns:
        T: 4x4 matrix such that [v_world, 1] = T @ [v_local, 1].
    """
    p = as_pose_vector(pose)
    T = np.eye(4)
    T[0:3, 0:3] = rad2rot(p[ORIENTATION_SLICE], convention)
    T[0:3, 3] = p[POSITION_SLICE]
    return T


def matrix_to_pose(T: np.ndarray,
                   convention: RotationConvention = RotationConvention.EULER_ZYX
                   ) -> np.ndarray:
    """Pose vector of a 4x4 homogeneous transform; inverse of pose_to_matrix."""
    return np.concatenate([T[0:3, 3], rot2rad(T[0:3, 0:3], convention)])


def compose_pose(pose: PoseLike, relative: PoseLike,
                 convention: RotationConvention = RotationConvention.EULER_ZYX
                 ) -> np.ndarray:
    """World pose of a relative pose expressed in the frame of pose.

    Rotate-then-translate composition, pose ⊕ relative.

    Args:
        pose: Reference pose in the world frame, shape (6,).
        relative: Pose in the reference pose's local frame, shape (6,).
        convention: Orientation convention of both poses and the result.

    Returns:
        Composed pose in the world frame, shape (6,).
    """
    p = as_pose_vector(pose)
    q = as_pose_vector(relative, name="relative")

    R_p = rad2rot(p[ORIENTATION_SLICE], convention)
    R_q = rad2rot(q[ORIENTATION_SLICE], convention)

    position = p[POSITION_SLICE] + R_p @ q[POSITION_SLICE]
    orientation = rot2rad(R_p @ R_q, convention)
    return np.concatenate([position, orientation])


def invert_pose(pose: PoseLike,
                convention: RotationConvention = RotationConvention.EULER_ZYX
                ) -> np.ndarray:
    """Inverse pose such that compose_pose(pose, invert_pose(pose)) is zero.

    Args:
        pose: Pose, shape (6,).
        convention: Orientation convention.

    Returns:
        (-R^T p, rot2rad(R^T)), shape (6,).
    """
    p = as_pose_vector(pose)
    R_t = rad2rot(p[ORIENTATION_SLICE], convention).T
    return np.concatenate([-R_t @ p[POSITION_SLICE], rot2rad(R_t, convention)])


def relative_pose(pose: PoseLike, target: PoseLike,
                  convention: RotationConvention = RotationConvention.EULER_ZYX
                  ) -> np.ndarray:
    """Pose of target expressed in the local frame of pose.

    Equivalent to invert_pose(pose) ⊕ target, computed directly:
        position    = R(r)^T (t_p - p)
        orientation = rot2rad(R(r)^T R(t_r))

    Args:
        pose: Observer pose in the world frame, shape (6,).
        target: Target pose in the world frame, shape (6,).
        convention: Orientation convention.

    Returns:
        Relative pose, shape (6,).
    """
    p = as_pose_vector(pose)
    t = as_pose_vector(target, name="target")

    R_t = rad2rot(p[ORIENTATION_SLICE], convention).T
    position = R_t @ (t[POSITION_SLICE] - p[POSITION_SLICE])
    orientation = rot2rad(R_t @ rad2rot(t[ORIENTATION_SLICE], convention),
                          convention)
    return np.concatenate([position, orientation])


def world_to_local(points: np.ndarray, pose: PoseLike,
                   convention: RotationConvention = RotationConvention.EULER_ZYX
                   ) -> np.ndarray:
    """Express world-frame points in the local frame of pose.

    Vectorized over rows: a = R^T b for column vectors is a' = b' R for
    row vectors, so all points are transformed with one matrix product.

    Args:
        points: World positions, shape (M, 3).
        pose: Observer pose, shape (6,).
        convention: Orientation convention.

    Returns:
        Local positions, shape (M, 3).
    """
    p = as_pose_vector(pose)
    delta = np.asarray(points, dtype=float) - p[POSITION_SLICE]
    return delta @ rad2rot(p[ORIENTATION_SLICE], convention)


def local_to_world(points: np.ndarray, pose: PoseLike,
                   convention: RotationConvention = RotationConvention.EULER_ZYX
                   ) -> np.ndarray:
    """Inverse of world_to_local: (M, 3) local points to world points."""
    p = as_pose_vector(pose)
    R = rad2rot(p[ORIENTATION_SLICE], convention)
    return np.asarray(points, dtype=float) @ R.T + p[POSITION_SLICE]
