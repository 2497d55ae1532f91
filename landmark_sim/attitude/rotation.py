"""
Rotation representations and conversions.

Convention: every rotation matrix R is active and maps local (body) frame
vectors into the reference (world) frame: v_world = R @ v_local.

Supported 3-value orientation conventions (see RotationConvention):
    - EULER_ZYX: R = Rz(r_z) @ Ry(r_y) @ Rx(r_x)
    - ROTATION_VECTOR: axis-angle vector whose norm is the angle

Quaternions are q = [q1, q2, q3, q4] with q4 as the scalar component.
"""

from __future__ import annotations

import numpy as np

from ..core.constants import TWO_PI, SMALL_ANGLE_RAD, GIMBAL_LOCK_TOL
from ..core.types import RotationConvention, DimensionMismatch


def wrap_to_pi(angle):
    """Wrap angle(s) to [-pi, pi).

    Args:
        angle: Angle [rad], scalar or array.

    Returns:
        Wrapped angle(s), same shape as input.
    """
    return (np.asarray(angle) + np.pi) % TWO_PI - np.pi


def skew(v: np.ndarray) -> np.ndarray:
    """Skew-symmetric cross-product matrix [v×].

    Args:
        v: 3-vector.

    Returns:
        3x3 skew-symmetric matrix such that [v×]·w = v × w.
    """
    return np.array([
        [0., -v[2], v[1]],
        [v[2], 0., -v[0]],
        [-v[1], v[0], 0.]
    ])


# ---------------------------------------------------------------------------
# Elementary rotations
# ---------------------------------------------------------------------------

def rotx(angle: float) -> np.ndarray:
    """Active rotation about the x axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1., 0., 0.],
        [0., c, -s],
        [0., s, c]
    ])


def roty(angle: float) -> np.ndarray:
    """Active rotation about the y axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, 0., s],
        [0., 1., 0.],
        [-s, 0., c]
    ])


def rotz(angle: float) -> np.ndarray:
    """Active rotation about the z axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, -s, 0.],
        [s, c, 0.],
        [0., 0., 1.]
    ])


# ---------------------------------------------------------------------------
# Euler angles (Z-Y-X)
# ---------------------------------------------------------------------------

def euler_zyx_to_dcm(rad: np.ndarray) -> np.ndarray:
    """Rotation matrix from Z-Y-X Euler angles.

    Args:
        rad: (r_x, r_y, r_z) [rad], shape (3,).

    Returns:
        R = Rz(r_z) @ Ry(r_y) @ Rx(r_x), shape (3, 3).
    """
    return rotz(rad[2]) @ roty(rad[1]) @ rotx(rad[0])


def dcm_to_euler_zyx(R: np.ndarray) -> np.ndarray:
    """Z-Y-X Euler angles from a rotation matrix.

    Returns r_x, r_z in (-pi, pi] and r_y in [-pi/2, pi/2]. At gimbal
    lock (|r_y| = pi/2) only r_z - r_x (or r_z + r_x) is observable;
    r_x is set to zero.

    Args:
        R: 3x3 rotation matrix.

    Returns:
        (r_x, r_y, r_z) [rad], shape (3,).
    """
    cy = np.hypot(R[0, 0], R[1, 0])
    ry = np.arctan2(-R[2, 0], cy)

    if cy > GIMBAL_LOCK_TOL:
        rx = np.arctan2(R[2, 1], R[2, 2])
        rz = np.arctan2(R[1, 0], R[0, 0])
    else:
        rx = 0.0
        rz = np.arctan2(-R[0, 1], R[1, 1])

    return np.array([rx, ry, rz])


# ---------------------------------------------------------------------------
# Quaternions
# ---------------------------------------------------------------------------

def q_normalize(q: np.ndarray) -> np.ndarray:
    """Normalize quaternion to unit magnitude.

    Args:
        q: Quaternion, shape (4,).

    Returns:
        Unit quaternion, shape (4,).
    """
    n = np.linalg.norm(q)
    if n < 1e-15:
        return np.array([0., 0., 0., 1.])
    return q / n


def q_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """Create quaternion from axis-angle representation.

    Args:
        axis: Rotation axis (unit vector), shape (3,).
        angle: Rotation angle [rad].

    Returns:
        Unit quaternion, shape (4,).
    """
    half = angle / 2.0
    s = np.sin(half)
    return np.array([axis[0]*s, axis[1]*s, axis[2]*s, np.cos(half)])


def q_to_axis_angle(q: np.ndarray) -> tuple[np.ndarray, float]:
    """Extract the shortest axis-angle from a unit quaternion.

    Args:
        q: Unit quaternion, shape (4,).

    Returns:
        axis: Rotation axis (unit vector), shape (3,).
        angle: Rotation angle [rad] in [0, pi].
    """
    q = q_normalize(q)
    if q[3] < 0:
        q = -q

    s = np.linalg.norm(q[0:3])
    if s < 1e-15:
        return np.array([0., 0., 1.]), 0.0

    angle = 2.0 * np.arctan2(s, q[3])
    return q[0:3] / s, angle


def q_to_dcm(q: np.ndarray) -> np.ndarray:
    """Convert unit quaternion to an active rotation matrix.

    Args:
        q: Unit quaternion [q1,q2,q3, q4_scalar], shape (4,).

    Returns:
        R: 3x3 rotation matrix such that v_world = R @ v_local.
    """
    q1, q2, q3, q4 = q

    return np.array([
        [1 - 2*(q2**2 + q3**2),  2*(q1*q2 - q3*q4),    2*(q1*q3 + q2*q4)],
        [2*(q1*q2 + q3*q4),      1 - 2*(q1**2 + q3**2), 2*(q2*q3 - q1*q4)],
        [2*(q1*q3 - q2*q4),      2*(q2*q3 + q1*q4),    1 - 2*(q1**2 + q2**2)]
    ])


def dcm_to_q(R: np.ndarray) -> np.ndarray:
    """Convert an active rotation matrix to a unit quaternion (Shepperd).

    Numerically robust for all rotation angles.

    Args:
        R: 3x3 rotation matrix.

    Returns:
        Unit quaternion, shape (4,).
    """
    tr = np.trace(R)

    if tr > 0:
        s = 0.5 / np.sqrt(tr + 1.0)
        q4 = 0.25 / s
        q1 = (R[2, 1] - R[1, 2]) * s
        q2 = (R[0, 2] - R[2, 0]) * s
        q3 = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        q4 = (R[2, 1] - R[1, 2]) / s
        q1 = 0.25 * s
        q2 = (R[0, 1] + R[1, 0]) / s
        q3 = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        q4 = (R[0, 2] - R[2, 0]) / s
        q1 = (R[0, 1] + R[1, 0]) / s
        q2 = 0.25 * s
        q3 = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        q4 = (R[1, 0] - R[0, 1]) / s
        q1 = (R[0, 2] + R[2, 0]) / s
        q2 = (R[1, 2] + R[2, 1]) / s
        q3 = 0.25 * s

    return q_normalize(np.array([q1, q2, q3, q4]))


# ---------------------------------------------------------------------------
# Rotation vectors
# ---------------------------------------------------------------------------

def rotvec_to_dcm(rotvec: np.ndarray) -> np.ndarray:
    """Rotation matrix from an axis-angle rotation vector.

    Args:
        rotvec: Rotation vector [rad], shape (3,). Its norm is the angle.

    Returns:
        3x3 rotation matrix.
    """
    rotvec = np.asarray(rotvec, dtype=float)
    angle = np.linalg.norm(rotvec)
    if angle < SMALL_ANGLE_RAD:
        # First-order expansion
        return np.eye(3) + skew(rotvec)
    return q_to_dcm(q_from_axis_angle(rotvec / angle, angle))


def dcm_to_rotvec(R: np.ndarray) -> np.ndarray:
    """Axis-angle rotation vector from a rotation matrix.

    Args:
        R: 3x3 rotation matrix.

    Returns:
        Rotation vector [rad], shape (3,), with norm in [0, pi].
    """
    axis, angle = q_to_axis_angle(dcm_to_q(R))
    return axis * angle


# ---------------------------------------------------------------------------
# Convention dispatch
# ---------------------------------------------------------------------------

def rad2rot(rad, convention: RotationConvention = RotationConvention.EULER_ZYX
            ) -> np.ndarray:
    """Rotation matrix from a 3-value orientation.

    Args:
        rad: Orientation [rad], shape (3,).
        convention: How the three values are interpreted.

    Returns:
        Proper 3x3 rotation matrix (orthogonal, determinant +1).
    """
    rad = np.asarray(rad, dtype=float)
    if rad.shape != (3,):
        raise DimensionMismatch("orientation", "3 values", rad.shape)
    if convention is RotationConvention.ROTATION_VECTOR:
        return rotvec_to_dcm(rad)
    return euler_zyx_to_dcm(rad)


def rot2rad(R: np.ndarray,
            convention: RotationConvention = RotationConvention.EULER_ZYX
            ) -> np.ndarray:
    """3-value orientation from a rotation matrix; inverse of rad2rot.

    Args:
        R: 3x3 rotation matrix.
        convention: Target orientation convention.

    Returns:
        Orientation [rad], shape (3,).
    """
    R = np.asarray(R, dtype=float)
    if R.shape != (3, 3):
        raise DimensionMismatch("rotation matrix", "(3, 3)", R.shape)
    if convention is RotationConvention.ROTATION_VECTOR:
        return dcm_to_rotvec(R)
    return dcm_to_euler_zyx(R)
