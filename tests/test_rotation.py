import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from landmark_sim.attitude.rotation import (
    rad2rot, rot2rad, rotx, roty, rotz, dcm_to_q, q_to_dcm, wrap_to_pi,
    rotvec_to_dcm, dcm_to_rotvec, q_to_axis_angle
)
from landmark_sim.core.types import RotationConvention, DimensionMismatch


EULER = RotationConvention.EULER_ZYX
ROTVEC = RotationConvention.ROTATION_VECTOR


def _euler_samples(n=200, seed=0):
    rng = np.random.default_rng(seed)
    return np.column_stack([
        rng.uniform(-3.1, 3.1, n),
        rng.uniform(-1.5, 1.5, n),
        rng.uniform(-3.1, 3.1, n),
    ])


def _rotvec_samples(n=200, seed=1):
    rng = np.random.default_rng(seed)
    axes = rng.normal(size=(n, 3))
    axes /= np.linalg.norm(axes, axis=1, keepdims=True)
    angles = rng.uniform(0.0, 3.1, n)
    return axes * angles[:, None]


def test_elementary_rotations_are_active():
    # +90 deg about z takes x onto y
    np.testing.assert_allclose(rotz(np.pi / 2) @ [1., 0., 0.], [0., 1., 0.], atol=1e-12)
    np.testing.assert_allclose(rotx(np.pi / 2) @ [0., 1., 0.], [0., 0., 1.], atol=1e-12)
    np.testing.assert_allclose(roty(np.pi / 2) @ [0., 0., 1.], [1., 0., 0.], atol=1e-12)


@pytest.mark.parametrize("convention", [EULER, ROTVEC])
def test_rad2rot_is_proper_rotation(convention):
    samples = _euler_samples() if convention is EULER else _rotvec_samples()
    for rad in samples:
        R = rad2rot(rad, convention)
        np.testing.assert_allclose(R.T @ R, np.eye(3), atol=1e-12)
        assert np.isclose(np.linalg.det(R), 1.0)


def test_euler_matches_scipy_intrinsic_zyx():
    for rad in _euler_samples(50):
        expected = Rotation.from_euler("ZYX", rad[::-1]).as_matrix()
        np.testing.assert_allclose(rad2rot(rad, EULER), expected, atol=1e-12)


def test_rotation_vector_matches_scipy():
    for rotvec in _rotvec_samples(50):
        expected = Rotation.from_rotvec(rotvec).as_matrix()
        np.testing.assert_allclose(rad2rot(rotvec, ROTVEC), expected, atol=1e-12)


def test_euler_round_trip():
    for rad in _euler_samples():
        np.testing.assert_allclose(rot2rad(rad2rot(rad, EULER), EULER), rad, atol=1e-9)


def test_rotation_vector_round_trip():
    for rotvec in _rotvec_samples():
        np.testing.assert_allclose(dcm_to_rotvec(rotvec_to_dcm(rotvec)), rotvec, atol=1e-9)


def test_rotation_vector_beyond_pi_wraps_to_shortest():
    rotvec = np.array([0., 0., 1.5 * np.pi])
    np.testing.assert_allclose(rot2rad(rad2rot(rotvec, ROTVEC), ROTVEC),
                               [0., 0., -0.5 * np.pi], atol=1e-9)


def test_zero_rotation():
    np.testing.assert_allclose(rad2rot(np.zeros(3), ROTVEC), np.eye(3))
    np.testing.assert_allclose(rot2rad(np.eye(3), ROTVEC), np.zeros(3))
    np.testing.assert_allclose(rot2rad(np.eye(3), EULER), np.zeros(3))


def test_euler_gimbal_lock_preserves_matrix():
    rad = np.array([0.4, np.pi / 2, -0.7])
    R = rad2rot(rad, EULER)
    recovered = rot2rad(R, EULER)
    assert recovered[0] == 0.0
    assert np.isclose(recovered[1], np.pi / 2)
    np.testing.assert_allclose(rad2rot(recovered, EULER), R, atol=1e-9)


def test_quaternion_dcm_round_trip():
    for rad in _euler_samples(50):
        R = rad2rot(rad, EULER)
        np.testing.assert_allclose(q_to_dcm(dcm_to_q(R)), R, atol=1e-12)


def test_q_to_axis_angle_picks_shortest():
    axis, angle = q_to_axis_angle(np.array([0., 0., -np.sin(0.3), -np.cos(0.3)]))
    np.testing.assert_allclose(axis, [0., 0., 1.])
    assert np.isclose(angle, 0.6)


def test_wrap_to_pi():
    angles = np.array([0., np.pi, -np.pi, 3 * np.pi / 2, -3 * np.pi / 2, 7.0])
    wrapped = wrap_to_pi(angles)
    assert np.all(wrapped >= -np.pi) and np.all(wrapped < np.pi)
    np.testing.assert_allclose(np.cos(wrapped), np.cos(angles), atol=1e-12)
    np.testing.assert_allclose(np.sin(wrapped), np.sin(angles), atol=1e-12)


def test_bad_shapes_raise():
    with pytest.raises(DimensionMismatch):
        rad2rot([0., 0.])
    with pytest.raises(DimensionMismatch):
        rot2rad(np.eye(4))
