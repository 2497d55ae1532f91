import numpy as np
import pytest

from landmark_sim.core.frames import (
    compose_pose, invert_pose, relative_pose, world_to_local, local_to_world,
    pose_to_matrix, matrix_to_pose
)
from landmark_sim.core.types import RotationConvention, Pose


@pytest.mark.parametrize("convention", list(RotationConvention))
def test_compose_recovers_target(random_map, convention):
    pose = np.array([1., -2., 0.5, 0.2, -0.3, 1.1])
    for target in random_map:
        if convention is RotationConvention.ROTATION_VECTOR:
            target = target.copy()
            target[3:6] *= 0.5
        rel = relative_pose(pose, target, convention)
        np.testing.assert_allclose(compose_pose(pose, rel, convention), target,
                                   atol=1e-9)


def test_invert_pose_composes_to_identity():
    pose = np.array([4., 1., -3., 0.5, 0.2, -2.0])
    np.testing.assert_allclose(compose_pose(pose, invert_pose(pose)), np.zeros(6),
                               atol=1e-12)
    np.testing.assert_allclose(compose_pose(invert_pose(pose), pose), np.zeros(6),
                               atol=1e-12)


def test_relative_pose_equals_inverse_composition():
    pose = np.array([4., 1., -3., 0.5, 0.2, -2.0])
    target = np.array([-1., 2., 7., -0.1, 0.9, 0.3])
    np.testing.assert_allclose(relative_pose(pose, target),
                               compose_pose(invert_pose(pose), target), atol=1e-12)


def test_world_to_local_scenario(scenario_map, scenario_pose):
    local = world_to_local(scenario_map[:, 0:3], scenario_pose)
    np.testing.assert_allclose(local, [
        [-2., 3., -4.],
        [-2., -2., -4.],
        [3., -2., -4.],
    ], atol=1e-12)


def test_local_to_world_inverts_world_to_local(random_map):
    pose = np.array([2., 3., -1., 0.3, -0.4, 2.5])
    local = world_to_local(random_map[:, 0:3], pose)
    np.testing.assert_allclose(local_to_world(local, pose), random_map[:, 0:3],
                               atol=1e-12)


def test_homogeneous_matrix_round_trip():
    pose = np.array([2., 3., -1., 0.3, -0.4, 2.5])
    T = pose_to_matrix(pose)
    np.testing.assert_allclose(T[3], [0., 0., 0., 1.])
    np.testing.assert_allclose(matrix_to_pose(T), pose, atol=1e-12)
    other = np.array([-1., 0., 4., 0.1, 0.2, -0.3])
    np.testing.assert_allclose(matrix_to_pose(T @ pose_to_matrix(other)),
                               compose_pose(pose, other), atol=1e-12)


def test_pose_dataclass_accepted():
    pose = Pose(position=np.array([1., 2., 3.]), orientation=np.array([0., 0., 0.5]))
    np.testing.assert_allclose(compose_pose(pose, np.zeros(6)), pose.as_array())
