# -*- coding: utf-8 -*-
# Copyright 2021 The Procrustean Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ============================================================================
"""Module for testing procrustes.py."""

import numpy as np
import pytest

import procrustean
from procrustean.utils import disparity
from procrustean.utils import rotation_matrix
from procrustean.utils import transform_points

SETTINGS = [
    (False, False), (False, True), (True, False), (True, True)
]


def assert_orthogonal(r):
    n_dim = r.shape[0]
    np.testing.assert_array_almost_equal(r @ np.transpose(r), np.eye(n_dim))


@pytest.mark.parametrize("include_scaling,include_reflections", SETTINGS)
def test_centroid_alignment(z0, include_scaling, include_reflections):
    """Test that the source centroid maps onto the target centroid."""
    rng = np.random.default_rng(252)
    z1 = rng.normal(size=z0.shape)

    scale, r, t = procrustean.procrustes(
        z0, z1, include_scaling=include_scaling,
        include_reflections=include_reflections
    )
    z0_mean = np.mean(z0, axis=0)
    z1_mean = np.mean(z1, axis=0)
    np.testing.assert_allclose(
        scale * r @ z0_mean + t, z1_mean, atol=1e-8
    )


@pytest.mark.parametrize("include_scaling,include_reflections", SETTINGS)
def test_orthogonality_3d(z0_3d, include_scaling, include_reflections):
    """Test that the rotation is always orthogonal."""
    rng = np.random.default_rng(7)
    z1 = rng.normal(size=z0_3d.shape)

    _, r, _ = procrustean.procrustes(
        z0_3d, z1, include_scaling=include_scaling,
        include_reflections=include_reflections
    )
    assert_orthogonal(r)
    if not include_reflections:
        np.testing.assert_almost_equal(np.linalg.det(r), 1.0)
    else:
        np.testing.assert_almost_equal(np.abs(np.linalg.det(r)), 1.0)


def test_scale_default(z0):
    """Test that scale is exactly one when scaling is not requested."""
    z1 = 3.0 * z0 + 1.0
    result = procrustean.procrustes(z0, z1)
    assert result.scale == 1.0
    assert isinstance(result, procrustean.ProcrustesResult)


@pytest.mark.parametrize("include_reflections", [False, True])
def test_identity(z0, include_reflections):
    """Test alignment of a set of points with itself."""
    scale, r, t = procrustean.procrustes(
        z0, z0, include_scaling=True,
        include_reflections=include_reflections
    )
    np.testing.assert_almost_equal(scale, 1.0)
    np.testing.assert_array_almost_equal(r, np.eye(2))
    np.testing.assert_array_almost_equal(t, np.zeros([2]))


@pytest.mark.parametrize("theta", [np.pi / 4, -np.pi / 2.1, 3.0])
@pytest.mark.parametrize("include_reflections", [False, True])
def test_simple_rotation(z0, theta, include_reflections):
    """Test recovery of a known rotation and translation."""
    r_desired = rotation_matrix(theta)
    t_desired = np.array([.3, -1.2])
    z1 = transform_points(z0, r=r_desired, t=t_desired)

    scale, r, t = procrustean.procrustes(
        z0, z1, include_reflections=include_reflections
    )
    assert scale == 1.0
    np.testing.assert_array_almost_equal(r, r_desired)
    np.testing.assert_array_almost_equal(t, t_desired)
    np.testing.assert_almost_equal(disparity(z0, z1, scale, r, t), 0.0)


@pytest.mark.parametrize("include_reflections", [False, True])
def test_rotation_3d(z0_3d, r0_3d, include_reflections):
    """Test recovery of a known 3D rotation and translation."""
    t_desired = np.array([1., 2., -3.])
    z1 = transform_points(z0_3d, r=r0_3d, t=t_desired)

    _, r, t = procrustean.procrustes(
        z0_3d, z1, include_reflections=include_reflections
    )
    np.testing.assert_array_almost_equal(r, r0_3d)
    np.testing.assert_array_almost_equal(t, t_desired)


def test_scaled_rotation(z0):
    """Test recovery of a known scale."""
    r_desired = rotation_matrix(np.pi / 4)
    t_desired = np.array([2., .5])
    z1 = transform_points(z0, scale=2.5, r=r_desired, t=t_desired)

    scale, r, t = procrustean.procrustes(z0, z1, include_scaling=True)
    np.testing.assert_almost_equal(scale, 2.5)
    np.testing.assert_array_almost_equal(r, r_desired)
    np.testing.assert_array_almost_equal(t, t_desired)


def test_pure_scaling(z0):
    """Test recovery of scale without rotation."""
    z1 = .25 * z0 + np.array([-1., 1.])

    scale, r, t = procrustean.procrustes(z0, z1, include_scaling=True)
    np.testing.assert_almost_equal(scale, .25)
    np.testing.assert_array_almost_equal(r, np.eye(2))
    np.testing.assert_array_almost_equal(t, np.array([-1., 1.]))


def test_scaled_rotation_no_scale(z0):
    """Test that scaling is ignored unless requested."""
    r_desired = rotation_matrix(np.pi / 4)
    z1 = transform_points(z0, scale=2., r=r_desired)

    scale, r, _ = procrustean.procrustes(z0, z1)
    assert scale == 1.0
    np.testing.assert_array_almost_equal(r, r_desired)


@pytest.mark.parametrize(
    "s",
    [
        np.array([[-1, 0], [0, 1]]),
        np.array([[1, 0], [0, -1]]),
    ]
)
def test_reflection(z0, s):
    """Test alignment of a reflected set of points."""
    f = rotation_matrix(np.pi / 4) @ s
    t_desired = np.array([.1, .2])
    z1 = transform_points(z0, r=f, t=t_desired)

    # Reflections permitted: exact recovery.
    _, r, t = procrustean.procrustes(z0, z1, include_reflections=True)
    np.testing.assert_almost_equal(np.linalg.det(r), -1.0)
    np.testing.assert_array_almost_equal(r, f)
    np.testing.assert_array_almost_equal(t, t_desired)
    np.testing.assert_almost_equal(disparity(z0, z1, 1.0, r, t), 0.0)

    # Reflections not permitted: best proper rotation.
    _, r_proper, t_proper = procrustean.procrustes(
        z0, z1, include_reflections=False
    )
    assert_orthogonal(r_proper)
    np.testing.assert_almost_equal(np.linalg.det(r_proper), 1.0)
    assert disparity(z0, z1, 1.0, r_proper, t_proper) > 1e-3


def test_reflection_3d(z0_3d, r0_3d):
    """Test alignment of a reflected set of 3D points."""
    f = r0_3d @ np.diag([1., 1., -1.])
    z1 = transform_points(z0_3d, scale=.5, r=f)

    scale, r, _ = procrustean.procrustes(
        z0_3d, z1, include_scaling=True, include_reflections=True
    )
    np.testing.assert_almost_equal(scale, .5)
    np.testing.assert_array_almost_equal(r, f)

    _, r_proper, _ = procrustean.procrustes(
        z0_3d, z1, include_scaling=True, include_reflections=False
    )
    np.testing.assert_almost_equal(np.linalg.det(r_proper), 1.0)


def test_x_xy_reflection_is_rotation(z0):
    """Test that a double reflection is recovered as a rotation."""
    f = rotation_matrix(np.pi / 4) @ np.array([[-1, 0], [0, -1]])
    z1 = transform_points(z0, r=f)

    _, r, _ = procrustean.procrustes(z0, z1)
    np.testing.assert_array_almost_equal(r, f)


@pytest.mark.parametrize("include_reflections", [False, True])
def test_collinear_points(include_reflections):
    """Test points that span a single direction."""
    x = np.array([[0., 0.], [1., 0.], [2., 0.], [3., 0.]])
    y = np.array([[0., 0.], [0., 1.], [0., 2.], [0., 3.]])

    scale, r, t = procrustean.procrustes(
        x, y, include_reflections=include_reflections
    )
    assert_orthogonal(r)
    np.testing.assert_array_almost_equal(
        transform_points(x, scale, r, t), y
    )


def test_single_point():
    """Test that a single point yields a pure translation."""
    x = np.array([[1., 2., 3.]])
    y = np.array([[0., -1., 4.]])

    scale, r, t = procrustean.procrustes(x, y)
    assert scale == 1.0
    assert_orthogonal(r)
    np.testing.assert_array_almost_equal(r @ x[0] + t, y[0])


def test_degenerate_scaling():
    """Test coincident source points when scaling is requested."""
    x = np.ones([4, 2])
    y = np.array([[0., 0.], [1., 0.], [0., 1.], [1., 1.]])

    with pytest.warns(RuntimeWarning, match="degenerate"):
        scale, r, _ = procrustean.procrustes(x, y, include_scaling=True)
    assert np.isinf(scale)
    assert_orthogonal(r)


def test_inputs_not_mutated(z0):
    """Test that the inputs are left unchanged."""
    x = z0.copy()
    y = 2. * z0 + 1.
    y_copy = y.copy()
    procrustean.procrustes(x, y, include_scaling=True)
    np.testing.assert_array_equal(x, z0)
    np.testing.assert_array_equal(y, y_copy)


@pytest.mark.parametrize(
    "x,y",
    [
        (np.zeros([3, 2]), np.zeros([4, 2])),
        (np.zeros([3, 2]), np.zeros([3, 3])),
        (np.zeros([3]), np.zeros([3])),
        (np.zeros([0, 2]), np.zeros([0, 2])),
    ]
)
def test_invalid_point_sets(x, y):
    """Test that mismatched point sets are rejected."""
    with pytest.raises(ValueError):
        procrustean.procrustes(x, y)


def test_scaled_rotation_overload(z0):
    """Test the scale is folded into the rotation."""
    r_desired = rotation_matrix(-np.pi / 3)
    z1 = transform_points(z0, scale=1.5, r=r_desired, t=np.array([1., 0.]))

    sr, t = procrustean.procrustes_scaled_rotation(
        z0, z1, include_scaling=True
    )
    np.testing.assert_array_almost_equal(sr, 1.5 * r_desired)
    np.testing.assert_array_almost_equal(t, np.array([1., 0.]))

    # Defaults are a rigid alignment.
    sr, _ = procrustean.procrustes_scaled_rotation(z0, z1)
    np.testing.assert_array_almost_equal(sr, r_desired)


@pytest.mark.parametrize("mode", ["affine", "projective"])
def test_transform_overload(z0_3d, r0_3d, mode):
    """Test the homogeneous transform overload."""
    t_desired = np.array([0., 1., 2.])
    z1 = transform_points(z0_3d, scale=3., r=r0_3d, t=t_desired)

    tf = procrustean.procrustes_transform(
        z0_3d, z1, include_scaling=True, n_dim=3, mode=mode
    )
    assert isinstance(tf, procrustean.Transform)
    assert tf.n_dim == 3
    assert tf.mode == mode
    np.testing.assert_array_almost_equal(tf.linear, 3. * r0_3d)
    np.testing.assert_array_almost_equal(tf.translation, t_desired)
    np.testing.assert_array_almost_equal(tf.apply(z0_3d), z1)


def test_transform_overload_dtype(z0):
    """Test the transform numeric representation."""
    tf = procrustean.procrustes_transform(
        z0, z0, mode='isometry', dtype=np.float32
    )
    assert tf.dtype == np.float32
    np.testing.assert_array_almost_equal(tf.matrix, np.eye(3), decimal=5)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_dim": 3},
        {"mode": "linear"},
        {"mode": "isometry", "include_scaling": True},
    ]
)
def test_transform_overload_invalid(z0, kwargs):
    """Test invalid transform overload arguments."""
    with pytest.raises(ValueError):
        procrustean.procrustes_transform(z0, z0, **kwargs)


def test_rotation_2d_overload(z0):
    """Test the planar rotation overload."""
    t_desired = np.array([-.5, .5])
    z1 = transform_points(z0, r=rotation_matrix(.7), t=t_desired)

    rot, t = procrustean.procrustes_rotation_2d(z0, z1)
    assert isinstance(rot, procrustean.Rotation2D)
    np.testing.assert_almost_equal(rot.angle, .7)
    np.testing.assert_array_almost_equal(t, t_desired)


def test_rotation_2d_overload_ignores_scale(z0):
    """Test that the planar overload is rigid."""
    z1 = transform_points(z0, scale=4., r=rotation_matrix(-2.))

    rot, _ = procrustean.procrustes_rotation_2d(z0, z1)
    np.testing.assert_almost_equal(rot.angle, -2.)


def test_rotation_2d_overload_wrong_dimension(z0_3d):
    """Test that 3D points are rejected by the planar overload."""
    with pytest.raises(ValueError, match="dimension 2"):
        procrustean.procrustes_rotation_2d(z0_3d, z0_3d)
