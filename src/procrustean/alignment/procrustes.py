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
"""Procrustes superimposition.

Functions:
    procrustes: Determine the similarity transform that best aligns
        two corresponding sets of points.
    procrustes_scaled_rotation: Same as `procrustes`, but with the
        scale folded into the rotation matrix.
    procrustes_transform: Same as `procrustes`, but returning a single
        homogeneous transform.
    procrustes_rotation_2d: Rigid alignment of planar points returning
        an angular rotation.

Classes:
    ProcrustesResult: Named tuple of scale, rotation and translation.

"""

import collections
import logging

from procrustean.alignment.center import center_points
from procrustean.alignment.cross_covariance import cross_covariance
from procrustean.alignment.rotation import solve_rotation
from procrustean.alignment.scale import estimate_scale
from procrustean.alignment.translation import recover_translation
from procrustean.transforms.rotation_2d import Rotation2D
from procrustean.transforms.transform import MODES
from procrustean.transforms.transform import Transform
from procrustean.utils.check_point_sets import check_point_sets

logger = logging.getLogger(__name__)

ProcrustesResult = collections.namedtuple(
    'ProcrustesResult', ['scale', 'rotation', 'translation']
)


def procrustes(x, y, include_scaling=False, include_reflections=False):
    """Perform Procrustes superimposition.

    Find the scale `s`, orthogonal matrix `r` and translation `t` that
    minimize the sum of squared distances between `s * r @ x_i + t`
    and `y_i` over all corresponding points. For row-stacked points
    this reads:

        y ~ s * x @ r^T + t

    The centroid of `x` is always mapped exactly onto the centroid of
    `y`.

    Arguments:
        x: The source set of points.
            shape=(n_point, n_dim)
        y: The target set of points. Must have the same shape as `x`.
            shape=(n_point, n_dim)
        include_scaling (optional): Boolean indicating if an isotropic
            scale factor should be estimated. By default the scale is
            exactly one (rigid alignment).
        include_reflections (optional): Boolean indicating if `r` may
            be an improper rotation (a reflection). By default
            `det(r) = +1`.

    Returns:
        A `ProcrustesResult` which unpacks as:
        scale: Scalar scale factor.
        rotation: Orthogonal matrix.
            shape=(n_dim, n_dim)
        translation: Translation vector.
            shape=(n_dim,)

    Raises:
        ValueError: If `x` and `y` are not valid, matching point sets.

    Notes:
        Degenerate inputs are not rejected. If scaling is requested
        and all source points coincide, the scale (and translation) is
        not finite. If the cross-covariance matrix is singular, some
        valid orthogonal matrix is still returned but it is not unique.

    """
    x, y = check_point_sets(x, y)

    x_mean, x_centered = center_points(x)
    y_mean, y_centered = center_points(y)

    scale, x_centered = estimate_scale(
        x_centered, y_centered, include_scaling=include_scaling
    )

    s = cross_covariance(x_centered, y_centered)
    r = solve_rotation(s, include_reflections=include_reflections)

    t = recover_translation(x_mean, y_mean, scale, r)
    logger.debug(
        "Aligned %d points in %d dimensions (scale=%g).",
        x.shape[0], x.shape[1], scale
    )
    return ProcrustesResult(scale, r, t)


def procrustes_scaled_rotation(
        x, y, include_scaling=False, include_reflections=False):
    """Perform Procrustes superimposition, folding scale into rotation.

    See `procrustes` for a description of the arguments.

    Returns:
        sr: Rotation matrix multiplied by the scale factor.
            shape=(n_dim, n_dim)
        t: Translation vector.
            shape=(n_dim,)

    """
    scale, r, t = procrustes(
        x, y, include_scaling=include_scaling,
        include_reflections=include_reflections
    )
    return scale * r, t


def procrustes_transform(
        x, y, include_scaling=False, include_reflections=False, n_dim=None,
        mode='affine', dtype=None):
    """Perform Procrustes superimposition, returning a transform.

    The transform is composed as `Translation @ Rotation @ Scaling`.
    See `procrustes` for a description of the shared arguments.

    Arguments:
        n_dim (optional): The spatial dimensionality of the transform.
            Must match the dimensionality of the points. Inferred if
            not provided.
        mode (optional): The transform representation, one of
            'affine', 'affine_compact', 'isometry' or 'projective'.
        dtype (optional): The floating point type of the transform.

    Returns:
        A `Transform`.

    Raises:
        ValueError: If `n_dim` disagrees with the points, if `mode` is
            not recognized, or if an isometry is requested together
            with scaling.

    """
    x, y = check_point_sets(x, y)
    if n_dim is not None and n_dim != x.shape[1]:
        raise ValueError(
            "The argument `n_dim` ({0}) must match the dimensionality of "
            "the points ({1}).".format(n_dim, x.shape[1])
        )
    if mode not in MODES:
        raise ValueError(
            "The argument `mode` must be one of {0}, got "
            "'{1}'.".format(MODES, mode)
        )
    if mode == 'isometry' and include_scaling:
        raise ValueError(
            "An 'isometry' transform cannot include scaling. Use "
            "`include_scaling=False` or a different `mode`."
        )

    scale, r, t = procrustes(
        x, y, include_scaling=include_scaling,
        include_reflections=include_reflections
    )
    return Transform.from_components(
        translation=t, rotation=r, scale=scale, n_dim=x.shape[1],
        mode=mode, dtype=dtype
    )


def procrustes_rotation_2d(x, y):
    """Rigid Procrustes superimposition of planar points.

    Neither scaling nor reflections are permitted.

    Arguments:
        x: The source set of points.
            shape=(n_point, 2)
        y: The target set of points.
            shape=(n_point, 2)

    Returns:
        rotation: A `Rotation2D`.
        t: Translation vector.
            shape=(2,)

    Raises:
        ValueError: If the points are not two-dimensional.

    """
    x, y = check_point_sets(x, y)
    if x.shape[1] != 2:
        raise ValueError(
            "The arguments `x` and `y` must have dimension 2, got "
            "{0}.".format(x.shape[1])
        )
    r, t = procrustes_scaled_rotation(x, y)
    return Rotation2D.from_rotation_matrix(r), t
