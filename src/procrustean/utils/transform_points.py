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
"""Module of utility functions.

Functions:
    transform_points: Similarity transformation of a set of points.

"""

import numpy as np


def transform_points(points, scale=1.0, r=None, t=None):
    """Similarity transformation of row-stacked points.

    Performs the following operation:
        points_affine = scale * points @ r^T + t

    which is the row-wise counterpart of `scale * r @ x + t` applied to
    each point `x`.

    Args:
        points: Points to transform.
            shape=(n_dim,) or (n_point, n_dim)
        scale (optional): Scalar scale factor.
        r (optional): Rotation matrix.
            shape=(n_dim, n_dim)
        t (optional): Translation vector.
            shape=(n_dim,) or (1, n_dim)

    Returns:
        points_affine: Transformed points.

    Notes:
        np.matmul will prepend a singleton dimension if the first
        argument is a 1D array, so a single point can be provided
        without reshaping.

    """
    points = np.asarray(points, dtype=float)
    if t is None:
        # Default to no translation.
        t = 0.0
    if r is None:
        # Default to identity matrix (no rotation).
        n_dim = points.shape[-1]
        r = np.eye(n_dim)

    return scale * np.matmul(points, np.transpose(r)) + t
