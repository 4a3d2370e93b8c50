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
"""Alignment module.

Functions:
    center_points: Subtract the centroid from a set of points.

"""

import numpy as np


def center_points(z):
    """Center a set of points.

    Arguments:
        z: A set of points.
            shape=(n_point, n_dim)

    Returns:
        z_mean: The centroid of `z`.
            shape=(n_dim,)
        z_centered: The points with the centroid subtracted.
            shape=(n_point, n_dim)

    Raises:
        ValueError: If `z` is not a rank-2 array with at least one
            point.

    """
    z = np.asarray(z, dtype=float)
    if z.ndim != 2 or z.shape[0] < 1:
        raise ValueError(
            "The argument `z` must be a rank-2 array with at least one "
            "point, got shape {0}.".format(z.shape)
        )
    z_mean = np.mean(z, axis=0)
    z_centered = z - z_mean
    return z_mean, z_centered
