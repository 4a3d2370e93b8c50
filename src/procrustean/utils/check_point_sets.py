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
    check_point_sets: Validate a pair of corresponding point sets.

"""

import numpy as np


def check_point_sets(x, y):
    """Validate and standardize a pair of point sets.

    Arguments:
        x: Source points.
            shape=(n_point, n_dim)
        y: Target points. Must have the same shape as `x`.
            shape=(n_point, n_dim)

    Returns:
        x: Source points as a float np.ndarray.
        y: Target points as a float np.ndarray.

    Raises:
        ValueError: If either argument is not a rank-2 array with at
            least one point, or if the shapes disagree.

    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    for name, z in (('x', x), ('y', y)):
        if z.ndim != 2:
            raise ValueError(
                "The argument `{0}` must be a rank-2 array with "
                "shape=(n_point, n_dim).".format(name)
            )
        if z.shape[0] < 1:
            raise ValueError(
                "The argument `{0}` must contain at least one "
                "point.".format(name)
            )

    if x.shape[0] != y.shape[0]:
        raise ValueError(
            "The arguments `x` and `y` must have the same number of "
            "points, got {0} and {1}.".format(x.shape[0], y.shape[0])
        )
    if x.shape[1] != y.shape[1]:
        raise ValueError(
            "The arguments `x` and `y` must have the same "
            "dimensionality, got {0} and {1}.".format(x.shape[1], y.shape[1])
        )
    return x, y
