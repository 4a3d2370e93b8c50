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
    disparity: Sum of squared residuals of an alignment.

"""

import numpy as np

from procrustean.utils.check_point_sets import check_point_sets
from procrustean.utils.transform_points import transform_points


def disparity(x, y, scale=1.0, r=None, t=None):
    """Return the sum of squared residuals of an alignment.

    Arguments:
        x: Source points.
            shape=(n_point, n_dim)
        y: Target points.
            shape=(n_point, n_dim)
        scale (optional): Scalar scale factor.
        r (optional): Rotation matrix.
            shape=(n_dim, n_dim)
        t (optional): Translation vector.
            shape=(n_dim,)

    Returns:
        Scalar sum of squared distances between the transformed source
        points and the target points.

    """
    x, y = check_point_sets(x, y)
    x_aligned = transform_points(x, scale=scale, r=r, t=t)
    return float(np.sum((x_aligned - y)**2))
