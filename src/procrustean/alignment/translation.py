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
    recover_translation: Determine the translation that maps the
        source centroid onto the target centroid.

"""

import numpy as np


def recover_translation(x_mean, y_mean, scale, r):
    """Return translation `t = y_mean - scale * r @ x_mean`.

    Arguments:
        x_mean: Centroid of the (uncentered) source points.
            shape=(n_dim,)
        y_mean: Centroid of the (uncentered) target points.
            shape=(n_dim,)
        scale: Scalar scale factor.
        r: Rotation matrix.
            shape=(n_dim, n_dim)

    Returns:
        t: Translation vector.
            shape=(n_dim,)

    """
    return y_mean - scale * np.matmul(r, x_mean)
