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
    cross_covariance: Compute the cross-covariance matrix of two
        centered sets of points.

"""

import numpy as np


def cross_covariance(x_centered, y_centered):
    """Return the cross-covariance matrix `x_centered^T @ y_centered`.

    Arguments:
        x_centered: Centered source points.
            shape=(n_point, n_dim)
        y_centered: Centered target points.
            shape=(n_point, n_dim)

    Returns:
        s: The cross-covariance matrix.
            shape=(n_dim, n_dim)

    Raises:
        ValueError: If the shapes of the two point sets disagree.

    """
    if np.shape(x_centered) != np.shape(y_centered):
        raise ValueError(
            "The arguments `x_centered` and `y_centered` must have the "
            "same shape, got {0} and {1}.".format(
                np.shape(x_centered), np.shape(y_centered)
            )
        )
    return np.matmul(np.transpose(x_centered), y_centered)
