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
    rotation_matrix: Returns a two-dimensional rotation matrix.
    rotation_angle: Returns the angle of a two-dimensional rotation
        matrix.

"""

import numpy as np


def rotation_matrix(theta):
    """Return 2D rotation matrix.

    Arguments:
        theta: Scalar value indicating radians of rotation.

    """
    return np.array((
        (np.cos(theta), -np.sin(theta)),
        (np.sin(theta), np.cos(theta)),
    ))


def rotation_angle(r):
    """Return the angle (in radians) of a 2D rotation matrix.

    The angle lies in the interval [-pi, pi].

    Arguments:
        r: A 2D rotation matrix.
            shape=(2, 2)

    Raises:
        ValueError: If `r` is not a 2x2 matrix.

    """
    r = np.asarray(r, dtype=float)
    if r.shape != (2, 2):
        raise ValueError(
            "The argument `r` must have shape=(2, 2), got shape "
            "{0}.".format(r.shape)
        )
    return float(np.arctan2(r[1, 0], r[0, 0]))
