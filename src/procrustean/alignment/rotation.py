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
    solve_rotation: Determine the rotation that best aligns two
        centered sets of points.

"""

import logging

import numpy as np

from procrustean.linalg.polar_dec import polar_dec
from procrustean.linalg.polar_svd import polar_svd

logger = logging.getLogger(__name__)


def _polar_proper(s):
    return polar_svd(s, include_reflections=False)


# Keyed on `include_reflections`.
_POLAR_STRATEGY = {
    True: polar_dec,
    False: _polar_proper,
}


def solve_rotation(s, include_reflections=False):
    """Solve for the rotation given a cross-covariance matrix.

    The cross-covariance matrix is factored as `s = r0 @ t` with `r0`
    orthogonal and `t` symmetric. The returned rotation is `r0^T`,
    which maps centered source points `x` onto centered target points
    `y` as `y = r @ x`.

    Arguments:
        s: A cross-covariance matrix.
            shape=(n_dim, n_dim)
        include_reflections (optional): Boolean indicating if an
            improper rotation (reflection) is permitted.

    Returns:
        r: An orthogonal matrix. If `include_reflections` is False,
            `det(r) = +1`.
            shape=(n_dim, n_dim)

    """
    include_reflections = bool(include_reflections)
    polar = _POLAR_STRATEGY[include_reflections]
    logger.debug(
        "Solving rotation with %s.",
        "polar_dec" if include_reflections else "polar_svd"
    )
    r0, _ = polar(s)
    return np.transpose(r0)
