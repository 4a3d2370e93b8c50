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
    estimate_scale: Estimate the isotropic scale between two centered
        sets of points.

"""

import logging
import warnings

import numpy as np

logger = logging.getLogger(__name__)

SCALE_TOLERANCE = 1e-8


def estimate_scale(x_centered, y_centered, include_scaling=False):
    """Estimate isotropic scale and rescale the source points.

    The magnitude of each point set is measured as the Frobenius norm
    of the centered coordinates divided by the number of points. The
    scale factor is the ratio of target magnitude to source magnitude.

    Arguments:
        x_centered: Centered source points.
            shape=(n_point, n_dim)
        y_centered: Centered target points.
            shape=(n_point, n_dim)
        include_scaling (optional): Boolean indicating if a scale
            factor should be estimated. If False, the scale is exactly
            one and `x_centered` is returned unchanged.

    Returns:
        scale: Scalar scale factor.
        x_scaled: Centered source points multiplied by `scale`.
            shape=(n_point, n_dim)

    Notes:
        If all source points coincide (up to floating point residue
        left by centering) the scale is undefined. A
        `RuntimeWarning` is issued, the returned scale is `inf` (or
        `nan` if the target points also coincide) and the source
        points are returned without rescaling.

    """
    if not include_scaling:
        return 1.0, x_centered

    n_point = x_centered.shape[0]
    scale_x = np.linalg.norm(x_centered) / n_point
    scale_y = np.linalg.norm(y_centered) / n_point

    if scale_x == 0 or scale_x <= np.finfo(float).eps * scale_y:
        warnings.warn(
            (
                "The source points are degenerate (all points coincide), "
                "the scale factor is undefined."
            ),
            RuntimeWarning,
            stacklevel=2,
        )
    with np.errstate(divide='ignore', invalid='ignore'):
        scale = float(np.float64(scale_y) / np.float64(scale_x))
    logger.debug("Estimated scale factor %g.", scale)

    if not np.isfinite(scale):
        # Degenerate source points are all zero after centering.
        return scale, x_centered

    x_scaled = scale * x_centered
    scale_x_new = np.linalg.norm(x_scaled) / n_point
    if abs(scale_x_new - scale_y) > SCALE_TOLERANCE * max(1.0, scale_y):
        logger.warning(
            "Rescaled source magnitude %g does not match target "
            "magnitude %g.", scale_x_new, scale_y
        )
    return scale, x_scaled
