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
"""Module of Matplotlib tools.

Functions:
    alignment_2d: Plot a planar Procrustes alignment.

"""

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
import numpy as np

from procrustean.utils.check_point_sets import check_point_sets
from procrustean.utils.transform_points import transform_points


def alignment_2d(
        x, y, scale=1.0, r=None, t=None, ax=None, source_kws=None,
        target_kws=None, residual_kws=None):
    """Plot aligned source points, target points and their residuals.

    Arguments:
        x: The source set of points.
            shape=(n_point, 2)
        y: The target set of points.
            shape=(n_point, 2)
        scale (optional): Scalar scale factor.
        r (optional): Rotation matrix.
            shape=(2, 2)
        t (optional): Translation vector.
            shape=(2,)
        ax (optional): A 'matplotlib' `AxesSubplot` object.
        source_kws (optional): Key-word arguments passed to `ax.scatter`
            when drawing the aligned source points.
        target_kws (optional): Key-word arguments passed to `ax.scatter`
            when drawing the target points.
        residual_kws (optional): Key-word arguments passed to the
            `matplotlib.collections.LineCollection` constructor.

    Returns:
        ax: The `AxesSubplot` that was drawn on.

    Raises:
        ValueError: If the points are not two-dimensional.

    """
    x, y = check_point_sets(x, y)
    if x.shape[1] != 2:
        raise ValueError(
            "The arguments `x` and `y` must have dimension 2, got "
            "{0}.".format(x.shape[1])
        )
    if ax is None:
        ax = plt.gca()

    source_kws = {'marker': 'o', 'label': 'source', **(source_kws or {})}
    target_kws = {'marker': 'x', 'label': 'target', **(target_kws or {})}
    residual_kws = {'color': 'gray', 'linewidths': .5, **(residual_kws or {})}

    x_aligned = transform_points(x, scale=scale, r=r, t=t)

    segments = np.stack([x_aligned, y], axis=1)
    ax.add_collection(LineCollection(segments, **residual_kws))
    ax.scatter(x_aligned[:, 0], x_aligned[:, 1], **source_kws)
    ax.scatter(y[:, 0], y[:, 1], **target_kws)
    ax.set_aspect('equal')
    return ax
