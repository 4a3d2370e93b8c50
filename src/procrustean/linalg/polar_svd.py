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
"""Module of linear algebra functions.

Functions:
    polar_svd: Polar decomposition of a square matrix using the
        singular value decomposition.

"""

import numpy as np
from scipy import linalg


def polar_svd(a, include_reflections=False, return_svd=False):
    """Polar decomposition using singular value decomposition.

    Factor `a` such that `a = r @ t` where `r` is orthogonal and `t`
    is symmetric positive semi-definite. Given the SVD
    `a = u @ diag(s) @ v^T`:

        r = u @ v^T
        t = v @ diag(s) @ v^T

    If reflections are not allowed and `u @ v^T` has a negative
    determinant, the direction associated with the smallest singular
    value is flipped so that `det(r) = +1`. In that case `t` is
    symmetric but no longer positive semi-definite, and `a = r @ t`
    continues to hold.

    Arguments:
        a: A square matrix.
            shape=(n_dim, n_dim)
        include_reflections (optional): Boolean indicating if `r` may
            be an improper rotation (i.e., `det(r) = -1`).
        return_svd (optional): Boolean indicating if the (possibly
            sign-corrected) singular value decomposition should also
            be returned.

    Returns:
        r: An orthogonal matrix.
            shape=(n_dim, n_dim)
        t: A symmetric matrix.
            shape=(n_dim, n_dim)
        u (optional): Left singular vectors.
            shape=(n_dim, n_dim)
        s (optional): Singular values in descending order.
            shape=(n_dim,)
        v (optional): Right singular vectors.
            shape=(n_dim, n_dim)

    Raises:
        ValueError: If `a` is not a square matrix.

    """
    a = np.asarray(a, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(
            "The argument `a` must be a square matrix, got shape "
            "{0}.".format(a.shape)
        )

    u, s, vh = linalg.svd(a)
    v = np.transpose(vh)

    r = u @ vh
    if not include_reflections and np.linalg.det(r) < 0:
        # Singular values are sorted in descending order, so the last
        # column is the least constrained direction.
        u[:, -1] = -u[:, -1]
        s[-1] = -s[-1]
        r = u @ vh

    t = (v * s) @ vh

    if return_svd:
        return r, t, u, s, v
    return r, t
