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
    polar_dec: Polar decomposition of a square matrix using the
        eigen-decomposition of a symmetric matrix.

"""

import logging

import numpy as np
from scipy import linalg

from procrustean.linalg.polar_svd import polar_svd

logger = logging.getLogger(__name__)

EIG_RATIO_THRESHOLD = np.sqrt(1e-12)


def polar_dec(a, return_svd=False):
    """Polar decomposition allowing reflections.

    Factor `a` such that `a = r @ t` where `r` is orthogonal (possibly
    with `det(r) = -1`) and `t` is symmetric positive semi-definite.
    The symmetric factor is the principal square root of `a^T @ a`:

        a^T @ a = v @ diag(d) @ v^T
        t = v @ diag(sqrt(d)) @ v^T
        r = a @ v @ diag(1 / sqrt(d)) @ v^T

    When `a^T @ a` is close to singular the inverse square root is
    ill-conditioned; in that case the decomposition is delegated to
    `polar_svd` with reflections allowed.

    Arguments:
        a: A square matrix.
            shape=(n_dim, n_dim)
        return_svd (optional): Boolean indicating if the implied
            singular value decomposition should also be returned.

    Returns:
        r: An orthogonal matrix.
            shape=(n_dim, n_dim)
        t: A symmetric positive semi-definite matrix.
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

    # Eigenvalues are returned in ascending order.
    d, v = linalg.eigh(np.transpose(a) @ a)
    if d[-1] <= 0 or d[0] / d[-1] < EIG_RATIO_THRESHOLD:
        logger.debug(
            "Eigenvalue ratio below %g, falling back to SVD polar "
            "decomposition.", EIG_RATIO_THRESHOLD
        )
        return polar_svd(a, include_reflections=True, return_svd=return_svd)

    s = np.sqrt(d)
    vh = np.transpose(v)
    r = a @ (v / s) @ vh
    t = (v * s) @ vh

    if return_svd:
        # Reorder to match the descending convention of `polar_svd`.
        s = s[::-1]
        v = v[:, ::-1]
        u = (a @ v) / s
        return r, t, u, s, v
    return r, t
