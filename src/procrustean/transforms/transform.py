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
"""Transforms module.

Classes:
    Transform: A homogeneous transform.

"""

import numpy as np

MODES = ('affine', 'affine_compact', 'isometry', 'projective')


class Transform(object):
    """A homogeneous transform acting on column vectors.

    A point `x` is mapped to `linear @ x + translation`. The full
    matrix has shape=(n_dim + 1, n_dim + 1); for all modes except
    'projective' its last row is `[0, ..., 0, 1]`.

    Attributes:
        matrix: The homogeneous matrix.
            shape=(n_dim + 1, n_dim + 1)
        mode: String indicating the transform representation. One of
            'affine', 'affine_compact', 'isometry' or 'projective'.
        n_dim: The spatial dimensionality.

    Methods:
        from_components: Compose a transform from translation,
            rotation and scale.
        apply: Transform points.
        inverse: Return the inverse transform.
        compact: Return the (n_dim, n_dim + 1) matrix.

    """

    def __init__(self, matrix, mode='affine', dtype=None):
        """Initialize.

        Arguments:
            matrix: A square homogeneous matrix.
                shape=(n_dim + 1, n_dim + 1)
            mode (optional): The transform representation.
            dtype (optional): The floating point type of the matrix.
                Defaults to the type of `matrix` (at least float).

        Raises:
            ValueError: If `mode` is not recognized or `matrix` is not
                square.

        """
        if mode not in MODES:
            raise ValueError(
                "The argument `mode` must be one of {0}, got "
                "'{1}'.".format(MODES, mode)
            )
        if dtype is None:
            dtype = np.result_type(np.asarray(matrix).dtype, np.float64)
        matrix = np.array(matrix, dtype=dtype)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(
                "The argument `matrix` must be a square matrix, got shape "
                "{0}.".format(matrix.shape)
            )
        self.matrix = matrix
        self.mode = mode

    @classmethod
    def from_components(
            cls, translation=None, rotation=None, scale=1.0, n_dim=None,
            mode='affine', dtype=None):
        """Compose `Translation @ Rotation @ Scaling`.

        Arguments:
            translation (optional): Translation vector.
                shape=(n_dim,)
            rotation (optional): Rotation matrix.
                shape=(n_dim, n_dim)
            scale (optional): Scalar isotropic scale factor.
            n_dim (optional): The spatial dimensionality. Inferred
                from `rotation` or `translation` if not provided.
            mode (optional): The transform representation.
            dtype (optional): The floating point type of the matrix.

        Raises:
            ValueError: If the dimensionality cannot be inferred or the
                components disagree.

        """
        if n_dim is None:
            if rotation is not None:
                n_dim = np.shape(rotation)[0]
            elif translation is not None:
                n_dim = np.shape(translation)[0]
            else:
                raise ValueError(
                    "The argument `n_dim` is required when neither "
                    "`rotation` nor `translation` are provided."
                )
        if rotation is None:
            rotation = np.eye(n_dim)
        if translation is None:
            translation = np.zeros([n_dim])
        rotation = np.asarray(rotation)
        translation = np.asarray(translation)
        if rotation.shape != (n_dim, n_dim):
            raise ValueError(
                "The argument `rotation` must have shape=({0}, {0}), got "
                "shape {1}.".format(n_dim, rotation.shape)
            )
        if translation.shape != (n_dim,):
            raise ValueError(
                "The argument `translation` must have shape=({0},), got "
                "shape {1}.".format(n_dim, translation.shape)
            )

        matrix = np.eye(n_dim + 1)
        matrix[0:n_dim, 0:n_dim] = rotation * scale
        matrix[0:n_dim, n_dim] = translation
        return cls(matrix, mode=mode, dtype=dtype)

    @property
    def n_dim(self):
        """The spatial dimensionality."""
        return self.matrix.shape[0] - 1

    @property
    def dtype(self):
        """The floating point type of the matrix."""
        return self.matrix.dtype

    @property
    def linear(self):
        """The linear part (rotation times scale)."""
        return self.matrix[0:self.n_dim, 0:self.n_dim]

    @property
    def translation(self):
        """The translation part."""
        return self.matrix[0:self.n_dim, self.n_dim]

    def compact(self):
        """Return the matrix without the homogeneous row."""
        return self.matrix[0:self.n_dim, :].copy()

    def apply(self, points):
        """Transform row-stacked points.

        Arguments:
            points: shape=(n_dim,) or (n_point, n_dim)

        Returns:
            Transformed points with the same shape as `points`.

        """
        points = np.asarray(points, dtype=self.dtype)
        if self.mode != 'projective':
            return np.matmul(points, np.transpose(self.linear)) + (
                self.translation
            )

        ones = np.ones(points.shape[:-1] + (1,), dtype=self.dtype)
        points_h = np.concatenate([points, ones], axis=-1)
        points_h = np.matmul(points_h, np.transpose(self.matrix))
        return points_h[..., 0:self.n_dim] / points_h[..., self.n_dim:]

    def inverse(self):
        """Return the inverse transform.

        Isometries are inverted using the transpose of the linear part.

        """
        if self.mode == 'projective':
            return Transform(
                np.linalg.inv(self.matrix), mode=self.mode, dtype=self.dtype
            )

        if self.mode == 'isometry':
            linear_inv = np.transpose(self.linear)
        else:
            linear_inv = np.linalg.inv(self.linear)
        matrix = np.eye(self.n_dim + 1, dtype=self.dtype)
        matrix[0:self.n_dim, 0:self.n_dim] = linear_inv
        matrix[0:self.n_dim, self.n_dim] = -linear_inv @ self.translation
        return Transform(matrix, mode=self.mode, dtype=self.dtype)

    def __matmul__(self, other):
        """Compose two transforms, applying `other` first."""
        if not isinstance(other, Transform):
            return NotImplemented
        if other.n_dim != self.n_dim:
            raise ValueError(
                "Cannot compose transforms of dimension {0} and "
                "{1}.".format(self.n_dim, other.n_dim)
            )
        if self.mode == other.mode:
            mode = self.mode
        elif 'projective' in (self.mode, other.mode):
            mode = 'projective'
        else:
            mode = 'affine'
        return Transform(
            self.matrix @ other.matrix, mode=mode,
            dtype=np.result_type(self.dtype, other.dtype)
        )

    def __repr__(self):
        return "Transform(n_dim={0}, mode='{1}', dtype={2})".format(
            self.n_dim, self.mode, self.dtype
        )
