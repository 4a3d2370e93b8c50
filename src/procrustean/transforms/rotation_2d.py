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
    Rotation2D: A planar rotation represented by an angle.

"""

import numpy as np

from procrustean.utils.rotation_matrix import rotation_angle
from procrustean.utils.rotation_matrix import rotation_matrix


class Rotation2D(object):
    """A planar rotation represented by an angle.

    Attributes:
        angle: The rotation angle in radians (counterclockwise).

    Methods:
        from_rotation_matrix: Create a rotation from a 2x2 matrix.
        to_rotation_matrix: Return the equivalent 2x2 matrix.
        apply: Rotate points.
        inverse: Return the inverse rotation.

    """

    def __init__(self, angle=0.0):
        """Initialize.

        Arguments:
            angle (optional): Scalar angle in radians.

        """
        self.angle = float(angle)

    @classmethod
    def from_rotation_matrix(cls, r):
        """Create a rotation from a 2x2 rotation matrix.

        Arguments:
            r: A proper rotation matrix.
                shape=(2, 2)

        Raises:
            ValueError: If `r` is not a 2x2 matrix.

        """
        return cls(rotation_angle(r))

    def to_rotation_matrix(self):
        """Return the 2x2 rotation matrix."""
        return rotation_matrix(self.angle)

    def apply(self, points):
        """Rotate row-stacked points.

        Arguments:
            points: shape=(2,) or (n_point, 2)

        """
        points = np.asarray(points, dtype=float)
        return np.matmul(points, np.transpose(self.to_rotation_matrix()))

    def inverse(self):
        """Return the inverse rotation."""
        return Rotation2D(-self.angle)

    def __matmul__(self, other):
        """Compose two rotations."""
        if not isinstance(other, Rotation2D):
            return NotImplemented
        return Rotation2D(self.angle + other.angle)

    def __repr__(self):
        return "Rotation2D(angle={0!r})".format(self.angle)
