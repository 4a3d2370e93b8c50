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
"""Root pytest setup."""

import numpy as np
import pytest

from procrustean.utils import rotation_matrix


@pytest.fixture(scope="module")
def z0():
    """Create random set of points."""
    z0 = np.array([
        [0.46472851, 0.09534286],
        [0.90612827, 0.21031482],
        [0.46595517, 0.92022067],
        [0.51457351, 0.88226988],
        [0.24506303, 0.75287697],
        [0.69773745, 0.25095083],
        [0.71550351, 0.14846334],
        [0.24825323, 0.96021703],
        [0.85497989, 0.9114596],
        [0.35982138, 0.85040905]
    ])
    return z0


@pytest.fixture(scope="module")
def z0_3d():
    """Create random set of 3D points."""
    z0 = np.array([
        [0.15601864, 0.15599452, 0.05808361],
        [0.86617615, 0.60111501, 0.70807258],
        [0.02058449, 0.96990985, 0.83244264],
        [0.21233911, 0.18182497, 0.18340451],
        [0.30424224, 0.52475643, 0.43194502],
        [0.29122914, 0.61185289, 0.13949386],
        [0.29214465, 0.36636184, 0.45606998],
        [0.78517596, 0.19967378, 0.51423444],
    ])
    return z0


@pytest.fixture(scope="module")
def r0_3d():
    """A proper 3D rotation (about a tilted axis)."""
    r_z = np.eye(3)
    r_z[0:2, 0:2] = rotation_matrix(np.pi / 5)
    r_x = np.eye(3)
    r_x[1:3, 1:3] = rotation_matrix(-np.pi / 3)
    return r_x @ r_z
