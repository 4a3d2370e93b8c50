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
"""Procrustean: Procrustes superimposition of corresponding points."""

from procrustean import alignment
from procrustean import linalg
from procrustean import transforms
from procrustean import utils
from procrustean.alignment import ProcrustesResult
from procrustean.alignment import procrustes
from procrustean.alignment import procrustes_rotation_2d
from procrustean.alignment import procrustes_scaled_rotation
from procrustean.alignment import procrustes_transform
from procrustean.transforms import Rotation2D
from procrustean.transforms import Transform

__version__ = '0.1.0'

__all__ = [
    "alignment",
    "linalg",
    "transforms",
    "utils",
    "ProcrustesResult",
    "procrustes",
    "procrustes_rotation_2d",
    "procrustes_scaled_rotation",
    "procrustes_transform",
    "Rotation2D",
    "Transform",
]
