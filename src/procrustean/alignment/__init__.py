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
"""Module of alignment functions."""

from procrustean.alignment.center import center_points
from procrustean.alignment.cross_covariance import cross_covariance
from procrustean.alignment.procrustes import ProcrustesResult
from procrustean.alignment.procrustes import procrustes
from procrustean.alignment.procrustes import procrustes_rotation_2d
from procrustean.alignment.procrustes import procrustes_scaled_rotation
from procrustean.alignment.procrustes import procrustes_transform
from procrustean.alignment.rotation import solve_rotation
from procrustean.alignment.scale import estimate_scale
from procrustean.alignment.translation import recover_translation

__all__ = [
    "center_points",
    "cross_covariance",
    "estimate_scale",
    "ProcrustesResult",
    "procrustes",
    "procrustes_rotation_2d",
    "procrustes_scaled_rotation",
    "procrustes_transform",
    "recover_translation",
    "solve_rotation",
]
