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
"""Module of utilities."""

from procrustean.utils.check_point_sets import check_point_sets
from procrustean.utils.disparity import disparity
from procrustean.utils.rotation_matrix import rotation_angle
from procrustean.utils.rotation_matrix import rotation_matrix
from procrustean.utils.transform_points import transform_points

__all__ = [
    "check_point_sets",
    "disparity",
    "rotation_angle",
    "rotation_matrix",
    "transform_points",
]
