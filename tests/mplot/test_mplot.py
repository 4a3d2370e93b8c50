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
"""Module for testing Matplotlib tools."""

import matplotlib
matplotlib.use('Agg')  # noqa
import matplotlib.pyplot as plt
import numpy as np
import pytest

import procrustean
import procrustean.mplot


@pytest.mark.parametrize("has_ax", [False, True])
def test_alignment_2d(z0, has_ax):
    """Basic test of `alignment_2d` plotter."""
    z1 = procrustean.utils.transform_points(
        z0, r=procrustean.utils.rotation_matrix(.5)
    )
    scale, r, t = procrustean.procrustes(z0, z1)

    fig = plt.figure(figsize=(6.5, 4), dpi=100)
    gs = fig.add_gridspec(1, 1)
    ax = fig.add_subplot(gs[0, 0])
    if has_ax:
        ax_out = procrustean.mplot.alignment_2d(
            z0, z1, scale, r, t, ax=ax, source_kws={'color': 'r'}
        )
    else:
        ax_out = procrustean.mplot.alignment_2d(z0, z1, scale, r, t)

    assert ax_out is ax
    assert len(ax.collections) == 3
    segments = ax.collections[0].get_segments()
    assert len(segments) == z0.shape[0]
    np.testing.assert_array_almost_equal(segments[0][0], z1[0])
    plt.close(fig)


def test_alignment_2d_wrong_dimension(z0_3d):
    """Test that 3D points are rejected."""
    with pytest.raises(ValueError):
        procrustean.mplot.alignment_2d(z0_3d, z0_3d)
