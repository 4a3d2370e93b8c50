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
"""Example that aligns a noisy, transformed copy of a planar shape.

A ground truth shape is rotated, reflected, scaled, translated and
perturbed with noise. The shape is then aligned back using all four
combinations of `include_scaling` and `include_reflections`,
demonstrating how each setting changes the quality of the fit.

Results are saved in the directory specified by `fp_project`. By
default, a `procrustean_examples` directory is created in your home
directory.

"""

import logging
from pathlib import Path
import time

import matplotlib.pyplot as plt
import numpy as np

import procrustean
import procrustean.mplot


def main():
    """Run script."""
    logging.basicConfig(level=logging.INFO)
    # Settings.
    fp_project = Path.home() / Path('procrustean_examples', 'align_2d')
    fp_figure = fp_project / Path('alignment.pdf')
    fp_project.mkdir(parents=True, exist_ok=True)
    rng = np.random.default_rng(252)

    # Ground truth: a star-like shape.
    n_point = 20
    theta = np.linspace(0, 2 * np.pi, n_point, endpoint=False)
    radius = 1 + .5 * np.cos(5 * theta) + .2 * np.sin(2 * theta)
    x = np.stack([radius * np.cos(theta), radius * np.sin(theta)], axis=1)

    r_true = procrustean.utils.rotation_matrix(2.) @ np.diag([1., -1.])
    y = procrustean.utils.transform_points(
        x, scale=1.7, r=r_true, t=np.array([3., -1.])
    )
    y = y + rng.normal(scale=.05, size=y.shape)

    fig = plt.figure(figsize=(6.5, 6.5), dpi=200)
    gs = fig.add_gridspec(2, 2)
    settings = [(False, False), (False, True), (True, False), (True, True)]
    for idx, (include_scaling, include_reflections) in enumerate(settings):
        scale, r, t = procrustean.procrustes(
            x, y, include_scaling=include_scaling,
            include_reflections=include_reflections
        )
        fit = procrustean.utils.disparity(x, y, scale, r, t)
        logging.info(
            'scaling=%s reflections=%s | scale=%.3f det=%+.0f '
            'disparity=%.4f', include_scaling, include_reflections, scale,
            np.linalg.det(r), fit
        )

        ax = fig.add_subplot(gs[idx // 2, idx % 2])
        procrustean.mplot.alignment_2d(x, y, scale, r, t, ax=ax)
        ax.set_title(
            'scaling={0} reflections={1}\ndisparity={2:.3f}'.format(
                include_scaling, include_reflections, fit
            ),
            fontsize=8
        )
        ax.set_xticks([])
        ax.set_yticks([])

    gs.tight_layout(fig)
    plt.savefig(fp_figure, format='pdf', bbox_inches='tight', dpi=300)


if __name__ == "__main__":
    start_time_s = time.time()
    main()
    total_time_s = time.time() - start_time_s
    print('Total script time: {0:.0f} s'.format(total_time_s))
