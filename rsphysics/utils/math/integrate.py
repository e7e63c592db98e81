# -*- coding:utf-8 -*-
# Copyright (c) 2021-2022.

################################################################
# The contents of this file are subject to the GPLv3 License
# you may not use this file except in
# compliance with the License. You may obtain a copy of the License at
# https://www.gnu.org/licenses/gpl-3.0.en.html

# Software distributed under the License is distributed on an "AS IS"
# basis, WITHOUT WARRANTY OF ANY KIND, either express or implied. See the
# License for the specific language governing rights and limitations
# under the License.

# The Original Code is part of the RSPhysics python package.

# Initial Dev of the Original Code is Jinshun Zhu, PhD Student,
# Institute of Remote Sensing and Geographic Information System,
# Peking Universiy Copyright (C) 2022
# All Rights Reserved.

# Contributor(s): Jinshun Zhu (created, refactored and updated original code).
###############################################################

"""
Hemispherical integration.
==========================

Fixed-step quadrature of an angular function ``f(zenith, azimuth)`` over the
hemisphere ``zenith in [0, pi/2)``, ``azimuth in [0, 2*pi)``.

The hemisphere is raster scanned with the same increment ``step`` on both
axes and every cell contributes ``f * step**2`` evaluated at its lower-left
corner (left Riemann sum). For ``f == c`` the sum tends to ``c * pi**2``
with an ``O(step)`` boundary error.
"""
import logging
import numpy as np

from rsphysics.config import INTEGRATION_STEP, COARSE_INTEGRATION_STEP
from rsphysics.constants import HALF_PI, TWO_PI
from rsphysics.utils.contracts import requires, ensures

__all__ = ['hemisphere_grid', 'integrate_hemisphere', 'integrate_hemisphere_weighted']

LOG = logging.getLogger(__name__)


def _valid_step(step):
    return np.isscalar(step) and np.isfinite(step) and step > 0


def hemisphere_grid(step=INTEGRATION_STEP):
    ''' zenith and azimuth nodes of the integration raster.

    Args:
        step: angular increment in radians

    Returns:
        (zenith, azimuth) 1-D arrays starting at 0
    '''
    if not _valid_step(step):
        raise ValueError(f'step must be a positive finite number, got {step}')
    return np.arange(0.0, HALF_PI, step), np.arange(0.0, TWO_PI, step)


def _accumulate(funcs, step, vectorized):
    if step > COARSE_INTEGRATION_STEP:
        LOG.warning("Coarse integration step %s, results carry an O(step) error", step)
    zenith, azimuth = hemisphere_grid(step)
    LOG.debug("Integrating over %d x %d cells", zenith.size, azimuth.size)
    s2 = step * step
    if vectorized:
        shape = (zenith.size, azimuth.size)
        zz, aa = np.meshgrid(zenith, azimuth, indexing='ij', sparse=True)
        values = np.ones(shape)
        for func in funcs:
            values = values * np.broadcast_to(np.asarray(func(zz, aa), dtype=np.float64), shape)
        return float(np.sum(values * s2))
    total = 0.0
    for theta in zenith.tolist():
        for phi in azimuth.tolist():
            value = 1.0
            for func in funcs:
                value *= func(theta, phi)
            total += s2 * value
    return float(total)


@requires(lambda f: callable(f), "Angular function must be callable")
@requires(_valid_step, "Cannot have zero or negative step for numerical integration")
@ensures(np.isfinite, "Integral is not finite")
def integrate_hemisphere(f, step=INTEGRATION_STEP, vectorized=False):
    """Integrate ``f(zenith, azimuth)`` over the hemisphere.

    Args:
        f: angular function, radians in, float out
        step: quadrature step in radians
        vectorized: evaluate ``f`` once on a sparse numpy meshgrid instead
            of cell by cell; the result is broadcast to the grid, so
            constant functions are accepted

    Returns:
        sum of ``f * step**2`` over the raster
    """
    return _accumulate((f, ), step, vectorized)


@requires(lambda f, g: callable(f) and callable(g), "Angular functions must be callable")
@requires(_valid_step, "Cannot have zero or negative step for numerical integration")
@ensures(np.isfinite, "Integral is not finite")
def integrate_hemisphere_weighted(f, g, step=INTEGRATION_STEP, vectorized=False):
    """Integrate the product ``f * g`` over the hemisphere.

    Used for pattern-weighted quantities such as antenna temperature.
    """
    return _accumulate((f, g), step, vectorized)
