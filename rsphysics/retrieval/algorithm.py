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
Split-window surface temperature.
=================================

Two brightness temperatures of the same surface, seen through the same
atmosphere at nadir (``Tb1``) and at zenith angle ``theta`` (``Tb2``), give both
the surface temperature ``T`` and the atmospheric optical depth ``tau``:

    Tb1 = T exp(-tau)          + Ta (1 - exp(-tau))
    Tb2 = T exp(-tau sec(theta)) + Ta (1 - exp(-tau sec(theta)))

Subtracting ``Ta`` and dividing the equations gives

    tau = ln((Tb1 - Ta) / (Tb2 - Ta)) / (sec(theta) - 1)
    T   = (Tb1 - Ta (1 - exp(-tau))) / exp(-tau)

The linear split-window model ``T = a0 + a1 Tb1 + a2 Tb2`` is also provided.
Its coefficients are always passed in explicitly.
"""

import math
import logging
import numpy as np

from rsphysics.constants import TWO_PI
from rsphysics.exceptions import DegenerateInput
from rsphysics.retrieval.coefficient import SplitWindowCoefficients, sw_coefficient
from rsphysics.utils.contracts import requires, ensures, positive

LOG = logging.getLogger(__name__)


@requires(lambda theta: 0 < theta < TWO_PI, "Angle must be greater than zero and less than 2PI")
@requires(lambda temp_b1, temp_b2, temp_a: positive(temp_a, temp_b1, temp_b2),
          "All temperatures must be greater than 0")
@requires(lambda temp_b1, temp_b2, temp_a: (temp_b2 > temp_a) == (temp_b1 > temp_a),
          "Both brightness temperatures must lie on the same side of the atmospheric temperature")
@ensures(lambda ret: ret[0] > 0, "Surface temperature must be greater than 0")
def surface_temp_tau(temp_b1, temp_b2, temp_a, theta):
    """Surface temperature and optical depth of a two-view system.

    Args:
        temp_b1: brightness temperature at nadir (K)
        temp_b2: brightness temperature at zenith angle `theta` (K)
        temp_a: atmospheric temperature (K)
        theta: zenith angle of the second view (radians)

    Returns:
        (surface temperature, tau)

    Raises:
        DegenerateInput: a brightness temperature equals `temp_a`,
            sec(theta) == 1, or the optical depth comes out negative or so
            large that the transmittance underflows
    """
    if temp_b1 == temp_a or temp_b2 == temp_a:
        raise DegenerateInput(
            f"brightness temperature equals atmospheric temperature {temp_a}, tau is undefined")
    sec_excess = 1.0 / math.cos(theta) - 1.0
    if sec_excess == 0:
        raise DegenerateInput(f"sec({theta}) == 1, both views share the same path")
    tau = math.log((temp_b1 - temp_a) / (temp_b2 - temp_a)) / sec_excess
    if tau < 0:
        raise DegenerateInput(
            f"negative optical depth {tau}, the slant view departs further from {temp_a} than nadir")
    # used twice
    minus_tau_exp = math.exp(-tau)
    if minus_tau_exp == 0:
        raise DegenerateInput(f"optical depth {tau} too large, transmittance underflows")
    surface = (temp_b1 - temp_a * (1.0 - minus_tau_exp)) / minus_tau_exp
    if not math.isfinite(surface):
        raise DegenerateInput(f"optical depth {tau} too large, surface temperature overflows")
    LOG.debug("tau %s, surface temperature %s", tau, surface)
    return surface, tau


def surface_temp(temp_b1, temp_b2, temp_a, theta):
    ''' surface temperature of a two-view system, see :func:`surface_temp_tau`
    '''
    surface, _ = surface_temp_tau(temp_b1, temp_b2, temp_a, theta)
    return surface


@requires(lambda coeffs: isinstance(coeffs, SplitWindowCoefficients),
          "coeffs must be SplitWindowCoefficients")
def split_window_temperature(temp_b1, temp_b2, coeffs):
    ''' linear split-window surface temperature a0 + a1 * Tb1 + a2 * Tb2.
    Accepts scalars or numpy arrays.
    '''
    ret = coeffs.a0 + coeffs.a1 * np.asarray(temp_b1) + coeffs.a2 * np.asarray(temp_b2)
    if np.ndim(ret) == 0:
        return float(ret)
    return ret


class SplitWindow(object):
    """ Linear split-window retrieval with explicit coefficients.

    >>> sw = SplitWindow.fit(t0, tb1, tb2)
    >>> sw.compute(tb1, tb2)
    """

    def __init__(self, coeffs=None):
        if coeffs is None:
            coeffs = SplitWindowCoefficients.from_config()
        self.coeffs = SplitWindowCoefficients(*coeffs)
        self.RMSE = None
        self.R2 = None

    def __repr__(self):
        return f"SplitWindow({self.coeffs})"

    @classmethod
    def fit(cls, t0, temp_b1, temp_b2):
        ''' train coefficients by least squares, see :func:`sw_coefficient`
        '''
        model = sw_coefficient(t0, temp_b1, temp_b2)
        sw = cls(model['coeffs'])
        sw.RMSE = model['RMSE']
        sw.R2 = model['R2']
        return sw

    def compute(self, temp_b1, temp_b2):
        return split_window_temperature(temp_b1, temp_b2, self.coeffs)
