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
Sky radiance.
=============

Hosek-Wilkie analytic sky model (SIGGRAPH 2012). The fitted coefficient
datasets are BSD-3 licensed and not shipped here; callers pass the nine
coefficient triples (A..I) they obtained from
https://cgg.mff.cuni.cz/projects/SkylightModelling/ for a given turbidity and
ground albedo.
"""

import math
import logging
import numpy as np

from rsphysics.exceptions import DegenerateInput, PreconditionViolation
from rsphysics.utils.contracts import requires

LOG = logging.getLogger(__name__)

HW_PARAM_SHAPE = (9, 3)


def hosek_wilkie_anisotropic(g, alpha):
    r''' anisotropic term :math:`\chi(g, \alpha)` of the Hosek-Wilkie model
    '''
    alph_cos = math.cos(alpha)
    denom = 1.0 + g ** 2 - 2.0 * g * alph_cos
    if denom == 0:
        raise DegenerateInput(f"anisotropic term is singular for g={g} at alpha={alpha}")
    return (1.0 + alph_cos ** 2) / denom ** 1.5


def hosek_wilkie_coefficients(params):
    ''' collapse a 9 x 3 parameter matrix into the coefficients A..I
    '''
    params = np.asarray(params, dtype=np.float64)
    if params.shape != HW_PARAM_SHAPE:
        raise PreconditionViolation(
            f"Hosek-Wilkie parameters must have shape {HW_PARAM_SHAPE}, got {params.shape}")
    return np.prod(params, axis=1)


@requires(lambda zenith: 0 <= zenith < math.pi / 2, "Zenith must be within [0, PI/2)")
def hosek_wilkie_luminance(zenith, azimuth, params):
    """Sky radiance in direction (`zenith`, `azimuth`).

    Args:
        zenith: angle between the view direction and the zenith (radians)
        azimuth: angle between the view direction and the sun (radians)
        params: 9 x 3 coefficient matrix, rows A..I

    Returns:
        relative radiance
    """
    A, B, C, D, E, F, G, H, I = hosek_wilkie_coefficients(params)
    chi = hosek_wilkie_anisotropic(H, azimuth)
    zenith_cos = math.cos(zenith)
    try:
        zenith_term = 1.0 + A * math.exp(B / (zenith_cos + 0.01))
        azimuth_term = D * math.exp(E * azimuth)
    except OverflowError as err:
        raise DegenerateInput(f"Hosek-Wilkie exponential overflows at zenith {zenith}, azimuth {azimuth}") from err
    return zenith_term * (C + azimuth_term + F * math.cos(azimuth) ** 2
                          + G * chi + I * math.sqrt(zenith_cos))
