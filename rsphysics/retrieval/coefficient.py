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
Split-window coefficients.
==========================

Least-squares training of the linear split-window model

    T0 = a0 + a1 * Tb1 + a2 * Tb2

from simulated or matched (surface temperature, brightness temperature) samples.
"""

import logging
import numpy as np
from collections import namedtuple
from sklearn.linear_model import LinearRegression
from sklearn.metrics import mean_squared_error, r2_score

from rsphysics.config import SPLIT_WINDOW_COEFFS
from rsphysics.exceptions import PreconditionViolation

LOG = logging.getLogger(__name__)


class SplitWindowCoefficients(namedtuple('SplitWindowCoefficients', ['a0', 'a1', 'a2'])):
    ''' immutable split-window coefficients
    '''
    __slots__ = ()

    @classmethod
    def from_config(cls):
        ''' coefficients from the ``split_window`` configuration section
        '''
        return cls(**SPLIT_WINDOW_COEFFS)


def _as_samples(name, values):
    arr = np.asarray(values, dtype=np.float64).ravel()
    if not np.all(np.isfinite(arr)):
        raise PreconditionViolation(f"{name} holds non finite values")
    return arr


def sw_coefficient(t0, tb1, tb2, label=None):
    """ calculate split-window coefficients

    Args:
        t0: surface temperatures (K)
        tb1: brightness temperatures of the first channel (K)
        tb2: brightness temperatures of the second channel (K)
        label: free text kept in the result

    Returns:
        dict with ``coeffs`` (SplitWindowCoefficients), ``RMSE``, ``R2``,
        ``count`` and ``label``
    """
    t0 = _as_samples('t0', t0)
    tb1 = _as_samples('tb1', tb1)
    tb2 = _as_samples('tb2', tb2)
    if not len(t0) == len(tb1) == len(tb2):
        raise PreconditionViolation(
            f"sample lengths differ: {len(t0)}, {len(tb1)}, {len(tb2)}")
    if len(t0) < 3:
        raise PreconditionViolation("at least 3 samples are needed to fit 3 coefficients")
    X = np.column_stack((tb1, tb2))
    reg = LinearRegression().fit(X, t0)
    predicted = reg.predict(X)
    coeffs = SplitWindowCoefficients(float(reg.intercept_), float(reg.coef_[0]), float(reg.coef_[1]))
    rmse = float(np.sqrt(mean_squared_error(t0, predicted)))
    r2 = float(r2_score(t0, predicted))
    LOG.debug("split-window fit %s: RMSE %.3f, R2 %.3f", coeffs, rmse, r2)
    return {
        'label': label,
        'coeffs': coeffs,
        'RMSE': rmse,
        'R2': r2,
        'count': len(t0),
    }
