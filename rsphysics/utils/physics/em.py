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

"""Electromagnetic radiation utilities."""

import math
import logging
import numpy as np

from rsphysics.config import INTEGRATION_STEP
from rsphysics.constants import C_SPEED, H_PLANCK, K_BOLTZMANN, SIGMA, Z0, TWO_PI
from rsphysics.utils.contracts import requires, ensures, positive
from rsphysics.utils.math.integrate import integrate_hemisphere

LOG = logging.getLogger(__name__)

__all__ = ['angular_frequency', 'em_wavelength', 'em_frequency', 'wave_number',
           'photon_energy', 'flux_density', 'doppler_ratio', 'irradiance',
           'spectral_radiance_f', 'spectral_radiance_lambda', 'bb_radiation']


@requires(lambda f: f > 0, "Frequency must be greater than zero Hz!")
def angular_frequency(f):
    return TWO_PI * f


@requires(lambda f: f > 0, "Frequency must be greater than zero Hz!")
def em_wavelength(f):
    return C_SPEED / f


@requires(lambda wavelength: wavelength > 0, "Wavelength must be greater than zero!")
def em_frequency(wavelength):
    return C_SPEED / wavelength


@requires(lambda wavelength: wavelength > 0, "Wavelength must be greater than zero!")
def wave_number(wavelength):
    ''' angular wave number (rad/m)
    '''
    return TWO_PI / wavelength


@requires(lambda f: f > 0, "Frequency must be greater than zero!")
def photon_energy(f):
    return H_PLANCK * f


@ensures(lambda ret: ret >= 0)
def flux_density(amplitude):
    ''' power flux density of a plane wave with electric field `amplitude`.

    Negative amplitudes are fine, the amplitude is squared.
    '''
    return amplitude ** 2 / (2 * Z0)


@requires(lambda velocity: 0 <= velocity < C_SPEED, "Velocity must be in [0, c) (m/s)")
@requires(lambda angle: 0 < angle < TWO_PI, "Angle (in radians) must be between 0 and 2PI")
@ensures(lambda ret: ret > 0)
def doppler_ratio(velocity, angle):
    ''' relativistic Doppler frequency ratio f'/f for a source moving at
    `velocity` with `angle` between velocity and line of sight.
    '''
    beta = velocity / C_SPEED
    return math.sqrt(1 - beta ** 2) / (1 - beta * math.cos(angle))


def _projected(radiance):
    def weighted(theta, phi):
        return radiance(theta, phi) * np.cos(theta) * np.sin(theta)
    return weighted


def irradiance(radiance, step=INTEGRATION_STEP, vectorized=False):
    r''' irradiance from a radiance distribution.

    .. math::
        E = \int\int L(\theta, \phi) \cos\theta \sin\theta \, d\theta \, d\phi

    With incoming radiance the result is the irradiance, with outgoing
    radiance the radiant exitance.

    Args:
        radiance: L(zenith, azimuth) in W m^-2 sr^-1
        step: quadrature step in radians
        vectorized: see :func:`integrate_hemisphere`
    '''
    return integrate_hemisphere(_projected(radiance), step, vectorized)


@requires(lambda temp: temp > 0, "Cannot have zero or negative temperature (K)")
@requires(lambda f: f > 0, "Cannot have zero or negative frequency (Hz)")
@ensures(lambda ret: ret > 0)
def spectral_radiance_f(temp, f):
    ''' Rayleigh-Jeans spectral radiance per unit frequency
    '''
    return 2 * K_BOLTZMANN * temp * f ** 2 / C_SPEED ** 2


@requires(lambda temp, wavelength: positive(temp, wavelength),
          "Cannot have zero or negative temperature (K) or wavelength (m)")
@ensures(lambda ret: ret > 0)
def spectral_radiance_lambda(temp, wavelength):
    ''' Rayleigh-Jeans spectral radiance per unit wavelength
    '''
    return 2 * K_BOLTZMANN * temp * C_SPEED / wavelength ** 4


@requires(lambda temp: temp > 0, "Cannot have negative or absolute zero temperature!")
@ensures(lambda ret: ret > 0)
def bb_radiation(temp):
    ''' total exitance of a blackbody (Stefan-Boltzmann)
    '''
    return SIGMA * temp ** 4
