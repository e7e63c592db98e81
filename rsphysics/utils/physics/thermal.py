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

''' Thermal Utilities
'''
import logging
import numpy as np

from rsphysics.constants import H_PLANCK, C_SPEED, K_BOLTZMANN, SIGMA, EPSILON
from rsphysics.utils.contracts import requires, ensures, positive

LOG = logging.getLogger(__name__)

__all__ = ['planck', 'inverse_planck', 'avg_spectral_radiance',
           'earth_surface_temp', 'thermal_inertia', 'thermal_wave_speed',
           'thermal_diffusivity', 'upward_heat_flux_weight', 'upward_heat_flux']


@requires(lambda wave: np.all(np.asarray(wave) > 0), "Wavelength/wavenumber must be greater than zero")
@requires(lambda temperature: np.all(np.asarray(temperature) > EPSILON), "Temperature must be greater than zero")
def planck(wave, temperature, wavelength=True):
    """Derive the Planck radiation as a function of wavelength or wavenumber.

    SI units.
    planck(wave, temperature, wavelength=True)
    wave = Wavelength/wavenumber or a sequence of wavelengths/wavenumbers (m or m^-1)
    temp = Temperature (scalar) or a sequence of temperatures (K)


    Output: Wavelength space: The spectral radiance per meter (not micron!)
            Unit = W/m^2 sr^-1 m^-1

            Wavenumber space: The spectral radiance in Watts per square meter
            per steradian per m-1:
            Unit = W/m^2 sr^-1 (m^-1)^-1 = W/m sr^-1

    A scalar wave and a scalar temperature give a float; otherwise the result
    has shape (temperatures, waves) with length-1 axes dropped.
    """
    temperature = np.atleast_1d(np.asarray(temperature, dtype='float64'))
    wln = np.atleast_1d(np.asarray(wave, dtype='float64'))

    if wavelength:
        nom = 2 * H_PLANCK * C_SPEED ** 2 / wln ** 5
        arg1 = H_PLANCK * C_SPEED / (K_BOLTZMANN * wln)
    else:
        nom = 2 * H_PLANCK * (C_SPEED ** 2) * (wln ** 3)
        arg1 = H_PLANCK * C_SPEED * wln / K_BOLTZMANN

    exp_arg = np.multiply.outer(1. / temperature, arg1)
    LOG.debug("Max and min before exp: %s  %s", exp_arg.max(), exp_arg.min())
    if exp_arg.min() < 0:
        LOG.warning("Denominator might be zero or negative in radiance derivation: "
                    "%d items", int(np.sum(exp_arg < 0)))

    with np.errstate(over='ignore'):
        rad = nom / np.expm1(exp_arg)
    rad = np.squeeze(rad)
    if rad.ndim == 0:
        return float(rad)
    return rad


@requires(lambda wave, radiance: np.all(np.asarray(wave) > 0) and np.all(np.asarray(radiance) > 0),
          "Wavelength and radiance must be greater than zero")
def inverse_planck(wave, radiance):
    ''' inverse of planck function.
    Get brightness temperature (K) from spectral radiance (W m^-2 sr^-1 m^-1)
    at wavelength `wave` (m).
    '''
    wave = np.asarray(wave, dtype='float64')
    radiance = np.asarray(radiance, dtype='float64')
    C1 = 2 * H_PLANCK * C_SPEED * C_SPEED
    C2 = H_PLANCK * C_SPEED / K_BOLTZMANN
    ret = C2 / wave / np.log1p(C1 / np.power(wave, 5) / radiance)
    if np.ndim(ret) == 0:
        return float(ret)
    return ret


@requires(lambda K1, K2: positive(K1, K2))
@requires(lambda temp: temp > 0)
@ensures(lambda ret: ret > 0)
def avg_spectral_radiance(K1, K2, temp):
    ''' band averaged spectral radiance from the sensor calibration constants
    K1, K2 and the surface temperature
    '''
    return K1 / (np.exp(K2 / temp) - 1.0)


@requires(lambda K1, K2: positive(K1, K2))
@requires(lambda avg_radiance: avg_radiance > 0)
@ensures(lambda ret: ret > 0)
def earth_surface_temp(K1, K2, avg_radiance):
    ''' inverse of :func:`avg_spectral_radiance`
    '''
    return K2 / np.log(K1 / avg_radiance + 1.0)


@requires(lambda heat_capacity, density, thermal_conductivity:
          positive(heat_capacity, density, thermal_conductivity))
@ensures(lambda ret: ret > 0)
def thermal_inertia(heat_capacity, density, thermal_conductivity):
    return np.sqrt(heat_capacity * density * thermal_conductivity)


@requires(lambda heat_capacity, density, thermal_conductivity, angular_frequency:
          positive(heat_capacity, density, thermal_conductivity, angular_frequency))
@ensures(lambda ret: ret > 0)
def thermal_wave_speed(heat_capacity, density, thermal_conductivity, angular_frequency):
    return np.sqrt(2.0 * thermal_conductivity * angular_frequency / (heat_capacity * density))


@requires(lambda heat_capacity, density, thermal_conductivity:
          positive(heat_capacity, density, thermal_conductivity))
@ensures(lambda ret: ret > 0)
def thermal_diffusivity(heat_capacity, density, thermal_conductivity):
    return thermal_conductivity / (heat_capacity * density)


@requires(lambda mean_temp, emissivity: positive(mean_temp, emissivity))
@ensures(lambda ret: ret > 0)
def upward_heat_flux_weight(mean_temp, emissivity):
    r''' weight :math:`\alpha` of the linearised upward heat flux
    :math:`\alpha (T - \bar{T})`
    '''
    return 4.0 * emissivity * SIGMA * mean_temp ** 3


@requires(lambda temp, mean_temp, emissivity: positive(temp, mean_temp, emissivity))
def upward_heat_flux(temp, mean_temp, emissivity):
    ''' linearised upward heat flux, negative when `temp` is below the mean
    '''
    return upward_heat_flux_weight(mean_temp, emissivity) * (temp - mean_temp)
