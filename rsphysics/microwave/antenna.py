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
Passive Microwave Antennas.
===========================

Antenna quantities derived from a normalised power pattern ``P(zenith, azimuth)``
by hemispherical integration, and the usual passive-microwave radiometer
relations.

    beam solid angle      Omega = int P dOmega
    antenna temperature   Ta = (1 / Omega) int Tb P dOmega
    effective area        Ae = wavelength**2 / Omega
    forward gain          G = efficiency * 4 pi / Omega

"""

import enum
import math
import logging

from rsphysics.config import INTEGRATION_STEP, SENSITIVITY_DEFAULTS
from rsphysics.constants import K_BOLTZMANN, FOUR_PI
from rsphysics.exceptions import DegenerateInput, PreconditionViolation
from rsphysics.utils.contracts import requires, ensures, positive
from rsphysics.utils.math.integrate import integrate_hemisphere, integrate_hemisphere_weighted

LOG = logging.getLogger(__name__)


class AntennaType(enum.Enum):
    MONOPOLE = 'monopole'
    SHORT_DIPOLE = 'short_dipole'
    HALF_WAVE_DIPOLE = 'half_wave_dipole'
    YAGI_UDA_SIX = 'yagi_uda_six'  # six horizontal rods
    RECTANGULAR = 'rectangular'
    PARABOLOID = 'paraboloid'  # circular paraboloid


def _nonzero_beam(bsa):
    if bsa == 0:
        raise DegenerateInput("beam solid angle is zero, power pattern is degenerate")
    return bsa


def beam_solid_angle(pattern, step=INTEGRATION_STEP, vectorized=False):
    ''' beam solid angle (sr) of a power pattern
    '''
    bsa = integrate_hemisphere(pattern, step, vectorized)
    LOG.debug("Beam solid angle: %s", bsa)
    return bsa


@requires(lambda bsa: 0 <= bsa <= FOUR_PI, "Beam solid angle must be within [0, 4PI]")
@ensures(lambda ret: ret >= 1)
def directivity(bsa):
    ''' directivity from the beam solid angle
    '''
    return FOUR_PI / _nonzero_beam(bsa)


def antenna_temperature(brightness, pattern, step=INTEGRATION_STEP, vectorized=False):
    """Antenna temperature seen through `pattern`.

    Args:
        brightness: brightness temperature Tb(zenith, azimuth) in K
        pattern: normalised power pattern P(zenith, azimuth)
        step: quadrature step in radians
        vectorized: see :func:`integrate_hemisphere`

    Raises:
        DegenerateInput: the pattern integrates to zero
    """
    bsa = _nonzero_beam(beam_solid_angle(pattern, step, vectorized))
    return integrate_hemisphere_weighted(brightness, pattern, step, vectorized) / bsa


@requires(lambda wavelength: wavelength > 0, "Wavelength must be greater than zero")
def effective_area(wavelength, pattern, step=INTEGRATION_STEP, vectorized=False):
    ''' effective area (m^2) of an antenna
    '''
    bsa = _nonzero_beam(beam_solid_angle(pattern, step, vectorized))
    return wavelength ** 2 / bsa


@requires(lambda efficiency: 0 < efficiency <= 1, "Efficiency must be within (0, 1]")
def forward_gain(efficiency, pattern, step=INTEGRATION_STEP, vectorized=False):
    ''' forward gain from the radiation efficiency and power pattern
    '''
    bsa = _nonzero_beam(beam_solid_angle(pattern, step, vectorized))
    return efficiency * FOUR_PI / bsa


@requires(lambda antenna_temp, band_size: positive(antenna_temp, band_size))
@ensures(lambda ret: ret > 0)
def jnoise_power(antenna_temp, band_size):
    ''' Johnson-Nyquist noise power (W) of an antenna
    '''
    return K_BOLTZMANN * antenna_temp * band_size


def hpbw(wavelength, size, atype):
    """Half power beam width in degrees.

    `size` is the side length of a rectangular aperture or the diameter of a
    paraboloid; it is ignored for the other antenna types.
    """
    atype = AntennaType(atype)
    if atype == AntennaType.MONOPOLE:
        return 0.0  # isotropic
    if atype in (AntennaType.SHORT_DIPOLE, AntennaType.HALF_WAVE_DIPOLE):
        return 90.0
    if atype == AntennaType.YAGI_UDA_SIX:
        return 42.0
    if not positive(wavelength, size):
        raise PreconditionViolation(f"wavelength and size must be positive, got {wavelength}, {size}")
    if atype == AntennaType.RECTANGULAR:
        return 51.0 * (wavelength / size)
    return 72.0 * (wavelength / size)


@requires(lambda tb, wavelength: positive(tb, wavelength))
@ensures(lambda ret: ret > 0)
def spectral_radiance(tb, wavelength):
    ''' Rayleigh-Jeans spectral radiance from brightness temperature
    '''
    return 2.0 * K_BOLTZMANN * tb / wavelength ** 2


@requires(lambda tb, wavelength, small_angle: positive(tb, wavelength, small_angle))
@ensures(lambda ret: ret > 0)
def spectral_flux_density(tb, wavelength, small_angle):
    ''' spectral flux density of a source subtending `small_angle` (sr)
    '''
    return 2.0 * K_BOLTZMANN * tb * small_angle / wavelength ** 2


@requires(lambda sys_temp: sys_temp > 0, "System temperature must be greater than zero")
def sensitivity(sys_temp, c=None, del_t=None, del_f=None):
    ''' radiometer sensitivity (Delta T)

    Args:
        sys_temp: system temperature (K)
        c: radiometer constant
        del_t: integration time (s)
        del_f: bandwidth (Hz)

    Missing values fall back to ``microwave.sensitivity`` in the configuration.
    '''
    c = SENSITIVITY_DEFAULTS['c'] if c is None else c
    del_t = SENSITIVITY_DEFAULTS['del_t'] if del_t is None else del_t
    del_f = SENSITIVITY_DEFAULTS['del_f'] if del_f is None else del_f
    if not positive(c, del_t, del_f):
        raise PreconditionViolation(f"c, del_t, del_f must be positive, got {c}, {del_t}, {del_f}")
    return c * sys_temp / math.sqrt(del_t * del_f)


def _normalized_difference(a, b):
    if a + b == 0:
        raise DegenerateInput(f"temperatures {a} and {b} sum to zero")
    return (a - b) / (a + b)


def xpgr(t_19h, t_37v):
    ''' cross-polarization gradient ratio
    '''
    return _normalized_difference(t_19h, t_37v)


def polarization_ratio(t_19h, t_19v):
    return _normalized_difference(t_19v, t_19h)


def gradient_ratio(t_19v, t_37v):
    return _normalized_difference(t_37v, t_19v)


@requires(lambda tau: tau >= 0, "Optical depth cannot be negative")
def upwelling_component(tau, temperature):
    ''' upwelling brightness temperature of an atmosphere with optical depth
    `tau`; `temperature` maps the emissivity 1 - exp(-tau) to a temperature.
    '''
    return temperature(1.0 - math.exp(-tau))
