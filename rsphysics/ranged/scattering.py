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
Ranged and scattering systems.
==============================

Bistatic radar power chain

    flux  = Gt Pt / (4 pi dt^2)                 incident flux density
    E     = flux cos(theta_in)                  irradiance at the surface
    L     = gamma E / (4 pi cos(theta_out))     scattered radiance
    Pr    = L A_collect A_eff / dr^2 cos(theta_out)

with the bistatic scattering coefficient gamma = 4 pi R cos(theta) derived
from a BRDF estimate R = L / E. Ranging relations follow.
"""

import math
import logging
import numpy as np

from rsphysics.config import AIRBORNE_RANGING
from rsphysics.constants import FOUR_PI, HALF_PI
from rsphysics.exceptions import DegenerateInput, PreconditionViolation
from rsphysics.utils.contracts import requires, ensures, positive

LOG = logging.getLogger(__name__)


def _grazing(angle):
    return 0 <= angle < HALF_PI


@requires(lambda gain, power, distance: positive(gain, power, distance),
          "Gain, transmitted power and distance must be greater than zero")
@ensures(lambda ret: ret > 0)
def incident_flux_density(gain, power, distance):
    ''' flux density (W/m^2) at `distance` from a transmitter
    '''
    return gain * power / (FOUR_PI * distance ** 2)


@requires(lambda flux: flux > 0, "Flux density must be greater than zero")
@requires(lambda theta_in: _grazing(theta_in), "Incidence angle must be within [0, PI/2)")
@ensures(lambda ret: ret > 0)
def surface_irradiance(flux, theta_in):
    return flux * math.cos(theta_in)


@requires(lambda radiance, irradiance: radiance >= 0 and irradiance > 0,
          "Radiance cannot be negative and irradiance must be greater than zero")
def brdf_basic(radiance, irradiance):
    ''' most basic BRDF: R = L / E
    '''
    return radiance / irradiance


@requires(lambda brdf: brdf >= 0, "BRDF cannot be negative")
@requires(lambda angle: _grazing(angle), "Angle must be within [0, PI/2)")
def bistatic_scattering_coefficient(brdf, angle):
    return FOUR_PI * brdf * math.cos(angle)


def bistatic_scattering_coefficient_basic(radiance, irradiance, angle):
    ''' bistatic scattering coefficient from a measured radiance/irradiance pair
    '''
    return bistatic_scattering_coefficient(brdf_basic(radiance, irradiance), angle)


@requires(lambda gamma, irradiance: positive(gamma, irradiance),
          "Scattering coefficient and irradiance must be greater than zero")
@requires(lambda theta_out: _grazing(theta_out), "Scattering angle must be within [0, PI/2)")
@ensures(lambda ret: ret > 0)
def scattered_radiance(gamma, irradiance, theta_out):
    return gamma * irradiance / (FOUR_PI * math.cos(theta_out))


@requires(lambda radiance, collect_area, effective_area, distance:
          positive(radiance, collect_area, effective_area, distance),
          "Radiance, areas and distance must be greater than zero")
@requires(lambda theta_out: _grazing(theta_out), "Scattering angle must be within [0, PI/2)")
@ensures(lambda ret: ret > 0)
def received_power(radiance, collect_area, effective_area, distance, theta_out):
    ''' power (W) collected by a receiver at `distance` from the scattering area
    '''
    return radiance * collect_area * effective_area / distance ** 2 * math.cos(theta_out)


def bistatic_received_power(gain, power, tx_distance, theta_in, gamma,
                            theta_out, collect_area, effective_area, rx_distance):
    """Received power of a bistatic radar.

    Args:
        gain: transmitter gain
        power: transmitted power (W)
        tx_distance: transmitter to surface distance (m)
        theta_in: incidence angle (radians)
        gamma: bistatic scattering coefficient
        theta_out: scattering angle towards the receiver (radians)
        collect_area: illuminated area seen by the receiver (m^2)
        effective_area: receiver antenna effective area (m^2)
        rx_distance: surface to receiver distance (m)

    Returns:
        received power (W)
    """
    flux = incident_flux_density(gain, power, tx_distance)
    irradiance = surface_irradiance(flux, theta_in)
    radiance = scattered_radiance(gamma, irradiance, theta_out)
    LOG.debug("flux %s, irradiance %s, radiance %s", flux, irradiance, radiance)
    return received_power(radiance, collect_area, effective_area, rx_distance, theta_out)


# Ranged systems

@requires(lambda distance, group_velocity: distance >= 0 and group_velocity > 0)
def travel_time(distance, group_velocity):
    ''' two-way travel time of a pulse
    '''
    return 2.0 * distance / group_velocity


@requires(lambda signal, noise: len(signal) == len(noise) and len(signal) > 0,
          "signal and noise must have the same, non zero length")
@ensures(lambda ret: ret >= 0)
def averaging_rms_snr(signal, noise):
    ''' ratio of the root-mean-square signal to the root-mean-square noise
    '''
    mean_square_signal = np.mean(np.square(np.asarray(signal, dtype=np.float64)))
    mean_square_noise = np.mean(np.square(np.asarray(noise, dtype=np.float64)))
    if mean_square_noise == 0:
        raise DegenerateInput("noise samples are all zero")
    return float(np.sqrt(mean_square_signal / mean_square_noise))


@requires(lambda rise_time, snr: positive(rise_time, snr))
def accuracy(rise_time, snr):
    ''' timing accuracy of a pulse with given rise time and signal-to-noise ratio
    '''
    return rise_time / snr


def _airborne(key, value):
    return AIRBORNE_RANGING[key] if value is None else value


@requires(lambda vg: vg > 0, "Group velocity must be greater than zero")
def range_accuracy(vg, rise_time=None, snr=None, velocity=None, height=None,
                   prf=None, beam_width=None):
    ''' range accuracy of a profiling system.

    Unset parameters use the airborne defaults of ``ranged.airborne`` in
    the configuration.
    '''
    tr = _airborne('rise_time', rise_time)
    s = _airborne('snr', snr)
    v = _airborne('velocity', velocity)
    h = _airborne('height', height)
    p = _airborne('prf', prf)
    del_theta = _airborne('beam_width', beam_width)
    if not positive(tr, s, v, h, p, del_theta):
        raise PreconditionViolation("ranging parameters must all be greater than zero")
    return vg * tr / (2.0 * s) * math.sqrt(v / (p * h * del_theta))


@requires(lambda vg: vg > 0, "Group velocity must be greater than zero")
def range_ambiguity(vg, prf=None):
    ''' maximum unambiguous range for pulse repetition frequency `prf` (Hz)
    '''
    prf = _airborne('prf', prf)
    if not prf > 0:
        raise PreconditionViolation(f"Pulse repetition frequency must be greater than zero, got {prf}")
    return vg / (2.0 * prf)


@requires(lambda vg: vg > 0, "Group velocity must be greater than zero")
def longest_period(vg, height=None):
    return vg / 2.0 * _airborne('height', height)


def is_ideal_period(period, vg, height=None):
    return period < longest_period(vg, height)
