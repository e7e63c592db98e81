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
Sensor Band Tables.
===================

Wavelength ranges of the ASTER, MODIS and OCM-2 channels and the lookup from a
wavelength (meters) to the band index.

Ranges are scanned in index order and the first one containing the wavelength
(both ends inclusive) wins. ASTER band 1 starts at 0 so it also absorbs
wavelengths below its nominal edge, and ASTER 3N/3B share band 3. Overlapping
MODIS bands resolve to the one listed first.

"""

import math
import logging
from collections import namedtuple

from rsphysics.exceptions import OutOfDomain, PreconditionViolation
from rsphysics.utils.contracts import requires, ensures

LOG = logging.getLogger(__name__)


class WavelengthRange(namedtuple('WavelengthRange', ['index', 'lower_bound', 'upper_bound'])):
    '''Wavelength range of one band, in meters.
    '''
    __slots__ = ()

    @property
    def bandwidth(self):
        return self.upper_bound - self.lower_bound

    def contains(self, wavelength):
        return self.lower_bound <= wavelength <= self.upper_bound


BandTable = namedtuple('BandTable', ['name', 'ranges', 'lower', 'upper'])


def _table(name, lower, upper, bounds):
    ranges = tuple(WavelengthRange(i + 1, lb, ub) for i, (lb, ub) in enumerate(bounds))
    for r in ranges:
        if not r.lower_bound < r.upper_bound:
            raise ValueError(f'{name} band {r.index} is empty')
    return BandTable(name, ranges, lower, upper)


# ASTER VNIR/SWIR
ASTER = _table('aster', 0.52e-6, 2.43e-6, [
    (0.0, 0.6e-6),
    (0.63e-6, 0.69e-6),
    (0.76e-6, 0.86e-6),  # 3N and 3B
    (1.6e-6, 1.7e-6),
    (2.145e-6, 2.185e-6),
    (2.185e-6, 2.225e-6),
    (2.235e-6, 2.285e-6),
    (2.295e-6, 2.365e-6),
    (2.365e-6, 2.430e-6),
])

# MODIS bands 1-19
MODIS = _table('modis', 4.05e-7, 2.155e-6, [
    (6.2e-07, 6.7e-07),
    (8.41e-07, 8.76e-07),
    (4.59e-07, 4.79e-07),
    (5.45e-07, 5.65e-07),
    (1.23e-06, 1.25e-06),
    (1.628e-06, 1.652e-06),
    (2.105e-06, 2.155e-06),
    (4.05e-07, 4.2e-07),
    (4.38e-07, 4.48e-07),
    (4.84e-07, 4.93e-07),
    (5.26e-07, 5.36e-07),
    (5.46e-07, 5.56e-07),
    (6.62e-07, 6.72e-07),
    (6.73e-07, 6.83e-07),
    (7.43e-07, 7.53e-07),
    (8.62e-07, 8.77e-07),
    (8.9e-07, 9.2e-07),
    (9.31e-07, 9.41e-07),
    (9.15e-07, 9.65e-07),
])

# Oceansat-2 OCM
OCM2 = _table('ocm2', 4.04e-7, 8.85e-7, [
    (4.04e-07, 4.24e-07),
    (4.31e-07, 4.51e-07),
    (4.76e-07, 4.96e-07),
    (5e-07, 5.2e-07),
    (5.46e-07, 5.66e-07),
    (6.1e-07, 6.3e-07),
    (7.25e-07, 7.55e-07),
    (8.45e-07, 8.85e-07),
])

BAND_TABLES = {
    'aster': ASTER,
    'modis': MODIS,
    'ocm2': OCM2,
    'ocm_2': OCM2,
    'ocm-2': OCM2,
}


def get_table(table):
    ''' resolve a table name or pass a BandTable through
    '''
    if isinstance(table, BandTable):
        return table
    try:
        return BAND_TABLES[str(table).lower().strip()]
    except KeyError:
        raise PreconditionViolation(
            f'unknown band table {table!r}, use one of {sorted(BAND_TABLES)}') from None


def get_range(table, index):
    ''' WavelengthRange of band `index` (1-based)
    '''
    table = get_table(table)
    for r in table.ranges:
        if r.index == index:
            return r
    raise OutOfDomain(f'{table.name} has no band {index}')


@requires(lambda wavelength: math.isfinite(wavelength) and wavelength > 0,
          "Wavelength must be a finite number greater than zero")
@ensures(lambda ret: ret >= 1)
def classify(table, wavelength):
    """Band index of `wavelength` in `table`.

    Args:
        table: BandTable or one of 'aster', 'modis', 'ocm2'
        wavelength: wavelength in meters

    Returns:
        1-based band index

    Raises:
        OutOfDomain: wavelength outside the instrument interval or between bands
    """
    table = get_table(table)
    if not table.lower <= wavelength <= table.upper:
        raise OutOfDomain(
            f'wavelength {wavelength} outside the {table.name} region [{table.lower}, {table.upper}]')
    for r in table.ranges:
        if r.contains(wavelength):
            return r.index
    LOG.debug('%s: wavelength %s falls between bands', table.name, wavelength)
    raise OutOfDomain(f'wavelength {wavelength} matches no {table.name} band')


def aster(wavelength):
    ''' ASTER band of a wavelength in [0.52, 2.43] um
    '''
    return classify(ASTER, wavelength)


def modis(wavelength):
    ''' MODIS band of a wavelength in [0.405, 2.155] um
    '''
    return classify(MODIS, wavelength)


def ocm_2(wavelength):
    ''' OCM-2 band of a wavelength in [0.404, 0.885] um
    '''
    return classify(OCM2, wavelength)


@requires(lambda wavelength: wavelength > 0, "Wavelength must be greater than 0")
@requires(lambda d: 0 < d < 1, "Distance must be nonzero, but not too large")
@requires(lambda n, wavelength, d: n * wavelength / d <= 1, "No diffraction order at this angle")
@ensures(lambda ret: 0 <= ret < 2 * math.pi)
def diffraction_angle(n, wavelength, d):
    ''' diffraction angle (radians) of order `n` for slit spacing `d`
    '''
    return math.asin(n * wavelength / d)
