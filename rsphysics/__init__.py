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

"""RSPhysics: remote-sensing physics formulas.

Radiometry, band classification, passive-microwave antennas,
photogrammetry, thermal retrieval and ranged/scattering sensor equations.
"""
import logging

from rsphysics.exceptions import (RSPhysicsException, PreconditionViolation,  # noqa
                                  PostconditionViolation, OutOfDomain, DegenerateInput,
                                  ConfigurationException)

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
