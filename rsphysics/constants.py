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


""" Constants"""
import numpy as np
import scipy.constants as spc

# Planck radiation equation.
H_PLANCK = spc.Planck  # SI-unit = [J*s]
H_EV = spc.Planck / spc.e  # [eV*s]
K_BOLTZMANN = spc.Boltzmann  # SI-unit = [J/K]
C_SPEED = spc.speed_of_light  # SI-unit = [m/s]
SIGMA = spc.Stefan_Boltzmann  # [W/(m^2*K^4)]

# Electromagnetics
MU_0 = spc.mu_0  # permeability of free space [N/A^2]
EPSILON_0 = spc.epsilon_0  # permittivity of free space [F/m]
Z0 = np.sqrt(MU_0 / EPSILON_0)  # impedance of free space [ohm]
K_E = 1 / (4 * np.pi * EPSILON_0)  # Coulomb constant [N*m^2/C^2]

# Irradiance
EARTH_IRRADIANCE = 1.37e3  # earth blackbody irradiance [W/m^2]
EXOATMOSPHERIC_RADIANCE = 2.02e7  # mean exoatmospheric irradiance

# Float precision
EPSILON = 1e-8

# Angles
TWO_PI = 2 * np.pi
FOUR_PI = 4 * np.pi
HALF_PI = np.pi / 2
