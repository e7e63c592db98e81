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

''' Position estimation from ranges (trilateration) and angles (triangulation)
'''

import math
import logging

from rsphysics.constants import EPSILON
from rsphysics.exceptions import DegenerateInput
from rsphysics.utils.contracts import requires, positive

LOG = logging.getLogger(__name__)

# sine of the angle between the centre baselines below which a fix is ill-conditioned
ILL_CONDITIONED = 1e-6


def _planar(*points):
    return all(len(p) == 2 for p in points)


@requires(lambda p1, p2, p3: _planar(p1, p2, p3), "Centres must be (x, y) pairs")
@requires(lambda d1, d2, d3: positive(d1, d2, d3), "Distances must be greater than zero")
def trilaterate(p1, d1, p2, d2, p3, d3):
    """Locate a point from its distances to three known centres.

    Subtracting the circle equations (x - xi)^2 + (y - yi)^2 = di^2 pairwise
    leaves a 2 x 2 linear system in (x, y). Collinear centres make it
    singular. Near-collinear centres are only logged; checking the geometry
    is up to the caller.

    Args:
        p1, p2, p3: (x, y) centres
        d1, d2, d3: distances from the point to each centre

    Returns:
        (x, y)

    Raises:
        DegenerateInput: the three centres are collinear
    """
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    a = 2 * (x2 - x1)
    b = 2 * (y2 - y1)
    c = d1 ** 2 - d2 ** 2 - x1 ** 2 + x2 ** 2 - y1 ** 2 + y2 ** 2
    d = 2 * (x3 - x2)
    e = 2 * (y3 - y2)
    f = d2 ** 2 - d3 ** 2 - x2 ** 2 + x3 ** 2 - y2 ** 2 + y3 ** 2
    det = e * a - b * d
    if det == 0:
        raise DegenerateInput(f"centres {p1}, {p2}, {p3} are collinear")
    scale = math.hypot(a, b) * math.hypot(d, e)
    if abs(det) < ILL_CONDITIONED * scale:
        LOG.warning("Centres %s, %s, %s are nearly collinear, the fix is ill-conditioned",
                    p1, p2, p3)
    x = (c * e - f * b) / det
    y = (c * d - a * f) / (b * d - a * e)
    LOG.debug("Trilaterated position (%s, %s)", x, y)
    return x, y


@requires(lambda baseline: baseline > 0, "Baseline must be greater than zero")
@requires(lambda alpha, beta: positive(alpha, beta), "Angles must be greater than zero")
@requires(lambda alpha, beta: alpha + beta < math.pi, "Angles must sum to less than PI")
def triangulate(baseline, alpha, beta):
    """Distance of a target from the baseline joining two observers.

    Args:
        baseline: distance between the observers
        alpha, beta: angles (radians) between the baseline and the line of
            sight at each observer

    Raises:
        DegenerateInput: the lines of sight are nearly parallel
    """
    denom = math.sin(alpha + beta)
    if abs(denom) < EPSILON:
        raise DegenerateInput(f"lines of sight at {alpha} and {beta} do not intersect")
    return baseline * math.sin(alpha) * math.sin(beta) / denom
