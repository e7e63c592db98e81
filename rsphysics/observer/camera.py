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
Photographic Systems.
=====================

Lens, film and stereo-photogrammetry relations. Image coordinates are taken
relative to the principal point (image centre).

"""

import math
import logging
import numpy as np

from rsphysics.config import RADIAL_DISTORTION_SLOPE
from rsphysics.exceptions import DegenerateInput
from rsphysics.utils.contracts import requires, ensures, positive

LOG = logging.getLogger(__name__)


@requires(lambda res: res > 0)
@ensures(lambda ret: ret > 0)
def dist_res(res):
    r''' distance from spatial resolution, or resolution from distance,
    :math:`d = \frac{1}{2r}`
    '''
    return 1.0 / (2.0 * res)


@requires(lambda i_mx, i_mn: i_mx + i_mn > 0 and i_mx > i_mn)
@ensures(lambda ret: ret > 0)
def modulation(i_mx, i_mn):
    ''' modulation from the max and min intensities
    '''
    return (i_mx - i_mn) / (i_mx + i_mn)


@requires(lambda obj_dist, image_dist: positive(obj_dist, image_dist))
@ensures(lambda ret: ret > 0)
def focal_len(obj_dist, image_dist):
    ''' focal length of a thin lens
    '''
    return 1.0 / (1.0 / obj_dist + 1.0 / image_dist)


@requires(lambda image_dist, focal_len: positive(image_dist, focal_len))
def actual_dist(image_dist, focal_len):
    ''' object distance from image distance and focal length
    '''
    inverse = 1.0 / focal_len - 1.0 / image_dist
    if inverse == 0:
        raise DegenerateInput("image at the focal plane, object at infinity")
    return 1.0 / inverse


@requires(lambda f_num, lens_incident_luminance: positive(f_num, lens_incident_luminance))
@ensures(lambda ret: ret > 0)
def film_illuminance(f_num, lens_incident_luminance):
    return math.pi * f_num ** 2 * lens_incident_luminance / 4.0


def radial_distort(x, y, slope=None):
    """Radially distort an image point.

    The point is scaled by L(r) = 1 + slope * r. A positive slope gives barrel
    distortion, a negative one pincushion distortion.

    Returns:
        distorted (x, y)
    """
    m = RADIAL_DISTORTION_SLOPE if slope is None else slope
    lr = 1.0 + m * math.hypot(x, y)
    return x * lr, y * lr


@requires(lambda camera_location, object_location: len(camera_location) == 3 and len(object_location) == 3,
          "Locations must be (x, y, z) triples")
@requires(lambda f_len: f_len > 0)
def image_location(camera_location, object_location, f_len):
    """ image coordinates (u, v) of a point seen by a camera looking along z
    """
    x_pr, y_pr, z_pr = (o - c for o, c in zip(object_location, camera_location))
    if z_pr == 0:
        raise DegenerateInput("object lies in the camera plane")
    return f_len * x_pr / z_pr, f_len * y_pr / z_pr


@requires(lambda f_len, ground_dist, camera_height: positive(f_len, ground_dist, camera_height))
def principle_point_distance(f_len, ground_dist, camera_height):
    ''' distance on the image of a ground point from the principal point
    '''
    return f_len * ground_dist / camera_height


@requires(lambda f_len, princ_pt_dist, camera_height: positive(f_len, princ_pt_dist, camera_height))
def ground_dist(f_len, princ_pt_dist, camera_height):
    return princ_pt_dist * camera_height / f_len


@requires(lambda f_len, ground_dist: positive(f_len, ground_dist))
@requires(lambda camera_height, object_height: camera_height > object_height > 0)
def relief_displacement(f_len, ground_dist, camera_height, object_height):
    ''' relief displacement on the image of the top of a vertical object
    '''
    pt_dist = principle_point_distance(f_len, ground_dist, camera_height)
    return object_height * pt_dist / (camera_height - object_height)


@requires(lambda height, focal_len, film_width: positive(height, focal_len, film_width))
def overlap_size(height, focal_len, baseline, film_width):
    ''' ground overlap of two exposures taken `baseline` apart
    '''
    return film_width * height / focal_len - baseline


@requires(lambda image_coord1, image_coord2, displacement:
          len(image_coord1) == len(image_coord2) == len(displacement) == 2,
          "Image coordinates and displacement must be pairs")
@requires(lambda focal_length: focal_length > 0)
def find_coordinate(image_coord1, image_coord2, focal_length, displacement, height):
    """Ground coordinates of a point seen on a stereo pair.

    Args:
        image_coord1, image_coord2: (u, v) of the point on both images
        focal_length: camera focal length
        displacement: (bx, by) camera baseline
        height: camera height

    Returns:
        (x, y, z)
    """
    bx, by = displacement
    u1, v1 = image_coord1
    u2, v2 = image_coord2
    parallax = (u1 - u2) * bx + (v1 - v2) * by
    if parallax == 0:
        raise DegenerateInput("no parallax between the two images")
    c = (bx ** 2 + by ** 2) / parallax
    return c * u1, c * v1, height + focal_length * c


@requires(lambda rmax, rmin: rmax >= rmin)
def contrast(rmax, rmin):
    ''' contrast from max and min radiances
    '''
    if rmax + rmin == 0:
        raise DegenerateInput("radiances sum to zero")
    return (rmax - rmin) / (rmax + rmin)


@requires(lambda img: np.ndim(img) == 2 and np.size(img) > 0, "Image must be a non empty 2-D array")
def img_contrast(img):
    ''' contrast of a grey-scale image
    '''
    img = np.asarray(img, dtype=np.float64)
    return contrast(float(img.max()), float(img.min()))
