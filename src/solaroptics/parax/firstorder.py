#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" First order relations for a thin lens under tilted illumination

.. Created on Sat Oct 17 12:02:14 2026

.. codeauthor: solaroptics developers
"""
import math

from solaroptics.util.misc_math import deg_to_rad


def calculate_effective_aperture(aperture: float,
                                 zenith_angle: float) -> float:
    """ aperture diameter projected along a beam at `zenith_angle` degrees

    The projection is the full aperture at normal incidence and goes to zero
    as the zenith angle approaches 90 degrees.
    """
    return aperture*math.cos(deg_to_rad(zenith_angle))


def calculate_image_distance(focal_length: float,
                             object_distance: float) -> float:
    """ image distance of a thin lens, s' = f*s/(s - f)

    Both distances are measured positive away from the lens, so an object
    inside the focal length gives a negative (virtual) image distance.

    Args:
        focal_length: lens focal length
        object_distance: distance from the object to the lens

    Returns:
        the image distance, or ``math.inf`` with the object at the focal point
    """
    if object_distance == focal_length:
        return math.inf
    return focal_length*object_distance/(object_distance - focal_length)


def focal_shift(focal_length: float, zenith_angle: float) -> float:
    """ lateral displacement of the focus for a beam tilted by `zenith_angle`

    A collimated beam tilted by theta focuses at height f*tan(theta) in the
    back focal plane.
    """
    return focal_length*math.tan(deg_to_rad(zenith_angle))
