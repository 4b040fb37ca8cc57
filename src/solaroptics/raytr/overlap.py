#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Overlap area of a circular focal spot with the receiver

    The receiver is centered on the optical axis. Spot coordinates are
    (y, z), y lying in the plane of the tilt. A rectangular receiver has its
    height along y and its width along z.

    For a circular receiver the overlap is the exact circle-circle
    intersection. For a rectangular receiver the overlap is approximated
    from the intersection of the spot's bounding square with the
    rectangle: a box centered near the spot center counts in full, an off
    center box is scaled by :data:`~.model_constants.CIRCLE_TO_SQUARE`
    (~pi/4, a circle's share of its bounding square). Either way the result
    never exceeds the spot area. This heuristic is kept, rather than an
    exact circle-rectangle intersection, so that power results stay
    comparable with earlier versions.

.. Created on Sat Oct 17 12:53:11 2026

.. codeauthor: solaroptics developers
"""
import math

import solaroptics.optical.model_constants as mc
from solaroptics.util.misc_math import circle_intersection_area, distance_2d


def circle_circle_overlap_area(diameter, center_y, center_z, radius):
    """ overlap of a spot with an on-axis circular receiver of `diameter` """
    d = distance_2d(center_y, center_z, 0., 0.)
    return circle_intersection_area(radius, diameter/2, d)


def circle_rectangle_overlap_area(width, height, center_y, center_z, radius):
    """ approximate overlap of a spot with an on-axis rectangular receiver

    Args:
        width: receiver extent along z
        height: receiver extent along y
        center_y: spot center y
        center_z: spot center z
        radius: spot radius

    Returns:
        the overlap area, 0 if the spot's bounding square misses the receiver
    """
    half_width = width/2
    half_height = height/2

    left = max(-half_width, center_z - radius)
    right = min(half_width, center_z + radius)
    bottom = max(-half_height, center_y - radius)
    top = min(half_height, center_y + radius)

    if left >= right or bottom >= top:
        return 0.

    box_area = (right - left)*(top - bottom)
    spot_area = math.pi*radius**2

    box_center_y = (bottom + top)/2
    box_center_z = (left + right)/2
    offset = distance_2d(box_center_y, box_center_z, center_y, center_z)

    if offset < radius*mc.CENTERED_OVERLAP_FRACTION:
        return min(box_area, spot_area)

    return min(box_area*mc.CIRCLE_TO_SQUARE, spot_area)


def calculate_overlap_area(pv, center_y, center_z, radius):
    """ overlap area of a spot of `radius` centered at (y, z) with `pv` """
    if radius <= 0:
        return 0.

    if pv.shape == mc.CIRCULAR:
        return circle_circle_overlap_area(pv.diameter,
                                          center_y, center_z, radius)
    else:
        return circle_rectangle_overlap_area(pv.width, pv.height,
                                             center_y, center_z, radius)
