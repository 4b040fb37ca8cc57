#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" miscellaneous functions for angles and circle geometry

.. Created on Sat Oct 17 15:09:03 2026

.. codeauthor: solaroptics developers
"""
from math import sqrt, pi, acos


def deg_to_rad(degrees: float) -> float:
    """ convert an angle in degrees to radians """
    return degrees*pi/180


def rad_to_deg(radians: float) -> float:
    """ convert an angle in radians to degrees """
    return radians*180/pi


def circle_area(diameter: float) -> float:
    """ return the area of a circle of the given diameter """
    return pi*(diameter/2)**2


def distance_2d(y0, z0, y1, z1):
    """ return distance between 2d points (y0, z0) and (y1, z1) """
    return sqrt((y0 - y1)**2 + (z0 - z1)**2)


def circle_intersection_area(ra, rb, d):
    """ return the area of the intersection of 2 circles

    Args:
        ra: radius of first circle
        rb: radius of second circle
        d: separation of the circles' centers

    Returns:
        area of the circle intersection. Separated circles, i.e.
        d >= ra + rb, return 0. If one circle is contained in the other,
        the area of the smaller circle is returned.

    `Weisstein, Eric W. "Circle-Circle Intersection." From MathWorld--A Wolfram Web
    Resource. <http://mathworld.wolfram.com/Circle-CircleIntersection.html>`_
    """
    if d >= ra + rb:  # circles are completely separated - no overlap
        return 0.

    if d <= abs(ra - rb):  # smaller circle contained inside the larger one
        r = min(ra, rb)
        return pi*r**2

    # past the checks above, d > |ra - rb| >= 0 and both radii are > 0
    ra2 = ra**2
    rb2 = rb**2
    d2 = d**2

    # calculate area via eq 14 in the referenced link
    p1 = ra2*acos((d2 + ra2 - rb2)/(2*d*ra))
    p2 = rb2*acos((d2 + rb2 - ra2)/(2*d*rb))
    p3 = sqrt((-d + ra + rb)*(d + ra - rb)*(d - ra + rb)*(d + ra + rb))/2
    area = p1 + p2 - p3
    return area
