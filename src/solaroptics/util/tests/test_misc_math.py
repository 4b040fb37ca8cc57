#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for angle conversion and circle geometry

.. Created on Sat Oct 17 15:26:02 2026

.. codeauthor: solaroptics developers
"""

import math
import unittest
from pytest import approx

from solaroptics.util.misc_math import (deg_to_rad, rad_to_deg,
                                        circle_area, distance_2d,
                                        circle_intersection_area)


class AngleConversionTestCase(unittest.TestCase):
    def test_deg_to_rad(self):
        assert deg_to_rad(0) == 0
        assert deg_to_rad(90) == approx(math.pi/2)
        assert deg_to_rad(180) == approx(math.pi)
        assert deg_to_rad(360) == approx(2*math.pi)

    def test_rad_to_deg(self):
        assert rad_to_deg(0) == 0
        assert rad_to_deg(math.pi/2) == approx(90)
        assert rad_to_deg(math.pi) == approx(180)
        assert rad_to_deg(2*math.pi) == approx(360)


class CircleGeometryTestCase(unittest.TestCase):
    def test_circle_area(self):
        assert circle_area(2.) == approx(math.pi)
        assert circle_area(0.) == 0.

    def test_distance_2d(self):
        assert distance_2d(0., 0., 3., 4.) == approx(5.)

    def test_separated_circles(self):
        assert circle_intersection_area(1., 1., 2.) == 0.
        assert circle_intersection_area(1., 2., 10.) == 0.

    def test_contained_circle(self):
        assert circle_intersection_area(1., 3., 1.) == approx(math.pi)
        assert circle_intersection_area(3., 1., 1.) == approx(math.pi)

    def test_coincident_circles(self):
        assert circle_intersection_area(2., 2., 0.) == approx(4*math.pi)

    def test_lens_shaped_overlap(self):
        # two unit circles one radius apart
        truth = 2*math.pi/3 - math.sqrt(3)/2
        assert circle_intersection_area(1., 1., 1.) == approx(truth)

    def test_zero_radius(self):
        assert circle_intersection_area(0., 1., 0.5) == 0.
        assert circle_intersection_area(1., 0., 2.) == 0.


if __name__ == '__main__':
    unittest.main(verbosity=2)
