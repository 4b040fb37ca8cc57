#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for lens, receiver and system validation

.. Created on Sat Oct 17 10:03:21 2026

.. codeauthor: solaroptics developers
"""

import unittest

from solaroptics.elem.elements import (create_lens, create_rectangular_pv,
                                       create_circular_pv,
                                       create_optical_system)
from solaroptics.elem.validation import (validate_lens, validate_pv,
                                         validate_optical_system)


class ValidateLensTestCase(unittest.TestCase):
    def test_valid_lens(self):
        assert validate_lens(create_lens('l1', 100, 200, 0)) == []

    def test_invalid_aperture(self):
        errors = validate_lens(create_lens('l1', -100, 200, 0))
        assert "Aperture must be positive" in errors

    def test_invalid_focal_length(self):
        errors = validate_lens(create_lens('l1', 100, -200, 0))
        assert "Focal length must be positive" in errors
        errors = validate_lens(create_lens('l1', 100, 0, 0))
        assert "Focal length must be positive" in errors

    def test_negative_position(self):
        errors = validate_lens(create_lens('l1', 100, 200, -10))
        assert "Position cannot be negative" in errors

    def test_transmittance_range(self):
        assert validate_lens(create_lens('l1', 100, 200, 0, 0.)) == []
        assert validate_lens(create_lens('l1', 100, 200, 0, 1.)) == []
        errors = validate_lens(create_lens('l1', 100, 200, 0, 1.5))
        assert errors == ["Transmittance must be between 0 and 1"]

    def test_all_rules_reported(self):
        errors = validate_lens(create_lens('l1', -1, -1, -1, 2))
        assert errors == ["Aperture must be positive",
                          "Focal length must be positive",
                          "Position cannot be negative",
                          "Transmittance must be between 0 and 1"]


class ValidatePVTestCase(unittest.TestCase):
    def test_valid_rectangular(self):
        assert validate_pv(create_rectangular_pv(50, 50, 0.2, 200)) == []

    def test_valid_circular(self):
        assert validate_pv(create_circular_pv(50, 0.2, 200)) == []

    def test_invalid_rectangular_dimensions(self):
        errors = validate_pv(create_rectangular_pv(-50, 0, 0.2, 200))
        assert "Width must be positive" in errors
        assert "Height must be positive" in errors

    def test_invalid_circular_diameter(self):
        errors = validate_pv(create_circular_pv(-50, 0.2, 200))
        assert errors == ["Diameter must be positive"]

    def test_efficiency_range(self):
        for efficiency in (0, -0.1, 1.5):
            pv = create_rectangular_pv(50, 50, efficiency, 200)
            assert "Efficiency must be between 0 and 1" in validate_pv(pv)
        assert validate_pv(create_rectangular_pv(50, 50, 1., 200)) == []

    def test_negative_position(self):
        errors = validate_pv(create_circular_pv(50, 0.2, -1))
        assert errors == ["Position cannot be negative"]


class ValidateOpticalSystemTestCase(unittest.TestCase):
    def test_valid_system(self):
        system = create_optical_system([create_lens('l1', 100, 200, 0)],
                                       create_rectangular_pv(50, 50, 0.2, 300))
        assert validate_optical_system(system) == []

    def test_empty_lens_list(self):
        system = create_optical_system([],
                                       create_rectangular_pv(50, 50, 0.2, 300))
        assert validate_optical_system(system) == \
            ["System must have exactly 1 lens"]

    def test_two_lenses(self):
        system = create_optical_system(
            [create_lens('l1', 100, 200, 0), create_lens('l2', 50, 100, 150)],
            create_rectangular_pv(20, 20, 0.2, 300))
        assert "System must have exactly 1 lens" in \
            validate_optical_system(system)

    def test_pv_before_lens(self):
        system = create_optical_system([create_lens('l1', 100, 200, 100)],
                                       create_rectangular_pv(50, 50, 0.2, 50))
        assert validate_optical_system(system) == \
            ["PV must be positioned after the lens"]

    def test_pv_at_lens(self):
        system = create_optical_system([create_lens('l1', 100, 200, 100)],
                                       create_circular_pv(50, 0.2, 100))
        assert "PV must be positioned after the lens" in \
            validate_optical_system(system)

    def test_prefixed_messages(self):
        system = create_optical_system(
            [create_lens('l1', -100, 200, 0), create_lens('l2', 100, 0, 10)],
            create_circular_pv(0, 0.2, 300))
        assert validate_optical_system(system) == [
            "System must have exactly 1 lens",
            "Lens 1: Aperture must be positive",
            "Lens 2: Focal length must be positive",
            "PV: Diameter must be positive"]
