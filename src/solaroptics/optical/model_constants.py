#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" optical model constants and defaults

.. Created on Sat Oct 17 11:28:16 2026

.. codeauthor: solaroptics developers
"""

# ABCD ray transfer matrix elements, as (row, column) index pairs
A, B, C, D = (0, 0), (0, 1), (1, 0), (1, 1)

# receiver shapes
RECTANGULAR = 'rectangular'
CIRCULAR = 'circular'
pv_shapes = (RECTANGULAR, CIRCULAR)

# standard AM1.5 solar irradiance, W/m**2
DEFAULT_SOLAR_INTENSITY = 1000.

# lens transmittance used when none is given
DEFAULT_TRANSMITTANCE = 0.92

# focal spots are never reported smaller than this diameter, so the spot
# area and concentration ratio stay finite at perfect focus
MIN_SPOT_DIAMETER = 0.001

# area of a circle divided by the area of its bounding square, ~pi/4.
# Used as the correction factor for off-center circle/rectangle overlap.
CIRCLE_TO_SQUARE = 0.785

# a spot whose overlap box center is within this fraction of the spot
# radius from the spot center counts the full box overlap
CENTERED_OVERLAP_FRACTION = 0.5

# default angle sweep, degrees
SWEEP_START = 0.
SWEEP_END = 85.
SWEEP_STEP = 1.
