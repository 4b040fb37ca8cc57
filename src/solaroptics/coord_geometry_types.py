#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" type hints for paraxial vectors and matrices

Mat2d is a 2 x 2 numpy array, e.g. an ABCD ray transfer matrix.
Vec2d is a numpy (height, slope) paraxial ray vector.
M2d and V2d are their array-like counterparts accepted as inputs.

.. Created on Sat Oct 17 09:12:24 2026

.. codeauthor: solaroptics developers
"""
import numpy.typing as npt

Vec2d = npt.NDArray
Mat2d = npt.NDArray

V2d = npt.ArrayLike
M2d = npt.ArrayLike
