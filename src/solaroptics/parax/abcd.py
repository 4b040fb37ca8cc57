#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Paraxial ABCD ray transfer matrices for thin lens systems

    A paraxial ray is the vector (y, u) of height and slope. An optical
    element acts on it through a 2 x 2 matrix::

        | y' |   | A  B | | y |
        | u' | = | C  D | | u |

    Matrices compose right to left: ``multiply(m2, m1)`` is the system in
    which the ray meets `m1` first.

.. Created on Sat Oct 17 11:45:15 2026

.. codeauthor: solaroptics developers
"""
import logging

import numpy as np

import solaroptics.optical.model_constants as mc
from solaroptics.coord_geometry_types import Mat2d, M2d, Vec2d, V2d

logger = logging.getLogger(__name__)


def identity_matrix() -> Mat2d:
    return np.identity(2)


def lens_matrix(focal_length: float) -> Mat2d:
    """ ray transfer matrix of a thin lens of the given focal length

    Raises:
        ValueError: if focal_length is zero
    """
    if focal_length == 0:
        raise ValueError("thin lens focal length must be non-zero")
    return np.array([[1., 0.],
                     [-1/focal_length, 1.]])


def propagation_matrix(distance: float) -> Mat2d:
    """ ray transfer matrix for free space propagation over `distance` """
    return np.array([[1., distance],
                     [0., 1.]])


def multiply(m1: M2d, m2: M2d) -> Mat2d:
    """ return the matrix for `m1` applied following `m2` """
    return np.matmul(m1, m2)


def build_system_matrix(lenses, receiver_position: float) -> Mat2d:
    """ ray transfer matrix from the axial origin to the receiver plane

    The lenses are applied in order of increasing position, starting from
    axial position 0. Free space propagation is inserted before a lens only
    when it lies beyond the current position, and after the last lens when
    the receiver lies beyond it.

    Args:
        lenses: a sequence of :class:`~.Lens`, in any order
        receiver_position: axial position of the receiver plane

    Returns:
        the composite 2 x 2 system matrix; the identity if there are no
        lenses
    """
    sys_mat = identity_matrix()
    if len(lenses) == 0:
        return sys_mat

    current_position = 0.
    for lens in sorted(lenses, key=lambda lns: lns.position):
        gap = lens.position - current_position
        if gap > 0:
            sys_mat = multiply(propagation_matrix(gap), sys_mat)
        sys_mat = multiply(lens_matrix(lens.focal_length), sys_mat)
        current_position = lens.position

    final_gap = receiver_position - current_position
    if final_gap > 0:
        sys_mat = multiply(propagation_matrix(final_gap), sys_mat)

    logger.debug("system matrix to %s: %s", receiver_position,
                 matrix_str(sys_mat))
    return sys_mat


def calculate_output_angle(sys_mat: M2d, input_angle: float,
                           input_position: float = 0.) -> float:
    """ paraxial output slope of a ray traced through `sys_mat`

    Args:
        sys_mat: the system ABCD matrix
        input_angle: input ray angle, radians
        input_position: input ray height; 0 for an on-axis collimated beam

    Returns:
        the output angle C*y + D*u, in radians
    """
    sys_mat = np.asarray(sys_mat)
    return float(sys_mat[mc.C]*input_position + sys_mat[mc.D]*input_angle)


def trace_ray(sys_mat: M2d, ray: V2d) -> Vec2d:
    """ return the (height, slope) vector following `sys_mat` """
    return np.matmul(sys_mat, ray)


def matrix_str(m: M2d) -> str:
    m = np.asarray(m)
    return (f"[[{m[mc.A]:.6g}, {m[mc.B]:.6g}], "
            f"[{m[mc.C]:.6g}, {m[mc.D]:.6g}]]")
