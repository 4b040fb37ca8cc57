#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Focal spot size, position and overlap for a single lens concentrator

    The spot model is geometric and linear in defocus: a beam of diameter
    D converging to a focus at distance f has diameter D*|z - f|/f at
    distance z behind the lens. Diffraction isn't modeled, so the spot
    vanishes at perfect focus; reported spots are floored at
    :data:`~.model_constants.MIN_SPOT_DIAMETER`.

    Only systems with exactly one lens are traced. Anything else yields a
    RayTraceResult with `is_valid` False.

.. Created on Sat Oct 17 13:27:09 2026

.. codeauthor: solaroptics developers
"""
import logging

import solaroptics.optical.model_constants as mc
from solaroptics.parax import abcd
from solaroptics.parax.firstorder import (calculate_effective_aperture,
                                          focal_shift)
from solaroptics.raytr import RayTraceResult
from solaroptics.raytr.overlap import calculate_overlap_area
from solaroptics.util.misc_math import deg_to_rad, rad_to_deg, circle_area

logger = logging.getLogger(__name__)


def calculate_spot_diameter_single_lens(lens, receiver_position,
                                        zenith_angle):
    """ spot diameter at `receiver_position` for a beam at `zenith_angle`

    Args:
        lens: the :class:`~.Lens`
        receiver_position: axial position of the receiver plane
        zenith_angle: beam angle to the optical axis, degrees

    Returns:
        the spot diameter. If the receiver isn't beyond the lens this is the
        projected aperture; at exact focus it is 0.
    """
    eff_aperture = calculate_effective_aperture(lens.aperture, zenith_angle)

    distance = receiver_position - lens.position
    if distance <= 0:
        return eff_aperture

    if distance == lens.focal_length:
        return 0.

    if lens.focal_length == 0:
        return eff_aperture

    return eff_aperture*abs(distance - lens.focal_length)/lens.focal_length


def calculate_spot_center(lens, receiver_position, zenith_angle):
    """ (y, z) of the spot center at the receiver plane

    The tilted focus, f*tan(theta) off axis in the focal plane, is scaled
    along the chief ray to the receiver distance. The model is confined to
    the plane of the tilt, so z is always 0.
    """
    if lens.focal_length == 0:
        return 0., 0.
    distance = receiver_position - lens.position
    t = distance/lens.focal_length
    return focal_shift(lens.focal_length, zenith_angle)*t, 0.


def invalid_trace_result(zenith_angle):
    return RayTraceResult(spot_diameter=0., spot_area=0.,
                          spot_center_y=0., spot_center_z=0.,
                          effective_area=0., concentration_ratio=0.,
                          is_valid=False, output_angle=zenith_angle,
                          total_transmittance=0.)


def trace_rays_through_system(system, zenith_angle) -> RayTraceResult:
    """ focal spot and its overlap with the receiver of `system`

    Args:
        system: the :class:`~.OpticalSystem`; must have exactly one lens
        zenith_angle: angle of the incoming sunlight, degrees

    Returns:
        a :class:`~.RayTraceResult`; `is_valid` is False if the system
        doesn't have exactly one lens
    """
    if len(system.lenses) != 1:
        logger.debug("can't trace a system with %d lenses",
                     len(system.lenses))
        return invalid_trace_result(zenith_angle)

    lens = system.lenses[0]
    pv = system.pv
    if lens.focal_length == 0:
        logger.debug("can't trace lens %s with zero focal length", lens.id)
        return invalid_trace_result(zenith_angle)

    input_angle = deg_to_rad(zenith_angle)
    sys_mat = abcd.build_system_matrix([lens], pv.position)
    output_angle = abcd.calculate_output_angle(sys_mat, input_angle, 0.)

    spot_center_y, spot_center_z = calculate_spot_center(lens, pv.position,
                                                         zenith_angle)

    spot_diameter = calculate_spot_diameter_single_lens(lens, pv.position,
                                                        zenith_angle)
    spot_diameter = max(spot_diameter, mc.MIN_SPOT_DIAMETER)
    spot_area = circle_area(spot_diameter)

    effective_area = calculate_overlap_area(pv, spot_center_y, spot_center_z,
                                            spot_diameter/2)

    input_area = circle_area(lens.aperture)
    concentration_ratio = input_area/spot_area if spot_area > 0 else 0.

    logger.debug("trace at %s deg: spot %.6g at (%.6g, %.6g), overlap %.6g",
                 zenith_angle, spot_diameter, spot_center_y, spot_center_z,
                 effective_area)

    return RayTraceResult(spot_diameter=spot_diameter,
                          spot_area=spot_area,
                          spot_center_y=spot_center_y,
                          spot_center_z=spot_center_z,
                          effective_area=effective_area,
                          concentration_ratio=concentration_ratio,
                          is_valid=True,
                          output_angle=rad_to_deg(output_angle),
                          total_transmittance=lens.transmittance)
