""" Package for focal spot, power and efficiency calculations

    The :mod:`~.raytr` subpackage provides the core calculations. These
    include:

        - Focal spot size and position at the receiver for a single lens
          system, :mod:`~.spot`
        - Overlap area of the focal spot with the receiver, :mod:`~.overlap`
        - Input power, output power and system efficiency, and sweeps of
          these over the zenith angle, :mod:`~.power`
        - Exception classes for reporting calculation errors,
          :mod:`~.traceerror`

    Results are returned as the namedtuples defined here. A result with
    `is_valid` False is a sentinel; its other fields are zero and must not
    be used.
"""

from collections import namedtuple

RayTraceResult = namedtuple('RayTraceResult',
                            ['spot_diameter', 'spot_area',
                             'spot_center_y', 'spot_center_z',
                             'effective_area', 'concentration_ratio',
                             'is_valid', 'output_angle',
                             'total_transmittance'])
RayTraceResult.__doc__ = "Focal spot and overlap at the receiver plane"
RayTraceResult.spot_diameter.__doc__ = "focal spot diameter"
RayTraceResult.spot_area.__doc__ = "focal spot area"
RayTraceResult.spot_center_y.__doc__ = "spot center offset in the tilt plane"
RayTraceResult.spot_center_z.__doc__ = "spot center offset normal to the tilt plane"
RayTraceResult.effective_area.__doc__ = "overlap area of spot and receiver"
RayTraceResult.concentration_ratio.__doc__ = "lens aperture area / spot area"
RayTraceResult.is_valid.__doc__ = "False if the system couldn't be traced"
RayTraceResult.output_angle.__doc__ = "paraxial exit angle, degrees"
RayTraceResult.total_transmittance.__doc__ = "transmittance of the lenses"

PowerCalculationResult = namedtuple('PowerCalculationResult',
                                    ['input_power', 'output_power',
                                     'spot_diameter', 'effective_area',
                                     'concentration_ratio',
                                     'system_efficiency', 'is_valid'])
PowerCalculationResult.__doc__ = "Power collected and delivered by a system"
PowerCalculationResult.input_power.__doc__ = "power on the projected lens aperture"
PowerCalculationResult.output_power.__doc__ = "power delivered by the receiver"
PowerCalculationResult.spot_diameter.__doc__ = "focal spot diameter"
PowerCalculationResult.effective_area.__doc__ = "overlap area of spot and receiver"
PowerCalculationResult.concentration_ratio.__doc__ = "lens aperture area / spot area"
PowerCalculationResult.system_efficiency.__doc__ = "output_power / input_power"
PowerCalculationResult.is_valid.__doc__ = "False if the system couldn't be traced"

AngleSweepResult = namedtuple('AngleSweepResult',
                              ['angle', 'power', 'efficiency'])
AngleSweepResult.__doc__ = "Output power and efficiency at one zenith angle"
AngleSweepResult.angle.__doc__ = "zenith angle, degrees"
AngleSweepResult.power.__doc__ = "output power"
AngleSweepResult.efficiency.__doc__ = "system efficiency"
