#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Checks that a lens, receiver and optical system are well formed

    Each function returns a list of messages, one per violated rule, in
    the order the rules are checked. An empty list means the input is
    valid. These functions never raise; callers are expected to check for
    an empty list before running calculations on a system.

.. Created on Sat Oct 17 10:20:20 2026

.. codeauthor: solaroptics developers
"""
import solaroptics.optical.model_constants as mc


def validate_lens(lens) -> list[str]:
    errors = []

    if lens.aperture <= 0:
        errors.append("Aperture must be positive")
    if lens.focal_length <= 0:
        errors.append("Focal length must be positive")
    if lens.position < 0:
        errors.append("Position cannot be negative")
    if lens.transmittance < 0 or lens.transmittance > 1:
        errors.append("Transmittance must be between 0 and 1")

    return errors


def validate_pv(pv) -> list[str]:
    """ check the receiver dimensions of its shape, efficiency and position """
    errors = []

    if pv.shape == mc.RECTANGULAR:
        if pv.width <= 0:
            errors.append("Width must be positive")
        if pv.height <= 0:
            errors.append("Height must be positive")
    elif pv.shape == mc.CIRCULAR:
        if pv.diameter <= 0:
            errors.append("Diameter must be positive")

    # a zero efficiency receiver is rejected along with negative ones
    if pv.efficiency <= 0 or pv.efficiency > 1:
        errors.append("Efficiency must be between 0 and 1")
    if pv.position < 0:
        errors.append("Position cannot be negative")

    return errors


def validate_optical_system(system) -> list[str]:
    """ check the lens count, each lens, the receiver and their placement

    Lens messages are prefixed with the 1-based lens number, e.g.
    "Lens 1: Aperture must be positive"; receiver messages with "PV: ".
    """
    errors = []

    if len(system.lenses) != 1:
        errors.append("System must have exactly 1 lens")

    for i, lens in enumerate(system.lenses, start=1):
        errors.extend(f"Lens {i}: {err}" for err in validate_lens(lens))

    errors.extend(f"PV: {err}" for err in validate_pv(system.pv))

    if len(system.lenses) == 1:
        if system.pv.position <= system.lenses[0].position:
            errors.append("PV must be positioned after the lens")

    return errors
