#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Model classes for the lens, receiver, light source and optical system

    The model objects are immutable. Changing a parameter is done by
    building a new object, e.g. with :func:`attr.evolve`::

        lens2 = attr.evolve(lens, focal_length=0.25)

    The receiver is one of two classes, :class:`RectangularReceiver` and
    :class:`CircularReceiver`, each holding only the dimensions of its own
    shape. Both expose a `shape` string, see
    :data:`~.model_constants.pv_shapes`.

.. Created on Sat Oct 17 09:29:23 2026

.. codeauthor: solaroptics developers
"""
import math

import attr

import solaroptics.optical.model_constants as mc


@attr.s(frozen=True)
class Lens():
    """ A thin lens on the optical axis

    Attributes:
        id: identifier, unique within an optical system
        aperture: clear aperture diameter
        focal_length: focal length, in the units of aperture
        position: axial position of the lens
        transmittance: fraction of the incident power passing the lens
    """
    id = attr.ib()
    aperture = attr.ib()
    focal_length = attr.ib()
    position = attr.ib()
    transmittance = attr.ib(default=mc.DEFAULT_TRANSMITTANCE)

    def listobj_str(self):
        o_str = f"{self.id}: thin lens\n"
        o_str += (f"aperture={self.aperture}, "
                  f"focal_length={self.focal_length}\n")
        o_str += (f"position={self.position}, "
                  f"transmittance={self.transmittance}\n")
        return o_str


@attr.s(frozen=True)
class RectangularReceiver():
    """ A rectangular photovoltaic cell, centered on the optical axis

    Attributes:
        width: extent along the z axis
        height: extent along the y axis, the plane of the tilt
        efficiency: conversion efficiency of captured optical power
        position: axial position of the receiver plane
    """
    shape = mc.RECTANGULAR

    width = attr.ib()
    height = attr.ib()
    efficiency = attr.ib()
    position = attr.ib()

    def area(self):
        return self.width*self.height

    def inscribed_diameter(self):
        """ diameter of the largest circle that fits on the receiver """
        return min(self.width, self.height)

    def listobj_str(self):
        o_str = f"{self.shape} receiver: {self.width} x {self.height}\n"
        o_str += (f"efficiency={self.efficiency}, "
                  f"position={self.position}\n")
        return o_str


@attr.s(frozen=True)
class CircularReceiver():
    """ A circular photovoltaic cell, centered on the optical axis

    Attributes:
        diameter: receiver diameter
        efficiency: conversion efficiency of captured optical power
        position: axial position of the receiver plane
    """
    shape = mc.CIRCULAR

    diameter = attr.ib()
    efficiency = attr.ib()
    position = attr.ib()

    def area(self):
        return math.pi*(self.diameter/2)**2

    def inscribed_diameter(self):
        return self.diameter

    def listobj_str(self):
        o_str = f"{self.shape} receiver: diameter {self.diameter}\n"
        o_str += (f"efficiency={self.efficiency}, "
                  f"position={self.position}\n")
        return o_str


@attr.s(frozen=True)
class LightSource():
    """ Collimated sunlight

    Attributes:
        intensity: irradiance, e.g. W/m**2
        zenith_angle: angle of the sunlight to the optical axis, degrees
    """
    intensity = attr.ib(default=mc.DEFAULT_SOLAR_INTENSITY)
    zenith_angle = attr.ib(default=0.)


@attr.s(frozen=True)
class OpticalSystem():
    """ Lenses plus a single photovoltaic receiver

    The order of `lenses` is not significant; calculations sort them by
    position. A system is well formed only when
    :func:`~.validate_optical_system` returns no errors.

    Attributes:
        lenses: tuple of :class:`Lens`
        pv: a :class:`RectangularReceiver` or :class:`CircularReceiver`
    """
    lenses = attr.ib(converter=tuple)
    pv = attr.ib()

    def listobj_str(self):
        o_str = f"optical system: {len(self.lenses)} lens(es)\n"
        for lens in self.lenses:
            o_str += lens.listobj_str()
        o_str += self.pv.listobj_str()
        return o_str


class LensIdSource():
    """ Generates lens identifiers, 'lens-1', 'lens-2', ...

    An instance is owned by the code that builds lenses, typically a user
    interface session. The model itself never creates identifiers.

    Args:
        count: number of identifiers already issued, e.g. when restoring a
               saved session
        prefix: text preceding the sequence number
    """

    def __init__(self, count=0, prefix='lens'):
        self.prefix = prefix
        self.count = count

    def next_id(self):
        self.count += 1
        return f"{self.prefix}-{self.count}"


def create_lens(id, aperture, focal_length, position,
                transmittance=mc.DEFAULT_TRANSMITTANCE) -> Lens:
    return Lens(id, aperture, focal_length, position, transmittance)


def create_rectangular_pv(width, height, efficiency,
                          position) -> RectangularReceiver:
    return RectangularReceiver(width, height, efficiency, position)


def create_circular_pv(diameter, efficiency, position) -> CircularReceiver:
    return CircularReceiver(diameter, efficiency, position)


def create_pv(shape, params, efficiency, position):
    """ create a receiver of the given `shape`

    Args:
        shape: 'rectangular' or 'circular'
        params: dict with the dimensions of the shape, i.e. 'width' and
                'height', or 'diameter'. Missing dimensions default to 0.
        efficiency: conversion efficiency of the receiver
        position: axial position of the receiver plane

    Raises:
        ValueError: if `shape` isn't a known receiver shape
    """
    if shape == mc.CIRCULAR:
        return create_circular_pv(params.get('diameter', 0), efficiency,
                                  position)
    elif shape == mc.RECTANGULAR:
        return create_rectangular_pv(params.get('width', 0),
                                     params.get('height', 0),
                                     efficiency, position)
    else:
        raise ValueError(f"unknown receiver shape: {shape!r}, "
                         f"expected one of {mc.pv_shapes}")


def create_optical_system(lenses, pv) -> OpticalSystem:
    return OpticalSystem(lenses, pv)
