# -*- coding: utf-8 -*-
""" The **solaroptics** solar concentrator modeling package

    A single thin lens focuses collimated sunlight, arriving at a zenith
    angle, onto a photovoltaic receiver. The package computes the focal spot
    geometry, the optical power captured by the receiver and the system
    efficiency as a function of incidence angle.

    The model is organized in the following subpackages:

        - :mod:`~.elem`: the Lens, receiver, LightSource and OpticalSystem
          model classes, their factories and validation
        - :mod:`~.parax`: paraxial ABCD ray transfer matrices and first order
          thin lens relations
        - :mod:`~.raytr`: focal spot model, spot/receiver overlap, power and
          efficiency calculations and angle sweeps
        - :mod:`~.optical`: model constants and defaults

    The :mod:`~.mpl` subpackage plots the angular response of a system using
    the :doc:`matplotlib <matplotlib:index>` package.

    The :mod:`~.util` subpackage provides angle conversion and circle
    geometry functions.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. It is a wrapper to a call of `listobj_str` on
    `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object. Multi-line strings are
    allowed; each line should end with a newline character. Examples include
    :meth:`.Lens.listobj_str` and :meth:`.OpticalSystem.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
