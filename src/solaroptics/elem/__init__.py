""" Package for the optical system model

    The :mod:`~.elem` subpackage provides the model of the concentrator:

        - the immutable Lens, receiver, LightSource and OpticalSystem
          classes, their factory functions and a lens identifier source,
          :mod:`~.elements`
        - validation of lenses, receivers and systems, :mod:`~.validation`
"""
