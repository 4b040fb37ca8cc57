""" package supplying utility functions for math and plotting support

    The :mod:`~solaroptics.util` subpackage provides miscellaneous functions
    that don't have an obvious home. These include:

        - angle conversion and circle geometry, :mod:`~.misc_math`
        - support for color handling, :mod:`~.colors`
"""
