""" package implementing solaroptics graphics using matplotlib

    The :mod:`~.mpl` subpackage provides plots of concentrator performance
    using the matplotlib plotting package:

        - output power and efficiency vs. zenith angle,
          :mod:`~.sweepfigure`
        - base class to manage light and dark styles, :mod:`~.styledfigure`
"""
