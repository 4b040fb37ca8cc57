""" Package for paraxial optics

    The :mod:`~.parax` subpackage provides the paraxial description of the
    concentrator:

        - ABCD ray transfer matrices for thin lenses and free space
          propagation, and their composition into a system matrix,
          :mod:`~.abcd`
        - thin lens first order relations: projected aperture, image
          distance and focal shift under tilt, :mod:`~.firstorder`
"""
