""" Package holding optical model constants

    The ``solaroptics.optical`` subpackage provides the defaults and numerical
    conventions shared by the model and the calculations, in
    :mod:`~.model_constants`.
"""
