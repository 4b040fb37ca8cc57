#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Support for calculation exception handling

    Malformed optical systems are not exceptional: they are reported by the
    validation functions and by `is_valid` on the results. The exceptions
    here cover invalid requests made of the calculations.

.. Created on Sat Oct 17 14:35:05 2026

.. codeauthor: solaroptics developers
"""


class TraceError(Exception):
    """ Exception raised when evaluating a model """


class SweepRangeError(TraceError, ValueError):
    """ Exception raised when an angle sweep can't advance """
    def __init__(self, start, end, step):
        self.start = start
        self.end = end
        self.step = step
        super().__init__(f"sweep step must be positive: start={start}, "
                         f"end={end}, step={step}")
