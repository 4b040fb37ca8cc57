#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" light and dark color schemes for response curve plots

    The palette is the Solarized scheme; the light variant uses its
    blue tinted base colors.

.. Created on Sat Oct 17 14:52:04 2026

.. codeauthor: solaroptics developers
"""

solarized = {
    'base03': '#002b36',
    'base02': '#073642',
    'base01': '#586e75',
    'base00': '#657b83',
    'base0': '#839496',
    'base1': '#93a1a1',
    'base2': '#e1e7f2',
    'base3': '#edf3fe',
    'yellow': '#b58900',
    'orange': '#cb4b16',
    'red': '#dc322f',
    'blue': '#268bd2',
    'cyan': '#2aa198',
    'green': '#859900',
    }


def curve_colors():
    """ colors for the plotted quantities of a sweep """
    return {
        'power': solarized['orange'],
        'efficiency': solarized['blue'],
        'receiver': solarized['green'],
        }


def foreground_background(is_dark=False):
    if is_dark:
        bases = ('base03', 'base02', 'base0', 'base1')
    else:
        bases = ('base3', 'base2', 'base00', 'base01')
    keys = ('background', 'background1', 'foreground', 'foreground1')
    return {k: solarized[b] for k, b in zip(keys, bases)}
