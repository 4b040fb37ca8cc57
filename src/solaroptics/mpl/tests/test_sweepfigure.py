#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the angular response figure

.. Created on Sat Oct 17 11:11:17 2026

.. codeauthor: solaroptics developers
"""

import matplotlib
matplotlib.use('Agg')

from matplotlib.backends.backend_agg import FigureCanvasAgg

from solaroptics.elem.elements import (create_lens, create_rectangular_pv,
                                       create_optical_system)
from solaroptics.mpl.sweepfigure import AngleSweepFigure
from solaroptics.util import colors


def make_system():
    return create_optical_system([create_lens('l1', 0.1, 0.2, 0.)],
                                 create_rectangular_pv(0.05, 0.05, 0.2, 0.2))


def test_sweep_figure():
    fig = AngleSweepFigure(make_system(), start=0, end=10, step=5)
    assert list(fig.sweep_data.index) == [0, 5, 10]
    assert len(fig.ax.get_lines()) == 1
    assert len(fig.ax_eff.get_lines()) == 1
    assert fig.ax.get_xlabel() == 'zenith angle (deg)'


def test_refresh_with_new_range():
    fig = AngleSweepFigure(make_system(), start=0, end=10, step=5)
    FigureCanvasAgg(fig)
    fig.refresh(end=20)
    assert fig.end == 20
    assert len(fig.sweep_data) == 5
    assert len(fig.ax.get_lines()) == 1


def test_light_or_dark():
    fig = AngleSweepFigure(make_system(), start=0, end=10, step=5)
    fig.sync_light_or_dark(True)
    assert fig.is_dark
    assert fig._rgb['background'] == colors.solarized['base03']
