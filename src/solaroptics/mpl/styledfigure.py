#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" light and dark color schemes for solaroptics figures

.. Created on Sat Oct 17 10:37:19 2026

.. codeauthor: solaroptics developers
"""
from matplotlib.figure import Figure

from solaroptics.util import colors


class StyledFigure(Figure):
    """Figure with the light or dark solaroptics color scheme.

    Subclasses implement `refresh()`, and create their axes in a list
    attribute, `axes_list`, so restyling can reach them.
    """

    def __init__(self, **kwargs):
        is_dark = kwargs.pop('is_dark', False)
        self.axes_list = []
        super().__init__(**kwargs)

        self.sync_light_or_dark(is_dark, do_refresh=False)

    def sync_light_or_dark(self, is_dark, do_refresh=True):
        self.is_dark = is_dark
        self._rgb = {**colors.curve_colors(),
                     **colors.foreground_background(is_dark)}
        self.set_facecolor(self._rgb['background'])
        for ax in self.axes_list:
            self.style_axes(ax)
        if do_refresh:
            self.refresh()

    def style_axes(self, ax):
        ax.set_facecolor(self._rgb['background1'])
        ax.tick_params(colors=self._rgb['foreground'])
        ax.xaxis.label.set_color(self._rgb['foreground1'])
        ax.yaxis.label.set_color(self._rgb['foreground1'])
        ax.title.set_color(self._rgb['foreground1'])

    def refresh(self, **kwargs):
        raise NotImplementedError
