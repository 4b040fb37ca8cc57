#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 solaroptics developers
""" Plot of output power and efficiency vs. zenith angle

.. Created on Sat Oct 17 10:54:18 2026

.. codeauthor: solaroptics developers
"""
import solaroptics.optical.model_constants as mc
from solaroptics.mpl.styledfigure import StyledFigure
from solaroptics.raytr.power import sweep_angle, sweep_df


class AngleSweepFigure(StyledFigure):
    """ Angular response of an optical system

    Output power is plotted on the left axis, system efficiency in percent
    on a twin right axis.

    Attributes:
        system: the :class:`~.OpticalSystem` to evaluate
        intensity: irradiance of the sunlight
        start: first zenith angle, degrees
        end: last zenith angle, degrees
        step: angle increment, degrees
    """

    def __init__(self, system, intensity=mc.DEFAULT_SOLAR_INTENSITY,
                 start=mc.SWEEP_START, end=mc.SWEEP_END, step=mc.SWEEP_STEP,
                 **kwargs):
        self.system = system
        self.intensity = intensity
        self.start = start
        self.end = end
        self.step = step

        super().__init__(**kwargs)

        self.update_data()
        self.plot()

    def refresh(self, **kwargs):
        self.update_data(**kwargs)
        self.plot()
        return self

    def update_data(self, **kwargs):
        """ recalculate the sweep; keyword arguments replace attributes """
        for key in ('system', 'intensity', 'start', 'end', 'step'):
            if key in kwargs:
                setattr(self, key, kwargs[key])
        results = sweep_angle(self.system, self.intensity,
                              self.start, self.end, self.step)
        self.sweep_data = sweep_df(results)
        return self

    def plot(self):
        self.clf()
        self.ax = self.add_subplot(1, 1, 1)
        self.ax_eff = self.ax.twinx()
        self.axes_list = [self.ax, self.ax_eff]

        angles = self.sweep_data.index
        self.ax.plot(angles, self.sweep_data['power'],
                     c=self._rgb['power'], label='output power')
        self.ax_eff.plot(angles, 100*self.sweep_data['efficiency'],
                         c=self._rgb['efficiency'], linestyle='--',
                         label='efficiency')

        self.ax.set_title("Angular Response", pad=10.0)
        self.ax.set_xlabel('zenith angle (deg)')
        self.ax.set_ylabel('output power (W)')
        self.ax_eff.set_ylabel('efficiency (%)')
        self.ax.grid(True)

        for ax in self.axes_list:
            self.style_axes(ax)

        lines = [*self.ax.get_lines(), *self.ax_eff.get_lines()]
        self.ax.legend(lines, [ln.get_label() for ln in lines])

        self.canvas.draw()

        return self
