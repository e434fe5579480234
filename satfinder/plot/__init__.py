"""Plotting utilities for pointing results"""

from .skyplot import SkyPlot

__all__ = ['SkyPlot']
