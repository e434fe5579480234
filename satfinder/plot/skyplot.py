"""Polar sky plot of antenna look angles"""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..core.data_structures import PointingAngles, VisibleSatellite


class SkyPlot:
    """Plot satellites and the current antenna orientation on a polar sky view.

    North is up and azimuth increases clockwise; the radius is zenith
    distance (90 - elevation) so the horizon is the outer ring.
    """

    def __init__(self, title: str = ''):
        self._colors = [
            '#1f77b4',
            '#ff7f0e',
            '#2ca02c',
            '#d62728',
            '#9467bd',
            '#8c564b',
        ]
        self._title = title
        self.fig = plt.figure(figsize=(6, 6))
        self.ax = self.fig.add_subplot(111, projection='polar')
        self.ax.set_theta_zero_location('N')
        self.ax.set_theta_direction(-1)
        self.ax.set_rlim(0, 90)
        self.ax.set_yticks([0, 30, 60, 90])
        self.ax.set_yticklabels(['90', '60', '30', '0'])
        if title:
            self.ax.set_title(title)
        self._count = 0

    def add_target(self, angles: PointingAngles, label: str = '', **kwargs):
        """
        Add a satellite look direction

        Parameters:
        -----------
        angles : PointingAngles
            Target look angles
        label : str
            Legend label
        **kwargs : dict
            color : str
                Marker color as hex code
            marker_size : float
                Marker size
        """
        color = kwargs.get('color', self._colors[self._count % len(self._colors)])
        self.ax.scatter(np.radians(angles.azimuth_deg), 90.0 - angles.elevation_deg,
                        s=kwargs.get('marker_size', 40), color=color, label=label or None)
        self._count += 1

    def add_orientation(self, azimuth_deg: float, elevation_deg: float, label: str = 'antenna'):
        """Mark the current antenna orientation"""
        self.ax.scatter(np.radians(azimuth_deg), 90.0 - elevation_deg,
                        marker='x', s=60, color='k', label=label)

    def add_visible(self, satellites: Sequence[VisibleSatellite], only_visible: bool = True):
        """Add every (visible) satellite from a ranking"""
        for item in satellites:
            if only_visible and not item.is_visible:
                continue
            self.add_target(item.solution.angles, item.satellite.name)

    def save(self, path: str, dpi: Optional[int] = 100):
        """Write the figure to ``path``"""
        if self._count:
            self.ax.legend(loc='lower left', fontsize='small', bbox_to_anchor=(1.0, 0.0))
        self.fig.savefig(path, dpi=dpi, bbox_inches='tight')

    def close(self):
        plt.close(self.fig)
