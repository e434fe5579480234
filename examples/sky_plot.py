#!/usr/bin/env python3
"""Save a polar sky plot of every satellite visible from a location"""

from satfinder.core import GeoPosition
from satfinder.plot import SkyPlot
from satfinder.pointing import get_visible_satellites


def main(output='skyplot.png'):
    observer = GeoPosition(48.8566, 2.3522)  # Paris
    satellites = get_visible_satellites(observer, min_elevation=5.0)

    plot = SkyPlot('Geostationary arc from Paris')
    plot.add_visible(satellites)
    plot.add_orientation(180.0, 30.0, label='current dish')
    plot.save(output, dpi=150)
    plot.close()
    print(f"Saved {output}")


if __name__ == "__main__":
    main()
