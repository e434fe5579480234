#!/usr/bin/env python3
"""
Dish Pointing Example using satfinder

This example demonstrates:
1. Computing look angles for a catalog satellite from an observer position
2. Comparing the basic and refracted precision tiers
3. Ranking every catalog satellite by how well it can be received
4. Loading a custom catalog from CSV
"""

import argparse
import logging

from satfinder.catalog import find_satellite, load_catalog
from satfinder.core import EngineConfig, GeoPosition, PrecisionTier
from satfinder.pointing import (calculate_magnetic_declination,
                                compute_pointing_solution,
                                get_visible_satellites)


def setup_logging():
    """Setup logging configuration"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)


def print_solution(solution):
    """Print one pointing solution"""
    angles = solution.angles
    link = solution.link
    print(f"\n{solution.satellite.name} ({solution.satellite.orbital_longitude:+.1f} deg)")
    print("-" * 50)
    print(f"  Azimuth:       {angles.azimuth_deg:8.2f} deg")
    print(f"  Elevation:     {angles.elevation_deg:8.2f} deg")
    print(f"  Polarization:  {angles.polarization_deg:8.2f} deg")
    print(f"  Slant range:   {link.slant_range_km:8.0f} km")
    print(f"  Signal delay:  {link.signal_delay_ms:8.2f} ms")
    print(f"  Path loss:     {link.free_space_path_loss_db:8.2f} dB")
    print(f"  Quality:       {link.predicted_quality:8d} %")
    print(f"  Best time:     {solution.alignment_window.time_description}")


def main():
    parser = argparse.ArgumentParser(description="Compute dish pointing angles")
    parser.add_argument('--lat', type=float, default=30.0444, help="Latitude in degrees")
    parser.add_argument('--lon', type=float, default=31.2357, help="Longitude in degrees")
    parser.add_argument('--alt', type=float, default=23.0, help="Altitude in meters")
    parser.add_argument('--satellite', default="Nilesat 201", help="Satellite name")
    parser.add_argument('--catalog', help="Optional CSV catalog (name, longitude, ...)")
    parser.add_argument('--profile', default='standard', help="Atmospheric profile")
    args = parser.parse_args()

    logger = setup_logging()
    observer = GeoPosition(args.lat, args.lon, args.alt)
    catalog = load_catalog(args.catalog) if args.catalog else None

    satellite = find_satellite(args.satellite, catalog)
    if satellite is None:
        logger.error(f"Satellite not found: {args.satellite}")
        return 1

    # 1. Refracted solution (default tier)
    config = EngineConfig(profile=args.profile)
    solution = compute_pointing_solution(observer, satellite, config)
    print_solution(solution)

    # 2. Compare with the geometric tier
    basic = compute_pointing_solution(
        observer, satellite, EngineConfig(precision=PrecisionTier.BASIC, profile=args.profile))
    logger.info(f"Refraction lifts the elevation by "
                f"{solution.angles.elevation_deg - basic.angles.elevation_deg:.4f} deg")

    declination = calculate_magnetic_declination(args.lat, args.lon)
    print(f"\n  Compass azimuth (approx.): "
          f"{(solution.angles.azimuth_deg - declination) % 360.0:.1f} deg")

    # 3. Rank the catalog
    print("\nVisible satellites")
    print("=" * 50)
    for item in get_visible_satellites(observer, catalog=catalog, config=config):
        if not item.is_visible:
            continue
        print(f"  {item.satellite.name:<16} el {item.solution.angles.elevation_deg:5.1f} deg"
              f"  score {item.recommendation_score:5.1f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
