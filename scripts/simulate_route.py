"""
Runs one route simulation against the real Directions service and prints a summary.
Optionally exports the trajectory to CSV (lat, lng, timestamp).

Usage:
    python scripts/simulate_route.py "Av. Paulista, São Paulo" "Ibirapuera Park" --speed-kmh 40 --csv trip.csv
"""
import argparse
import logging

import pandas as pd

from routing.directions_client import DirectionsClient
from simulation.models import SimulationResult
from simulation.service import RouteSimulationService


def trajectory_to_frame(result: SimulationResult) -> pd.DataFrame:
    """One row per simulated fix, columns lat/lng/timestamp (ms from trip start)."""
    return pd.DataFrame(
        [step.to_dict() for step in result.steps],
        columns=["lat", "lng", "timestamp"],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate a GPS trace along a routed path.")
    parser.add_argument("origin", help="origin place name or 'lat,lng'")
    parser.add_argument("destination", help="destination place name or 'lat,lng'")
    parser.add_argument("--speed-kmh", type=float, default=50.0)
    parser.add_argument("--timeout", type=float, default=None, help="Directions request timeout in seconds")
    parser.add_argument("--csv", dest="csv_path", default=None, help="write the trajectory to this CSV file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    service = RouteSimulationService(DirectionsClient(timeout=args.timeout))
    result = service.simulate(args.origin, args.destination, args.speed_kmh)

    print(f"\nTotal duration: {result.total_duration_seconds}s ({len(result.steps)} fixes)")
    first, last = result.steps[0], result.steps[-1]
    print(f"  start: {first.lat:.5f}, {first.lng:.5f} @ {first.timestamp_ms}ms")
    print(f"  end:   {last.lat:.5f}, {last.lng:.5f} @ {last.timestamp_ms}ms")

    if args.csv_path:
        frame = trajectory_to_frame(result)
        frame.to_csv(args.csv_path, index=False)
        print(f"✅ Saved {len(frame)} fixes to '{args.csv_path}'")


if __name__ == "__main__":
    main()
