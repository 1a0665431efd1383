#!/usr/bin/env python3
"""
Simulate the cleanup robot against a running API.

Posts a real-time sample every tick (random walk around a start position)
and refreshes cumulative, performance and environmental figures every few
ticks so the dashboard has something to draw.
"""
import argparse
import random
import time

import requests

# Configuration
API_URL = "http://localhost:3000"
START_POSITION = (37.7749, -122.4194)
STATUSES = ["Active", "Active", "Active", "Collecting", "Returning", "Charging"]

# Share of collected trash per material
MATERIAL_MIX = {"plastic": 0.6, "metal": 0.3, "organic": 0.1}


class RobotState:
    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        self.status = "Active"
        self.trash_collected = 0
        self.totals = {name: 0 for name in MATERIAL_MIX}
        self.operational_minutes = 0

    def step(self, tick_minutes: int) -> None:
        """Advance the robot by one tick."""
        self.status = random.choice(STATUSES)
        if self.status != "Charging":
            self.latitude += random.gauss(0, 0.0003)
            self.longitude += random.gauss(0, 0.0003)
            self.operational_minutes += tick_minutes

        picked = random.randint(0, 4) if self.status in ("Active", "Collecting") else 0
        self.trash_collected += picked
        for _ in range(picked):
            material = random.choices(list(MATERIAL_MIX), weights=MATERIAL_MIX.values())[0]
            self.totals[material] += 1

    @property
    def total(self) -> int:
        return sum(self.totals.values())

    def efficiency(self) -> float:
        """Items collected per operational hour."""
        if not self.operational_minutes:
            return 0.0
        return round(self.total / (self.operational_minutes / 60), 2)


def post(session: requests.Session, path: str, payload: dict) -> bool:
    try:
        res = session.post(f"{API_URL}{path}", json=payload, timeout=5)
    except requests.RequestException as e:
        print(f"  Connection error on {path}: {e}")
        return False
    if res.status_code != 201:
        print(f"  {path}: {res.status_code} {res.text}")
        return False
    return True


def main():
    global API_URL

    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--api-url", default=API_URL)
    parser.add_argument("--ticks", type=int, default=60, help="number of samples to send")
    parser.add_argument("--interval", type=float, default=5.0, help="seconds between samples")
    parser.add_argument("--tick-minutes", type=int, default=1, help="simulated minutes per tick")
    parser.add_argument("--summary-every", type=int, default=6, help="ticks between summary posts")
    args = parser.parse_args()
    API_URL = args.api_url.rstrip("/")

    print("=" * 60)
    print(f"Cleanup robot simulator -> {API_URL}")
    print("=" * 60)

    robot = RobotState(*START_POSITION)
    session = requests.Session()
    sent = 0

    for tick in range(1, args.ticks + 1):
        robot.step(args.tick_minutes)
        if post(session, "/api/real-time", {
            "trash_collected": robot.trash_collected,
            "robot_status": robot.status,
            "latitude": round(robot.latitude, 6),
            "longitude": round(robot.longitude, 6),
        }):
            sent += 1

        if tick % args.summary_every == 0:
            # Cumulative totals reject zero counts, so wait for every material
            if all(robot.totals.values()):
                post(session, "/api/cumulative", {"total_trash_collected": robot.total, **robot.totals})
            post(session, "/api/performance", {
                "efficiency": robot.efficiency(),
                "operational_time": robot.operational_minutes,
            })
            post(session, "/api/environmental-impact", {
                "pollution_reduction": robot.total * 2,
                "carbon_offset": round(robot.total * 0.25, 2),
            })
            print(f"  tick {tick}: {robot.total} items, efficiency {robot.efficiency()}/h")

        if tick < args.ticks:
            time.sleep(args.interval)

    print(f"\n{'=' * 60}")
    print(f"Done: {sent}/{args.ticks} real-time samples accepted")
    print("=" * 60)


if __name__ == "__main__":
    main()
