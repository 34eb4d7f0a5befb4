"""One approach to the crossroads, holding a lane of cars per turning."""

from __future__ import annotations

import random
from typing import Optional

from .car import Car
from .path import Direction, Turning
from .statistics import Statistics


class Route:
    """The three lanes (left, straight, right) entering from one direction."""

    def __init__(self, direction: Direction) -> None:
        self.direction = direction
        self.lanes: dict[Turning, list[Car]] = {turning: [] for turning in Turning}

    def __repr__(self) -> str:
        counts = ", ".join(f"{t.name}={len(lane)}" for t, lane in self.lanes.items())
        return f"Route({self.direction.name}: {counts})"

    @property
    def cars(self) -> list[Car]:
        """Every car on this route, lane by lane."""
        return [car for lane in self.lanes.values() for car in lane]

    def add_car(self, car: Car) -> None:
        """Put a car at the back of the lane matching its turning."""
        self.lanes[car.turning].append(car)

    def available_turnings(self) -> list[Turning]:
        """Lanes that are empty or whose last car has cleared the entrance."""
        return [
            turning
            for turning, lane in self.lanes.items()
            if not lane or lane[-1].index > 2
        ]

    def choose_turning(self, rng: Optional[random.Random] = None) -> Optional[Turning]:
        """Pick a free lane at random, or None when every lane is blocked."""
        options = self.available_turnings()
        if not options:
            return None
        return (rng if rng is not None else random).choice(options)

    def cleanup(self, stats: Statistics) -> None:
        """Record crossing times of cars that have left, then drop them."""
        for lane in self.lanes.values():
            for car in lane:
                if car.is_done():
                    car.record_time(stats)
            lane[:] = [car for car in lane if not car.is_done()]