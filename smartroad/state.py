"""The whole crossroads: four routes, their cars and the statistics."""

from __future__ import annotations

import copy
import random
from collections import Counter
from typing import Optional, Sequence

from .car import Car
from .config import CLOSE_CALL_DISTANCE, COLLISION_DISTANCE, MARGIN, SECTOR_WIDTH
from .path import Direction, Turning
from .road import Route
from .statistics import Statistics

# Stop spawning once this many tracked cars stand still.
_MAX_STOPPED = 9

_MIDDLE_SECTORS = frozenset({(5, 5), (5, 6), (6, 5), (6, 6)})

# Lanes whose cars can meet other traffic inside the crossroads.
_TRACKED_LANES = (Turning.LEFT, Turning.STRAIGHT)


class State:
    """Routes, statistics and the flags the interface toggles."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.roads: dict[Direction, Route] = {d: Route(d) for d in Direction}
        self.stats = Statistics()
        self.show_final_statistics = False
        self.auto_spawn = False
        self.total_cars = 0
        self.rng = rng if rng is not None else random.Random()

    def update(self) -> None:
        """Advance every car by one frame against a snapshot of the traffic."""
        snapshot = self.all_cars()
        for route in self.roads.values():
            route.cleanup(self.stats)
            for car in route.cars:
                if detect_collision(car, snapshot):
                    self.stats.add_collision()
                elif detect_close_call(car, snapshot):
                    self.stats.add_close_call()

                if detect_deadlock(snapshot, car):
                    car.stop()
                    continue
                self.stats.record_velocity(car.vel)
                car.move(snapshot)

    def add_car(self, direction: Direction) -> None:
        """Spawn a car from ``direction`` in a free lane, if traffic allows."""
        stopped = sum(1 for car in self.all_cars() if car.vel == 0.0)
        if stopped >= _MAX_STOPPED:
            return
        route = self.roads[direction]
        turning = route.choose_turning(self.rng)
        if turning is None:
            return
        route.add_car(Car(direction, turning, self.total_cars))
        self.total_cars += 1

    def all_cars(self) -> list[Car]:
        """Copies of the left and straight cars currently inside the grid."""
        return [
            copy.copy(car)
            for route in self.roads.values()
            for turning in _TRACKED_LANES
            for car in route.lanes[turning]
            if 1 <= car.index < 11
        ]

    def add_car_random(self) -> None:
        """Spawn a car from a random direction."""
        self.add_car(self.rng.choice(list(Direction)))


def detect_close_call(car: Car, cars: Sequence[Car]) -> bool:
    """Whether another car is within close-call distance."""
    return any(c.id != car.id and car.distance_to(c) <= CLOSE_CALL_DISTANCE for c in cars)


def detect_collision(car: Car, cars: Sequence[Car]) -> bool:
    """Whether another car is within collision distance."""
    return any(c.id != car.id and car.distance_to(c) <= COLLISION_DISTANCE for c in cars)


def detect_deadlock(cars: Sequence[Car], car: Car) -> bool:
    """Whether a left-turning car must wait to avoid locking the centre."""
    if car.turning is not Turning.LEFT:
        return False

    in_middle = [
        c for c in cars if (c.sector(0).x, c.sector(0).y) in _MIDDLE_SECTORS
    ]
    at_end_of_sector = car.sector_pos() > SECTOR_WIDTH - MARGIN

    if car.index == 3 and at_end_of_sector:
        return len(in_middle) >= 2

    if car.index == 4 and at_end_of_sector:
        per_direction = Counter(c.direction for c in in_middle)
        if any(
            per_direction[d] >= 2 for d in Direction if d is not car.direction
        ):
            return False
        return len(in_middle) >= 3

    return False