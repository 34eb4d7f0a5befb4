"""Cars: movement along their path and the scans that keep them apart."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .config import (
    ACCELERATION_DISTANCE,
    CLOSE_CALL_DISTANCE,
    CRUISE_SPEED,
    FPS,
    MARGIN,
    MAX_VELOCITY,
    SCAN_DISTANCE,
    SECTOR_WIDTH,
    SPEED_LIMIT,
    WINDOW_SIZE,
)
from .path import Direction, Moving, Sector, Turning, build_path
from .statistics import Statistics


class Model(Enum):
    """The look of a car."""

    STANDARD = "standard"
    SPORT = "sport"
    TAXI_GREEN = "taxi_green"


@dataclass(frozen=True)
class Borders:
    """Edges of the square a car occupies on screen."""

    top: float
    right: float
    bottom: float
    left: float


_INITIAL_MOVING = {
    Direction.NORTH: Moving.DOWN,
    Direction.EAST: Moving.LEFT,
    Direction.SOUTH: Moving.UP,
    Direction.WEST: Moving.RIGHT,
}

# One spawn in five is a taxi, one a sports car, the rest standard.
_MODEL_POOL = (
    Model.TAXI_GREEN,
    Model.SPORT,
    Model.STANDARD,
    Model.STANDARD,
    Model.STANDARD,
)


def _random_model() -> Model:
    return random.choice(_MODEL_POOL)


def _entry_coords(sector: Sector, direction: Direction) -> tuple[float, float]:
    """Place a car one sector outside the window, before its first sector."""
    x = SECTOR_WIDTH * sector.x
    y = SECTOR_WIDTH * sector.y
    if direction is Direction.WEST:
        return x - SECTOR_WIDTH, y
    if direction is Direction.EAST:
        return x + SECTOR_WIDTH, y
    if direction is Direction.NORTH:
        return x, y - SECTOR_WIDTH
    return x, y + SECTOR_WIDTH


class Car:
    """A car driving through the crossroads along a fixed path of sectors."""

    def __init__(
        self,
        direction: Direction,
        turning: Turning,
        car_id: int,
        model: Optional[Model] = None,
    ) -> None:
        self.direction = direction
        self.turning = turning
        self.id = car_id
        self.path: list[Sector] = build_path(direction, turning)
        self.x, self.y = _entry_coords(self.path[0], direction)
        self.index = 0
        self.moving = _INITIAL_MOVING[direction]
        self.vel = 1.0
        self.model = model if model is not None else _random_model()
        self.started = time.monotonic()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Car):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"Car(id={self.id}, direction={self.direction.name}, "
            f"turning={self.turning.name}, index={self.index}, "
            f"x={self.x:.1f}, y={self.y:.1f}, vel={self.vel:.2f})"
        )

    # ----------------------------------------------------------------- driving

    def move(self, cars: Sequence[Car]) -> None:
        """Advance one frame, adjusting speed against the other cars."""
        self._move_in_path(cars)
        self.moving = self.sector(0).moving
        self._change_pos(cars)

        # Right turns never cross another lane.
        if self.turning is Turning.RIGHT:
            self.accelerate(SCAN_DISTANCE)
            return

        # Still entering the crossroads.
        if self.index < 2:
            return

        if self.turning is Turning.STRAIGHT and 3 <= self.index <= 7:
            self.sector_in_front(cars)

        if self.index == 3 and self.sector_pos() > CLOSE_CALL_DISTANCE:
            self.check_passing(cars)

        if self.turning is Turning.LEFT and 5 <= self.index <= 7:
            self.center_scan(cars)

        # Past the crossing area: only keep distance to the car ahead.
        if self.index >= 8:
            self.forward_scan(cars)
            return

        self.adjust_position()
        self.ray_casting(cars)
        self.forward_scan(cars)

    def accelerate(self, distance: float) -> None:
        """Speed up towards the limit, less so when the way ahead is short."""
        factor = 1.0 if distance >= SCAN_DISTANCE else distance / SCAN_DISTANCE
        gain = (SPEED_LIMIT - self.vel) / FPS * factor
        if self.vel < SPEED_LIMIT:
            self.vel += gain

    def brake(self, distance: float) -> None:
        """Slow down to a speed proportional to the distance ahead."""
        reduction = self.vel - distance / SCAN_DISTANCE
        if reduction < 0.0:
            return
        self.vel -= reduction
        if self.vel < 0.3:
            self.stop()

    def stop(self) -> None:
        self.vel = 0.0

    def _change_pos(self, cars: Sequence[Car]) -> None:
        """Move on screen, faster when alone and slower in a crowd."""
        nearby = sum(
            1
            for c in cars
            if c.id != self.id and self.distance_to(c) < ACCELERATION_DISTANCE
        )
        factor = 1.05 if nearby == 0 else 1.00 if nearby == 1 else 0.90
        step = self.vel * MAX_VELOCITY * factor
        if self.moving is Moving.UP:
            self.y -= step
        elif self.moving is Moving.RIGHT:
            self.x += step
        elif self.moving is Moving.DOWN:
            self.y += step
        else:
            self.x -= step

    def sector_pos(self) -> float:
        """Distance travelled inside the current sector."""
        current = self.sector(0)
        sx = current.x * SECTOR_WIDTH
        sy = current.y * SECTOR_WIDTH
        if self.moving is Moving.UP:
            return SECTOR_WIDTH - (self.y - sy)
        if self.moving is Moving.RIGHT:
            return SECTOR_WIDTH - (sx - self.x)
        if self.moving is Moving.DOWN:
            return SECTOR_WIDTH - (sy - self.y)
        return SECTOR_WIDTH - (self.x - sx)

    def _move_in_path(self, cars: Sequence[Car]) -> None:
        """Step to the next sector once reached, unless it is occupied."""
        if self.index + 2 > len(self.path):
            return
        ahead = self.sector(1)
        car_ahead = any(c.sector(0) == ahead for c in cars)
        if self._reached(self.sector(0)):
            if car_ahead:
                self.stop()
            else:
                self.index += 1

    def _reached(self, target: Sector) -> bool:
        step = self.vel * MAX_VELOCITY
        if self.moving is Moving.UP:
            return self.y - step <= target.y * SECTOR_WIDTH
        if self.moving is Moving.RIGHT:
            return self.x + step >= target.x * SECTOR_WIDTH
        if self.moving is Moving.DOWN:
            return self.y + step >= target.y * SECTOR_WIDTH
        return self.x - step <= target.x * SECTOR_WIDTH

    def adjust_position(self) -> None:
        """Snap to the grid line of the current sector after a turn."""
        previous = self.path[self.index - 1]
        current = self.sector(0)
        if current.x != previous.x:
            self.y = SECTOR_WIDTH * current.y
        if current.y != previous.y:
            self.x = SECTOR_WIDTH * current.x

    def sector(self, n: int) -> Sector:
        """The sector ``n`` steps ahead of the current one."""
        return self.path[self.index + n]

    def borders(self) -> Borders:
        return Borders(
            top=self.y,
            right=self.x + SECTOR_WIDTH,
            bottom=self.y + SECTOR_WIDTH,
            left=self.x,
        )

    def record_time(self, stats: Statistics, now: Optional[float] = None) -> None:
        """Record how long this car has been on the road."""
        if now is None:
            now = time.monotonic()
        stats.record_time(now - self.started)
        stats.update_average_time()

    def is_done(self) -> bool:
        """Whether the car has fully left the window."""
        b = self.borders()
        if self.moving is Moving.UP:
            return b.bottom <= 0.0
        if self.moving is Moving.RIGHT:
            return b.left >= WINDOW_SIZE
        if self.moving is Moving.DOWN:
            return b.top >= WINDOW_SIZE
        return b.right <= 0.0

    # ---------------------------------------------------------------- scanning

    def forward_scan(self, cars: Sequence[Car]) -> None:
        """Accelerate or brake according to the nearest car straight ahead."""
        b = self.borders()
        x_lo, x_hi = b.left + MARGIN, b.right - MARGIN
        y_lo, y_hi = b.top + MARGIN, b.bottom - MARGIN
        self_x, self_y = self.center()

        distance = float(WINDOW_SIZE)
        for car in cars:
            if car.id == self.id:
                continue
            d = self.distance_to(car)
            if d > distance:
                continue
            x, y = car.center()
            if self.moving is Moving.UP:
                ahead = y < self_y and x_lo <= x <= x_hi
            elif self.moving is Moving.DOWN:
                ahead = y > self_y and x_lo <= x <= x_hi
            elif self.moving is Moving.RIGHT:
                ahead = x > self_x and y_lo <= y <= y_hi
            else:
                ahead = x < self_x and y_lo <= y <= y_hi
            if ahead:
                distance = d

        if distance > ACCELERATION_DISTANCE:
            self.accelerate(distance)
        else:
            self.brake(distance)

    def ray_casting(self, cars: Sequence[Car]) -> None:
        """Brake for the nearest crossing car that is closer to its exit."""
        distance = SCAN_DISTANCE
        x, y = self.center()
        for car in cars:
            if not (
                self._longer_distance_to_exit(car)
                and self.distance_to(car) < SCAN_DISTANCE
                and self._crossing_paths(car)
            ):
                continue
            d = self.distance_to(car)
            if d > distance:
                continue
            x2, y2 = car.center()
            if self.moving is Moving.UP:
                ahead = y > y2
            elif self.moving is Moving.DOWN:
                ahead = y < y2
            elif self.moving is Moving.RIGHT:
                ahead = x < x2
            else:
                ahead = x > x2
            if ahead:
                distance = d

        if distance < SCAN_DISTANCE:
            self.brake(distance)

    def check_passing(self, cars: Sequence[Car]) -> None:
        """Stop before the crossing while a straight car from elsewhere passes."""
        low, high = (6, 8) if self.turning is Turning.STRAIGHT else (5, 7)
        if any(
            c.id != self.id
            and c.turning is Turning.STRAIGHT
            and c.direction is not self.direction
            and self.distance_to(c) < SCAN_DISTANCE
            and low <= c.index <= high
            for c in cars
        ):
            self.stop()

    def sector_in_front(self, cars: Sequence[Car]) -> None:
        """Brake for a car occupying the next sector."""
        ahead = self.sector(1)
        for car in cars:
            if car.id != self.id and ahead == car.sector(0):
                self.brake(self.distance_to(car))
                return

    def _crossing_paths(self, other: Car) -> bool:
        """Whether ``other`` is about to enter one of our next sectors."""
        other_next = other.sector(1)
        other_current = other.sector(0)
        for sector in self.path[self.index : self.index + 3]:
            if sector == other_next or (
                sector == other_current and other.sector_pos() < SECTOR_WIDTH / 2.0
            ):
                return True
        return False

    def _remaining(self) -> float:
        return len(self.path) * SECTOR_WIDTH - (
            self.index * SECTOR_WIDTH + self.sector_pos()
        )

    def _longer_distance_to_exit(self, other: Car) -> bool:
        return self._remaining() > other._remaining()

    def center_scan(self, cars: Sequence[Car]) -> None:
        """Slow to cruise speed while a later left-turner is in the centre."""
        if any(
            self.id < c.id and 5 <= c.index <= 7 and c.turning is Turning.LEFT
            for c in cars
        ):
            self.vel = CRUISE_SPEED

    def center(self) -> tuple[float, float]:
        """The centre point of the car."""
        b = self.borders()
        return b.left + (b.right - b.left) / 2.0, b.top + (b.bottom - b.top) / 2.0

    def distance_to(self, other: Car) -> float:
        """Euclidean distance between the centres of two cars."""
        x, y = self.center()
        x2, y2 = other.center()
        return math.hypot(x - x2, y - y2)