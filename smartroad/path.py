"""Directions, lanes and the grid paths cars follow through the crossroads."""

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """The side of the crossroads a car enters from."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class Turning(Enum):
    """The lane a car takes, and so where it leaves."""

    LEFT = "left"
    STRAIGHT = "straight"
    RIGHT = "right"


class Moving(Enum):
    """The screen direction a car is travelling in."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


@dataclass(frozen=True)
class Sector:
    """One grid cell; two sectors are equal when they share a position."""

    x: int
    y: int
    moving: Moving = field(compare=False)


# Entry, turning point and exit of each lane.
_WAYPOINTS: dict[tuple[Turning, Direction], tuple[Sector, Sector, Sector]] = {
    (Turning.LEFT, Direction.NORTH): (
        Sector(5, 0, Moving.DOWN), Sector(5, 6, Moving.RIGHT), Sector(11, 6, Moving.RIGHT)
    ),
    (Turning.LEFT, Direction.EAST): (
        Sector(11, 5, Moving.LEFT), Sector(5, 5, Moving.DOWN), Sector(5, 11, Moving.DOWN)
    ),
    (Turning.LEFT, Direction.SOUTH): (
        Sector(6, 11, Moving.UP), Sector(6, 5, Moving.LEFT), Sector(0, 5, Moving.LEFT)
    ),
    (Turning.LEFT, Direction.WEST): (
        Sector(0, 6, Moving.RIGHT), Sector(6, 6, Moving.UP), Sector(6, 0, Moving.UP)
    ),
    (Turning.STRAIGHT, Direction.NORTH): (
        Sector(4, 0, Moving.DOWN), Sector(4, 5, Moving.DOWN), Sector(4, 11, Moving.DOWN)
    ),
    (Turning.STRAIGHT, Direction.EAST): (
        Sector(11, 4, Moving.LEFT), Sector(5, 4, Moving.LEFT), Sector(0, 4, Moving.LEFT)
    ),
    (Turning.STRAIGHT, Direction.SOUTH): (
        Sector(7, 11, Moving.UP), Sector(7, 5, Moving.UP), Sector(7, 0, Moving.UP)
    ),
    (Turning.STRAIGHT, Direction.WEST): (
        Sector(0, 7, Moving.RIGHT), Sector(5, 7, Moving.RIGHT), Sector(11, 7, Moving.RIGHT)
    ),
    (Turning.RIGHT, Direction.NORTH): (
        Sector(3, 0, Moving.DOWN), Sector(3, 3, Moving.LEFT), Sector(0, 3, Moving.LEFT)
    ),
    (Turning.RIGHT, Direction.EAST): (
        Sector(11, 3, Moving.LEFT), Sector(8, 3, Moving.UP), Sector(8, 0, Moving.UP)
    ),
    (Turning.RIGHT, Direction.SOUTH): (
        Sector(8, 11, Moving.UP), Sector(8, 8, Moving.RIGHT), Sector(11, 8, Moving.RIGHT)
    ),
    (Turning.RIGHT, Direction.WEST): (
        Sector(0, 8, Moving.RIGHT), Sector(3, 8, Moving.DOWN), Sector(3, 11, Moving.DOWN)
    ),
}


def _step(value: int, target: int) -> int:
    if value < target:
        return value + 1
    if value > target:
        return value - 1
    return value


def _walk(start: Sector, target: Sector, moving: Moving):
    """Yield the sectors after ``start`` up to and including ``target``."""
    x, y = start.x, start.y
    while (x, y) != (target.x, target.y):
        x, y = _step(x, target.x), _step(y, target.y)
        yield Sector(x, y, moving)


def build_path(direction: Direction, turning: Turning) -> list[Sector]:
    """Return every sector a car crosses from entry to exit."""
    entry, turn, exit_ = _WAYPOINTS[(turning, direction)]
    sectors = [entry]
    sectors.extend(_walk(entry, turn, entry.moving))
    sectors.extend(_walk(turn, exit_, turn.moving))
    return sectors