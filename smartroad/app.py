"""Window, input handling and drawing for the crossroads simulation."""

from __future__ import annotations

import argparse
import math
import os
import time
from pathlib import Path
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .car import Car, Model  # noqa: E402
from .config import (  # noqa: E402
    FONT_SIZE,
    FPS,
    RANDOM_INTERVAL,
    SECTOR_WIDTH,
    TITLE_SIZE,
    WINDOW_SIZE,
    WINDOW_TITLE,
)
from .path import Direction, Moving  # noqa: E402
from .state import State  # noqa: E402
from .statistics import Statistics  # noqa: E402

_CAR_SPRITES = {
    Model.STANDARD: Path("cars") / "1.png",
    Model.SPORT: Path("cars") / "2.png",
    Model.TAXI_GREEN: Path("cars") / "6.png",
}
_BACKGROUND = Path("road.png")

_ROTATION = {
    Moving.UP: 0.0,
    Moving.LEFT: -90.0,
    Moving.DOWN: -180.0,
    Moving.RIGHT: -270.0,
}

# Arrow keys spawn a car travelling in the arrow's direction.
_SPAWN_KEYS = {
    pygame.K_UP: Direction.SOUTH,
    pygame.K_DOWN: Direction.NORTH,
    pygame.K_RIGHT: Direction.WEST,
    pygame.K_LEFT: Direction.EAST,
}

_CENTER_Y = WINDOW_SIZE / 2.0
_TEXT_X = _CENTER_Y - 100.0
_CAR_SCALE = 0.9


def round_to_tenth(num: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return math.copysign(math.floor(abs(num) * 10.0 + 0.5), num) / 10.0


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def statistics_lines(stats: Statistics) -> list[str]:
    """The title and lines of the final statistics screen."""
    return [
        "FINAL STATISTICS:",
        f"MAX VEHICLES: {stats.max_vehicles} CARS",
        "MAX VELOCITY: "
        f"{_format_number(round_to_tenth(stats.max_velocity * SECTOR_WIDTH))} px/s",
        "MIN VELOCITY: "
        f"{_format_number(round_to_tenth(stats.min_velocity * SECTOR_WIDTH))} px/s",
        f"MAX TIME: {_format_number(round_to_tenth(stats.max_time))} s",
        f"MIN TIME: {_format_number(round_to_tenth(stats.min_time))} s",
        f"CLOSE CALLS: {stats.close_calls()}",
        f"COLLISIONS: {stats.collisions()}",
        f"AVERAGE TIME: {_format_number(round_to_tenth(stats.average_time))} s",
    ]


def handle_key(state: State, key: int) -> None:
    """Apply one key press to the simulation state."""
    if key == pygame.K_ESCAPE:
        state.show_final_statistics = True
        return
    direction = _SPAWN_KEYS.get(key)
    if direction is not None:
        state.add_car(direction)
        state.auto_spawn = False
        return
    if key == pygame.K_r:
        state.auto_spawn = not state.auto_spawn


def car_rotation(car: Car) -> float:
    """Clockwise sprite rotation in degrees, negated; sprites face up."""
    return _ROTATION[car.moving]


class _Textures:
    """Background and car sprites loaded from an asset directory."""

    def __init__(self, assets: Path) -> None:
        self.background = pygame.image.load(str(assets / _BACKGROUND)).convert()
        self.cars = {
            model: pygame.image.load(str(assets / sprite)).convert_alpha()
            for model, sprite in _CAR_SPRITES.items()
        }


def _draw_car(screen: pygame.Surface, car: Car, textures: _Textures) -> None:
    texture = textures.cars[car.model]
    width = min(int(SECTOR_WIDTH), texture.get_width())
    height = min(int(SECTOR_WIDTH), texture.get_height())
    source = texture.subsurface(pygame.Rect(0, 0, width, height))
    scaled_size = SECTOR_WIDTH * _CAR_SCALE
    side = max(1, round(scaled_size))
    image = pygame.transform.smoothscale(source, (side, side))
    # Rotation in the sprite convention is clockwise; pygame turns counter-clockwise.
    image = pygame.transform.rotate(image, -car_rotation(car))
    left = car.x + (SECTOR_WIDTH - scaled_size) / 2.0
    top = car.y + (SECTOR_WIDTH - scaled_size) / 2.0
    centre = (left + scaled_size / 2.0, top + scaled_size / 2.0)
    screen.blit(image, image.get_rect(center=centre))


def _draw_statistics(screen: pygame.Surface, stats: Statistics) -> None:
    screen.fill((0, 0, 0))
    title_font = pygame.font.Font(None, int(TITLE_SIZE))
    font = pygame.font.Font(None, int(FONT_SIZE))
    white = (255, 255, 255)
    for i, line in enumerate(statistics_lines(stats)):
        current = title_font if i == 0 else font
        baseline = _CENTER_Y - 80.0 + 20.0 * i
        surface = current.render(line, True, white)
        screen.blit(surface, (_TEXT_X, baseline - current.get_ascent()))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="smartroad", description="Autonomous cars crossing an intersection."
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("assets"),
        help="directory holding road.png and the cars/ sprites",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the simulation until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        textures = _Textures(args.assets)
        state = State()
        clock = pygame.time.Clock()
        interval = RANDOM_INTERVAL / 1000.0
        last_spawn = time.monotonic()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(state, event.key)

            screen.fill((0, 0, 0))
            if not state.show_final_statistics:
                screen.blit(textures.background, (0, 0))
                now = time.monotonic()
                if state.auto_spawn and now - last_spawn > interval:
                    state.add_car_random()
                    last_spawn = now
                state.update()
                for route in state.roads.values():
                    for car in route.cars:
                        _draw_car(screen, car, textures)
                clock.tick(FPS)
            else:
                state.stats.update_max_vehicles(state.total_cars)
                _draw_statistics(screen, state.stats)
                clock.tick(FPS)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())