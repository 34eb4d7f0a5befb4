"""Simulation and window constants shared across the package."""

WINDOW_SIZE: int = 1000
WINDOW_TITLE: str = "Smart-Road"
FPS: int = 60

# The crossroads is laid out on a 12 x 12 grid of square sectors.
GRID_SIZE: int = 12
SECTOR_WIDTH: float = WINDOW_SIZE / GRID_SIZE

CLOSE_CALL_DISTANCE: float = SECTOR_WIDTH * 0.9
COLLISION_DISTANCE: float = SECTOR_WIDTH * 0.8
SCAN_DISTANCE: float = SECTOR_WIDTH * 3.0
ACCELERATION_DISTANCE: float = SCAN_DISTANCE / 2.0

SPEED_LIMIT: float = 2.0
MAX_VELOCITY: float = (SECTOR_WIDTH * SPEED_LIMIT) / FPS

CRUISE_SPEED: float = SPEED_LIMIT * 0.35
MARGIN: float = 4.0

# Milliseconds between two randomly spawned cars.
RANDOM_INTERVAL: int = WINDOW_SIZE // int(SPEED_LIMIT)

FONT_SIZE: float = 20.0
TITLE_SIZE: float = FONT_SIZE * 1.5