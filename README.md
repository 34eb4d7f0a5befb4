# smartroad

A traffic simulation of a four-way intersection with no traffic lights. Cars
arrive from the north, east, south and west. Each car takes one of three lanes
(turn left, go straight or turn right), and every car adjusts its own speed by
scanning the cars around it, so that they get through without colliding.

## Installation

```
pip install .
```

The window is drawn with `pygame`, which is installed as a dependency.

## Running

```
smartroad
```

This opens a 1000 × 1000 window showing the intersection. The images are read
from an asset directory, by default `assets` in the current directory; another
one can be given with `--assets`:

```
smartroad --assets path/to/assets
```

The directory must hold `road.png` (the background) and `cars/1.png`,
`cars/2.png` and `cars/6.png` (the standard, sport and taxi sprites, facing
up). These images are not part of the package; without them the window cannot
be drawn and the command stops with an error.

### Controls

| Key    | Action                                        |
|--------|-----------------------------------------------|
| Up     | Add a car coming from the south               |
| Down   | Add a car coming from the north               |
| Right  | Add a car coming from the west                |
| Left   | Add a car coming from the east                |
| R      | Toggle random car generation                  |
| Escape | Stop the simulation and show final statistics |

Pressing an arrow key turns off random generation. While random generation is
on, a car from a random direction is added every half second. A new car is
only added when a lane on its road has room for it (the lane is empty or its
last car has moved past the entrance), and no car is added while nine or more
left-turning or straight cars inside the intersection are standing still.
Closing the window ends the program.

### Final statistics

After Escape, the window shows:

- the number of cars added,
- the highest and lowest velocity recorded, in pixels per second,
- the longest and shortest time a car needed to leave the window, and the
  midpoint of the two as the average time,
- the number of close calls and collisions, each counted as the frames two
  cars spent too near each other, divided by two and by the frame rate.

The simulation does not resume after the statistics are shown.

## Using the simulation in code

The simulation does not need a window. `smartroad.state.State` holds the four
roads and the statistics:

```python
import random

from smartroad.path import Direction
from smartroad.state import State

state = State(rng=random.Random(1))
state.add_car(Direction.NORTH)
state.add_car_random()

for _ in range(1000):
    state.update()

print(state.stats.collisions(), state.stats.max_velocity)
```

The modules:

- `smartroad.path`: the `Direction`, `Turning` and `Moving` enums, `Sector`,
  and `build_path(direction, turning)`, which lists the grid sectors a car
  follows from entry to exit.
- `smartroad.car`: `Car`, `Model` and `Borders`. A car moves one frame with
  `move(cars)` and keeps its distance with `forward_scan`, `ray_casting`,
  `check_passing`, `sector_in_front` and `center_scan`.
- `smartroad.road`: `Route`, the three lanes entering from one direction,
  with `add_car`, `available_turnings`, `choose_turning` and `cleanup`.
- `smartroad.state`: `State` (`update`, `add_car`, `add_car_random`,
  `all_cars`), plus `detect_collision`, `detect_close_call` and
  `detect_deadlock`.
- `smartroad.statistics`: `Statistics`, which collects what the final screen
  shows.
- `smartroad.config`: the sizes, distances and speeds the simulation uses.
- `smartroad.app`: the window and its helpers `handle_key`,
  `statistics_lines`, `round_to_tenth`, `car_rotation`, and `main`, which the
  `smartroad` command runs.