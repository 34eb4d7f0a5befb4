import pytest

from smartroad.car import Borders, Car, Model
from smartroad.config import (
    CRUISE_SPEED,
    SCAN_DISTANCE,
    SECTOR_WIDTH,
    SPEED_LIMIT,
    WINDOW_SIZE,
)
from smartroad.path import Direction, Moving, Turning, build_path
from smartroad.statistics import Statistics


def make(direction=Direction.NORTH, turning=Turning.STRAIGHT, car_id=0):
    return Car(direction, turning, car_id, Model.STANDARD)


@pytest.mark.parametrize(
    "direction, moving",
    [
        (Direction.NORTH, Moving.DOWN),
        (Direction.EAST, Moving.LEFT),
        (Direction.SOUTH, Moving.UP),
        (Direction.WEST, Moving.RIGHT),
    ],
)
def test_initial_moving(direction, moving):
    assert make(direction).moving is moving


def test_entry_coords_north():
    car = make(Direction.NORTH, Turning.STRAIGHT)
    first = car.path[0]
    assert car.x == pytest.approx(SECTOR_WIDTH * first.x)
    assert car.y == pytest.approx(SECTOR_WIDTH * first.y - SECTOR_WIDTH)


def test_entry_coords_west():
    car = make(Direction.WEST, Turning.LEFT)
    first = car.path[0]
    assert car.x == pytest.approx(SECTOR_WIDTH * first.x - SECTOR_WIDTH)
    assert car.y == pytest.approx(SECTOR_WIDTH * first.y)


def test_path_matches_build_path():
    car = make(Direction.EAST, Turning.RIGHT)
    assert car.path == build_path(Direction.EAST, Turning.RIGHT)
    assert car.index == 0
    assert car.vel == 1.0


def test_equality_by_id():
    a = make(Direction.NORTH, car_id=3)
    b = make(Direction.SOUTH, Turning.LEFT, car_id=3)
    c = make(Direction.NORTH, car_id=4)
    assert a == b
    assert a != c


def test_model_default_and_explicit():
    assert Car(Direction.NORTH, Turning.LEFT, 1, Model.SPORT).model is Model.SPORT
    models = {Car(Direction.NORTH, Turning.LEFT, i).model for i in range(50)}
    assert models <= set(Model)


def test_sector_follows_index():
    car = make()
    car.index = 2
    assert car.sector(0) == car.path[2]
    assert car.sector(1) == car.path[3]


def test_stop():
    car = make()
    car.stop()
    assert car.vel == 0.0


def test_accelerate_increases_below_limit():
    car = make()
    before = car.vel
    car.accelerate(SCAN_DISTANCE)
    assert before < car.vel < SPEED_LIMIT


def test_accelerate_less_for_short_distance():
    far, near = make(), make()
    far.accelerate(SCAN_DISTANCE * 2)
    near.accelerate(SCAN_DISTANCE / 2)
    assert far.vel > near.vel > 1.0


def test_accelerate_at_limit_unchanged():
    car = make()
    car.vel = SPEED_LIMIT
    car.accelerate(SCAN_DISTANCE)
    assert car.vel == SPEED_LIMIT


def test_brake_to_zero_distance_stops():
    car = make()
    car.brake(0.0)
    assert car.vel == 0.0


def test_brake_proportional_to_distance():
    car = make()
    car.brake(SCAN_DISTANCE / 2)
    assert car.vel == pytest.approx(0.5)


def test_brake_ignored_when_far():
    car = make()
    car.vel = 0.5
    car.brake(SCAN_DISTANCE)
    assert car.vel == 0.5


def test_borders_and_center():
    car = make()
    car.x, car.y = 100.0, 200.0
    assert car.borders() == Borders(
        top=200.0, right=100.0 + SECTOR_WIDTH, bottom=200.0 + SECTOR_WIDTH, left=100.0
    )
    assert car.center() == pytest.approx(
        (100.0 + SECTOR_WIDTH / 2, 200.0 + SECTOR_WIDTH / 2)
    )


def test_distance_to():
    a, b = make(car_id=0), make(car_id=1)
    b.x, b.y = a.x + 3.0, a.y + 4.0
    assert a.distance_to(b) == pytest.approx(5.0)
    assert b.distance_to(a) == pytest.approx(a.distance_to(b))
    assert a.distance_to(a) == 0.0


def test_sector_pos_at_entry_is_zero():
    for direction in Direction:
        car = make(direction)
        assert car.sector_pos() == pytest.approx(0.0)


def test_is_done():
    car = make(Direction.SOUTH)
    assert car.moving is Moving.UP
    assert not car.is_done()
    car.y = -SECTOR_WIDTH
    assert car.is_done()

    down = make(Direction.NORTH)
    down.y = WINDOW_SIZE
    assert down.is_done()


def test_record_time():
    car = make()
    stats = Statistics()
    car.record_time(stats, now=car.started + 2.5)
    assert stats.max_time == pytest.approx(2.5)
    assert stats.min_time == pytest.approx(2.5)
    assert stats.average_time == pytest.approx(2.5)


def test_adjust_position_snaps_to_lane():
    car = make(Direction.NORTH, Turning.STRAIGHT)
    car.index = 2
    car.x = 12.0
    car.adjust_position()
    assert car.x == pytest.approx(SECTOR_WIDTH * car.sector(0).x)


def test_move_alone_advances():
    car = make(Direction.NORTH, Turning.RIGHT)
    y0 = car.y
    car.move([])
    assert car.y > y0
    assert car.vel > 1.0


def test_move_reaches_exit_eventually():
    car = make(Direction.WEST, Turning.STRAIGHT)
    for _ in range(2000):
        car.move([])
        if car.is_done():
            break
    assert car.is_done()
    assert car.index == len(car.path) - 1


def test_forward_scan_brakes_for_car_ahead():
    car = make(Direction.NORTH, Turning.STRAIGHT, car_id=0)
    other = make(Direction.NORTH, Turning.STRAIGHT, car_id=1)
    other.y = car.y + SECTOR_WIDTH
    car.forward_scan([other])
    assert car.vel < 1.0


def test_forward_scan_accelerates_when_clear():
    car = make(Direction.NORTH, Turning.STRAIGHT, car_id=0)
    behind = make(Direction.NORTH, Turning.STRAIGHT, car_id=1)
    behind.y = car.y - SECTOR_WIDTH
    car.forward_scan([behind, car])
    assert car.vel > 1.0


def test_ray_casting_without_cars_keeps_speed():
    car = make()
    car.index = 3
    car.ray_casting([])
    assert car.vel == 1.0


def test_sector_in_front_brakes():
    car = make(Direction.NORTH, Turning.STRAIGHT, car_id=0)
    car.index = 3
    car.x, car.y = SECTOR_WIDTH * 4, SECTOR_WIDTH * 3
    other = make(Direction.NORTH, Turning.STRAIGHT, car_id=1)
    other.index = 4
    other.x, other.y = SECTOR_WIDTH * 4, SECTOR_WIDTH * 4
    car.sector_in_front([other])
    assert car.vel < 1.0


def test_center_scan_sets_cruise_speed():
    car = make(Direction.NORTH, Turning.LEFT, car_id=0)
    car.index = 5
    other = make(Direction.SOUTH, Turning.LEFT, car_id=1)
    other.index = 6
    car.center_scan([other])
    assert car.vel == CRUISE_SPEED


def test_center_scan_ignores_earlier_cars():
    car = make(Direction.NORTH, Turning.LEFT, car_id=5)
    car.index = 5
    other = make(Direction.SOUTH, Turning.LEFT, car_id=1)
    other.index = 6
    car.center_scan([other])
    assert car.vel == 1.0


def test_check_passing_stops_for_crossing_straight_car():
    car = make(Direction.NORTH, Turning.STRAIGHT, car_id=0)
    other = make(Direction.WEST, Turning.STRAIGHT, car_id=1)
    other.index = 7
    other.x, other.y = car.x + SECTOR_WIDTH, car.y
    car.check_passing([other])
    assert car.vel == 0.0


def test_check_passing_ignores_same_direction():
    car = make(Direction.NORTH, Turning.STRAIGHT, car_id=0)
    other = make(Direction.NORTH, Turning.STRAIGHT, car_id=1)
    other.index = 7
    other.x, other.y = car.x, car.y + SECTOR_WIDTH
    car.check_passing([other])
    assert car.vel == 1.0