import pytest

from smartroad.statistics import Statistics

SAMPLES = [1, 2, 42, 99]


def test_defaults_are_zero():
    stats = Statistics()
    assert stats.min_time == 0.0
    assert stats.max_time == 0.0
    assert stats.max_velocity == 0.0
    assert stats.close_calls() == 0
    assert stats.min_velocity == 0.0
    assert stats.max_vehicles == 0


@pytest.mark.parametrize("n", SAMPLES)
def test_max_vehicles(n):
    stats = Statistics()
    stats.update_max_vehicles(n)
    assert stats.max_vehicles == n
    stats.update_max_vehicles(n - 1)
    assert stats.max_vehicles == n


@pytest.mark.parametrize("n", SAMPLES)
def test_min_time(n):
    stats = Statistics()
    stats.update_min_time(float(n))
    assert stats.min_time == n
    stats.update_min_time(n + 1.0)
    assert stats.min_time == n
    stats.update_min_time(n - 1.0)
    assert stats.min_time == n - 1.0


@pytest.mark.parametrize("n", SAMPLES)
def test_max_time(n):
    stats = Statistics()
    stats.update_max_time(float(n))
    assert stats.max_time == n
    stats.update_max_time(n - 1.0)
    assert stats.max_time == n


@pytest.mark.parametrize("n", SAMPLES)
def test_min_velocity(n):
    stats = Statistics()
    stats.update_min_velocity(float(n))
    assert stats.min_velocity == n
    stats.update_min_velocity(n + 1.0)
    assert stats.min_velocity == n
    stats.update_min_velocity(n - 1.0)
    assert stats.min_velocity == n - 1.0


@pytest.mark.parametrize("n", SAMPLES)
def test_max_velocity(n):
    stats = Statistics()
    stats.update_max_velocity(float(n))
    assert stats.max_velocity == n
    stats.update_max_velocity(n - 1.0)
    assert stats.max_velocity == n
    stats.update_max_velocity(n + 1.0)
    assert stats.max_velocity == n + 1.0


@pytest.mark.parametrize("n", SAMPLES)
def test_collisions(n):
    stats = Statistics()
    for _ in range(n * 120 + 1):
        stats.add_collision()
    assert stats.collisions() == n


@pytest.mark.parametrize("n", SAMPLES)
def test_close_calls(n):
    stats = Statistics()
    for _ in range(n * 120 + 1):
        stats.add_close_call()
    assert stats.close_calls() == n
    assert stats.collisions() == 0


def test_record_velocity_tracks_both_extremes():
    stats = Statistics()
    for v in (1.5, 0.5, 2.0):
        stats.record_velocity(v)
    assert stats.min_velocity == 0.5
    assert stats.max_velocity == 2.0


def test_record_time_and_average():
    stats = Statistics()
    stats.record_time(2.0)
    stats.record_time(6.0)
    stats.update_average_time()
    assert stats.min_time == 2.0
    assert stats.max_time == 6.0
    assert stats.average_time == 4.0