import pytest

from ftracker.core.calories import (
    running_spent_calories,
    swimming_spent_calories,
    walking_spent_calories,
)
from ftracker.core.kinematics import swimming_mean_speed


def test_running_calories():
    # speed 0.65 km/h: 18.0 * 0.65 * 1.79 * 70 / 1000 * 1 * 60
    assert running_spent_calories(1000, 70.0, 1.0) == pytest.approx(87.9606)


def test_running_calories_zero_duration():
    assert running_spent_calories(1000, 70.0, 0) == 0


def test_running_calories_non_decreasing_in_steps():
    previous = running_spent_calories(0, 70.0, 1.5)
    for action in range(0, 20000, 250):
        current = running_spent_calories(action, 70.0, 1.5)
        assert current >= previous
        previous = current


def test_walking_calories():
    # speed 0.65 km/h -> 0.1807 m/s, height 1.75 m
    expected = (0.035 * 70 + 0.1807 ** 2 / 1.75 * (0.029 * 70)) * 1.0 * 60
    assert walking_spent_calories(1000, 1.0, 70.0, 175.0) == pytest.approx(expected)
    assert walking_spent_calories(1000, 1.0, 70.0, 175.0) == pytest.approx(149.2726, abs=1e-4)


def test_walking_calories_zero_duration():
    # The weight-only term is still scaled by the duration
    assert walking_spent_calories(1000, 0, 70.0, 175.0) == 0


def test_walking_calories_without_steps_keeps_weight_term():
    assert walking_spent_calories(0, 1.0, 70.0, 175.0) == pytest.approx(0.035 * 70 * 60)


def test_swimming_calories():
    assert swimming_spent_calories(25, 40, 1.0, 70.0) == pytest.approx(294.0)


def test_swimming_calories_matches_formula():
    for length_pool, count_pool, duration, weight in [
        (25, 40, 1.0, 70.0),
        (50, 12, 0.75, 82.5),
        (25, 0, 2.0, 60.0),
        (25, 40, 0, 70.0),
    ]:
        speed = swimming_mean_speed(length_pool, count_pool, duration)
        expected = (speed + 1.1) * 2 * weight * duration
        assert swimming_spent_calories(length_pool, count_pool, duration, weight) == pytest.approx(expected)


def test_walking_calories_zero_height_keeps_weight_term():
    assert walking_spent_calories(1000, 1.0, 70.0, 0) == pytest.approx(0.035 * 70 * 60)
