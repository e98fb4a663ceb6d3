"""Calories spent per training type.

Each formula multiplies out left to right in a fixed order; reordering the
terms changes the last digits of the result, so keep the expressions as is.
"""

from ftracker.core.constants import (
    CM_IN_M,
    KMH_IN_MSEC,
    M_IN_KM,
    MIN_IN_HOUR,
    RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER,
    RUNNING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
    WALKING_CALORIES_WEIGHT_MULTIPLIER,
    WALKING_SPEED_HEIGHT_MULTIPLIER,
)
from ftracker.core.kinematics import mean_speed, swimming_mean_speed


def running_spent_calories(action: int, weight: float, duration: float) -> float:
    """
    Calories spent while running.

    action: number of steps
    weight: body weight, kg
    duration: hours
    """
    mean_speed_kmh = mean_speed(action, duration)
    speed_calories_ratio = RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER * mean_speed_kmh

    # M_IN_KM acts as a calibration divisor here, not a unit conversion
    return (
        (speed_calories_ratio * RUNNING_CALORIES_MEAN_SPEED_SHIFT)
        * weight / M_IN_KM * duration * MIN_IN_HOUR
    )


def walking_spent_calories(
    action: int, duration: float, weight: float, height: float
) -> float:
    """
    Calories spent while walking.

    action: number of steps
    duration: hours
    weight: body weight, kg
    height: body height, cm; zero drops the height/speed term
    """
    mean_speed_ms = mean_speed(action, duration) * KMH_IN_MSEC
    if height == 0:
        height_speed_ratio = 0.0
    else:
        height_speed_ratio = mean_speed_ms ** 2 / (height / CM_IN_M)
    weight_calories_ratio = WALKING_CALORIES_WEIGHT_MULTIPLIER * weight
    weight_speed_ratio = WALKING_SPEED_HEIGHT_MULTIPLIER * weight

    return (
        (weight_calories_ratio + height_speed_ratio * weight_speed_ratio)
        * duration * MIN_IN_HOUR
    )


def swimming_spent_calories(
    length_pool: int, count_pool: int, duration: float, weight: float
) -> float:
    """
    Calories spent while swimming.

    length_pool: pool length, m
    count_pool: laps swum
    duration: hours
    weight: body weight, kg
    """
    mean_speed_kmh = swimming_mean_speed(length_pool, count_pool, duration)
    weight_calories_ratio = SWIMMING_CALORIES_WEIGHT_MULTIPLIER * weight

    return (mean_speed_kmh + SWIMMING_CALORIES_MEAN_SPEED_SHIFT) * weight_calories_ratio * duration
