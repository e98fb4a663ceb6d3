"""
Training report builder.

Looks up the training label, picks the speed and calorie formulas for its
type and renders the five-line summary shown to the user.
"""
from typing import Optional

from ftracker.core.calories import (
    running_spent_calories,
    swimming_spent_calories,
    walking_spent_calories,
)
from ftracker.core.constants import REPORT_DECIMALS, UNKNOWN_TRAINING_MESSAGE
from ftracker.core.kinematics import distance, mean_speed, swimming_mean_speed
from ftracker.core.logging import get_logger
from ftracker.schemas.training import (
    TrainingSummary,
    TrainingType,
    lookup_training_type,
)

logger = get_logger(__name__)


def summarize_training(
    action: int,
    training_type: str,
    duration: float,
    weight: float,
    height: float = 0.0,
    length_pool: int = 0,
    count_pool: int = 0,
) -> Optional[TrainingSummary]:
    """
    Compute distance, speed and calories for a training.

    Args:
        action: steps (running, walking) or strokes (swimming)
        training_type: registry label, e.g. "Бег"
        duration: hours
        weight: body weight, kg
        height: body height, cm (walking only)
        length_pool: pool length, m (swimming only)
        count_pool: laps swum (swimming only)

    Returns:
        TrainingSummary, or None when the label is not registered
    """
    kind = lookup_training_type(training_type)
    if kind is None:
        logger.warning("Unknown training type", training_type=training_type)
        return None

    # Distance is always step based, even for swimming
    dist = distance(action)
    speed = mean_speed(action, duration)

    if kind is TrainingType.run:
        calories = running_spent_calories(action, weight, duration)
    elif kind is TrainingType.walk:
        calories = walking_spent_calories(action, duration, weight, height)
    else:
        speed = swimming_mean_speed(length_pool, count_pool, duration)
        calories = swimming_spent_calories(length_pool, count_pool, duration, weight)

    return TrainingSummary(
        training_type=training_type,
        kind=kind,
        duration=duration,
        distance=dist,
        speed=speed,
        calories=calories,
    )


def format_training_summary(summary: TrainingSummary) -> str:
    d = REPORT_DECIMALS
    return (
        f"Тип тренировки: {summary.training_type}\n"
        f"Длительность: {summary.duration:.{d}f} ч.\n"
        f"Дистанция: {summary.distance:.{d}f} км.\n"
        f"Скорость: {summary.speed:.{d}f} км/ч\n"
        f"Сожгли калорий: {summary.calories:.{d}f}\n"
    )


def show_training_info(
    action: int,
    training_type: str,
    duration: float,
    weight: float,
    height: float = 0.0,
    length_pool: int = 0,
    count_pool: int = 0,
) -> str:
    """
    Return the human-readable training report.

    An unregistered label gives UNKNOWN_TRAINING_MESSAGE instead of a report.
    Example:
        show_training_info(1000, "Бег", 1.0, 70.0)
        -> 'Тип тренировки: Бег\\nДлительность: 1.00 ч.\\n...'
    """
    summary = summarize_training(
        action, training_type, duration, weight, height, length_pool, count_pool
    )
    if summary is None:
        return UNKNOWN_TRAINING_MESSAGE

    logger.debug(
        "Training report built",
        training_type=training_type,
        kind=summary.kind.value,
        calories=round(summary.calories, REPORT_DECIMALS),
    )
    return format_training_summary(summary)
