from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, model_validator


class TrainingType(str, Enum):
    run = "run"
    walk = "walk"
    swim = "swim"


# Labels accepted by the report builder, as shown to the user.
# Read-only: callers may use it to validate a label up front.
AVAILABLE_TRAININGS: Mapping[str, TrainingType] = MappingProxyType(
    {
        "Бег": TrainingType.run,
        "Ходьба": TrainingType.walk,
        "Плавание": TrainingType.swim,
    }
)


def lookup_training_type(label: str) -> Optional[TrainingType]:
    """Return the training type for a label, or None if it is not registered."""
    return AVAILABLE_TRAININGS.get(label)


class TrainingInfoRequest(BaseModel):
    action: int          # steps for running/walking, strokes for swimming
    training_type: str   # registry label, e.g. "Бег"
    duration: float      # hours
    weight: float        # kg

    # Walking only
    height: float = 0.0  # cm

    # Swimming only
    length_pool: int = 0  # meters
    count_pool: int = 0   # laps

    @model_validator(mode="after")
    def _walking_needs_height(self):
        if lookup_training_type(self.training_type) is TrainingType.walk and self.height <= 0:
            raise ValueError("height must be > 0 for walking")
        return self


class TrainingSummary(BaseModel):
    """Computed metrics for one training session."""

    training_type: str
    kind: TrainingType
    duration: float  # h
    distance: float  # km
    speed: float     # km/h
    calories: float  # kcal


class TrainingInfoRead(TrainingSummary):
    """Schema returned by the API: the metrics plus the formatted report."""

    report: str


class TrainingTypeRead(BaseModel):
    label: str
    kind: TrainingType
