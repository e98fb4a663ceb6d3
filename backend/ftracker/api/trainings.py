from fastapi import APIRouter, HTTPException

from ftracker.core.constants import UNKNOWN_TRAINING_MESSAGE
from ftracker.core.report import format_training_summary, summarize_training
from ftracker.schemas.training import (
    AVAILABLE_TRAININGS,
    TrainingInfoRead,
    TrainingInfoRequest,
    TrainingTypeRead,
)


router = APIRouter(prefix="/trainings", tags=["trainings"])


@router.get("/types", response_model=list[TrainingTypeRead])
def list_training_types():
    return [
        TrainingTypeRead(label=label, kind=kind)
        for label, kind in AVAILABLE_TRAININGS.items()
    ]


@router.post("/info", response_model=TrainingInfoRead)
def training_info(payload: TrainingInfoRequest):
    """
    Compute the training report for one session.

    Example:
      POST /trainings/info {"action": 1000, "training_type": "Бег", "duration": 1, "weight": 70}
    """
    summary = summarize_training(
        payload.action,
        payload.training_type,
        payload.duration,
        payload.weight,
        payload.height,
        payload.length_pool,
        payload.count_pool,
    )
    if summary is None:
        raise HTTPException(status_code=404, detail=UNKNOWN_TRAINING_MESSAGE)

    return TrainingInfoRead(
        **summary.model_dump(),
        report=format_training_summary(summary),
    )
