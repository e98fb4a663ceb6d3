from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ftracker.api.trainings import router as trainings_router
from ftracker.core.config import settings
from ftracker.core.logging import setup_logging


setup_logging()

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trainings_router)


@app.get("/")
def root():
    return {"message": "ftracker backend is running"}
