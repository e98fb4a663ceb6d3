from typing import Annotated

from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console or json

    # Allowed CORS origins for the HTTP API, e.g. "http://localhost:3000,http://127.0.0.1:3000"
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    class Config:
        env_file = ".env"


settings = Settings()
