from typing import Optional

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    API_BASE_URL: str = "http://ui-developer-backend.herokuapp.com/api"
    REQUEST_TIMEOUT: float = 10.0
    # None means every fan-out request is issued at once
    MAX_CONCURRENCY: Optional[PositiveInt] = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
