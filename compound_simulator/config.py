from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    LOG_LEVEL: str = "INFO"
    CHART_MAX_POINTS: int = 60

    OPENAI_API_KEY: str = ""
    INSIGHT_MODEL: str = "gpt-4o-mini"
    INSIGHT_BASE_URL: Optional[str] = None
    INSIGHT_TIMEOUT: float = 20.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
