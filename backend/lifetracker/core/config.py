from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "LifeTracker API"
    API_PREFIX: str = "/api"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Auth
    API_KEY: str = "dev-api-key-change-in-production"
    CORS_ORIGINS: List[str] = ["*"]

    # LLM provider
    OLLAMA_HOST: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "gpt-oss:20b"
    OLLAMA_MODEL_FAMILY: str = "gpt-oss"
    OLLAMA_TEMPERATURE: float = 0.1
    OLLAMA_NUM_PREDICT: int = 200
    OLLAMA_TIMEOUT: Optional[float] = None  # None -> transport default

    # DB
    DATABASE_URL: str = "sqlite:///./data/lifetracker.db"

settings = Settings()
