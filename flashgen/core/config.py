# flashgen/core/config.py
import os
import uuid
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "Flashgen"
    env: str = "local"
    DATABASE_URL: str = "sqlite:///./flashgen.db"

    # Single-user mode until auth lands; injected via get_current_user_id
    DEFAULT_USER_ID: uuid.UUID = uuid.UUID("39372e69-3264-457c-a816-988fdb0b24a1")

    # =========================
    # Generation pipeline
    # =========================
    GENERATION_ATTEMPT_TIMEOUT_SECONDS: float = 20.0
    GENERATION_TIMEOUT_SECONDS: float = 60.0
    GENERATION_MAX_RETRIES: int = 2
    GENERATION_RETRY_BACKOFF_SECONDS: float = 1.0
    # Deadline for each record-store step; a hung step is abandoned
    PERSISTENCE_TIMEOUT_SECONDS: float = 10.0

    # Reference generator knobs
    GENERATOR_MIN_PROPOSALS: int = 3
    GENERATOR_MAX_PROPOSALS: int = 10
    GENERATOR_MIN_LATENCY_MS: int = 0
    GENERATOR_MAX_LATENCY_MS: int = 0
    GENERATOR_FAILURE_RATE: float = 0.0  # 0 disables chaos wrapper
    GENERATOR_SEED: int | None = None

    PERFORMANCE_TEST_ENABLED: bool = True

    CORS_ALLOW_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
