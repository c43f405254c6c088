from __future__ import annotations

from datetime import time
from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.services.task_schedule import CadenceStrategy, TaskSchedulePolicy


class Settings(BaseSettings):
    database_url: str
    log_level: str = "INFO"
    environment: str = "dev"
    jwt_secret_key: SecretStr
    jwt_algorithm: str = "HS256"
    jwt_access_token_expires_minutes: int = 60
    jwt_issuer: str | None = None
    jwt_audience: str | None = None
    # CORS
    cors_allow_origins: str = "*"
    # Task generation policy applied when a treatment does not carry its own
    task_strategy: CadenceStrategy = CadenceStrategy.FIXED_COUNT
    task_count: int = 3
    task_interval_days: int = 1
    task_time: time = time(8, 0)
    task_points: int = 5
    # Compliance sweep; 0 disables the in-process loop
    missed_task_grace_days: int = 0
    compliance_sweep_interval_minutes: int = 0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins

    @property
    def default_task_policy(self) -> TaskSchedulePolicy:
        return TaskSchedulePolicy(
            strategy=self.task_strategy,
            count=self.task_count,
            interval_days=self.task_interval_days,
            scheduled_time=self.task_time,
            points_per_task=self.task_points,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
