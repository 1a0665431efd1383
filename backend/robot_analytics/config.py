from functools import lru_cache
from typing import Annotated, List, Literal

from pydantic import model_validator, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["development", "staging", "production"] = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    database_url: str = "sqlite:///./robot_analytics.db"
    create_schema_on_startup: bool = False
    cors_origins: Annotated[List[str], NoDecode] = ["*"]

    real_time_history_default_hours: int = 24
    real_time_history_max_hours: int = 24 * 30
    performance_history_default_days: int = 7
    performance_history_max_days: int = 365

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        if isinstance(value, str):
            parts = [item.strip() for item in value.split(",") if item.strip()]
            return parts or ["*"]
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def validate_history_windows(self) -> "Settings":
        if not 1 <= self.real_time_history_default_hours <= self.real_time_history_max_hours:
            raise ValueError("real-time history default must lie within [1, max hours]")
        if not 1 <= self.performance_history_default_days <= self.performance_history_max_days:
            raise ValueError("performance history default must lie within [1, max days]")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
