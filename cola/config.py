"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cola.cidr.find import DEFAULT_MAX_VISITS


class Settings(BaseSettings):
    """Global settings container."""

    model_config = SettingsConfigDict(
        env_prefix="COLA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    log_file_path: str = ""

    max_visits: int | None = DEFAULT_MAX_VISITS

    root_cidr: str = ""
    used_cidrs: str = ""
    desired_prefix: int | None = None

    @field_validator("max_visits")
    @classmethod
    def check_max_visits(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("max_visits must be positive")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()

    @property
    def used_cidr_list(self) -> list[str]:
        """Return parsed comma separated used CIDRs."""

        return [raw.strip() for raw in self.used_cidrs.split(",") if raw.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def load_settings(env_file: str | None = None) -> Settings:
    """Build settings from an explicit env file, or the cached defaults."""

    if env_file is None:
        return get_settings()
    return Settings(_env_file=env_file)
