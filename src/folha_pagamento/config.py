"""Application settings loaded from environment variables or ``.env``."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration (env prefix ``FOLHA_``)."""

    model_config = SettingsConfigDict(
        env_prefix="FOLHA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Defaults used when the employee record leaves them empty
    default_weekly_hours: int = Field(default=40, gt=0)
    default_worked_days: int = Field(default=22, ge=0, le=31)

    # FGTS is an employer charge, but the payroll contract subtracts it from net
    deduct_fgts_from_net: bool = True

    log_level: str = "INFO"
    log_file: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    return Settings()
