from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ENERGY_", env_file=".env", extra="ignore")

    app_name: str = "Appliance Energy Metrics"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = Field(default=None)  # None = console only
    log_max_bytes: int = 2_000_000
    log_backup_count: int = 5

    # Profiles with decreasing timestamps: sort them (True) or reject (False)
    sort_month_events: bool = False


settings = Settings()
