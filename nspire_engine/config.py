"""Configuration management using Pydantic Settings"""

from typing import Dict
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring configuration loaded from environment variables (NSPIRE_ prefix)"""

    model_config = SettingsConfigDict(
        env_prefix="NSPIRE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "nspire-engine"
    log_level: str = "INFO"

    # HUD thresholds
    pass_threshold: float = 60.0
    ups_auto_fail_threshold: float = 30.0

    # Point weights
    default_category_weight: float = 2.0  # Categories missing from the weight table
    severity_factors: Dict[str, float] = {"severe": 1.0, "moderate": 1.0, "low": 1.0}


settings = Settings()
