from __future__ import annotations

"""backend/bootdiag/config/settings.py

Application configuration using environment-driven settings.

This module centralizes:
- application name / environment tier (used as telemetry tier)
- whether startup failures are reported at all
- the log level used for the failure report
- Statsig server secret for telemetry events
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  app_name: str = "bootdiag"
  environment: str = "development"

  # Failure reporting
  report_startup_failures: bool = True
  failure_log_level: str = "ERROR"

  # Telemetry
  statsig_server_secret: str | None = None

  model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
