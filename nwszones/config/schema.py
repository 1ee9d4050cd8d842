"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from nwszones.config.defaults import DEFAULT_REGION
from nwszones.ingest.noaa_client import NOAA_BASE_URL


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NOAA_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    default_region: str = Field(default=DEFAULT_REGION, pattern=r"^[A-Z]{1,4}$")
    log_level: LogLevel = LogLevel.WARNING

    @field_validator("default_region", mode="before")
    @classmethod
    def _upper_region(cls, v):
        return v.strip().upper() if isinstance(v, str) else v
