"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings


class NachaConfig(BaseSettings):
    """NACHA file generation settings."""

    model_config = {"env_prefix": "ACHGEN_NACHA_"}

    file_id_modifier: str = "A"  # A-Z, 0-9; bump when sending several files per day
    reference_code: str = ""
    large_batch_threshold: Decimal = Decimal("1000000")


class StorageConfig(BaseSettings):
    """Generated-file archive configuration."""

    model_config = {"env_prefix": "ACHGEN_STORAGE_"}

    backend: Literal["memory", "s3"] = "memory"
    bucket: str = "achgen-nacha-files"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    prefix: str = "ach"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ACHGEN_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    nacha: NachaConfig = NachaConfig()
    storage: StorageConfig = StorageConfig()
