"""Configuration helpers for comparator_reduce."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .comparators import COMPARATORS


class Settings(BaseSettings):
    """Settings loaded from environment variables and the ``.env`` file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    default_comparator: str = Field("min", description="Comparator used when none is requested")
    enable_run_log: bool = Field(False, description="Append each CLI reduction to the run log")
    log_dir: Path = Field(Path("logs"), description="Directory holding JSONL run logs")
    numeric_items: bool = Field(True, description="Coerce CLI items to int or float where possible")

    @field_validator("default_comparator")
    @classmethod
    def _ensure_known_comparator(cls, value: str) -> str:
        """Ensure the default comparator is registered."""

        name = value.strip().lower()
        if name not in COMPARATORS:
            raise ValueError(f"Unknown comparator {value!r}")
        return name


def load_settings(**overrides: Any) -> Settings:
    """Load settings with optional overrides."""

    return Settings(**overrides)


__all__ = ["Settings", "load_settings"]
