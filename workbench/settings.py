from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WORKBENCH_",
        env_file=None,
        extra="ignore",
    )

    env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = True

    # request guards shared by every tool
    max_count: int = Field(default=1000, ge=1)
    max_json_bytes: int = Field(default=1_000_000, ge=1)

    modules_path: Path = BASE_DIR / "modules"
    shared_templates: Path | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v is None or not str(v).strip():
            return "INFO"
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def shared_templates_dir(root_dir: Path | None = None) -> Path:
    override = get_settings().shared_templates
    if override:
        return Path(override)
    return (root_dir or BASE_DIR) / "workbench" / "templates"
