"""Application configuration loaded from config.yaml and environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_YAML_PATH = PROJECT_ROOT / "config.yaml"


# --- YAML sub-models ---


class ServerConfig(BaseModel):
    """Listener settings used by the console entry point."""

    host: str = "0.0.0.0"
    port: int = 9000


class WebConfig(BaseModel):
    """Template and static asset locations, relative to the project root."""

    templates_dir: str = "templates"
    assets_dir: str = "assets"
    template_name: str = "index.html"


# --- Main settings ---


class Settings(BaseSettings):
    """Application settings combining .env secrets and config.yaml values."""

    # App config
    env: str = Field(default="dev")
    log_format: str = Field(default="text")

    # Store connection from .env
    supabase_url: str = Field(default="")
    supabase_schema: str = Field(default="")
    profile_table: str = Field(default="")
    supabase_secret_key: str = Field(default="")
    supabase_service_role_key: str = Field(default="")

    # YAML-sourced config
    server: ServerConfig = Field(default_factory=ServerConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    model_config = {
        "env_file": str(PROJECT_ROOT / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def __init__(self, **kwargs: Any) -> None:
        yaml_data = _load_yaml_config()
        merged = {**yaml_data, **kwargs}
        super().__init__(**merged)

    @property
    def effective_supabase_secret_key(self) -> str:
        """Prefer the new secret key, falling back to the legacy service role key."""
        return self.supabase_secret_key or self.supabase_service_role_key

    @property
    def templates_path(self) -> Path:
        return PROJECT_ROOT / self.web.templates_dir

    @property
    def assets_path(self) -> Path:
        return PROJECT_ROOT / self.web.assets_dir

    def missing_store_settings(self) -> list[str]:
        """Return the env names of required store settings that are unset."""
        required = {
            "SUPABASE_URL": self.supabase_url,
            "SUPABASE_SCHEMA": self.supabase_schema,
            "PROFILE_TABLE": self.profile_table,
            "SUPABASE_SECRET_KEY": self.effective_supabase_secret_key,
        }
        return [name for name, value in required.items() if not value]


def _load_yaml_config() -> dict[str, Any]:
    """Read and parse config.yaml, returning an empty dict on failure."""
    if not CONFIG_YAML_PATH.exists():
        return {}
    with CONFIG_YAML_PATH.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings singleton."""
    return Settings()
