# src/nearmatch/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/nearmatch/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `NEARMATCH_CONFIG_PATH`
- environment variables (e.g., `NEARMATCH_MATCH_RADIUS_M`, `PORT`)

Design rule:
- Tuning knobs live in YAML, not hard-coded in business logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any
from nearmatch.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `nearmatch.config`."""
    text = resources.files("nearmatch.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "NearMatch"
    greeting: str = "Hello 👋 the server is alive"
    health_message: str = "Friends server is connected"
    log_level: str = "INFO"


class MatchingSettings(BaseModel):
    radius_m: float = Field(500, gt=0)


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)


class CorsSettings(BaseModel):
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    allow_methods: list[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    allow_headers: list[str] = Field(default_factory=lambda: ["Content-Type", "Authorization"])


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: only a small whitelist of variables is honoured.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("NEARMATCH_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    radius = os.getenv("NEARMATCH_MATCH_RADIUS_M")
    if radius:
        data.setdefault("matching", {})["radius_m"] = float(radius)

    origins = os.getenv("NEARMATCH_CORS_ORIGINS")
    if origins:
        data.setdefault("cors", {})["allow_origins"] = [s.strip() for s in origins.split(",") if s.strip()]

    host = os.getenv("HOST")
    if host:
        data.setdefault("server", {})["host"] = host
    port = os.getenv("PORT")
    if port:
        data.setdefault("server", {})["port"] = int(port)

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("NEARMATCH_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
