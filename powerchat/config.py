"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "powerchat"

# kind -> (override env var, XDG env var, XDG fallback under home)
_USER_DIRS = {
    "config": ("POWERCHAT_CONFIG_DIR", "XDG_CONFIG_HOME", (".config",)),
    "data": ("POWERCHAT_DATA_DIR", "XDG_DATA_HOME", (".local", "share")),
}


def user_dir(kind: str) -> Path:
    """Per-user directory holding powerchat's ``config`` or ``data`` files."""
    override_var, xdg_var, fallback = _USER_DIRS[kind]
    override = os.environ.get(override_var)
    if override:
        return Path(override)

    if sys.platform == "win32":
        appdata = "APPDATA" if kind == "config" else "LOCALAPPDATA"
        return Path(os.environ.get(appdata, Path.home() / "AppData")) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get(xdg_var, Path.home().joinpath(*fallback))) / APP_DIR_NAME



class MessageConfig(BaseModel):
    alternate_colour_char: str = Field(default="&", min_length=1, max_length=1)
    rich_chat: bool = True


class StorageConfig(BaseModel):
    path: str = ""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POWERCHAT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    message: MessageConfig = Field(default_factory=MessageConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    log_level: str = "INFO"
    log_json: bool = False

    def get_store_path(self) -> Path:
        if self.storage.path:
            return Path(self.storage.path)
        return user_dir("data") / "messages.yaml"


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from env vars, optionally overlaying a YAML config."""
    yaml_data: dict[str, Any] = {}

    # Determine config file path
    if config_path is None:
        config_path = os.environ.get("POWERCHAT_CONFIG")
    if config_path is None:
        default = user_dir("config") / "config.yaml"
        if default.exists():
            config_path = default

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                yaml_data = yaml.safe_load(f) or {}

    # Explicit YAML values win over env vars; env fills the rest
    return Settings(**yaml_data)
