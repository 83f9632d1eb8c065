"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

PREPROCESSOR_NAME = "section-validator"

DEFAULT_INVALID_MESSAGE = (
    "🚨 Warning, this content is out of date and is included for historical reasons. 🚨"
)


@dataclass
class ValidatorOptions:
    """How sections are rendered once their verdict is known."""
    hide_invalid: bool = True
    invalid_message: str = DEFAULT_INVALID_MESSAGE


@dataclass
class HTTPConfig:
    """Remote check settings."""
    user_agent: str = "mdbook-section-validator"
    request_timeout: float = 30.0
    github_api_base: str = "https://api.github.com"


@dataclass
class Settings:
    """Application settings."""
    
    # From environment only
    github_token: Optional[str] = None
    
    options: ValidatorOptions = field(default_factory=ValidatorOptions)
    http: HTTPConfig = field(default_factory=HTTPConfig)
    
    @property
    def hide_invalid(self) -> bool:
        return self.options.hide_invalid
    
    @property
    def invalid_message(self) -> str:
        return self.options.invalid_message


def apply_table(settings: Settings, table: dict[str, Any]) -> Settings:
    """Apply a preprocessor config table, ignoring values of the wrong type."""
    hide_invalid = table.get("hide_invalid")
    if isinstance(hide_invalid, bool):
        settings.options.hide_invalid = hide_invalid
    
    invalid_message = table.get("invalid_message")
    if isinstance(invalid_message, str):
        settings.options.invalid_message = invalid_message
    
    request_timeout = table.get("request_timeout")
    if isinstance(request_timeout, (int, float)) and not isinstance(request_timeout, bool):
        settings.http.request_timeout = float(request_timeout)
    
    return settings


def settings_from_context(context: dict[str, Any]) -> Settings:
    """Build settings from the mdbook preprocessor context.
    
    Reads `[preprocessor.section-validator]` from the book configuration.
    """
    settings = Settings(github_token=os.getenv("GITHUB_TOKEN"))
    
    config = context.get("config") or {}
    preprocessors = config.get("preprocessor") or {}
    table = preprocessors.get(PREPROCESSOR_NAME)
    if isinstance(table, dict):
        apply_table(settings, table)
    
    return settings


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data if isinstance(data, dict) else {}


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """Get settings from an optional YAML file and the environment."""
    settings = Settings(github_token=os.getenv("GITHUB_TOKEN"))
    if config_path is not None:
        apply_table(settings, load_config(config_path))
    return settings
