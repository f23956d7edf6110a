"""Configuration management using Pydantic Settings."""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from compounder.exceptions import ConfigurationError

# Load .env file at module import time
load_dotenv()

DEFAULT_CONFIG_PATH = Path("config/config.yaml")


class CalculatorSettings(BaseSettings):
    """Initial parameter values shown before any user input."""

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        extra="ignore",
    )

    starting_capital: float = Field(
        default=100000.0, gt=0, allow_inf_nan=False, description="Starting capital in USD"
    )
    # Same ranges as the interactive controls
    profit_per_trade: float = Field(
        default=5.0, ge=0.1, le=10, description="Profit per trade in percent"
    )
    num_trades: int = Field(default=50, ge=1, le=100, description="Number of trades")


class ShareSettings(BaseSettings):
    """Share-link configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SHARE_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:3000/", description="Page URL share links point to"
    )

    @field_validator("base_url")
    @classmethod
    def require_http_url(cls, v: str) -> str:
        """Share links must be absolute http(s) URLs."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {v!r}")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Log level")
    file: Path = Field(default=Path("logs/calculator.log"), description="Log file path")


def _without_env_overrides(section: Dict[str, Any], env_prefix: str) -> Dict[str, Any]:
    """Drop YAML keys whose environment variable is set, so env wins."""
    return {
        key: value
        for key, value in section.items()
        if not os.environ.get(f"{env_prefix}{key}".upper())
    }


class Settings(BaseSettings):
    """Main settings container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    calculator: CalculatorSettings = Field(default_factory=CalculatorSettings)
    share: ShareSettings = Field(default_factory=ShareSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, config_path: Path = DEFAULT_CONFIG_PATH) -> "Settings":
        """Load settings from YAML file, with env vars taking precedence."""
        yaml_config = {}
        if config_path.exists():
            with open(config_path) as f:
                yaml_config = yaml.safe_load(f) or {}

        if not isinstance(yaml_config, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping")

        sections = {}
        for name, prefix in (("calculator", "CALC_"), ("share", "SHARE_"), ("logging", "LOG_")):
            section = yaml_config.get(name) or {}
            if not isinstance(section, dict):
                raise ConfigurationError(f"Section '{name}' in {config_path} must be a mapping")
            sections[name] = _without_env_overrides(section, prefix)

        return cls(
            calculator=CalculatorSettings(**sections["calculator"]),
            share=ShareSettings(**sections["share"]),
            logging=LoggingSettings(**sections["logging"]),
        )


def load_settings(config_path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from config file and environment."""
    if config_path.exists():
        return Settings.from_yaml(config_path)
    return Settings()
