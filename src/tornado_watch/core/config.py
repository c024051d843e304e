"""
Configuration management for Tornado Watch.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from ruamel.yaml import YAML


class ConfigError(Exception):
    """Configuration file could not be used."""

    pass


class NWSApiConfig(BaseModel):
    """NWS API configuration."""

    base_url: str = Field("https://api.weather.gov", description="NWS API base URL")
    alerts_path: str = Field("/alerts/active", description="Path of the active alerts feed")
    timeout: int = Field(30, description="Request timeout in seconds")
    user_agent: str = Field("TornadoWatch", description="User agent for API requests")
    accept: str = Field("application/json", description="Accept header sent with feed requests")


class FilterConfig(BaseModel):
    """Alert classification and display configuration."""

    event_keyword: str = Field("Tornado", description="Case-sensitive substring an event must contain")
    timezone: str = Field("America/Denver", description="IANA zone alert times are displayed in")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level")
    file: Optional[Path] = Field(None, description="Log file path")
    format: str = Field("text", description="Log format: 'json' or 'text'")


class AppConfig(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TORNADO_WATCH_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    state_file: Path = Field(Path("processed_alerts.txt"), description="File holding processed alert identifiers")
    poll_interval: int = Field(60, description="Poll interval in seconds")

    nws: NWSApiConfig = Field(default_factory=NWSApiConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment variables override values read from the YAML file
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, config_path=None) -> "AppConfig":
        """Load configuration from YAML file."""
        if config_path is None:
            config_path = Path("config/default.yaml")
        elif isinstance(config_path, str):
            config_path = Path(config_path)

        if not config_path.exists():
            # Return default config if file doesn't exist
            return cls()

        yaml = YAML(typ='safe')
        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.load(f)

        if yaml_data is None:
            yaml_data = {}
        if not isinstance(yaml_data, Mapping):
            raise ConfigError(
                f"Configuration file {config_path} must contain a mapping at the top level, "
                f"got {type(yaml_data).__name__}"
            )

        return cls(**yaml_data)
