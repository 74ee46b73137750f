"""Configuration management for glesysdns."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from glesysdns.providers.dns.glesys import GlesysClient

CONFIG_FILENAMES = ("glesysdns.yaml", "glesysdns.yml")


class PollingConfig(BaseModel):
    """Budget for waiting on listings to converge after a write."""

    attempts: int = 30
    delay: float = 1.0  # Seconds between attempts

    @field_validator("attempts")
    @classmethod
    def check_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("attempts must be at least 1")
        return v

    @field_validator("delay")
    @classmethod
    def check_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("delay must not be negative")
        return v


class LiveConfig(BaseModel):
    """Settings for the live test suite."""

    domain_suffix: str = "jclouds.org"


class GlesysDnsConfig(BaseModel):
    """Main configuration for glesysdns."""

    polling: PollingConfig = Field(default_factory=PollingConfig)
    live: LiveConfig = Field(default_factory=LiveConfig)


class GlesysSettings(BaseSettings):
    """Environment variables for credentials and endpoint."""

    model_config = SettingsConfigDict(env_prefix="GLESYS_", env_file=".env")

    username: str | None = None
    api_key: str | None = None
    endpoint: str = GlesysClient.BASE_URL
    timeout: float = 30.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.api_key)


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find glesysdns.yaml in current or parent directories."""
    search_path = start_path or Path.cwd()

    for path in [search_path, *search_path.parents]:
        for name in CONFIG_FILENAMES:
            config_file = path / name
            if config_file.exists():
                return config_file

    return None


def load_config(config_path: Path | None = None) -> GlesysDnsConfig:
    """Load configuration from YAML file, falling back to defaults."""
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return GlesysDnsConfig()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return GlesysDnsConfig(**(data or {}))


def load_env_settings() -> GlesysSettings:
    """Load credentials from .env and environment variables."""
    return GlesysSettings()


def create_client(settings: GlesysSettings) -> GlesysClient:
    """Build a GleSYS client from settings."""
    if not settings.has_credentials:
        raise ValueError("GLESYS_USERNAME and GLESYS_API_KEY must be set")

    return GlesysClient(
        username=settings.username,
        api_key=settings.api_key,
        endpoint=settings.endpoint,
        timeout=settings.timeout,
    )


def dump_yaml(data: dict, stream=None) -> str | None:
    """Dump data to YAML in file order."""
    return yaml.dump(data, stream=stream, default_flow_style=False, sort_keys=False)
