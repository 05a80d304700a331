"""Configuration loader for the library lending application."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Library Lending"
    version: str = "1.0.0"
    library_name: str = "Biblioteca Municipal Central"


class LendingConfig(BaseModel):
    """Business rules applied by the lending workflow."""

    loan_limit: int = Field(default=3, ge=1)
    loan_duration_days: int = Field(default=10, ge=1)


class LatencyConfig(BaseModel):
    """Simulated I/O latency, in seconds, at each suspension point."""

    loan_request: float = Field(default=1.0, ge=0)
    return_request: float = Field(default=0.8, ge=0)
    copy_transfer: float = Field(default=0.5, ge=0)
    loan_finalize: float = Field(default=0.2, ge=0)
    authentication: float = Field(default=0.3, ge=0)
    demo_pause: float = Field(default=2.0, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    lending: LendingConfig = Field(default_factory=LendingConfig)
    latency: LatencyConfig = Field(default_factory=LatencyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sample_data_path: str = "./data/sample_library.yaml"


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override log level from environment
    log_level = os.getenv("LIBRARY_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
