"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.config import AppConfig, LendingConfig, load_config


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Library Lending"
        assert config.app.library_name == "Biblioteca Municipal Central"

    def test_default_lending_rules(self) -> None:
        config = AppConfig()
        assert config.lending.loan_limit == 3
        assert config.lending.loan_duration_days == 10

    def test_default_latencies(self) -> None:
        config = AppConfig()
        assert config.latency.loan_request == 1.0
        assert config.latency.return_request == 0.8
        assert config.latency.copy_transfer == 0.5
        assert config.latency.loan_finalize == 0.2
        assert config.latency.authentication == 0.3

    def test_default_log_level(self) -> None:
        assert AppConfig().logging.level == "INFO"

    def test_rejects_non_positive_loan_limit(self) -> None:
        with pytest.raises(ValidationError):
            LendingConfig(loan_limit=0)


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "lending": {"loan_duration_days": 14},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.app.version == "0.1.0"
        assert config.lending.loan_duration_days == 14
        # Other fields keep defaults
        assert config.lending.loan_limit == 3
        assert config.latency.loan_request == 1.0

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Library Lending"

    def test_env_var_sets_log_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("LIBRARY_LOG_LEVEL", "debug")

        config = load_config(config_file)
        assert config.logging.level == "DEBUG"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.app.name == "Library Lending"
        assert config.sample_data_path == "./data/sample_library.yaml"
