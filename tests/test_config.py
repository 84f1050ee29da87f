"""Tests for configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from hubguard.config import Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HUBGUARD_HOME", "HUBGUARD_LOG_LEVEL", "HUBGUARD_AUDIT_DENIALS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path: Path) -> None:
    config = Config.load(tmp_path)
    assert config.home == tmp_path
    assert config.log_level == "INFO"
    assert config.audit_denials is False


def test_yaml_file(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("log_level: DEBUG\naudit_denials: true\nunknown: 1\n")
    config = Config.load(tmp_path)
    assert config.log_level == "DEBUG"
    assert config.audit_denials is True


def test_string_boolean_in_yaml(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("audit_denials: 'no'\n")
    assert Config.load(tmp_path).audit_denials is False


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.yaml").write_text("log_level: DEBUG\naudit_denials: false\n")
    monkeypatch.setenv("HUBGUARD_HOME", str(tmp_path))
    monkeypatch.setenv("HUBGUARD_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("HUBGUARD_AUDIT_DENIALS", "yes")

    config = Config.load()
    assert config.home == tmp_path
    assert config.log_level == "WARNING"
    assert config.audit_denials is True


def test_save_round_trip(config: Config) -> None:
    config.log_level = "ERROR"
    config.audit_denials = True
    config.save()

    data = yaml.safe_load(config.config_file.read_text())
    assert data == {"log_level": "ERROR", "audit_denials": True}
    assert Config.load(config.home).log_level == "ERROR"


def test_configure_logging(config: Config) -> None:
    config.log_level = "warning"
    config.configure_logging()
    assert logging.getLogger("hubguard").level == logging.WARNING

    config.log_level = "chatty"
    config.configure_logging()
    assert logging.getLogger("hubguard").level == logging.INFO
