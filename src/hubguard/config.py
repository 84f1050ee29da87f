"""hubguard configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """hubguard configuration.

    Only ambient settings live here; the authorization tables are static.
    """

    home: Path = field(default_factory=lambda: Path.home() / ".hubguard")
    log_level: str = "INFO"
    audit_denials: bool = False

    @classmethod
    def load(cls, home: Path | None = None) -> Config:
        """Load config from env vars, then YAML file, then defaults."""
        config = cls()

        if home:
            config.home = home

        env_home = os.environ.get("HUBGUARD_HOME")
        if env_home:
            config.home = Path(env_home)

        env_log = os.environ.get("HUBGUARD_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        env_audit = os.environ.get("HUBGUARD_AUDIT_DENIALS")
        if env_audit:
            config.audit_denials = env_audit.strip().lower() in _TRUE

        config_file = config.config_file
        if config_file.exists():
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            for key, value in data.items():
                if key == "home" or not hasattr(config, key):
                    continue
                # env vars win over the file
                if key == "log_level" and env_log:
                    continue
                if key == "audit_denials" and env_audit:
                    continue
                if isinstance(getattr(config, key), bool) and isinstance(value, str):
                    value = value.strip().lower() in _TRUE
                expected_type = type(getattr(config, key))
                setattr(config, key, expected_type(value))

        return config

    @property
    def config_file(self) -> Path:
        return self.home / "config.yaml"

    def configure_logging(self) -> None:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        logging.getLogger("hubguard").setLevel(level)

    def save(self) -> None:
        """Save current config to YAML."""
        self.home.mkdir(parents=True, exist_ok=True)
        data = {
            "log_level": self.log_level,
            "audit_denials": self.audit_denials,
        }
        with open(self.config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
