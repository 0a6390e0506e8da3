"""Configuration management for devcrew."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import yaml

from . import defaults as D

logger = logging.getLogger(__name__)


@dataclass
class CoordinationConfig:
    """Agent coordination settings."""

    service_timeout: float = D.DEFAULT_SERVICE_TIMEOUT
    enrichment_enabled: bool = D.DEFAULT_ENRICHMENT_ENABLED


@dataclass
class ReportConfig:
    """Manager report settings."""

    summary_preview_limit: int = D.DEFAULT_SUMMARY_PREVIEW_LIMIT
    compliance_standard: str = D.DEFAULT_COMPLIANCE_STANDARD


@dataclass
class Config:
    """Main application configuration."""

    coordination: CoordinationConfig = field(default_factory=CoordinationConfig)
    reports: ReportConfig = field(default_factory=ReportConfig)
    log_level: str = D.DEFAULT_LOG_LEVEL

    # Standard paths
    USER_CONFIG_DIR: ClassVar[Path] = Path.home() / ".devcrew"
    USER_CONFIG_FILE: ClassVar[Path] = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_FILE: ClassVar[Path] = Path(".devcrew") / "config.yaml"

    @classmethod
    def load(cls, project_dir: Path | None = None) -> Config:
        """Load configuration from user and project files."""
        config = cls()

        if cls.USER_CONFIG_FILE.exists():
            config._merge_from_file(cls.USER_CONFIG_FILE)

        # Project config overrides user config
        project_config = (project_dir or Path.cwd()) / cls.PROJECT_CONFIG_FILE
        if project_config.exists():
            config._merge_from_file(project_config)

        config._apply_env_overrides()

        return config

    def _merge_from_file(self, path: Path) -> None:
        """Merge configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            logger.warning("Could not read config %s: %s", path, e)
            return

        coordination = data.get("coordination", {})
        if "service_timeout" in coordination:
            self.coordination.service_timeout = float(coordination["service_timeout"])
        if "enrichment_enabled" in coordination:
            self.coordination.enrichment_enabled = bool(coordination["enrichment_enabled"])

        reports = data.get("reports", {})
        if "summary_preview_limit" in reports:
            self.reports.summary_preview_limit = int(reports["summary_preview_limit"])
        if "compliance_standard" in reports:
            self.reports.compliance_standard = str(reports["compliance_standard"]).lower()

        if "log_level" in data:
            self.log_level = str(data["log_level"]).upper()

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        if timeout := os.environ.get("DEVCREW_SERVICE_TIMEOUT"):
            self.coordination.service_timeout = float(timeout)
        if level := os.environ.get("DEVCREW_LOG_LEVEL"):
            self.log_level = level.upper()
        if standard := os.environ.get("DEVCREW_COMPLIANCE_STANDARD"):
            self.reports.compliance_standard = standard.lower()
        if os.environ.get("DEVCREW_NO_ENRICHMENT", "").lower() in ("1", "true", "yes"):
            self.coordination.enrichment_enabled = False

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of the effective configuration."""
        return {
            "coordination": {
                "service_timeout": self.coordination.service_timeout,
                "enrichment_enabled": self.coordination.enrichment_enabled,
            },
            "reports": {
                "summary_preview_limit": self.reports.summary_preview_limit,
                "compliance_standard": self.reports.compliance_standard,
            },
            "log_level": self.log_level,
        }

    def save_user_config(self) -> None:
        """Save current configuration to user config file."""
        self.USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(self.USER_CONFIG_FILE, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
