"""Tests for configuration loading."""

from __future__ import annotations

import yaml

from devcrew.core import defaults as D
from devcrew.core.config import Config
from devcrew.web.config import WebConfig


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data))


class TestConfigLoad:
    def test_defaults(self):
        config = Config.load()
        assert config.coordination.service_timeout == D.DEFAULT_SERVICE_TIMEOUT
        assert config.coordination.enrichment_enabled is True
        assert config.reports.summary_preview_limit == 3
        assert config.reports.compliance_standard == "owasp"
        assert config.log_level == "WARNING"

    def test_project_overrides_user(self, tmp_path):
        write_yaml(
            Config.USER_CONFIG_FILE,
            {"coordination": {"service_timeout": 10}, "reports": {"summary_preview_limit": 5}},
        )
        write_yaml(tmp_path / ".devcrew" / "config.yaml", {"coordination": {"service_timeout": 20}})

        config = Config.load(tmp_path)

        assert config.coordination.service_timeout == 20.0
        assert config.reports.summary_preview_limit == 5

    def test_env_overrides_files(self, tmp_path, monkeypatch):
        write_yaml(tmp_path / ".devcrew" / "config.yaml", {"log_level": "info"})
        monkeypatch.setenv("DEVCREW_LOG_LEVEL", "debug")
        monkeypatch.setenv("DEVCREW_SERVICE_TIMEOUT", "2.5")
        monkeypatch.setenv("DEVCREW_COMPLIANCE_STANDARD", "GDPR")
        monkeypatch.setenv("DEVCREW_NO_ENRICHMENT", "true")

        config = Config.load(tmp_path)

        assert config.log_level == "DEBUG"
        assert config.coordination.service_timeout == 2.5
        assert config.reports.compliance_standard == "gdpr"
        assert config.coordination.enrichment_enabled is False

    def test_invalid_yaml_is_ignored(self, tmp_path):
        path = tmp_path / ".devcrew" / "config.yaml"
        path.parent.mkdir()
        path.write_text("coordination: [unclosed")

        assert Config.load(tmp_path).coordination.service_timeout == D.DEFAULT_SERVICE_TIMEOUT

    def test_save_round_trip(self):
        config = Config.load()
        config.reports.compliance_standard = "gdpr"
        config.coordination.enrichment_enabled = False
        config.save_user_config()

        saved = yaml.safe_load(Config.USER_CONFIG_FILE.read_text())
        assert saved["reports"]["compliance_standard"] == "gdpr"

        reloaded = Config.load()
        assert reloaded.reports.compliance_standard == "gdpr"
        assert reloaded.coordination.enrichment_enabled is False


class TestWebConfig:
    def test_defaults(self):
        config = WebConfig.load()
        assert config.debug is False
        assert config.cors_origins is None

    def test_env(self, monkeypatch):
        monkeypatch.setenv("DEVCREW_DEBUG", "1")
        monkeypatch.setenv("DEVCREW_CORS_ORIGINS", "http://a.test, http://b.test")

        config = WebConfig.load()

        assert config.debug is True
        assert config.cors_origins == ["http://a.test", "http://b.test"]
