"""Tests for the devcrew CLI using typer's CliRunner."""

from __future__ import annotations

import pytest
import yaml
from typer.testing import CliRunner

from devcrew.cli.app import app
from devcrew.core.config import Config

runner = CliRunner()

REQUIREMENTS = """\
# Product listing page
## Product card component
# Order API endpoint
requires Product listing page
"""


@pytest.fixture
def requirements_file(tmp_path):
    path = tmp_path / "requirements.md"
    path.write_text(REQUIREMENTS)
    return path


class TestRoute:
    def test_default_route(self):
        result = runner.invoke(app, ["route", "hello there"])
        assert result.exit_code == 0
        assert "Development Manager" in result.output
        assert "rule: default" in result.output

    def test_lists_applicable_agents(self):
        result = runner.invoke(app, ["route", "build the checkout page"])
        assert result.exit_code == 0
        assert "Applicable Agents" in result.output


class TestChat:
    def test_routed_reply(self):
        result = runner.invoke(app, ["chat", "hello there"])
        assert result.exit_code == 0
        assert "Here is an outline" in result.output

    def test_explicit_agent(self):
        result = runner.invoke(app, ["chat", "--agent", "devops", "hello there"])
        assert result.exit_code == 0
        assert "DevOps Engineer" in result.output

    def test_unknown_agent(self):
        result = runner.invoke(app, ["chat", "-a", "wizard", "hello there"])
        assert result.exit_code == 1
        assert "Available:" in result.output

    def test_manager_with_requirements(self, requirements_file):
        result = runner.invoke(
            app, ["chat", "-a", "manager", "-r", str(requirements_file), "show the project spec"]
        )
        assert result.exit_code == 0
        assert "Enhanced Project Analysis Summary" in result.output


class TestTasks:
    def test_enhanced(self, requirements_file):
        result = runner.invoke(app, ["tasks", str(requirements_file)])
        assert result.exit_code == 0
        assert "Enhanced Project Analysis Summary" in result.output
        assert "Frontend Developer" in result.output

    def test_basic(self, requirements_file):
        result = runner.invoke(app, ["tasks", "--basic", str(requirements_file)])
        assert result.exit_code == 0
        assert "Project Analysis Summary" in result.output
        assert "Enhanced" not in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["tasks", str(tmp_path / "missing.md")])
        assert result.exit_code == 1


class TestScan:
    @pytest.fixture
    def code_file(self, tmp_path):
        path = tmp_path / "app.js"
        path.write_text('const query = `SELECT * FROM users WHERE id = ${id}`;\neval(input);\n')
        return path

    def test_scan(self, code_file):
        result = runner.invoke(app, ["scan", str(code_file)])
        assert result.exit_code == 0
        assert "Security Findings" in result.output
        assert "OWASP Compliance" in result.output

    def test_report(self, code_file):
        result = runner.invoke(app, ["scan", str(code_file), "--standard", "gdpr", "--report"])
        assert result.exit_code == 0
        assert "GDPR Compliance" in result.output
        assert "Security Assessment Report" in result.output

    def test_unknown_standard(self, code_file):
        result = runner.invoke(app, ["scan", str(code_file), "-s", "pci"])
        assert result.exit_code == 1
        assert "Available: owasp, gdpr" in result.output


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "service_timeout" in result.output
        assert "No user config file" in result.output

    def test_show_section(self):
        result = runner.invoke(app, ["config", "show", "reports"])
        assert result.exit_code == 0
        assert "compliance_standard: owasp" in result.output
        assert "service_timeout" not in result.output

    def test_show_unknown_section(self):
        result = runner.invoke(app, ["config", "show", "nope"])
        assert result.exit_code == 1

    def test_set_standard(self):
        result = runner.invoke(app, ["config", "set", "standard", "GDPR"])
        assert result.exit_code == 0
        saved = yaml.safe_load(Config.USER_CONFIG_FILE.read_text())
        assert saved["reports"]["compliance_standard"] == "gdpr"

    @pytest.mark.parametrize(
        "key, value",
        [("standard", "pci"), ("timeout", "soon"), ("preview", "many"), ("colour", "blue")],
    )
    def test_set_rejects(self, key, value):
        result = runner.invoke(app, ["config", "set", key, value])
        assert result.exit_code == 1
        assert not Config.USER_CONFIG_FILE.exists()
