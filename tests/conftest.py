"""Shared fixtures for devcrew tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from devcrew.agents.factory import AgentFactory
from devcrew.agents.models import AgentCategory
from devcrew.core.config import CoordinationConfig


def make_services(draft: str = "Here is a plain answer.") -> AsyncMock:
    """AsyncMock standing in for AssistantServices."""
    services = AsyncMock()
    services.generate.return_value = draft
    services.search_code_examples.return_value = "CODE RESULTS"
    services.search_packages.return_value = "PACKAGE RESULTS"
    services.search_internet.return_value = "SEARCH RESULTS"
    services.run_tests.return_value = "TEST RESULTS"
    services.troubleshoot.return_value = "TROUBLESHOOT RESULTS"
    services.check_security.return_value = "SECURITY RESULTS"
    return services


class RecordingFactory(AgentFactory):
    """AgentFactory that records every category it builds.

    ``stubs`` maps a category to a prebuilt agent returned instead of a
    fresh one.
    """

    def __init__(self, services=None, config=None, stubs=None):
        super().__init__(services=services, config=config)
        self.created: list[AgentCategory] = []
        self.stubs = stubs or {}

    def create(self, category):
        agent = super().create(category)
        self.created.append(agent.category)
        return self.stubs.get(agent.category, agent)


@pytest.fixture
def services():
    return make_services()


@pytest.fixture
def coordination_config():
    return CoordinationConfig(service_timeout=5.0)


@pytest.fixture
def factory(services, coordination_config):
    return RecordingFactory(services=services, config=coordination_config)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from real user config and DEVCREW_* environment."""
    from devcrew.core.config import Config

    monkeypatch.setattr(Config, "USER_CONFIG_DIR", tmp_path / ".devcrew-user")
    monkeypatch.setattr(Config, "USER_CONFIG_FILE", tmp_path / ".devcrew-user" / "config.yaml")
    monkeypatch.chdir(tmp_path)
    for name in (
        "DEVCREW_SERVICE_TIMEOUT",
        "DEVCREW_LOG_LEVEL",
        "DEVCREW_COMPLIANCE_STANDARD",
        "DEVCREW_NO_ENRICHMENT",
        "DEVCREW_CORS_ORIGINS",
        "DEVCREW_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_stub_services():
    """Builder for AsyncMock services with a given draft."""
    return make_services


@pytest.fixture
def recording_factory_cls():
    return RecordingFactory
