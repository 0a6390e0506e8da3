"""Tests for the coordination and escalation flows with stub agents."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from devcrew.agents.models import AgentCategory, DependencyInfo
from devcrew.agents.registry import get_profile
from devcrew.coordination.coordinator import Coordinator


def _stub_agent(category, reply="stub reply", error=None):
    agent = MagicMock()
    agent.category = category
    agent.title = get_profile(category).title
    agent.generate_response = AsyncMock(return_value=reply, side_effect=error)
    return agent


def _stub_factory(stubs):
    factory = MagicMock()
    factory.create.side_effect = lambda category: stubs[category]
    return factory


def _info(*categories, details="details"):
    info = DependencyInfo(has_dependencies=True, dependency_details=details)
    for category in categories:
        info.add_agent(category)
    return info


class TestCoordinate:
    @pytest.mark.asyncio
    async def test_consults_in_order_then_synthesises(self):
        stubs = {
            AgentCategory.BACKEND: _stub_agent(AgentCategory.BACKEND, "backend says"),
            AgentCategory.DATABASE: _stub_agent(AgentCategory.DATABASE, "database says"),
            AgentCategory.MANAGER: _stub_agent(AgentCategory.MANAGER, "the plan"),
        }
        factory = _stub_factory(stubs)
        coordinator = Coordinator(factory)

        result = await coordinator.coordinate(
            "add wishlists",
            _info(AgentCategory.BACKEND, AgentCategory.DATABASE, details="storage and API "),
            get_profile(AgentCategory.FRONTEND),
        )

        created = [call.args[0] for call in factory.create.call_args_list]
        assert created == [AgentCategory.BACKEND, AgentCategory.DATABASE, AgentCategory.MANAGER]
        assert result.startswith("# Coordinated Development Plan")
        assert "As the Frontend Developer" in result
        assert "the plan" in result

        for category in (AgentCategory.BACKEND, AgentCategory.DATABASE):
            call = stubs[category].generate_response.await_args
            assert call.kwargs["consulted"] is True
            assert "I'm the Frontend Developer" in call.args[0]
            assert "storage and API" in call.args[0]

        synthesis = stubs[AgentCategory.MANAGER].generate_response.await_args
        assert synthesis.kwargs["consulted"] is True
        assert "## Input from Backend Developer:\n\nbackend says" in synthesis.args[0]
        assert "## Input from Database Architect:\n\ndatabase says" in synthesis.args[0]
        assert "The Frontend Developer's initial assessment" in synthesis.args[0]

    @pytest.mark.asyncio
    async def test_partial_failure_keeps_both_sections(self):
        stubs = {
            AgentCategory.BACKEND: _stub_agent(AgentCategory.BACKEND, error=RuntimeError("down")),
            AgentCategory.UX: _stub_agent(AgentCategory.UX, "ux says"),
            AgentCategory.MANAGER: _stub_agent(AgentCategory.MANAGER, "the plan"),
        }
        coordinator = Coordinator(_stub_factory(stubs))

        result = await coordinator.coordinate(
            "add wishlists",
            _info(AgentCategory.BACKEND, AgentCategory.UX),
            get_profile(AgentCategory.FRONTEND),
        )

        synthesis_prompt = stubs[AgentCategory.MANAGER].generate_response.await_args.args[0]
        assert "## Input from backend specialist (failed to retrieve):" in synthesis_prompt
        assert "## Input from UX Designer:\n\nux says" in synthesis_prompt
        assert "the plan" in result

    @pytest.mark.asyncio
    async def test_manager_speaker_falls_through_to_escalation(self):
        factory = _stub_factory({})
        coordinator = Coordinator(factory)

        result = await coordinator.coordinate(
            "add wishlists",
            _info(AgentCategory.BACKEND),
            get_profile(AgentCategory.MANAGER),
        )

        assert result == (
            "I need more information to properly answer this question. "
            "Need coordination with multiple teams"
        )
        factory.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_agent_list_escalates(self):
        manager = _stub_agent(AgentCategory.MANAGER, "manager guidance")
        coordinator = Coordinator(_stub_factory({AgentCategory.MANAGER: manager}))

        result = await coordinator.coordinate(
            "add wishlists", _info(), get_profile(AgentCategory.UX)
        )

        assert result.startswith("I consulted with the Development Manager")
        prompt = manager.generate_response.await_args.args[0]
        assert "Need coordination with multiple teams" in prompt


class TestEscalate:
    @pytest.mark.asyncio
    async def test_manager_escalation_never_builds_a_manager(self):
        factory = _stub_factory({})
        coordinator = Coordinator(factory)

        result = await coordinator.escalate(
            "hello", "ESCALATE: not enough detail", get_profile(AgentCategory.MANAGER)
        )

        assert result == (
            "I need more information to properly answer this question. not enough detail"
        )
        assert factory.create.call_count == 0

    @pytest.mark.asyncio
    async def test_specialist_escalation_consults_one_manager(self):
        manager = _stub_agent(AgentCategory.MANAGER, "use a queue")
        factory = _stub_factory({AgentCategory.MANAGER: manager})
        coordinator = Coordinator(factory)

        result = await coordinator.escalate(
            "how do I sync stock?", "ESCALATE: not sure", get_profile(AgentCategory.DATABASE)
        )

        assert factory.create.call_count == 1
        prompt = manager.generate_response.await_args.args[0]
        assert "One of your team members (Database Architect) needs guidance" in prompt
        assert '"not sure"' in prompt
        assert manager.generate_response.await_args.kwargs["consulted"] is True
        assert "use a queue" in result
        assert result.endswith(
            "If you'd like more specific database architect implementation details, "
            "please let me know."
        )
