"""Tests for message routing and task categorisation."""

from __future__ import annotations

import pytest

from devcrew.agents.classifier import (
    ROUTING_RULES,
    can_handle,
    categorize_task,
    determine_agent_type,
    explain_routing,
)
from devcrew.agents.models import AgentCategory, Phase


class TestRoutingPriority:
    def test_ecommerce_beats_frontend(self):
        message = "Add a product page with a React component"
        assert determine_agent_type(message) is AgentCategory.ECOMMERCE

    def test_devops_beats_backend(self):
        assert determine_agent_type("Deploy the api server with docker") is AgentCategory.DEVOPS

    def test_frontend_beats_database(self):
        message = "Make the layout responsive and show the query results table"
        assert determine_agent_type(message) is AgentCategory.FRONTEND

    @pytest.mark.parametrize(
        "message,expected",
        [
            ("Set up a docker pipeline", AgentCategory.DEVOPS),
            ("Create a REST api endpoint for login", AgentCategory.BACKEND),
            ("Design the database schema", AgentCategory.DATABASE),
            ("Improve usability of the signup flow", AgentCategory.UX),
            ("Plan the next sprint", AgentCategory.MANAGER),
        ],
    )
    def test_single_signal(self, message, expected):
        assert determine_agent_type(message) is expected

    def test_ecommerce_beats_devops(self):
        message = "set up a github pipeline for our shopping cart"
        assert determine_agent_type(message) is AgentCategory.ECOMMERCE

    @pytest.mark.parametrize(
        "message,expected",
        [
            ("Add items to carts faster", AgentCategory.ECOMMERCE),
            ("Which taxes apply in the EU", AgentCategory.ECOMMERCE),
            ("Open three new stores", AgentCategory.ECOMMERCE),
            ("Design REST APIs for users", AgentCategory.BACKEND),
            ("Add two tables for reviews", AgentCategory.DATABASE),
            ("Speed up slow queries", AgentCategory.DATABASE),
        ],
    )
    def test_plural_keywords(self, message, expected):
        assert determine_agent_type(message) is expected

    def test_rules_are_ordered(self):
        names = [rule.name for rule in ROUTING_RULES]
        assert names.index("ecommerce") < names.index("devops") < names.index("frontend")
        assert names.index("backend") < names.index("database") < names.index("ux")

    def test_phases_do_not_change_routing(self):
        phases = [Phase("Build", ("Checkout flow",))]
        assert determine_agent_type("hello there", phases) is AgentCategory.MANAGER


class TestDefaultRouting:
    def test_unrecognised_message_goes_to_manager(self):
        assert determine_agent_type("hello there") is AgentCategory.MANAGER

    def test_empty_message_goes_to_manager(self):
        assert determine_agent_type("") is AgentCategory.MANAGER

    def test_explain_default(self):
        assert explain_routing("hello there") == "default"


class TestBuildIntent:
    def test_build_page_refines_to_frontend(self):
        assert determine_agent_type("Build a new page") is AgentCategory.FRONTEND
        assert explain_routing("Build a new page") == "build-frontend"

    def test_generate_service_refines_to_backend(self):
        assert determine_agent_type("Generate a service for emails") is AgentCategory.BACKEND

    def test_build_marketplace_refines_to_ecommerce(self):
        assert determine_agent_type("Build a marketplace") is AgentCategory.ECOMMERCE

    def test_build_without_signal_keeps_evaluating(self):
        assert determine_agent_type("Build something nice") is AgentCategory.MANAGER
        assert determine_agent_type("Build the project roadmap") is AgentCategory.MANAGER
        assert explain_routing("Build the project roadmap") == "project-management"


class TestCategorizeTask:
    @pytest.mark.parametrize(
        "title,expected",
        [
            ("User interface for login", AgentCategory.FRONTEND),
            ("Authentication endpoints", AgentCategory.BACKEND),
            ("Order tables and relations", AgentCategory.DATABASE),
            ("Deployment pipeline", AgentCategory.DEVOPS),
            ("Wireframe the onboarding journey", AgentCategory.UX),
            ("Shopping cart", AgentCategory.ECOMMERCE),
            ("Project kickoff", AgentCategory.MANAGER),
        ],
    )
    def test_categories(self, title, expected):
        assert categorize_task(title) is expected


class TestCanHandle:
    def test_manager_handles_everything(self):
        assert can_handle(AgentCategory.MANAGER, "hello there")

    def test_frontend_vocabulary(self):
        assert can_handle(AgentCategory.FRONTEND, "a React component")
        assert not can_handle(AgentCategory.FRONTEND, "hello there")

    @pytest.mark.parametrize(
        "category,message",
        [
            (AgentCategory.ECOMMERCE, "Open three new stores"),
            (AgentCategory.ECOMMERCE, "Which taxes apply"),
            (AgentCategory.BACKEND, "Document our APIs"),
            (AgentCategory.DATABASE, "Partition the tables"),
        ],
    )
    def test_plural_vocabulary(self, category, message):
        assert can_handle(category, message)
