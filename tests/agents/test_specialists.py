"""Tests for role-specific agent behaviour."""

from __future__ import annotations

import pytest

from devcrew.agents.models import AgentCategory, Phase
from devcrew.agents.specialists import CODE_GENERATION_APOLOGY, COMPLIANCE_GUIDANCE


class TestPrompts:
    def test_phases_are_rendered(self, factory):
        agent = factory.create(AgentCategory.DATABASE)
        phases = (Phase("Foundation", ("Order schema",)),)

        prompt = agent.create_prompt("hello there", phases)

        assert "Consider the current project phases when designing data models" in prompt
        assert '"Order schema"' in prompt

    def test_role_focus_replaces_profile_expertise(self, factory):
        prompt = factory.create(AgentCategory.BACKEND).create_prompt("hello there", ())
        assert "- RESTful and GraphQL API design" in prompt

    def test_devops_security_requests_use_security_focus(self, factory):
        agent = factory.create(AgentCategory.DEVOPS)

        security_prompt = agent.create_prompt("Run a security review of the pipeline", ())
        plain_prompt = agent.create_prompt("Set up the pipeline", ())

        assert "DevSecOps best practices" in security_prompt
        assert "DevSecOps best practices" not in plain_prompt


class TestSearchQueries:
    def test_frontend_query_uses_project_frontend_tasks(self, factory):
        agent = factory.create(AgentCategory.FRONTEND)
        phases = (
            Phase("Build", ("Login screen", "Order schema", "Checkout page", "Header component")),
        )

        query = agent.create_search_query("forms", phases)

        assert query.startswith("React Tailwind CSS UI component responsive design")
        assert "Login screen Checkout page" in query
        assert "Header component" not in query
        assert "Order schema" not in query

    def test_devops_security_query(self, factory):
        query = factory.create(AgentCategory.DEVOPS).create_search_query("container scan")
        assert "vulnerability assessment hardening" in query

    def test_default_template(self, factory):
        query = factory.create(AgentCategory.BACKEND).create_search_query("rate limits")
        assert query == "e-commerce backend rate limits API design best practices security"


class TestEcommerceAgent:
    @pytest.mark.asyncio
    async def test_reply_carries_compliance_note(self, factory):
        agent = factory.create(AgentCategory.ECOMMERCE)
        reply = await agent.generate_response("hello there")

        assert reply.startswith("Here is a plain answer.")
        assert reply.endswith(COMPLIANCE_GUIDANCE)

    @pytest.mark.asyncio
    async def test_code_request_returns_generated_code_and_review(self, factory, services):
        services.generate.return_value = "// TODO wire the cart\nconst total = price * qty;"
        services.check_security.return_value = "No security findings."
        agent = factory.create(AgentCategory.ECOMMERCE)

        reply = await agent.generate_response("Create a product card component in React")

        assert reply.startswith("## Generated Component Code (typescript/react)")
        assert "```typescript\n// TODO wire the cart" in reply
        assert "### Suggestions" in reply
        assert "- Ensure proper decimal handling for monetary values" in reply
        assert "### Issues" not in reply
        assert reply.endswith("solution and API endpoints.")
        assert COMPLIANCE_GUIDANCE not in reply

        prompt = services.generate.await_args.args[0]
        assert "Component: ProductCard" in prompt
        services.check_security.assert_awaited_once_with(
            "// TODO wire the cart\nconst total = price * qty;"
        )
        services.search_code_examples.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_security_result_becomes_issues(self, factory, services):
        services.generate.return_value = "db.query(`SELECT * FROM orders WHERE id = ${id}`)"
        services.check_security.return_value = (
            "- [high] Potential SQL Injection vulnerability detected.\n"
            "- recommendation: use parameterized queries"
        )
        agent = factory.create(AgentCategory.ECOMMERCE)

        reply = await agent.generate_response("Implement an api endpoint for orders")

        assert reply.startswith("## Generated Api Code")
        assert "- **WARNING**: [high] Potential SQL Injection vulnerability detected.\n" in reply
        assert "### Security Considerations" in reply
        assert "use parameterized queries" not in reply
        assert "This API endpoint can be implemented by:" in reply

    @pytest.mark.asyncio
    async def test_generation_failure_returns_apology(self, factory, services):
        services.generate.side_effect = RuntimeError("backend down")
        agent = factory.create(AgentCategory.ECOMMERCE)

        reply = await agent.generate_response("Generate a checkout component")

        assert reply == CODE_GENERATION_APOLOGY

    @pytest.mark.asyncio
    async def test_failed_security_check_is_reported(self, factory, services):
        services.check_security.side_effect = RuntimeError("scanner down")
        agent = factory.create(AgentCategory.ECOMMERCE)

        evaluation = await agent.evaluate_code("const x = 1;", "typescript")

        assert evaluation.is_valid
        assert evaluation.security_concerns == ["Could not perform security analysis."]
        assert evaluation.suggestions == []

    @pytest.mark.asyncio
    async def test_consulted_agent_does_not_generate_code(self, factory, services):
        agent = factory.create(AgentCategory.ECOMMERCE)

        reply = await agent.generate_response("Create the order schema", consulted=True)

        assert reply.endswith(COMPLIANCE_GUIDANCE)
        services.check_security.assert_not_awaited()
