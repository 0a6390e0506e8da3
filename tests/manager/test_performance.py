"""Tests for performance plans and documentation templates."""

from __future__ import annotations

from devcrew.manager.performance import (
    MONITORING_TOOLS,
    generate_monitoring_tool_doc,
    generate_performance_plan,
    generate_technical_documentation,
)


class TestPerformancePlan:
    def test_plan_sections(self):
        plan = generate_performance_plan("ShopFast")

        assert plan.startswith("# Performance Monitoring Plan\n\n")
        assert "performance of ShopFast." in plan
        for heading in (
            "## Key Metrics",
            "## Monitoring Tools",
            "## Performance Testing",
            "## Optimization Strategy",
            "## Performance Budget",
            "## Implementation Roadmap",
            "## Conclusion",
        ):
            assert heading in plan
        for tool in MONITORING_TOOLS.values():
            assert f"### {tool.name}" in plan


class TestMonitoringToolDoc:
    def test_known_tool(self):
        doc = generate_monitoring_tool_doc("lighthouse")
        assert doc.startswith("# Google Lighthouse Integration Guide")
        assert "lhci autorun" in doc

    def test_unknown_tool(self):
        assert generate_monitoring_tool_doc("nagios") == "# Error\n\nMonitoring tool not found."


class TestTechnicalDocumentation:
    def test_templates(self):
        assert generate_technical_documentation("api").startswith("# API Documentation")
        assert generate_technical_documentation("User").startswith("# User Guide")

    def test_fallback(self):
        doc = generate_technical_documentation("Security")
        assert doc == (
            "# Security Documentation\n\n"
            "This document provides information about the Security aspects of the project."
        )
