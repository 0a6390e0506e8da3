"""Performance monitoring plans and documentation stubs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MonitoringTool:
    name: str
    description: str
    setup_instructions: str


MONITORING_TOOLS: dict[str, MonitoringTool] = {
    "lighthouse": MonitoringTool(
        "Google Lighthouse",
        "Automated tool for improving web page quality",
        """\
# Setting up Lighthouse Integration

## Manual Audit
1. Open Chrome DevTools
2. Go to the Lighthouse tab
3. Select categories to audit
4. Click "Generate report"

## CI Integration
Use Lighthouse CI for continuous monitoring:
```
npm install -g @lhci/cli
lhci autorun
```""",
    ),
    "newRelic": MonitoringTool(
        "New Relic",
        "Full-stack observability platform",
        """\
# Setting up New Relic Integration

1. Sign up for a New Relic account
2. Install the New Relic Browser agent in your index.html
3. For backend monitoring, install the appropriate New Relic agent for your server
4. Configure custom metrics as needed""",
    ),
    "datadog": MonitoringTool(
        "Datadog",
        "Monitoring and security platform for cloud applications",
        """\
# Setting up Datadog Integration

1. Sign up for a Datadog account
2. Install the Datadog agent on your server
3. For Real User Monitoring (RUM), add the Datadog RUM SDK
4. Configure custom metrics and alerts as needed""",
    ),
}

# (section, rows of (metric, description, target))
METRIC_TABLES: tuple[tuple[str, tuple[tuple[str, str, str], ...]], ...] = (
    (
        "Frontend Metrics",
        (
            (
                "First Contentful Paint",
                "Time until the browser renders the first bit of content",
                "< 1.8s",
            ),
            ("Time to Interactive", "Time until the page is fully interactive", "< 3.5s"),
            ("Total Blocking Time", "Sum of all time periods between FCP and TTI", "< 300ms"),
            ("Cumulative Layout Shift", "Measure of layout stability", "< 0.1"),
        ),
    ),
    (
        "Backend Metrics",
        (
            ("API Response Time", "Average time for API endpoints to respond", "< 300ms"),
            ("Error Rate", "Percentage of requests that result in errors", "< 1%"),
            ("Request Throughput", "Number of requests handled per second", "Baseline + 20%"),
        ),
    ),
    (
        "Database Metrics",
        (
            (
                "Query Execution Time",
                "Average time for database queries to complete",
                "< 100ms",
            ),
            (
                "Connection Pool Utilization",
                "Percentage of database connections in use",
                "< 80%",
            ),
            ("Index Hit Ratio", "Percentage of queries using indexes", "> 95%"),
        ),
    ),
    (
        "Infrastructure Metrics",
        (
            ("CPU Utilization", "Percentage of CPU in use", "< 70%"),
            ("Memory Usage", "Percentage of memory in use", "< 80%"),
            ("Disk I/O", "Disk read/write operations per second", "Baseline + 20%"),
        ),
    ),
)

PERFORMANCE_BUDGET: tuple[tuple[str, str], ...] = (
    ("Total Page Size", "< 1MB"),
    ("JavaScript Size", "< 300KB"),
    ("CSS Size", "< 100KB"),
    ("Image Size", "< 500KB"),
    ("Font Size", "< 100KB"),
    ("Third-party Scripts", "< 200KB"),
)

DOCUMENTATION_TEMPLATES: dict[str, str] = {
    "api": "# API Documentation\n\nThis document outlines the API endpoints and usage for the project.",
    "technical": (
        "# Technical Documentation\n\nThis document provides technical details about the "
        "project architecture and implementation."
    ),
    "user": "# User Guide\n\nThis document provides instructions for using the application.",
    "maintenance": (
        "# Maintenance Guide\n\nThis document provides guidelines for maintaining and "
        "updating the application."
    ),
}


def generate_performance_plan(app_name: str) -> str:
    """Markdown monitoring plan: metrics, tools, testing, optimization and budget."""
    plan = ["# Performance Monitoring Plan\n\n"]
    plan.append(
        "## Overview\n\nThis performance monitoring plan outlines the strategy for monitoring, "
        f"measuring, and optimizing the performance of {app_name}.\n\n"
    )

    plan.append("## Key Metrics\n\n")
    for section, rows in METRIC_TABLES:
        plan.append(f"### {section}\n\n")
        plan.append("| Metric | Description | Target |\n")
        plan.append("| ------ | ----------- | ------ |\n")
        for metric, description, target in rows:
            plan.append(f"| {metric} | {description} | {target} |\n")
        plan.append("\n")

    plan.append("## Monitoring Tools\n\n")
    for tool in MONITORING_TOOLS.values():
        plan.append(f"### {tool.name}\n\n")
        plan.append(f"{tool.description}\n\n")
        plan.append("**Key Features:**\n\n")
        plan.append("- Real-time monitoring\n")
        plan.append("- Custom dashboards\n")
        plan.append("- Alerting capabilities\n")
        plan.append("- Historical data analysis\n\n")

    plan.append("## Performance Testing\n\n")
    plan.append("### Testing Types\n\n")
    plan.append("1. **Load Testing**: Test the application under expected load conditions\n")
    plan.append("2. **Stress Testing**: Test the application under extreme load conditions\n")
    plan.append(
        "3. **Endurance Testing**: Test the application under sustained load over an "
        "extended period\n"
    )
    plan.append(
        "4. **Spike Testing**: Test the application's response to sudden increases in load\n\n"
    )
    plan.append("### Testing Tools\n\n")
    plan.append("- JMeter\n- Lighthouse\n- WebPageTest\n- k6\n\n")

    plan.append("## Optimization Strategy\n\n")
    plan.append("1. **Measure**: Establish baseline performance metrics\n")
    plan.append("2. **Analyze**: Identify performance bottlenecks\n")
    plan.append("3. **Optimize**: Implement optimizations\n")
    plan.append("4. **Repeat**: Continuously monitor and optimize\n\n")
    plan.append("### Common Optimization Techniques\n\n")
    plan.append("- Code splitting and lazy loading\n")
    plan.append("- Image optimization\n")
    plan.append("- Caching strategies\n")
    plan.append("- Database query optimization\n")
    plan.append("- CDN utilization\n")
    plan.append("- Server-side rendering\n\n")

    plan.append("## Performance Budget\n\n")
    plan.append("| Metric | Budget |\n")
    plan.append("| ------ | ------ |\n")
    for metric, budget in PERFORMANCE_BUDGET:
        plan.append(f"| {metric} | {budget} |\n")
    plan.append("\n")

    plan.append("## Implementation Roadmap\n\n")
    plan.append(
        "1. **Phase 1**: Set up monitoring tools and establish baseline metrics (Week 1-2)\n"
    )
    plan.append(
        "2. **Phase 2**: Conduct initial performance testing and identify optimization "
        "opportunities (Week 3-4)\n"
    )
    plan.append("3. **Phase 3**: Implement high-priority optimizations (Week 5-6)\n")
    plan.append("4. **Phase 4**: Continuous monitoring and optimization (Ongoing)\n\n")

    plan.append("## Conclusion\n\n")
    plan.append(
        f"By implementing this performance monitoring plan, {app_name} will maintain optimal "
        "performance and provide an excellent user experience. Regular monitoring, testing, "
        "and optimization will ensure the application scales effectively as user traffic "
        "grows.\n"
    )

    return "".join(plan)


def generate_monitoring_tool_doc(tool_key: str) -> str:
    tool = MONITORING_TOOLS.get(tool_key)
    if tool is None:
        return "# Error\n\nMonitoring tool not found."
    return f"# {tool.name} Integration Guide\n\n{tool.description}\n\n{tool.setup_instructions}"


def generate_technical_documentation(kind: str) -> str:
    """Documentation skeleton for api, technical, user or maintenance docs."""
    template = DOCUMENTATION_TEMPLATES.get(kind.lower())
    if template is not None:
        return template
    return (
        f"# {kind} Documentation\n\n"
        f"This document provides information about the {kind} aspects of the project."
    )
