"""Message and task classification.

Routing is an ordered rules table evaluated top to bottom. The first rule
whose pattern matches the message wins; there is no scoring. Matching is a
case-insensitive regex search over the whole message.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .models import AgentCategory, Phase


@dataclass(frozen=True)
class RoutingRule:
    """A single (pattern, category) routing entry."""

    name: str
    pattern: str
    category: AgentCategory | None  # None = refine via sub-rules

    def matches(self, text: str) -> bool:
        return re.search(self.pattern, text, re.IGNORECASE) is not None


# Vocabulary shared by the router and the build-intent refinement
ECOMMERCE_PATTERN = (
    r"e-?commerce|cart|checkout|payment|product|\border|catalog|\bshop|store"
    r"|customer|inventory|pricing|discount|coupon|shipping|tax|wishlist"
)
DEVOPS_PATTERN = (
    r"github|repositor(?:y|ies)|\brepo\b|\bbranch|\bcommit|pull request|\bpr\b|\bgit\b"
    r"|ci/cd|pipeline|docker|kubernetes|\bk8s\b|infrastructure|devops|deployment"
)
FRONTEND_PATTERN = (
    r"frontend|front-end|\bui\b|component|react|\bcss\b|tailwind|responsive|layout"
)
BACKEND_PATTERN = (
    r"backend|back-end|server|api|endpoint|\broute|controller|middleware|\bauth"
)
DATABASE_PATTERN = (
    r"database|schema|table|quer|\bsql\b|nosql|mongodb|postgres"
    r"|mysql|sqlite|data model|migration|seeding"
)
UX_PATTERN = (
    r"user experience|\bux\b|usability|accessibility|\ba11y\b|wireframe|user flow"
    r"|prototype|information architecture"
)
BUILD_INTENT_PATTERN = r"\b(?:build|generate|implement|create|develop)\b"
PROJECT_MANAGEMENT_PATTERN = (
    r"project|phase|\btasks?\b|timeline|milestone|planning|requirement|specification"
    r"|roadmap|sprint"
)

# Ordered routing table: e-commerce > DevOps > Frontend > Backend > Database
# > UX > generic build > project management > default Manager.
ROUTING_RULES: tuple[RoutingRule, ...] = (
    RoutingRule("ecommerce", ECOMMERCE_PATTERN, AgentCategory.ECOMMERCE),
    RoutingRule("devops", DEVOPS_PATTERN, AgentCategory.DEVOPS),
    RoutingRule("frontend", FRONTEND_PATTERN, AgentCategory.FRONTEND),
    RoutingRule("backend", BACKEND_PATTERN, AgentCategory.BACKEND),
    RoutingRule("database", DATABASE_PATTERN, AgentCategory.DATABASE),
    RoutingRule("ux", UX_PATTERN, AgentCategory.UX),
    RoutingRule("build", BUILD_INTENT_PATTERN, None),
    RoutingRule("project-management", PROJECT_MANAGEMENT_PATTERN, AgentCategory.MANAGER),
)

# Sub-signals checked, in order, when a message only expresses build intent
BUILD_SUBRULES: tuple[RoutingRule, ...] = (
    RoutingRule(
        "build-ecommerce",
        r"\bsales?\b|merchant|marketplace|subscription|\bbuy|\bsell",
        AgentCategory.ECOMMERCE,
    ),
    RoutingRule(
        "build-frontend",
        r"\bpages?\b|screen|\bforms?\b|button|interface|\bviews?\b|widget|\bmodal",
        AgentCategory.FRONTEND,
    ),
    RoutingRule(
        "build-backend",
        r"\bservices?\b|\bfunctions?\b|webhook|business logic|\bjobs?\b|\bworker",
        AgentCategory.BACKEND,
    ),
    RoutingRule(
        "build-database",
        r"\bmodels?\b|\bdata\b|storage|\bindex|\brecords?\b|\bentit(?:y|ies)\b",
        AgentCategory.DATABASE,
    ),
)

DEFAULT_CATEGORY = AgentCategory.MANAGER


# Task-tree categorisation: narrower nouns typical of requirement headings
TASK_RULES: tuple[RoutingRule, ...] = (
    RoutingRule(
        "task-frontend",
        r"\bui\b|interface|component|screen|\bpages?\b|\bviews?\b|frontend|\bcss\b|\bhtml\b"
        r"|\bstyl|animation|responsive|mobile|desktop|layout",
        AgentCategory.FRONTEND,
    ),
    RoutingRule(
        "task-backend",
        r"api|endpoint|server|backend|\bauth|middleware|\bservices?\b|controller"
        r"|\broute|validator",
        AgentCategory.BACKEND,
    ),
    RoutingRule(
        "task-database",
        r"database|schema|\bmodels?\b|entit(?:y|ies)|table|\bcolumns?\b|\bfields?\b"
        r"|relation|quer|\bsql\b|nosql|mongodb|postgres|mysql|migration|\bseed",
        AgentCategory.DATABASE,
    ),
    RoutingRule(
        "task-devops",
        r"deploy|\bci\b|\bcd\b|pipeline|docker|container|kubernetes|\bk8s\b|\baws\b|cloud"
        r"|hosting|environment|\bconfig|monitor|\blog(?:s|ging)?\b|performance|\bscal",
        AgentCategory.DEVOPS,
    ),
    RoutingRule(
        "task-ux",
        r"\bux\b|user experience|design|wireframe|prototype|usability|accessibility"
        r"|\bflows?\b|journey|persona|research|testing",
        AgentCategory.UX,
    ),
    RoutingRule("task-ecommerce", ECOMMERCE_PATTERN, AgentCategory.ECOMMERCE),
)


def _first_match(rules: Iterable[RoutingRule], text: str) -> RoutingRule | None:
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def determine_agent_type(
    message: str,
    project_phases: Iterable[Phase] = (),
) -> AgentCategory:
    """Pick the agent that should handle a user message.

    Args:
        message: Free-text user message.
        project_phases: Current project phases. Accepted for call-site
            symmetry with the agents; routing does not depend on them.

    Returns:
        Exactly one AgentCategory. Manager when nothing matches.
    """
    for rule in ROUTING_RULES:
        if not rule.matches(message):
            continue
        if rule.category is not None:
            return rule.category
        refined = _first_match(BUILD_SUBRULES, message)
        if refined is not None:
            return refined.category  # type: ignore[return-value]
        # Plain build intent with no domain signal: keep evaluating
    return DEFAULT_CATEGORY


def explain_routing(message: str) -> str:
    """Name of the rule that routes a message ("default" when none does)."""
    for rule in ROUTING_RULES:
        if not rule.matches(message):
            continue
        if rule.category is not None:
            return rule.name
        refined = _first_match(BUILD_SUBRULES, message)
        if refined is not None:
            return refined.name
    return "default"


def categorize_task(text: str) -> AgentCategory:
    """Categorise a requirement heading for the task tree.

    No specific signal means a process task, which belongs to the Manager.
    """
    rule = _first_match(TASK_RULES, text)
    if rule is None:
        return AgentCategory.MANAGER
    return rule.category  # type: ignore[return-value]


def can_handle(category: AgentCategory, message: str) -> bool:
    """Check whether the given agent role is applicable to a message."""
    from .registry import get_profile

    return get_profile(category).can_handle(message)
