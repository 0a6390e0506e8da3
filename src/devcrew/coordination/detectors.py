"""Detectors over agent drafts and user messages.

Covers cross-team dependency detection, escalation detection and the
keyword predicates that decide which enrichment step applies to a reply.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..agents.models import AgentCategory, DependencyInfo

# COORDINATE_WITH:<CATEGORY>:<detail>, detail runs to the next marker or the end
COORDINATE_TAG = re.compile(
    r"COORDINATE_WITH:([A-Za-z-]+):(.+?)(?=COORDINATE_WITH:|$)",
    re.DOTALL,
)


@dataclass(frozen=True)
class ImplicitDependencyRule:
    """Phrase suggesting input is needed from another team."""

    pattern: str
    category: AgentCategory

    def matches(self, text: str) -> bool:
        return re.search(self.pattern, text, re.IGNORECASE) is not None


# Checked against the draft and the user message; every match counts
IMPLICIT_DEPENDENCY_RULES: tuple[ImplicitDependencyRule, ...] = (
    ImplicitDependencyRule(r"need.*(api|endpoint|backend|server)", AgentCategory.BACKEND),
    ImplicitDependencyRule(r"backend.*first", AgentCategory.BACKEND),
    ImplicitDependencyRule(r"database.*(schema|model|design)", AgentCategory.DATABASE),
    ImplicitDependencyRule(r"ui|design.*needed", AgentCategory.UX),
    ImplicitDependencyRule(r"deployment|pipeline.*setup", AgentCategory.DEVOPS),
    ImplicitDependencyRule(r"frontend.*integration", AgentCategory.FRONTEND),
)

# Case-sensitive sentinels meaning the agent is not confident
ESCALATION_MARKERS: tuple[str, ...] = (
    "ESCALATE:",
    "I'm not sure",
    "This is outside my expertise",
    "I don't have enough information",
)

ESCALATE_PREFIX = "ESCALATE:"


def detect_dependencies(
    response: str,
    user_message: str,
    speaker: AgentCategory | None = None,
) -> DependencyInfo:
    """Detect cross-team dependencies in a draft answer.

    Explicit COORDINATE_WITH tags take precedence: when at least one tag is
    present the implicit phrase rules are not consulted at all.

    Args:
        response: The agent's draft answer.
        user_message: The message the agent was answering.
        speaker: Category of the answering agent; never recorded as its
            own dependency.

    Returns:
        A fresh DependencyInfo.
    """
    info = DependencyInfo()

    for match in COORDINATE_TAG.finditer(response):
        info.has_dependencies = True
        category = AgentCategory.from_string(match.group(1))
        detail = " ".join(match.group(2).split())

        # Unknown categories are dropped; their detail text is kept
        if category is not None and category is not speaker:
            info.add_agent(category)

        info.dependency_details += f"{detail} "

    if info.has_dependencies:
        return info

    for rule in IMPLICIT_DEPENDENCY_RULES:
        if not (rule.matches(response) or rule.matches(user_message)):
            continue
        if rule.category is speaker:
            continue
        if info.add_agent(rule.category):
            info.has_dependencies = True
            info.dependency_details += f"Need input from {rule.category.value} specialist. "

    return info


def is_agent_stuck(response: str) -> bool:
    """Check whether a draft signals uncertainty or asks for escalation."""
    return any(marker in response for marker in ESCALATION_MARKERS)


def strip_escalation(response: str) -> str:
    """Remove the first ESCALATE: marker from a draft."""
    return response.replace(ESCALATE_PREFIX, "", 1)


# --- Enrichment predicates ---


def should_search_for_code_examples(message: str) -> bool:
    return (
        re.search(r"example|sample|code|implementation|how to implement|pattern", message, re.I)
        is not None
    )


def should_search_for_package_info(message: str) -> bool:
    return re.search(r"package|library|dependency|install|npm|yarn|pip\b", message, re.I) is not None


# Fallback package per role when the message names none
DEFAULT_PACKAGES: dict[AgentCategory, str] = {
    AgentCategory.FRONTEND: "react-query",
    AgentCategory.BACKEND: "express",
    AgentCategory.DATABASE: "prisma",
    AgentCategory.DEVOPS: "docker",
    AgentCategory.UX: "framer-motion",
    AgentCategory.ECOMMERCE: "stripe",
    AgentCategory.MANAGER: "project-management",
}

_PACKAGE_NAME_PATTERNS = (
    re.compile(r"packages?\s+(?:called|named)\s+['\"]?([a-zA-Z0-9\-_@/.]+)['\"]?", re.I),
    re.compile(r"['\"]?([a-zA-Z0-9\-_@/.]+)['\"]?\s+package", re.I),
    re.compile(r"install\s+['\"]?([a-zA-Z0-9\-_@/.]+)['\"]?", re.I),
)


def extract_package_name(message: str, category: AgentCategory) -> str:
    """Package named in a message, else the role's default package."""
    for pattern in _PACKAGE_NAME_PATTERNS:
        match = pattern.search(message)
        if match and match.group(1):
            return match.group(1)
    return DEFAULT_PACKAGES.get(category, "react")


def should_test_code(message: str, response: str) -> bool:
    asks_for_checks = re.search(r"test|validate|check|verify", message, re.I) is not None
    return (asks_for_checks and "```" in response) or "test this code" in message


_CODE_BLOCK = re.compile(r"```[\w+-]*\n(.*?)\n```", re.DOTALL)


def extract_code_blocks(response: str) -> str:
    """Concatenate the fenced code blocks of a draft."""
    code = "\n\n".join(block for block in _CODE_BLOCK.findall(response))
    return code.strip() or "// No code found to test"


def determine_test_type(message: str) -> str:
    if re.search(r"unit test|test function|method test", message, re.I):
        return "unit"
    if re.search(r"integration|api test|component test", message, re.I):
        return "integration"
    return "general"


def should_troubleshoot_code(message: str) -> bool:
    return re.search(r"error|not working|issue|bug|fix|trouble|debug", message, re.I) is not None


def extract_error_message(message: str) -> str:
    """The error text quoted in a message, else the whole message."""
    match = re.search(r"error[:\s]+([^\n]+)", message, re.I) or re.search(
        r"(\S+Error[^.]+)", message, re.I
    )
    if match and match.group(1):
        return match.group(1).strip()
    return message


def should_check_security(message: str, response: str) -> bool:
    has_code = "```" in response
    asks_about_security = re.search(r"secure|security|vulnerability|safe", message, re.I) is not None
    return (asks_about_security and has_code) or ("payment" in message and has_code)


def should_search_for_additional_info(message: str) -> bool:
    return (
        re.search(
            r"best practice|recommend|example|how to|tutorial|resource|reference|library"
            r"|framework|tool",
            message,
            re.I,
        )
        is not None
    )
