"""Prompt rendering for agents and coordination flows."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass

from ..agents.models import AgentCategory, AgentProfile, ConversationContext, Phase

AGENT_PROMPT_TEMPLATE = """\
As an AI {title} specializing in e-commerce platforms, please respond to the following:

User: "{user_message}"

{phase_context}

Your expertise is in:
{expertise}

{closing}

If part of the answer depends on another team, add a line of the form
COORDINATE_WITH:<TEAM>:<what you need from them> where TEAM is one of
FRONTEND, BACKEND, DATABASE, DEVOPS, UX or ECOMMERCE.
If you are not confident in your answer, start it with ESCALATE:"""

DEPENDENCY_PROMPT_TEMPLATE = """\
I'm the {title} and I need your input on the following task:
"{user_message}"

Specifically, I need your expertise on: {details}

Please provide a short, focused response that I can use to move forward with my part of the task.
Focus on the technical requirements and interfaces between our systems."""

SYNTHESIS_PROMPT_TEMPLATE = """\
As the Development Manager, please synthesize these different specialist inputs into a cohesive plan:

Original user request: "{user_message}"

{sections}

The {title}'s initial assessment: "{details}"

Please create a coordinated response that outlines:
1. The correct sequence of development steps
2. Dependencies between different teams
3. A clear path forward for implementation
4. Any technical integration points that need special attention"""

CONSULTATION_PROMPT_TEMPLATE = """\
One of your team members ({title}) needs guidance on the following user question:

"{user_message}"

The {title} attempted to answer but wasn't confident:

"{attempt}"

As the Development Manager, please provide guidance or a more complete answer to help the team member."""

AGENT_SECTION_TEMPLATE = "## Input from {title}:\n\n{response}\n"

FAILED_SECTION_TEMPLATE = (
    "## Input from {category} specialist (failed to retrieve):\n\n"
    "I was unable to get specific information from this team at the moment.\n"
)

COORDINATED_PLAN_TEMPLATE = """\
# Coordinated Development Plan

As the {title}, here's my assessment based on the inputs from other teams:

{plan}

Let me know if you'd like to focus on a specific aspect of this plan or if you need more details on any part of the implementation."""

MANAGER_GUIDANCE_TEMPLATE = """\
I consulted with the Development Manager about your question. Here's their guidance:

{guidance}

If you'd like more specific {title_lower} implementation details, please let me know."""

NEEDS_MORE_INFORMATION = "I need more information to properly answer this question. {attempt}"

DEFAULT_CLOSING = (
    "Provide concrete examples when applicable, focusing on maintainable, secure and "
    "scalable solutions."
)


@dataclass(frozen=True)
class PromptStyle:
    """Role-specific wording for the agent prompt."""

    focus: tuple[str, ...] = ()  # Bullets under "Your expertise is in"; profile expertise if empty
    phase_hint: str = "planning this work"
    area: str = "development"
    closing: str = DEFAULT_CLOSING
    search_template: str = "e-commerce {message} best practices"


def render_phases(phases: Sequence[Phase]) -> str:
    """Serialise project phases as JSON for inclusion in a prompt."""
    return json.dumps([phase.to_dict() for phase in phases])


def render_prompt(
    context: ConversationContext,
    profile: AgentProfile,
    style: PromptStyle | None = None,
) -> str:
    """Render the role-specific prompt for a user message."""
    style = style or PromptStyle()

    if context.project_phases:
        phase_context = (
            f"Consider the current project phases when {style.phase_hint}: "
            f"{render_phases(context.project_phases)}"
        )
    else:
        phase_context = (
            "No project structure has been defined yet. "
            f"Focus on general {style.area} best practices for e-commerce."
        )

    focus = style.focus or profile.expertise
    return AGENT_PROMPT_TEMPLATE.format(
        title=profile.title,
        user_message=context.user_message,
        phase_context=phase_context,
        expertise="\n".join(f"- {item}" for item in focus),
        closing=style.closing,
    )


def create_search_query(message: str, style: PromptStyle | None = None) -> str:
    """Query for the generic best-practice search."""
    style = style or PromptStyle()
    return style.search_template.format(message=message)


def create_code_search_query(message: str, category: AgentCategory) -> str:
    """Query for the code-example search."""
    return f"{category.value} {message} code example e-commerce"


def render_dependency_prompt(title: str, user_message: str, details: str) -> str:
    return DEPENDENCY_PROMPT_TEMPLATE.format(
        title=title, user_message=user_message, details=details.strip()
    )


def render_synthesis_prompt(
    title: str,
    user_message: str,
    sections: Sequence[str],
    details: str,
) -> str:
    return SYNTHESIS_PROMPT_TEMPLATE.format(
        title=title,
        user_message=user_message,
        sections="\n".join(sections),
        details=details.strip(),
    )


def render_consultation_prompt(title: str, user_message: str, attempt: str) -> str:
    return CONSULTATION_PROMPT_TEMPLATE.format(
        title=title, user_message=user_message, attempt=attempt.strip()
    )
