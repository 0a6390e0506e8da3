"""Coordinator - Cross-team consultation and escalation flows."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..agents.models import AgentCategory, AgentProfile, DependencyInfo, Phase
from . import prompts
from .detectors import strip_escalation

if TYPE_CHECKING:
    from ..agents.factory import AgentFactory

logger = logging.getLogger(__name__)

# Draft handed to escalation when coordination cannot proceed
COORDINATION_FALLBACK_DRAFT = "Need coordination with multiple teams"


class Coordinator:
    """Runs the coordination and escalation flows for a speaking agent.

    Every consulted agent, including the synthesising Manager, is built
    fresh through the injected factory and answers with ``consulted=True``
    so it cannot start another round of coordination.
    """

    def __init__(self, factory: AgentFactory):
        self.factory = factory

    async def coordinate(
        self,
        user_message: str,
        info: DependencyInfo,
        speaker: AgentProfile,
        phases: Sequence[Phase] = (),
    ) -> str:
        """Consult dependent agents in order, then have a Manager synthesise a plan.

        Args:
            user_message: The original user request.
            info: Dependencies detected in the speaker's draft.
            speaker: Profile of the agent that detected the dependencies.
            phases: Current project phases.

        Returns:
            The coordinated plan text.
        """
        if (
            not info.has_dependencies
            or not info.dependent_agents
            or speaker.category is AgentCategory.MANAGER
        ):
            return await self.escalate(user_message, COORDINATION_FALLBACK_DRAFT, speaker, phases)

        dependency_prompt = prompts.render_dependency_prompt(
            speaker.title, user_message, info.dependency_details
        )

        sections: list[str] = []
        for category in info.dependent_agents:
            try:
                agent = self.factory.create(category)
                reply = await agent.generate_response(dependency_prompt, phases, consulted=True)
                sections.append(
                    prompts.AGENT_SECTION_TEMPLATE.format(title=agent.title, response=reply)
                )
            except Exception:
                logger.exception("Consultation with %s agent failed", category.value)
                sections.append(prompts.FAILED_SECTION_TEMPLATE.format(category=category.value))

        synthesis_prompt = prompts.render_synthesis_prompt(
            speaker.title, user_message, sections, info.dependency_details
        )
        manager = self.factory.create(AgentCategory.MANAGER)
        plan = await manager.generate_response(synthesis_prompt, phases, consulted=True)

        return prompts.COORDINATED_PLAN_TEMPLATE.format(title=speaker.title, plan=plan)

    async def escalate(
        self,
        user_message: str,
        draft: str,
        speaker: AgentProfile,
        phases: Sequence[Phase] = (),
    ) -> str:
        """Ask a Manager for guidance on an uncertain draft.

        A Manager speaker terminates here without constructing another Manager.
        """
        attempt = strip_escalation(draft).strip()

        if speaker.category is AgentCategory.MANAGER:
            return prompts.NEEDS_MORE_INFORMATION.format(attempt=attempt)

        consultation_prompt = prompts.render_consultation_prompt(
            speaker.title, user_message, attempt
        )
        manager = self.factory.create(AgentCategory.MANAGER)
        guidance = await manager.generate_response(consultation_prompt, phases, consulted=True)

        return prompts.MANAGER_GUIDANCE_TEMPLATE.format(
            guidance=guidance, title_lower=speaker.title.lower()
        )
