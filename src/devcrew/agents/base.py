"""BaseAgent - The response flow every agent role follows."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from ..coordination import detectors
from ..coordination.enhancers import EnrichmentRequest, apply_template, select_enrichment
from ..coordination.prompts import PromptStyle, create_search_query, render_prompt
from ..core.config import CoordinationConfig
from ..services import AssistantServices, OfflineServices
from .models import AgentCategory, AgentProfile, ConversationContext, DependencyInfo, Phase
from .registry import get_profile

if TYPE_CHECKING:
    from ..coordination.coordinator import Coordinator
    from .factory import AgentFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")

APOLOGY_MESSAGE = (
    "I encountered an error processing your request. "
    "Please try again or contact the development team if the issue persists."
)


class BaseAgent:
    """Common behaviour for all agent roles.

    A reply is produced in strict order, returning on the first applicable
    branch: draft, coordination when dependencies are detected, escalation
    when the draft signals uncertainty, one enrichment step, else the draft.

    Subclasses set ``category`` and may override ``prompt_style``,
    ``enrichment_templates``, ``create_prompt``, ``create_search_query``
    and ``should_check_security``.
    """

    category: AgentCategory = AgentCategory.MANAGER
    prompt_style: PromptStyle = PromptStyle()
    enrichment_templates: Mapping[str, str] = {}

    def __init__(
        self,
        services: AssistantServices | None = None,
        factory: AgentFactory | None = None,
        config: CoordinationConfig | None = None,
    ):
        self.profile: AgentProfile = get_profile(self.category)
        self.services: AssistantServices = services or OfflineServices()
        self.config = config or CoordinationConfig()
        self._factory = factory
        self._coordinator: Coordinator | None = None
        self._memory: dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def title(self) -> str:
        return self.profile.title

    @property
    def description(self) -> str:
        return self.profile.description

    @property
    def expertise(self) -> tuple[str, ...]:
        return self.profile.expertise

    @property
    def factory(self) -> AgentFactory:
        """Factory used to construct consulted agents."""
        if self._factory is None:
            from .factory import AgentFactory

            self._factory = AgentFactory(services=self.services, config=self.config)
        return self._factory

    @property
    def coordinator(self) -> Coordinator:
        if self._coordinator is None:
            from ..coordination.coordinator import Coordinator

            self._coordinator = Coordinator(self.factory)
        return self._coordinator

    def can_handle(self, message: str) -> bool:
        return self.profile.can_handle(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"

    # --- Scratch memory ---

    def remember(self, key: str, value: Any) -> None:
        """Store a value in this instance's scratch memory."""
        self._memory[key] = value

    def recall(self, key: str, default: Any = None) -> Any:
        """Retrieve a value from this instance's scratch memory."""
        return self._memory.get(key, default)

    # --- Response flow ---

    async def generate_response(
        self,
        message: str,
        project_phases: Iterable[Phase] = (),
        *,
        consulted: bool = False,
    ) -> str:
        """Answer a message.

        Args:
            message: The user message, or an internal consultation prompt.
            project_phases: Current project phases for prompt context.
            consulted: True when another agent is asking. Consulted agents
                do not coordinate or escalate further.

        Returns:
            The reply text. Failures are logged and turned into a fixed
            apology; this method does not raise.
        """
        try:
            return await self.respond(message, tuple(project_phases), consulted=consulted)
        except Exception:
            logger.exception("%s agent failed to answer", self.name)
            return APOLOGY_MESSAGE

    async def respond(
        self,
        message: str,
        phases: tuple[Phase, ...] = (),
        *,
        consulted: bool = False,
    ) -> str:
        """Run the response flow without the apology boundary."""
        prompt = self.create_prompt(message, phases)
        draft = await self.call_service(self.services.generate(prompt))

        if not consulted:
            info = self.detect_dependencies(draft, message)
            if info.has_dependencies:
                logger.info(
                    "%s coordinating with %s",
                    self.name,
                    ", ".join(c.value for c in info.dependent_agents) or "nobody",
                )
                return await self.coordinator.coordinate(message, info, self.profile, phases)

            if self.is_stuck(draft):
                logger.info("%s escalating to the Development Manager", self.name)
                return await self.coordinator.escalate(message, draft, self.profile, phases)

        if not self.config.enrichment_enabled:
            return draft
        return await self.enrich(message, draft, phases)

    async def enrich(self, message: str, draft: str, phases: tuple[Phase, ...] = ()) -> str:
        """Apply the first applicable enrichment step to a draft."""
        request = EnrichmentRequest(agent=self, message=message, draft=draft, phases=phases)
        step = select_enrichment(request)
        if step is None:
            return draft

        logger.debug("%s enrichment: %s", self.name, step.name)
        results = await self.call_service(step.fetch(request))
        template = self.enrichment_templates.get(step.name, step.template)
        return apply_template(template, draft, results)

    async def call_service(self, awaitable: Awaitable[T]) -> T:
        """Await an external call, bounded by the configured timeout."""
        return await asyncio.wait_for(awaitable, timeout=self.config.service_timeout)

    # --- Overridable hooks ---

    def create_prompt(self, message: str, phases: tuple[Phase, ...]) -> str:
        context = ConversationContext(user_message=message, project_phases=phases)
        return render_prompt(context, self.profile, self.prompt_style)

    def create_search_query(self, message: str, phases: tuple[Phase, ...] = ()) -> str:
        return create_search_query(message, self.prompt_style)

    def detect_dependencies(self, draft: str, message: str) -> DependencyInfo:
        return detectors.detect_dependencies(draft, message, speaker=self.category)

    def is_stuck(self, draft: str) -> bool:
        return detectors.is_agent_stuck(draft)

    def should_check_security(self, message: str, draft: str) -> bool:
        return detectors.should_check_security(message, draft)
