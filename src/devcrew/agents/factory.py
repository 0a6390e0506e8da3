"""AgentFactory - Builds agent instances by category."""

from __future__ import annotations

import logging

from ..core.config import CoordinationConfig
from ..services import AssistantServices, OfflineServices
from .base import BaseAgent
from .models import AgentCategory
from .specialists import SPECIALIST_CLASSES

logger = logging.getLogger(__name__)


class AgentFactory:
    """Creates a fresh agent per call.

    Agents built here share the factory's services and coordination
    settings, and use the factory itself for any agents they consult.
    """

    def __init__(
        self,
        services: AssistantServices | None = None,
        config: CoordinationConfig | None = None,
    ):
        self.services = services or OfflineServices()
        self.config = config or CoordinationConfig()

    def create(self, category: AgentCategory | str | None) -> BaseAgent:
        """Create an agent for a category.

        Args:
            category: The role to build. Strings are resolved
                case-insensitively.

        Returns:
            A new agent. Falsy or unknown categories yield a Manager.
        """
        if isinstance(category, str):
            category = AgentCategory.from_string(category)

        agent_cls = SPECIALIST_CLASSES.get(category) if category else None
        if agent_cls is None:
            from ..manager.agent import ManagerAgent

            agent_cls = ManagerAgent

        logger.debug("Creating %s", agent_cls.__name__)
        return agent_cls(services=self.services, factory=self, config=self.config)


def create_agent(
    category: AgentCategory | str | None,
    services: AssistantServices | None = None,
) -> BaseAgent:
    """Create a single agent with its own factory."""
    return AgentFactory(services=services).create(category)
