"""Data models for the agent system."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class AgentCategory(Enum):
    """Agent roles that messages and tasks can be routed to."""

    MANAGER = "manager"
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    DEVOPS = "devops"
    UX = "ux"
    ECOMMERCE = "ecommerce"

    @classmethod
    def from_string(cls, value: str | None) -> AgentCategory | None:
        """Parse a category from a string, or None if it is not recognised."""
        if not value:
            return None
        value_lower = value.lower().strip()
        for category in cls:
            if category.value == value_lower:
                return category
        # Tolerate the hyphenated spelling used in prose
        if value_lower == "e-commerce":
            return cls.ECOMMERCE
        return None

    @classmethod
    def specialists(cls) -> list[AgentCategory]:
        """All categories except the Manager."""
        return [c for c in cls if c is not cls.MANAGER]


@dataclass(frozen=True)
class AgentProfile:
    """Static description of an agent role."""

    category: AgentCategory
    name: str
    title: str
    description: str
    expertise: tuple[str, ...]
    patterns: tuple[str, ...] = ()  # Applicability vocabulary (regex fragments)
    handles_everything: bool = False

    def can_handle(self, message: str) -> bool:
        """Check whether this role is applicable to a message."""
        if self.handles_everything:
            return True
        if not self.patterns:
            return False
        return re.search("|".join(self.patterns), message, re.IGNORECASE) is not None

    def __str__(self) -> str:
        return f"Agent({self.name}: {self.title})"


@dataclass(frozen=True)
class Phase:
    """A project phase with its task descriptions."""

    name: str
    tasks: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"name": self.name, "tasks": list(self.tasks)}


@dataclass(frozen=True)
class ConversationContext:
    """Read-only input to a single generation call."""

    user_message: str
    project_phases: tuple[Phase, ...] = ()


@dataclass
class DependencyInfo:
    """Cross-team dependencies detected in an agent's draft answer."""

    has_dependencies: bool = False
    dependent_agents: list[AgentCategory] = field(default_factory=list)
    dependency_details: str = ""

    def add_agent(self, category: AgentCategory) -> bool:
        """Record a dependent agent once. Returns True if it was new."""
        if category in self.dependent_agents:
            return False
        self.dependent_agents.append(category)
        return True
