"""Data models for the Manager's project state and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..agents.models import AgentCategory


class TaskPriority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Task:
    """A requirement extracted from a requirements document."""

    id: str
    title: str
    description: str = ""
    category: AgentCategory = AgentCategory.MANAGER
    priority: TaskPriority = TaskPriority.MEDIUM
    subtasks: list[Task] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)  # Ids of tasks this one waits on

    # Filled by assignment / the dependency-aware extractor
    parent_id: str | None = None
    estimated_effort: int = 3
    tags: list[str] = field(default_factory=list)

    def iter_all(self):
        """This task followed by its subtasks."""
        yield self
        yield from self.subtasks

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "priority": self.priority.value,
            "subtasks": [s.to_dict() for s in self.subtasks],
            "dependencies": list(self.dependencies),
            "parent_id": self.parent_id,
            "estimated_effort": self.estimated_effort,
            "tags": list(self.tags),
        }


# Every category is present as a key, possibly with an empty list
TaskAssignmentMap = dict[AgentCategory, list[Task]]


def empty_assignments() -> TaskAssignmentMap:
    return {category: [] for category in AgentCategory}


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    category: AgentCategory
    priority: TaskPriority
    parent_id: str | None = None


@dataclass(frozen=True)
class GraphEdge:
    """Directed edge. For "dependency" edges the source blocks the target."""

    source: str
    target: str
    kind: str  # "parent-child" or "dependency"


@dataclass
class DependencyGraph:
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def dependency_edges(self) -> list[GraphEdge]:
        return [e for e in self.edges if e.kind == "dependency"]


@dataclass
class ProjectState:
    """The Manager's current project. Replaced wholesale on every upload."""

    requirements: str = ""
    parsed_tasks: list[Task] = field(default_factory=list)
    assigned_tasks: TaskAssignmentMap = field(default_factory=empty_assignments)
    graph: DependencyGraph | None = None
    summary: str = ""

    @property
    def has_tasks(self) -> bool:
        return bool(self.parsed_tasks)


# --- Security ---


class Severity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FindingType(Enum):
    VULNERABILITY = "vulnerability"
    BEST_PRACTICE = "best_practice"
    COMPLIANCE = "compliance"


class ComplianceStatus(Enum):
    PASSED = "passed"
    WARNING = "warning"
    FAILED = "failed"


@dataclass(frozen=True)
class SecurityFinding:
    id: str
    type: FindingType
    severity: Severity
    description: str
    recommendation: str
    code_location: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
            "recommendation": self.recommendation,
            "code_location": self.code_location,
        }


@dataclass(frozen=True)
class ComplianceRequirement:
    id: str
    name: str
    description: str
    status: ComplianceStatus
    recommendation: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "recommendation": self.recommendation,
        }
