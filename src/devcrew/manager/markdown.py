"""Dependency-aware requirements extraction.

Builds on the heading parser with three passes: build the task tree,
link tasks whose descriptions reference other tasks, then assign
priorities from keywords and from how many tasks wait on each one.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..agents.classifier import categorize_task
from .models import DependencyGraph, GraphEdge, GraphNode, Task, TaskPriority

logger = logging.getLogger(__name__)

DEPENDENCY_KEYWORDS = re.compile(r"depends on|requires|after|following|prerequisite", re.I)
HIGH_PRIORITY_KEYWORDS = re.compile(
    r"critical|urgent|important|high priority|essential|core|key", re.I
)
LOW_PRIORITY_KEYWORDS = re.compile(r"optional|nice to have|future|low priority|enhancement", re.I)

# (pattern, estimate) checked in order; default DEFAULT_EFFORT
EFFORT_RULES: tuple[tuple[re.Pattern[str], int], ...] = (
    (
        re.compile(
            r"complex|difficult|challenging|extensive|comprehensive|complete|full|end-to-end",
            re.I,
        ),
        8,
    ),
    (re.compile(r"implement|create|develop|build|design|refactor", re.I), 5),
    (re.compile(r"update|modify|fix|change|adjust|simple|easy|quick", re.I), 2),
)
DEFAULT_EFFORT = 3

# Every matching tag applies
TAG_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("frontend", re.compile(r"react|frontend|ui|ux|component", re.I)),
    ("backend", re.compile(r"api|backend|server|service|controller", re.I)),
    ("database", re.compile(r"database|data|schema|model|entity", re.I)),
    ("devops", re.compile(r"deployment|ci|cd|pipeline|docker|cloud", re.I)),
    ("testing", re.compile(r"test|testing|unit|integration|e2e|quality", re.I)),
    ("security", re.compile(r"security|auth|authorization|authentication", re.I)),
    ("performance", re.compile(r"performance|optimization|speed", re.I)),
    ("user-management", re.compile(r"user|account|profile", re.I)),
    ("product-catalog", re.compile(r"product|catalog|inventory", re.I)),
    ("shopping-cart", re.compile(r"cart|checkout|payment", re.I)),
    ("order-management", re.compile(r"order|shipping|delivery", re.I)),
    ("search", re.compile(r"search|filter|sort", re.I)),
    ("reviews", re.compile(r"review|rating|feedback", re.I)),
)


def estimate_effort(text: str) -> int:
    for pattern, estimate in EFFORT_RULES:
        if pattern.search(text):
            return estimate
    return DEFAULT_EFFORT


def extract_tags(text: str) -> list[str]:
    return [tag for tag, pattern in TAG_RULES if pattern.search(text)]


def _new_task(task_id: str, title: str) -> Task:
    return Task(
        id=task_id,
        title=title,
        category=categorize_task(title),
        estimated_effort=estimate_effort(title),
        tags=extract_tags(title),
    )


def extract_tasks_with_dependencies(markdown: str) -> list[Task]:
    """Extract the task tree with dependencies, priorities, effort and tags.

    Raises:
        Any parsing error; callers fall back to the heading parser.
    """
    tasks: list[Task] = []
    current_task: Task | None = None
    current_subtask: Task | None = None

    for raw_line in markdown.split("\n"):
        line = raw_line.strip()

        if line.startswith("# "):
            current_task = _new_task(f"task-{len(tasks) + 1}", line[2:].strip())
            tasks.append(current_task)
            current_subtask = None
        elif line.startswith("## "):
            if current_task is not None:
                current_subtask = _new_task(
                    f"subtask-{current_task.id}-{len(current_task.subtasks) + 1}",
                    line[3:].strip(),
                )
                current_subtask.parent_id = current_task.id
                current_task.subtasks.append(current_subtask)
        elif line.startswith(("- ", "* ")):
            target = current_subtask or current_task
            if target is not None:
                target.description += f"• {line[2:].strip()}\n"
        elif line:
            target = current_subtask or current_task
            if target is not None:
                target.description += f"{line}\n"

    for task in tasks:
        for item in task.iter_all():
            _link_dependencies(item, tasks)

    _assign_priorities(tasks)

    logger.debug("Extracted %d tasks with dependencies", len(tasks))
    return tasks


def _link_dependencies(task: Task, all_tasks: list[Task]) -> None:
    """Record tasks referenced by title or id in a description that mentions a dependency."""
    if not DEPENDENCY_KEYWORDS.search(task.description):
        return

    description = task.description.lower()
    for other_task in all_tasks:
        for candidate in other_task.iter_all():
            if candidate.id == task.id or not candidate.title:
                continue
            if candidate.title.lower() in description or _mentions_id(description, candidate.id):
                task.dependencies.append(candidate.id)


def _mentions_id(text: str, task_id: str) -> bool:
    # task-1 must not match inside task-10 or subtask-task-1-1
    pattern = rf"(?<![\w-]){re.escape(task_id.lower())}(?![\w-])"
    return re.search(pattern, text) is not None


def _keyword_priority(task: Task, default: TaskPriority) -> TaskPriority:
    priority = default
    if HIGH_PRIORITY_KEYWORDS.search(task.title) or HIGH_PRIORITY_KEYWORDS.search(task.description):
        priority = TaskPriority.HIGH
    # Low-priority wording wins over high-priority wording
    if LOW_PRIORITY_KEYWORDS.search(task.title) or LOW_PRIORITY_KEYWORDS.search(task.description):
        priority = TaskPriority.LOW
    return priority


def _assign_priorities(tasks: list[Task]) -> None:
    for task in tasks:
        task.priority = _keyword_priority(task, task.priority)
        for subtask in task.subtasks:
            subtask.priority = _keyword_priority(subtask, task.priority)

    # How many tasks wait on each task
    dependents: dict[str, int] = {}
    for task in tasks:
        for item in task.iter_all():
            for dep_id in item.dependencies:
                dependents[dep_id] = dependents.get(dep_id, 0) + 1

    for task in tasks:
        _promote(task, dependents.get(task.id, 0), high_at=3)
        for subtask in task.subtasks:
            _promote(subtask, dependents.get(subtask.id, 0), high_at=2)


def _promote(task: Task, dependent_count: int, high_at: int) -> None:
    if dependent_count >= high_at and task.priority is not TaskPriority.HIGH:
        task.priority = TaskPriority.HIGH
    elif dependent_count >= 1 and task.priority is TaskPriority.LOW:
        task.priority = TaskPriority.MEDIUM


def generate_dependency_graph(tasks: list[Task]) -> DependencyGraph:
    """Nodes for every task and subtask; parent-child and dependency edges."""
    graph = DependencyGraph()
    known: set[str] = set()

    for task in tasks:
        known.add(task.id)
        graph.nodes.append(GraphNode(task.id, task.title, task.category, task.priority))
        for subtask in task.subtasks:
            known.add(subtask.id)
            graph.nodes.append(
                GraphNode(subtask.id, subtask.title, subtask.category, subtask.priority, task.id)
            )
            graph.edges.append(GraphEdge(task.id, subtask.id, "parent-child"))

    for task in tasks:
        for item in task.iter_all():
            for dep_id in item.dependencies:
                if dep_id in known:
                    graph.edges.append(GraphEdge(dep_id, item.id, "dependency"))

    return graph


# --- Architecture patterns ---


@dataclass(frozen=True)
class ArchitecturePattern:
    name: str
    description: str
    suitable_for: str
    signals: tuple[str, ...]  # Requirement words that favour this pattern


@dataclass(frozen=True)
class PatternRecommendation:
    pattern: str
    description: str
    suitability: int


ARCHITECTURE_PATTERNS: tuple[ArchitecturePattern, ...] = (
    ArchitecturePattern(
        "Microservices",
        "Independently deployable services organised around business capabilities",
        "large-scale applications",
        ("scale", "distributed", "independent"),
    ),
    ArchitecturePattern(
        "Monolithic",
        "A single deployable application containing all features",
        "small teams",
        ("simple", "mvp", "quick"),
    ),
    ArchitecturePattern(
        "Serverless",
        "Managed functions that run on demand and scale automatically",
        "variable workloads",
        ("event", "function", "cloud"),
    ),
    ArchitecturePattern(
        "Event-Driven",
        "Components communicate through events published to a broker",
        "real-time systems",
        ("real-time", "notification", "message"),
    ),
    ArchitecturePattern(
        "Layered Architecture",
        "Presentation, business and data layers with strict boundaries",
        "enterprise applications",
        ("enterprise", "corporate", "large"),
    ),
    ArchitecturePattern(
        "JAMstack",
        "Pre-rendered frontend served from a CDN, backed by APIs",
        "content-focused sites",
        ("content", "static", "blog"),
    ),
)


def recommend_architecture_patterns(requirements: str) -> list[PatternRecommendation]:
    """Score every known pattern against the requirements, best first."""
    text = requirements.lower()
    scored: list[PatternRecommendation] = []

    for pattern in ARCHITECTURE_PATTERNS:
        suitability = 0
        if pattern.name.lower() in text:
            suitability += 3
        if pattern.suitable_for.lower() in text:
            suitability += 2
        if any(signal in text for signal in pattern.signals):
            suitability += 2
        scored.append(PatternRecommendation(pattern.name, pattern.description, suitability))

    return sorted(scored, key=lambda rec: rec.suitability, reverse=True)
