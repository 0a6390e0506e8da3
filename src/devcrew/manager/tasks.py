"""Task extraction, assignment and summaries for requirements documents."""

from __future__ import annotations

import dataclasses
import logging
from collections import Counter
from collections.abc import Iterable

from ..agents.classifier import categorize_task
from ..agents.models import AgentCategory
from ..agents.registry import get_profile
from ..core import defaults as D
from .models import DependencyGraph, Task, TaskAssignmentMap, TaskPriority, empty_assignments

logger = logging.getLogger(__name__)

# Order categories are listed in summaries
SUMMARY_ORDER: tuple[AgentCategory, ...] = (
    AgentCategory.FRONTEND,
    AgentCategory.BACKEND,
    AgentCategory.DATABASE,
    AgentCategory.DEVOPS,
    AgentCategory.UX,
    AgentCategory.ECOMMERCE,
    AgentCategory.MANAGER,
)

CRITICAL_PATH_EDGE_THRESHOLD = 3
CRITICAL_PATH_SIZE = 3


def extract_tasks_from_markdown(markdown: str) -> list[Task]:
    """Parse headings into a task tree.

    ``# `` lines start a task, ``## `` lines a subtask of the latest task.
    List items and plain lines are appended to the current description,
    list items with a bullet. Content before the first heading and
    subtasks without a parent are ignored.
    """
    try:
        return _parse_headings(markdown)
    except Exception:
        logger.exception("Failed to extract tasks from markdown")
        return []


def _parse_headings(markdown: str) -> list[Task]:
    tasks: list[Task] = []
    current_task: Task | None = None
    current_subtask: Task | None = None

    for raw_line in markdown.split("\n"):
        line = raw_line.strip()

        if line.startswith("# "):
            title = line[2:].strip()
            current_task = Task(
                id=f"task-{len(tasks) + 1}",
                title=title,
                category=categorize_task(title),
            )
            tasks.append(current_task)
            current_subtask = None
        elif line.startswith("## "):
            if current_task is None:
                continue
            title = line[3:].strip()
            current_subtask = Task(
                id=f"subtask-{len(current_task.subtasks) + 1}",
                title=title,
                category=categorize_task(title),
            )
            current_task.subtasks.append(current_subtask)
        elif line.startswith(("- ", "* ")):
            target = current_subtask or current_task
            if target is not None:
                target.description += f"• {line[2:].strip()}\n"
        elif line:
            target = current_subtask or current_task
            if target is not None:
                target.description += f"{line}\n"

    logger.debug("Extracted %d tasks", len(tasks))
    return tasks


def assign_tasks_to_specialists(tasks: Iterable[Task]) -> TaskAssignmentMap:
    """Bucket tasks and subtasks by category.

    Subtasks are recorded as copies carrying their parent's id.
    """
    assignments = empty_assignments()

    for task in tasks:
        assignments[task.category].append(task)
        for subtask in task.subtasks:
            category = subtask.category or task.category
            assignments[category].append(dataclasses.replace(subtask, parent_id=task.id))

    logger.debug(
        "Task assignments: %s",
        {c.value: len(items) for c, items in assignments.items() if items},
    )
    return assignments


def _preview_lines(titles: list[str], limit: int, label: str = "") -> list[str]:
    lines = [f"- {title}\n" for title in titles[:limit]]
    if len(titles) > limit:
        suffix = f" {label} tasks" if label else ""
        lines.append(f"- ... and {len(titles) - limit} more{suffix}\n")
    return lines


def _count_subtasks(tasks: list[Task]) -> int:
    return sum(len(t.subtasks) for t in tasks)


def generate_task_summary(
    tasks: list[Task],
    assignments: TaskAssignmentMap,
    preview_limit: int = D.DEFAULT_SUMMARY_PREVIEW_LIMIT,
) -> str:
    """Markdown report of the task assignments."""
    summary = ["# Project Analysis Summary\n"]
    summary.append(
        f"I've analyzed your requirements document and extracted {len(tasks)} main tasks "
        f"and {_count_subtasks(tasks)} subtasks.\n"
    )

    summary.append("## Task Assignments\n")
    for category in SUMMARY_ORDER:
        assigned = assignments.get(category, [])
        if not assigned:
            continue
        summary.append(f"### {get_profile(category).title} ({len(assigned)} tasks)\n")
        summary.extend(_preview_lines([t.title for t in assigned], preview_limit))
        summary.append("\n")

    summary.append("## Next Steps\n")
    summary.append("I recommend we take the following steps:\n")
    summary.append("1. Review the task assignments and make any necessary adjustments\n")
    summary.append("2. Prioritize tasks and create a project timeline\n")
    summary.append("3. Set up the initial project architecture\n")
    summary.append("4. Begin development of the highest priority tasks\n\n")

    summary.append("Would you like me to:\n")
    summary.append("1. Provide more details about specific tasks?\n")
    summary.append("2. Create a technical architecture proposal?\n")
    summary.append("3. Propose a development timeline?\n")
    summary.append("4. Something else?\n")

    return "".join(summary)


def find_critical_tasks(
    graph: DependencyGraph,
    size: int = CRITICAL_PATH_SIZE,
) -> list[tuple[str, int]]:
    """Task ids blocking the most other tasks, with their counts.

    Ties keep the order in which the blocking task was first seen.
    """
    counts = Counter(edge.source for edge in graph.dependency_edges())
    # Counter preserves insertion order and sorted() is stable
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:size]


def _find_task(tasks: list[Task], task_id: str) -> Task | None:
    for task in tasks:
        for candidate in task.iter_all():
            if candidate.id == task_id:
                return candidate
    return None


def generate_enhanced_task_summary(
    tasks: list[Task],
    graph: DependencyGraph | None,
    requirements: str,
    preview_limit: int = D.DEFAULT_SUMMARY_PREVIEW_LIMIT,
) -> str:
    """Markdown report with dependency, priority and architecture sections."""
    from .markdown import recommend_architecture_patterns

    summary = ["# Enhanced Project Analysis Summary\n"]
    summary.append(
        f"I've analyzed your requirements document and extracted {len(tasks)} main tasks "
        f"and {_count_subtasks(tasks)} subtasks with dependencies and priority information.\n"
    )

    summary.append("## Task Dependencies\n")
    if graph is not None:
        summary.append(
            "I've identified dependencies between tasks. The dependency graph has "
            f"{len(graph.nodes)} nodes and {len(graph.edges)} connections.\n"
        )
        if len(graph.edges) > CRITICAL_PATH_EDGE_THRESHOLD:
            summary.append("### Critical Path\n")
            summary.append("Tasks on the critical path that should be prioritized:\n")
            critical = find_critical_tasks(graph)
            if critical:
                for task_id, blocked in critical:
                    task = _find_task(tasks, task_id)
                    if task is not None:
                        summary.append(f"- **{task.title}** - Blocks {blocked} other task(s)\n")
            else:
                summary.append("- No critical blocking tasks identified yet\n")
    else:
        summary.append("No dependencies were identified between tasks.\n")

    by_priority = Counter(t.priority for t in tasks)
    summary.append("\n## Priority Breakdown\n")
    summary.append(f"- **High Priority:** {by_priority[TaskPriority.HIGH]} tasks\n")
    summary.append(f"- **Medium Priority:** {by_priority[TaskPriority.MEDIUM]} tasks\n")
    summary.append(f"- **Low Priority:** {by_priority[TaskPriority.LOW]} tasks\n")

    summary.append("\n## Task Categories\n")
    grouped: dict[AgentCategory, list[Task]] = {}
    for task in tasks:
        grouped.setdefault(task.category, []).append(task)
    for category, grouped_tasks in grouped.items():
        name = category.value.capitalize()
        summary.append(f"### {name} ({len(grouped_tasks)} tasks)\n")
        summary.extend(_preview_lines([t.title for t in grouped_tasks], preview_limit, name))
        summary.append("\n")

    summary.append("## Architecture Recommendations\n")
    summary.append("Based on your requirements, I recommend these architectural patterns:\n")
    for index, rec in enumerate(recommend_architecture_patterns(requirements)[:3], start=1):
        summary.append(f"{index}. **{rec.pattern}** - {rec.description}\n")
    summary.append("\n")

    summary.append("## Next Steps\n")
    summary.append("I recommend we take the following steps:\n")
    summary.append("1. Review the identified tasks and dependencies\n")
    summary.append("2. Adjust priorities if needed\n")
    summary.append("3. Begin implementation planning for high-priority tasks\n")
    summary.append("4. Set up technical architecture based on recommendations\n\n")

    summary.append("Would you like me to:\n")
    summary.append("1. Show you the detailed dependency graph?\n")
    summary.append("2. Create a technical architecture proposal based on the recommended patterns?\n")
    summary.append("3. Suggest a development timeline based on task dependencies?\n")
    summary.append("4. Something else?\n")

    return "".join(summary)
