"""ManagerAgent - Project oversight, requirements processing and escalation target."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..agents.base import BaseAgent
from ..agents.models import AgentCategory, Phase
from ..coordination.prompts import PromptStyle, render_phases
from ..core.config import CoordinationConfig, ReportConfig
from ..services import AssistantServices
from . import performance, security
from .detector import ManagerIntent, detect_intent
from .knowledge import generate_knowledge_base_prompt
from .markdown import (
    extract_tasks_with_dependencies,
    generate_dependency_graph,
    recommend_architecture_patterns,
)
from .models import ComplianceRequirement, DependencyGraph, ProjectState, SecurityFinding
from .tasks import (
    assign_tasks_to_specialists,
    extract_tasks_from_markdown,
    generate_enhanced_task_summary,
    generate_task_summary,
)

logger = logging.getLogger(__name__)

PROCESSING_ERROR_MESSAGE = (
    "I encountered an error while processing your requirements document. "
    "Please try again or upload a different file."
)

UPLOAD_PROMPT = (
    "I don't have a requirements document for this project yet. Upload a markdown file "
    "with `# ` headings for main tasks and `## ` headings for subtasks, and I'll extract "
    "the tasks, assign them to the right specialists and map their dependencies."
)

NO_TASKS_YET = (
    "## Task Planning\n\n"
    "No tasks have been extracted yet. Upload a requirements document and I'll break it "
    "into prioritized tasks assigned to each specialist."
)

DEFAULT_APP_NAME = "your e-commerce platform"

CODE_REVIEW_PROMPT = """\
As the Development Manager and lead architect, you're being asked to review code quality.

{user_message}

Provide a thorough code review that covers:
1. Code structure and organization
2. Adherence to best practices
3. Potential bugs or edge cases
4. Performance considerations
5. Security implications (especially important for e-commerce)
6. Maintainability and scalability

Your review should be specific, actionable, and educational. Explain not just what should be changed, but why.
Always consider the e-commerce context and how code quality impacts user experience and business outcomes."""

TECHNICAL_DECISION_PROMPT = """\
As the Development Manager and lead architect, you're being asked to make a technical decision.

{user_message}

Provide a clear decision with:
1. Analysis of different options
2. Pros and cons of each approach
3. Your recommendation and reasoning
4. Implementation considerations
5. Potential risks and mitigation strategies

Your decision should balance technical excellence with practicality for the e-commerce context.
Consider factors like development speed, future scalability, security requirements, and team expertise."""

COORDINATION_PROMPT = """\
As the Development Manager and technical lead, you're being asked to coordinate inputs from multiple specialists.

{user_message}

Your job is to create a clear development plan that:
1. Establishes the correct sequence of tasks
2. Identifies critical dependencies between different parts of the system
3. Highlights integration points that need special attention
4. Provides clear technical guidance on how components should work together
5. Sets quality standards and testing requirements
6. Addresses potential risks and mitigation strategies

Remember that you have final decision-making authority on technical approaches."""

CONSULTATION_PROMPT = """\
As the Development Manager and technical lead for this e-commerce project, you're being consulted by one of your team specialists.

{user_message}

Please provide authoritative guidance that combines your broad technical knowledge with project specifics.
Remember you have oversight across all domains including: frontend, backend, database, DevOps, and UX.
Your goal is to provide clear, actionable direction that will unblock your team member.

Draw on your expertise in:
1. E-commerce architecture patterns
2. Technical standards and best practices
3. Cross-domain integration approaches
4. Risk assessment and mitigation
5. Performance and security considerations"""

DEFAULT_PROMPT = """\
As an AI Development Manager specializing in e-commerce projects, please respond to the following:

User: "{user_message}"

{phase_context}

Your role is to:
1. Provide high-level architectural guidance
2. Help break down complex requirements into manageable tasks
3. Suggest workflows and development approaches
4. Coordinate between different aspects of the e-commerce development
5. Support team members who need technical guidance across specialties
6. Make authoritative technical decisions when needed
7. Ensure quality, security, and performance standards are met
8. Provide strategic direction aligned with e-commerce best practices

Focus on project structure, dependencies, and integration points between different system components.
As the Development Manager, you have the final say on technical decisions and can provide authoritative guidance across all domains.

If part of the answer depends on a specialist team, add a line of the form
COORDINATE_WITH:<TEAM>:<what you need from them>.
If you are not confident in your answer, start it with ESCALATE:"""

CODE_REVIEW_TESTING_TEMPLATE = """\
{response}

## Code Review and Testing Recommendations

{results}

As the Development Manager, I recommend that all team members follow these testing practices for our e-commerce platform:

1. Write unit tests for all business logic components
2. Implement integration tests for API endpoints and data flows
3. Add end-to-end tests for critical user journeys like checkout
4. Perform security testing on all code that handles user data or payments
5. Test all responsive design breakpoints for mobile and desktop

Would you like me to help set up a testing framework or provide specific test cases for this code?"""

# (phrases, template); first template with any phrase present wins
PROMPT_VARIANTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("review this code", "quality check", "best practices review"), CODE_REVIEW_PROMPT),
    (
        ("technical decision", "architectural choice", "technology selection"),
        TECHNICAL_DECISION_PROMPT,
    ),
    (("synthesize these different specialist inputs",), COORDINATION_PROMPT),
)


class ManagerAgent(BaseAgent):
    """The Development Manager.

    Default recipient of unmatched messages and target of every
    escalation and synthesis. Holds the project state built from the
    latest requirements upload.
    """

    category = AgentCategory.MANAGER
    prompt_style = PromptStyle(
        search_template=(
            "e-commerce project management {message} best practices methodology "
            "leadership architecture"
        ),
    )
    enrichment_templates = {"code-testing": CODE_REVIEW_TESTING_TEMPLATE}

    def __init__(
        self,
        services: AssistantServices | None = None,
        factory=None,
        config: CoordinationConfig | None = None,
        project: ProjectState | None = None,
        reports: ReportConfig | None = None,
    ):
        super().__init__(services=services, factory=factory, config=config)
        self.project = project or ProjectState()
        self.reports = reports or ReportConfig()

    # --- Prompting ---

    def create_prompt(self, message: str, phases: tuple[Phase, ...]) -> str:
        for phrases, template in PROMPT_VARIANTS:
            if any(phrase in message for phrase in phrases):
                return template.format(user_message=message)

        if "One of your team members" in message and "needs guidance" in message:
            return CONSULTATION_PROMPT.format(user_message=message)

        if phases:
            phase_context = f"Consider the current project phases: {render_phases(phases)}"
        else:
            phase_context = (
                "No project structure has been defined yet. Consider asking for a markdown "
                "file or helping the user define project requirements."
            )
        return DEFAULT_PROMPT.format(user_message=message, phase_context=phase_context)

    def should_check_security(self, message: str, draft: str) -> bool:
        # Any code in the draft gets a security pass
        return "```" in draft

    # --- Request handling ---

    async def respond(
        self,
        message: str,
        phases: tuple[Phase, ...] = (),
        *,
        consulted: bool = False,
    ) -> str:
        if consulted:
            return await super().respond(message, phases, consulted=True)

        intent = detect_intent(message)
        logger.debug("Manager intent: %s", intent.value)

        if intent is ManagerIntent.FILE_UPLOAD:
            if not self.project.has_tasks:
                return UPLOAD_PROMPT
            return self.project.summary

        base = await super().respond(message, phases)

        if intent is ManagerIntent.KNOWLEDGE_BASE:
            return f"{base}\n\n{generate_knowledge_base_prompt()}"
        if intent is ManagerIntent.ARCHITECTURE:
            return f"{base}\n\n{self.architecture_report(message)}"
        if intent is ManagerIntent.SECURITY:
            return f"{base}\n\n{security.SECURITY_GUIDANCE}"
        if intent is ManagerIntent.PERFORMANCE:
            return f"{base}\n\n{self.generate_performance_plan(DEFAULT_APP_NAME)}"
        if intent is ManagerIntent.TASK_MANAGEMENT:
            report = self.project.summary if self.project.has_tasks else NO_TASKS_YET
            return f"{base}\n\n{report}"
        return base

    def architecture_report(self, message: str) -> str:
        """Top architecture patterns for the uploaded requirements, else the message."""
        requirements = self.project.requirements or message
        lines = ["## Architecture Recommendations\n\n"]
        for index, rec in enumerate(recommend_architecture_patterns(requirements)[:3], start=1):
            lines.append(f"{index}. **{rec.pattern}** - {rec.description}\n")
        return "".join(lines)

    # --- Requirements processing ---

    def process_markdown(self, markdown: str) -> str:
        """Extract, assign and summarise tasks from a requirements document.

        The project state is replaced only when processing succeeds.
        """
        limit = self.reports.summary_preview_limit
        try:
            graph: DependencyGraph | None
            try:
                tasks = extract_tasks_with_dependencies(markdown)
                graph = generate_dependency_graph(tasks)
            except Exception:
                logger.exception("Dependency-aware extraction failed, using heading parser")
                tasks = extract_tasks_from_markdown(markdown)
                graph = None

            assignments = assign_tasks_to_specialists(tasks)
            if graph is not None:
                summary = generate_enhanced_task_summary(tasks, graph, markdown, limit)
            else:
                summary = generate_task_summary(tasks, assignments, limit)
        except Exception:
            logger.exception("Failed to process requirements document")
            return PROCESSING_ERROR_MESSAGE

        self.project = ProjectState(
            requirements=markdown,
            parsed_tasks=tasks,
            assigned_tasks=assignments,
            graph=graph,
            summary=summary,
        )
        logger.info("Processed requirements: %d tasks", len(tasks))
        return summary

    # --- Reports ---

    def perform_security_scan(self, code: str) -> list[SecurityFinding]:
        return security.perform_security_scan(code)

    def perform_compliance_check(
        self, code: str, standard: str | None = None
    ) -> list[ComplianceRequirement]:
        return security.perform_compliance_check(
            code, standard or self.reports.compliance_standard
        )

    def generate_security_report(
        self,
        findings: Sequence[SecurityFinding],
        requirements: Sequence[ComplianceRequirement],
    ) -> str:
        return security.generate_security_report(findings, requirements)

    def generate_performance_plan(self, app_name: str) -> str:
        return performance.generate_performance_plan(app_name)

    def generate_technical_documentation(self, kind: str) -> str:
        return performance.generate_technical_documentation(kind)
