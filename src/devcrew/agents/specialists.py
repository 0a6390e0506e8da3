"""Specialist agent roles."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..coordination.prompts import PromptStyle, render_prompt
from . import codegen
from .base import BaseAgent
from .classifier import categorize_task
from .models import AgentCategory, ConversationContext, Phase

logger = logging.getLogger(__name__)


class FrontendAgent(BaseAgent):
    """React, Tailwind and responsive UI development."""

    category = AgentCategory.FRONTEND
    prompt_style = PromptStyle(
        focus=(
            "React component architecture and design patterns",
            "Tailwind CSS styling and responsive design principles",
            "State management strategies (Context API, useState, useReducer)",
            "Frontend performance optimization techniques",
            "Accessibility standards and user experience best practices",
            "UI animations and interactive elements",
        ),
        phase_hint="designing UI components",
        area="frontend",
        closing=(
            "Provide concrete code examples when applicable, focusing on modern React "
            "patterns with TypeScript and Tailwind CSS.\n"
            "When discussing UI components, emphasize clean, maintainable code architecture."
        ),
    )

    SEARCH_TERMS = ("React", "Tailwind CSS", "UI component", "responsive design")

    def create_search_query(self, message: str, phases: tuple[Phase, ...] = ()) -> str:
        project_terms = _frontend_tasks(phases)[:2]
        return (
            f"{' '.join(self.SEARCH_TERMS)} {' '.join(project_terms)} {message} "
            "e-commerce best practices"
        )


def _frontend_tasks(phases: Iterable[Phase]) -> list[str]:
    return [
        task
        for phase in phases
        for task in phase.tasks
        if categorize_task(task) is AgentCategory.FRONTEND
    ]


class BackendAgent(BaseAgent):
    """API design, server architecture and authentication."""

    category = AgentCategory.BACKEND
    prompt_style = PromptStyle(
        focus=(
            "RESTful and GraphQL API design",
            "Authentication systems and security",
            "Payment processing integration",
            "Scalable backend architecture",
            "Serverless function development",
            "Data validation and error handling",
        ),
        phase_hint="designing APIs and backend services",
        area="backend",
        closing=(
            "Provide concrete code examples when applicable, focusing on modern backend "
            "patterns, security best practices, and scalable architectures."
        ),
        search_template="e-commerce backend {message} API design best practices security",
    )


class DatabaseAgent(BaseAgent):
    """Data modeling, schema design and query optimization."""

    category = AgentCategory.DATABASE
    prompt_style = PromptStyle(
        focus=(
            "E-commerce data modeling and schema design",
            "Query optimization for common e-commerce operations",
            "Efficient storage of product catalogs, orders, and user data",
            "Data relationships and integrity constraints",
            "Scaling database operations for high-volume stores",
            "Migration strategies for evolving data needs",
        ),
        phase_hint="designing data models",
        area="database",
        closing=(
            "Provide concrete schema examples and query patterns when applicable, "
            "focusing on performance, scalability, and data integrity."
        ),
        search_template="e-commerce database {message} schema design query optimization",
    )


SECURITY_REQUEST = re.compile(
    r"security|vulnerability|compliance|scan|assessment|hardening|penetration test"
    r"|pen test|security review",
    re.IGNORECASE,
)


class DevOpsAgent(BaseAgent):
    """CI/CD, cloud infrastructure, repository workflows and security hardening."""

    category = AgentCategory.DEVOPS
    prompt_style = PromptStyle(
        focus=(
            "Deployment strategies for e-commerce applications",
            "Setting up CI/CD pipelines for reliable delivery",
            "Infrastructure as code using tools like Terraform or CloudFormation",
            "Containerization with Docker and orchestration with Kubernetes",
            "Cloud service configuration for scalability and high availability",
            "Monitoring, logging, and alerting for e-commerce platforms",
            "GitHub repository management and branch strategies",
            "Pull request workflows and code review processes",
            "Security scanning and vulnerability assessment",
        ),
        phase_hint="designing infrastructure",
        area="DevOps",
        closing=(
            "Provide concrete configuration examples and architecture recommendations "
            "when applicable, focusing on reliability, scalability, and security."
        ),
        search_template=(
            "e-commerce {message} DevOps deployment CI/CD cloud infrastructure GitHub "
            "best practices"
        ),
    )
    security_style = PromptStyle(
        focus=(
            "Security scanning and vulnerability assessment",
            "Compliance checking for DevOps practices",
            "Security hardening for infrastructure and deployments",
            "Implementing security in CI/CD pipelines",
            "DevSecOps best practices",
            "Container and cloud security",
            "Network security configurations",
        ),
        phase_hint="hardening the platform",
        area="DevSecOps",
        closing=(
            "Provide concrete recommendations for improving security in the e-commerce "
            "application's DevOps processes.\n"
            "Focus on practical steps that can be implemented immediately, as well as "
            "longer-term security improvements."
        ),
        search_template=(
            "e-commerce {message} security DevOps vulnerability assessment hardening "
            "compliance best practices"
        ),
    )

    def _style_for(self, message: str) -> PromptStyle:
        if SECURITY_REQUEST.search(message):
            return self.security_style
        return self.prompt_style

    def create_prompt(self, message: str, phases: tuple[Phase, ...]) -> str:
        context = ConversationContext(user_message=message, project_phases=phases)
        return render_prompt(context, self.profile, self._style_for(message))

    def create_search_query(self, message: str, phases: tuple[Phase, ...] = ()) -> str:
        return self._style_for(message).search_template.format(message=message)


class UXAgent(BaseAgent):
    """User research, interaction design and conversion optimization."""

    category = AgentCategory.UX
    prompt_style = PromptStyle(
        focus=(
            "E-commerce user experience patterns and best practices",
            "Conversion-optimized user flows and checkout processes",
            "Accessible interface design (WCAG compliance)",
            "Mobile-first and responsive design approaches",
            "User testing methodologies for e-commerce",
            "Information architecture for product catalogs and navigation",
        ),
        phase_hint="designing user experiences",
        area="UX",
        closing=(
            "Provide concrete UX recommendations and interface patterns when applicable, "
            "focusing on conversion optimization, accessibility, and usability."
        ),
        search_template=(
            "e-commerce {message} UX design user experience conversion optimization "
            "best practices"
        ),
    )


COMPLIANCE_GUIDANCE = """\


## Compliance Notes

- Never store raw card data; use the payment provider's tokenisation (PCI-DSS).
- Serve checkout and account pages over HTTPS only.
- Collect only the customer data you need and document how long it is kept (GDPR).
- Log payment and order state changes for audit, without sensitive fields."""


CODE_GENERATION_APOLOGY = (
    "I apologize, but I encountered an error while generating code. "
    "Please try again with more specific requirements."
)


class EcommerceAgent(BaseAgent):
    """E-commerce workflows, carts, payments and order management.

    Requests for code are answered with generated code and a review of it.
    Every other reply carries a short compliance note for payment handling
    and customer data.
    """

    category = AgentCategory.ECOMMERCE
    prompt_style = PromptStyle(
        focus=(
            "E-commerce workflows and shopping cart systems",
            "Payment integrations and PCI-DSS compliant checkout flows",
            "Product catalog design and inventory management",
            "Order management, shipping and tax calculation",
            "E-commerce security & compliance",
        ),
        phase_hint="designing commerce features",
        area="e-commerce",
        search_template="e-commerce {message} checkout payments catalog best practices",
    )

    async def respond(
        self,
        message: str,
        phases: tuple[Phase, ...] = (),
        *,
        consulted: bool = False,
    ) -> str:
        if not consulted and codegen.is_code_request(message):
            return await self.generate_code(message)
        reply = await super().respond(message, phases, consulted=consulted)
        return reply + COMPLIANCE_GUIDANCE

    async def generate_code(self, message: str) -> str:
        """Generate code for a request and append a review of it.

        Failures are logged and turned into a fixed apology.
        """
        request = codegen.analyze_code_request(message)
        try:
            prompt = codegen.render_code_prompt(request, self.title)
            code = await self.call_service(self.services.generate(prompt))
            evaluation = await self.evaluate_code(code, request.language)
        except Exception:
            logger.exception("%s failed to generate %s code", self.name, request.code_type)
            return CODE_GENERATION_APOLOGY
        return codegen.format_code_response(code, evaluation, request)

    async def evaluate_code(self, code: str, language: str) -> codegen.CodeEvaluation:
        """Review code with the security collaborator and keyword heuristics."""
        try:
            result = await self.call_service(self.services.check_security(code))
        except Exception:
            logger.warning("%s could not run the security check", self.name, exc_info=True)
            return codegen.CodeEvaluation(
                security_concerns=["Could not perform security analysis."],
            )

        concerns = codegen.parse_security_result(result)
        return codegen.CodeEvaluation(
            is_valid=not concerns,
            issues=[codegen.CodeIssue(severity="warning", message=c) for c in concerns],
            suggestions=codegen.code_suggestions(code, language),
            security_concerns=concerns,
            performance_notes=codegen.performance_notes(code, language),
        )


SPECIALIST_CLASSES: dict[AgentCategory, type[BaseAgent]] = {
    AgentCategory.FRONTEND: FrontendAgent,
    AgentCategory.BACKEND: BackendAgent,
    AgentCategory.DATABASE: DatabaseAgent,
    AgentCategory.DEVOPS: DevOpsAgent,
    AgentCategory.UX: UXAgent,
    AgentCategory.ECOMMERCE: EcommerceAgent,
}
