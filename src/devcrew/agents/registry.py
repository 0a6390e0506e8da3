"""AgentRegistry - Static registry of agent profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .models import AgentCategory, AgentProfile

# Built-in agent profiles, one per category. Immutable after import.
BUILTIN_PROFILES: Mapping[AgentCategory, AgentProfile] = MappingProxyType(
    {
        AgentCategory.MANAGER: AgentProfile(
            category=AgentCategory.MANAGER,
            name="DevManager",
            title="Development Manager",
            description="Coordinates project phases and integrates work from all specialized agents",
            expertise=(
                "Project planning",
                "Task breakdown",
                "Sprint planning",
                "Resource allocation",
                "Technical requirements gathering",
                "Cross-functional team coordination",
                "Technical oversight and guidance",
                "Architectural decision-making",
                "Quality assurance",
                "Security review",
                "Vulnerability assessment",
                "Compliance checking",
                "Performance optimization strategy",
                "E-commerce domain expertise",
                "Knowledge base management",
                "Testing strategy development",
            ),
            handles_everything=True,
        ),
        AgentCategory.FRONTEND: AgentProfile(
            category=AgentCategory.FRONTEND,
            name="FrontendDev",
            title="Frontend Developer",
            description="Expert in React, Tailwind, and responsive UI development",
            expertise=(
                "React components",
                "Tailwind CSS styling",
                "Responsive design",
                "State management",
                "Frontend performance optimization",
                "Accessibility",
                "UI/UX design principles",
                "UI animations",
                "Frontend testing",
                "Component architecture",
                "Design systems",
            ),
            patterns=(
                "frontend", r"\bui\b", r"\bux\b", "component", "react", "design", r"\bcss\b",
                "tailwind", r"\bstyle", "layout", "responsive", "mobile", "desktop",
                "animation", "transition", "state management", "redux", r"\bhooks?\b",
                "interface", "button", r"\bforms?\b", r"\binput", r"\bmodal", "sidebar",
                "navbar", "design system", r"\btheme", "accessibility", r"\ba11y\b",
            ),
        ),
        AgentCategory.BACKEND: AgentProfile(
            category=AgentCategory.BACKEND,
            name="BackendDev",
            title="Backend Developer",
            description="Expert in API design, server architecture, and authentication",
            expertise=(
                "API design (REST and GraphQL)",
                "Authentication & authorization",
                "Payment processing integration",
                "Backend architecture",
                "Serverless functions",
                "Performance optimization",
                "Security best practices",
                "Server-side validation",
            ),
            patterns=(
                "backend", "server", "api", "endpoint", r"\broute", "controller",
                "middleware", "authentication", "authorization", r"\bjwt\b", "session",
                "serverless", "lambda", "function", "security", "validation",
            ),
        ),
        AgentCategory.DATABASE: AgentProfile(
            category=AgentCategory.DATABASE,
            name="DataArchitect",
            title="Database Architect",
            description="Expert in data modeling, schema design, and query optimization",
            expertise=(
                "Data modeling",
                "SQL and NoSQL databases",
                "Query optimization",
                "Indexing strategies",
                "Migrations and seeding",
                "Data integrity and constraints",
                "Backup and recovery",
            ),
            patterns=(
                "database", "schema", "table", "quer", r"\bsql\b",
                "nosql", "mongodb", "postgresql", "data model", "migration", "seeding",
                r"\bindex", "relation", "foreign key", "primary key", "constraint",
                "normalization",
            ),
        ),
        AgentCategory.DEVOPS: AgentProfile(
            category=AgentCategory.DEVOPS,
            name="DevOpsEng",
            title="DevOps Engineer",
            description="Expert in CI/CD, cloud infrastructure, and repository workflows",
            expertise=(
                "CI/CD pipelines",
                "Docker and Kubernetes",
                "Cloud infrastructure (AWS, Azure, GCP)",
                "Monitoring and logging",
                "GitHub repository management",
                "Branching strategies",
                "Security scanning and hardening",
            ),
            patterns=(
                "deployment", "ci/cd", "docker", "kubernetes", r"\baws\b", "azure", r"\bgcp\b",
                "scaling", "monitoring", "logging", "performance", "infrastructure",
                "container", "cloud", "pipeline", "automation", "devops", "github",
                "repository", r"\bbranch", "workflow", "pull request", r"\bpr\b", r"\bgit\b",
                "security", "vulnerability", "compliance", "scanning", "hardening",
            ),
        ),
        AgentCategory.UX: AgentProfile(
            category=AgentCategory.UX,
            name="UXDesigner",
            title="UX Designer",
            description="Expert in user research, interaction design, and conversion optimization",
            expertise=(
                "User research",
                "Information architecture",
                "Wireframing and prototyping",
                "Usability testing",
                "Accessibility standards",
                "Conversion optimization",
                "Interaction design",
            ),
            patterns=(
                "user experience", r"\bux\b", "usability", "accessibility", "user flow",
                "information architecture", "wireframe", "prototype", "user research",
                "persona", "journey map", "interaction design", "conversion", "funnel",
            ),
        ),
        AgentCategory.ECOMMERCE: AgentProfile(
            category=AgentCategory.ECOMMERCE,
            name="EcommerceExpert",
            title="E-commerce Development Specialist",
            description="Specializes in e-commerce architecture, component design, and best practices",
            expertise=(
                "E-commerce workflows",
                "Shopping cart systems",
                "Payment integrations",
                "Product catalog design",
                "Order management",
                "E-commerce security & compliance",
            ),
            patterns=(
                "shopping cart", "checkout", "payment", "product", r"\border", "catalog",
                "e-commerce", "ecommerce", r"\bshop", "store", "customer", "inventory",
                "pricing", "discount", "coupon", "shipping", "tax", "cart", "wishlist",
            ),
        ),
    }
)


def get_profile(category: AgentCategory) -> AgentProfile:
    """Get the built-in profile for a category."""
    return BUILTIN_PROFILES[category]


@dataclass
class AgentRegistry:
    """Read-only view over agent profiles."""

    profiles: Mapping[AgentCategory, AgentProfile] = field(
        default_factory=lambda: BUILTIN_PROFILES
    )

    def get(self, category: AgentCategory) -> AgentProfile:
        """Get a profile by category."""
        return self.profiles[category]

    def list_all(self) -> list[AgentProfile]:
        """List all profiles in category order."""
        return [self.profiles[c] for c in AgentCategory if c in self.profiles]

    def list_for_message(self, message: str) -> list[AgentProfile]:
        """Profiles whose vocabulary applies to a message."""
        return [p for p in self.list_all() if p.can_handle(message)]
