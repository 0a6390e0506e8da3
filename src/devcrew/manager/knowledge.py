"""Knowledge base prompts, resource scoring and recommendations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

KNOWLEDGE_BASE_PROMPT = """\
## Knowledge Base Enhancement

To better support your e-commerce project, I'd like to build a knowledge base of relevant resources. Could you provide links to:

1. **Technology Documentation** - Links to docs for your preferred tech stack (frontend, backend, database)
2. **Industry Standards** - E-commerce best practices, security standards, accessibility guidelines
3. **Competitor Analysis** - Examples of similar e-commerce platforms you admire or want to reference
4. **Security Compliance** - Any specific security or regulatory requirements your project needs to meet

Adding these resources will help all specialists provide more accurate and relevant guidance throughout the development process.

To add a resource, simply share a link with a brief description of what it contains."""

# Resources scoring at or below this are dropped from search results
RELEVANCE_THRESHOLD = 0.2


@dataclass(frozen=True)
class KnowledgeResource:
    title: str
    url: str
    description: str = ""
    category: str = "other"
    tags: tuple[str, ...] = field(default_factory=tuple)
    relevance_score: float | None = None


def generate_knowledge_base_prompt() -> str:
    return KNOWLEDGE_BASE_PROMPT


def calculate_resource_relevance(resource: KnowledgeResource, query: str) -> float:
    """Score between 0 and 1 from per-term hits in title, description, tags and category."""
    if not query:
        return 0.0

    terms = query.lower().split()
    title = resource.title.lower()
    description = resource.description.lower()
    category = resource.category.lower()
    tags = [tag.lower() for tag in resource.tags]

    score = 0.0
    for term in terms:
        if term in title:
            score += 0.3
        if term in description:
            score += 0.2
        score += 0.4 * sum(1 for tag in tags if term in tag)
        if term in category:
            score += 0.1

    return min(1.0, score)


def search_knowledge_base(
    resources: list[KnowledgeResource],
    query: str,
) -> list[KnowledgeResource]:
    """Resources relevant to the query, most relevant first, with scores attached."""
    if not query or not resources:
        return []

    scored = [(resource, calculate_resource_relevance(resource, query)) for resource in resources]
    relevant = [item for item in scored if item[1] > RELEVANCE_THRESHOLD]
    relevant.sort(key=lambda item: item[1], reverse=True)
    return [replace(resource, relevance_score=score) for resource, score in relevant]


def categorize_resource(resource: KnowledgeResource) -> str:
    """technical, standards, competitors, security or other."""
    url = resource.url.lower()
    title = resource.title.lower()
    description = resource.description.lower()

    if (
        "docs." in url
        or "/documentation" in url
        or any(word in title for word in ("documentation", "guide", "reference"))
    ):
        return "technical"
    if any(word in title for word in ("standard", "best practice", "guideline")) or any(
        word in description for word in ("standard", "best practice")
    ):
        return "standards"
    if "competitor" in title or any(
        word in description for word in ("competitor", "similar platform")
    ):
        return "competitors"
    if any(word in title for word in ("security", "compliance", "gdpr", "pci")) or any(
        word in description for word in ("security", "compliance")
    ):
        return "security"
    return "other"


RESOURCE_RULES: tuple[tuple[re.Pattern[str], tuple[str, ...]], ...] = (
    (
        re.compile(
            r"ui|interface|component|screen|frontend|css|html|style|responsive|mobile|desktop",
            re.I,
        ),
        (
            "Frontend design documentation",
            "UI component libraries",
            "Responsive design guidelines",
        ),
    ),
    (
        re.compile(
            r"api|endpoint|server|backend|auth|authentication|authorization|middleware|service",
            re.I,
        ),
        (
            "Backend frameworks documentation",
            "API design best practices",
            "Authentication implementation guides",
        ),
    ),
    (
        re.compile(r"database|schema|model|entity|table|query|sql|nosql", re.I),
        (
            "Database modeling guides",
            "Query optimization resources",
            "Data migration strategies",
        ),
    ),
    (
        re.compile(r"payment|checkout|cart|product|inventory|order|shipping", re.I),
        (
            "E-commerce platform comparison",
            "Payment gateway documentation",
            "E-commerce UX best practices",
        ),
    ),
    (
        re.compile(r"security|secure|encryption|protection|privacy|compliance", re.I),
        (
            "Web application security checklists",
            "OWASP top 10 vulnerabilities",
            "Data protection regulations",
        ),
    ),
)


def generate_resource_recommendations(requirements: str) -> list[str]:
    """Resource types worth collecting for a set of requirements."""
    recommendations: list[str] = []
    for pattern, resources in RESOURCE_RULES:
        if pattern.search(requirements):
            recommendations.extend(resources)
    return recommendations
