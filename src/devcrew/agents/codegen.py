"""Code generation requests and heuristic review of generated code.

Used by the e-commerce agent: a request is classified into a code type and
a language, the generated code is reviewed with the security collaborator
plus a few keyword heuristics, and everything is rendered as markdown.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

CODE_REQUEST = re.compile(
    r"\b(?:generate|create|build|code|implement|develop|example|component|function"
    r"|class|schema)",
    re.IGNORECASE,
)

# First match wins; anything else is a component
CODE_TYPES: tuple[tuple[str, str], ...] = (
    ("database|schema", "schema"),
    ("api|endpoint", "api"),
    ("function|utility", "utility"),
    ("hook", "hook"),
)
DEFAULT_CODE_TYPE = "component"

COMPONENT_KEYWORDS = (
    "product card", "product list", "product detail", "cart", "checkout",
    "payment form", "order summary", "navigation", "search", "filter",
    "user profile", "login", "registration", "wishlist", "review",
)
ENTITY_KEYWORDS = (
    "product", "order", "user", "customer", "cart", "category",
    "review", "payment", "shipping", "inventory", "discount",
)
DATABASE_NAMES: dict[str, str] = {
    "postgresql": "PostgreSQL",
    "postgres": "PostgreSQL",
    "mysql": "MySQL",
    "mongodb": "MongoDB",
    "nosql": "MongoDB",
    "sql server": "SQL Server",
    "sqlite": "SQLite",
}
DEFAULT_DATABASE = "PostgreSQL"

CLEAN_SECURITY_RESULT = re.compile(r"no (?:obvious )?security (?:issues|findings)", re.I)

CODE_PROMPT_TEMPLATE = """\
As an AI {title} specializing in e-commerce platforms, generate {language} code.

Code type: {code_type}
{subject}
Requirements: "{requirements}"

Return production-ready code only, with proper decimal handling for money
and no hardcoded secrets."""

USAGE_NOTES: dict[str, str] = {
    "component": (
        "This component can be integrated into your e-commerce application by:\n\n"
        "1. Saving it to a file in your components directory\n"
        "2. Importing it where needed\n"
        "3. Passing the required props\n\n"
        "You may need to adjust this component to work with your state management "
        "solution and API endpoints."
    ),
    "schema": (
        "This schema can be implemented in your database by:\n\n"
        "1. Running the migration/schema creation script\n"
        "2. Ensuring proper indices for optimal query performance\n"
        "3. Setting up proper relationships with other entities\n\n"
        "Consider adding appropriate validation and business rules in your "
        "application layer."
    ),
    "api": (
        "This API endpoint can be implemented by:\n\n"
        "1. Adding it to your routes/controllers\n"
        "2. Implementing proper authentication and authorization\n"
        "3. Adding input validation and error handling\n\n"
        "Ensure you've properly secured the endpoint and validated all inputs."
    ),
}


@dataclass(frozen=True)
class CodeRequest:
    """What to generate for a message."""

    code_type: str
    language: str
    requirements: str
    component: str = ""
    entity: str = ""
    database: str = ""

    @property
    def subject(self) -> str:
        if self.code_type == "component":
            return f"Component: {self.component}"
        if self.code_type == "schema":
            return f"Entity: {self.entity} ({self.database})"
        return ""


@dataclass
class CodeIssue:
    severity: str
    message: str
    line: int | None = None


@dataclass
class CodeEvaluation:
    """Review of a piece of generated code."""

    is_valid: bool = True
    issues: list[CodeIssue] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    security_concerns: list[str] = field(default_factory=list)
    performance_notes: list[str] = field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        return not self.is_valid or bool(self.suggestions) or bool(self.security_concerns)


def is_code_request(message: str) -> bool:
    return CODE_REQUEST.search(message) is not None


def _detect_language(text: str) -> str:
    if "javascript" in text:
        return "javascript/react" if "react" in text else "javascript"
    if "typescript" in text:
        return "typescript/react" if "react" in text else "typescript"
    if "python" in text:
        return "python"
    if "sql" in text or "postgresql" in text:
        return "postgresql"
    if "mongodb" in text or "nosql" in text:
        return "mongodb"
    return "typescript/react"


def _component_name(text: str) -> str:
    for keyword in COMPONENT_KEYWORDS:
        if keyword in text:
            return "".join(word.capitalize() for word in keyword.split())
    return "ProductComponent"


def _entity_name(text: str) -> str:
    for keyword in ENTITY_KEYWORDS:
        if keyword in text:
            return keyword.capitalize()
    return "Product"


def _database_name(text: str) -> str:
    for keyword, name in DATABASE_NAMES.items():
        if keyword in text:
            return name
    return DEFAULT_DATABASE


def analyze_code_request(message: str) -> CodeRequest:
    """Classify a code request. The whole message is the requirement."""
    text = message.lower()
    code_type = next(
        (kind for pattern, kind in CODE_TYPES if re.search(pattern, text)),
        DEFAULT_CODE_TYPE,
    )
    return CodeRequest(
        code_type=code_type,
        language=_detect_language(text),
        requirements=message,
        component=_component_name(text) if code_type == "component" else "",
        entity=_entity_name(text) if code_type == "schema" else "",
        database=_database_name(text) if code_type == "schema" else "",
    )


def render_code_prompt(request: CodeRequest, title: str) -> str:
    return CODE_PROMPT_TEMPLATE.format(
        title=title,
        language=request.language,
        code_type=request.code_type,
        subject=request.subject,
        requirements=request.requirements,
    )


def parse_security_result(result: str) -> list[str]:
    """Turn the bullet lines of a security check into issue strings.

    Lines mentioning a recommendation are advice, not issues.
    """
    if not result or CLEAN_SECURITY_RESULT.search(result):
        return []
    return [
        line[2:]
        for line in result.splitlines()
        if line.startswith("- ") and "recommendation" not in line.lower()
    ]


def code_suggestions(code: str, language: str) -> list[str]:
    suggestions = []
    if "TODO" in code or "FIXME" in code:
        suggestions.append("Replace any TODO or FIXME comments with actual implementations")
    if "console.log" in code and ("javascript" in language or "typescript" in language):
        suggestions.append("Remove console.log statements in production code")
    if re.search(r"https?://", code) and not re.search(r"process\.env|import\.meta\.env", code):
        suggestions.append("Consider moving hardcoded URLs to environment variables")
    if re.search(r"price|amount|total", code):
        suggestions.append("Ensure proper decimal handling for monetary values")
    if "react" in language and "useState" in code and re.search(r"cart|product", code):
        suggestions.append(
            "Consider using a more robust state management solution for cart state"
        )
    return suggestions


def performance_notes(code: str, language: str) -> list[str]:
    notes = []
    if "react" in language:
        if "useEffect" in code and "useCallback" not in code and re.search(r"fetch|axios", code):
            notes.append(
                "Consider using useCallback for functions passed to useEffect "
                "to prevent unnecessary re-renders"
            )
        if "map(" in code and re.search(r"key=\{(?:index|i)\}", code):
            notes.append("Avoid using array indices as React keys when mapping over items")
        if (
            "useState" in code
            and "map(" in code
            and "filter(" in code
            and "useMemo" not in code
        ):
            notes.append(
                "Consider using useMemo for expensive computations like filtering and mapping"
            )

    if "sql" in language:
        if "SELECT *" in code and "LIMIT" not in code:
            notes.append(
                "Specify required columns instead of using SELECT * "
                "and consider adding a LIMIT clause"
            )
        if "CREATE INDEX" not in code and re.search(r"WHERE|JOIN", code):
            notes.append(
                "Consider adding appropriate indices for columns used in WHERE clauses and JOINs"
            )

    if language == "mongodb":
        if "find(" in code and "projection" not in code and "limit" not in code:
            notes.append(
                "Use projections to limit returned fields and consider adding limits to queries"
            )
    return notes


def _bullets(items: list[str]) -> str:
    return "".join(f"- {item}\n" for item in items) + "\n"


def format_code_response(code: str, evaluation: CodeEvaluation, request: CodeRequest) -> str:
    """Render generated code, its review and usage notes as markdown."""
    fence = request.language.split("/")[0]
    parts = [
        f"## Generated {request.code_type.capitalize()} Code ({request.language})\n\n",
        f"```{fence}\n{code}\n```\n\n",
    ]

    if evaluation.has_findings:
        parts.append("## Code Evaluation\n\n")
        if not evaluation.is_valid and evaluation.issues:
            parts.append("### Issues\n\n")
            for issue in evaluation.issues:
                location = f" (Line {issue.line})" if issue.line else ""
                parts.append(f"- **{issue.severity.upper()}**: {issue.message}{location}\n")
            parts.append("\n")
        if evaluation.suggestions:
            parts.append("### Suggestions\n\n" + _bullets(evaluation.suggestions))
        if evaluation.security_concerns:
            parts.append("### Security Considerations\n\n" + _bullets(evaluation.security_concerns))
        if evaluation.performance_notes:
            parts.append("### Performance Notes\n\n" + _bullets(evaluation.performance_notes))

    parts.append("## Usage\n\n")
    parts.append(USAGE_NOTES.get(request.code_type, ""))
    return "".join(parts)
