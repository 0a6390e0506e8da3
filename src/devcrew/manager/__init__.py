"""Development Manager - requirements processing, reports and oversight."""

from .agent import PROCESSING_ERROR_MESSAGE, ManagerAgent
from .detector import INTENT_RULES, ManagerIntent, detect_intent
from .models import (
    ComplianceRequirement,
    ComplianceStatus,
    DependencyGraph,
    FindingType,
    ProjectState,
    SecurityFinding,
    Severity,
    Task,
    TaskPriority,
)
from .security import generate_security_report, perform_compliance_check, perform_security_scan
from .tasks import (
    assign_tasks_to_specialists,
    extract_tasks_from_markdown,
    generate_enhanced_task_summary,
    generate_task_summary,
)

__all__ = [
    "ComplianceRequirement",
    "ComplianceStatus",
    "DependencyGraph",
    "FindingType",
    "INTENT_RULES",
    "ManagerAgent",
    "ManagerIntent",
    "PROCESSING_ERROR_MESSAGE",
    "ProjectState",
    "SecurityFinding",
    "Severity",
    "Task",
    "TaskPriority",
    "assign_tasks_to_specialists",
    "detect_intent",
    "extract_tasks_from_markdown",
    "generate_enhanced_task_summary",
    "generate_security_report",
    "generate_task_summary",
    "perform_compliance_check",
    "perform_security_scan",
]
