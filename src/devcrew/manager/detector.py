"""Intent detection for messages addressed to the Development Manager."""

from __future__ import annotations

import re
from enum import Enum


class ManagerIntent(Enum):
    FILE_UPLOAD = "file-upload"
    KNOWLEDGE_BASE = "knowledge-base"
    ARCHITECTURE = "architecture"
    SECURITY = "security"
    PERFORMANCE = "performance"
    TASK_MANAGEMENT = "task-management"
    DEFAULT = "default"


# Checked in order; first match wins
INTENT_RULES: tuple[tuple[ManagerIntent, re.Pattern[str]], ...] = (
    (
        ManagerIntent.FILE_UPLOAD,
        re.compile(
            r"analyze this file|uploaded|file upload|requirements document|spec document"
            r"|project spec",
            re.I,
        ),
    ),
    (
        ManagerIntent.KNOWLEDGE_BASE,
        re.compile(
            r"knowledge base|documentation|reference|resource|link|article|guide|tutorial"
            r"|standard|best practice|example",
            re.I,
        ),
    ),
    (
        ManagerIntent.ARCHITECTURE,
        re.compile(
            r"architecture|system design|component|diagram|structure|high level design"
            r"|technical architecture|stack|technology choice",
            re.I,
        ),
    ),
    (
        ManagerIntent.SECURITY,
        re.compile(
            r"security|vulnerability|compliance|secure coding|owasp|penetration test"
            r"|security scan",
            re.I,
        ),
    ),
    (
        ManagerIntent.PERFORMANCE,
        re.compile(
            r"performance|optimization|speed|latency|slow|fast|metrics|benchmark|monitoring",
            re.I,
        ),
    ),
    (
        ManagerIntent.TASK_MANAGEMENT,
        re.compile(
            r"task|assignment|priority|dependency|milestone|timeline|schedule|plan|roadmap",
            re.I,
        ),
    ),
)


def detect_intent(message: str) -> ManagerIntent:
    for intent, pattern in INTENT_RULES:
        if pattern.search(message):
            return intent
    return ManagerIntent.DEFAULT
