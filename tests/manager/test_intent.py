"""Tests for Manager intent detection."""

from __future__ import annotations

import pytest

from devcrew.manager.detector import ManagerIntent, detect_intent


class TestDetectIntent:
    @pytest.mark.parametrize(
        "message, intent",
        [
            ("I uploaded the requirements document", ManagerIntent.FILE_UPLOAD),
            ("Please analyze this file", ManagerIntent.FILE_UPLOAD),
            ("Any tutorial links?", ManagerIntent.KNOWLEDGE_BASE),
            ("What stack should we use?", ManagerIntent.ARCHITECTURE),
            ("Is our code owasp compliant", ManagerIntent.SECURITY),
            ("The site feels slow", ManagerIntent.PERFORMANCE),
            ("What is the timeline?", ManagerIntent.TASK_MANAGEMENT),
            ("hello there", ManagerIntent.DEFAULT),
        ],
    )
    def test_intents(self, message, intent):
        assert detect_intent(message) is intent

    def test_first_rule_wins(self):
        # Knowledge-base wording is checked before security wording
        assert detect_intent("security best practice") is ManagerIntent.KNOWLEDGE_BASE
        # Upload wording beats everything
        assert detect_intent("project spec security review") is ManagerIntent.FILE_UPLOAD

    def test_case_insensitive(self):
        assert detect_intent("SECURITY SCAN please") is ManagerIntent.SECURITY
