"""Tests for the security scan, compliance checks and report."""

from __future__ import annotations

from datetime import datetime

import pytest

from devcrew.manager.models import (
    ComplianceRequirement,
    ComplianceStatus,
    FindingType,
    SecurityFinding,
    Severity,
)
from devcrew.manager.security import (
    generate_security_report,
    overall_risk_level,
    perform_compliance_check,
    perform_security_scan,
)


def descriptions(findings):
    return [f.description for f in findings]


def finding(severity, type_=FindingType.VULNERABILITY):
    return SecurityFinding(
        id="sec-x",
        type=type_,
        severity=severity,
        description=f"{severity.value} issue",
        recommendation=f"Fix the {severity.value} issue.",
        code_location="somewhere",
    )


def requirement(status):
    return ComplianceRequirement(
        id="comp-x",
        name=f"{status.value} req",
        description="d",
        status=status,
        recommendation="r",
    )


class TestSecurityScan:
    def test_parameterized_query_is_not_sql_injection(self):
        code = 'db.query("SELECT * FROM users WHERE id = ?", [id]);  // parameterized query'
        findings = perform_security_scan(code)
        assert not any("SQL Injection" in d for d in descriptions(findings))

    def test_placeholder_query_is_not_flagged(self):
        code = 'db.query("SELECT * FROM users WHERE id = ?", [id]);'
        findings = perform_security_scan(code)
        assert not any("SQL Injection" in d for d in descriptions(findings))

    def test_interpolated_query_is_flagged(self):
        code = "db.query(`SELECT * FROM users WHERE id = ${id}`);"
        findings = perform_security_scan(code)
        (sql,) = [f for f in findings if "SQL Injection" in f.description]
        assert sql.severity is Severity.HIGH
        assert sql.type is FindingType.VULNERABILITY
        assert sql.id.startswith("sec-")

    def test_hardcoded_credentials_need_a_literal(self):
        flagged = perform_security_scan('const apiKey = "sk_live_12345678";')
        clean = perform_security_scan("const apiKey = process.env.API_KEY;")

        (creds,) = [f for f in flagged if "hardcoded credentials" in f.description]
        assert creds.severity is Severity.CRITICAL
        assert not any("hardcoded credentials" in d for d in descriptions(clean))

    def test_xss_mitigated_by_sanitizer(self):
        assert any("XSS" in d for d in descriptions(perform_security_scan("el.innerHTML = html")))
        sanitized = perform_security_scan("el.innerHTML = DOMPurify.sanitize(html)")
        assert not any("XSS" in d for d in descriptions(sanitized))

    def test_image_alt_text(self):
        assert descriptions(perform_security_scan('<img src="a.png">')) == [
            "Image elements without alt attributes may not be WCAG compliant."
        ]
        assert perform_security_scan('<img src="a.png" alt="Logo">') == []

    def test_empty_code(self):
        assert perform_security_scan("") == []

    def test_ids_are_numbered_per_scan(self):
        code = "md5(password); eval(input)"
        first = perform_security_scan(code)
        second = perform_security_scan(code)
        assert first
        ids = [f.id for f in first]
        assert ids == [f"sec-{n}" for n in range(1, len(first) + 1)]
        assert [f.id for f in second] == ids


class TestComplianceCheck:
    def test_owasp_checks(self):
        requirements = perform_compliance_check("")
        assert [r.id for r in requirements] == [
            "comp-owasp-1",
            "comp-owasp-2",
            "comp-owasp-3",
            "comp-owasp-5",
            "comp-owasp-6",
            "comp-owasp-7",
        ]
        statuses = {r.name: r.status for r in requirements}
        assert statuses["Secure Configuration"] is ComplianceStatus.WARNING
        assert statuses["Injection Prevention"] is ComplianceStatus.PASSED

    @pytest.mark.parametrize(
        "code, name",
        [
            ("eval(userInput)", "Injection Prevention"),
            ("el.innerHTML = html", "XSS Prevention"),
        ],
    )
    def test_failures(self, code, name):
        statuses = {r.name: r.status for r in perform_compliance_check(code, "owasp")}
        assert statuses[name] is ComplianceStatus.FAILED

    def test_gdpr(self):
        requirements = perform_compliance_check("", "GDPR")
        assert [r.id for r in requirements] == [
            "comp-gdpr-1",
            "comp-gdpr-2",
            "comp-gdpr-3",
            "comp-gdpr-4",
        ]
        assert [r.status for r in requirements] == [
            ComplianceStatus.PASSED,
            ComplianceStatus.WARNING,
            ComplianceStatus.WARNING,
            ComplianceStatus.WARNING,
        ]

    def test_unknown_standard(self):
        assert perform_compliance_check("eval(x)", "pci") == []


class TestRiskLevel:
    def test_low_when_clean(self):
        assert overall_risk_level([], []) == "Low"

    def test_critical_finding(self):
        assert overall_risk_level([finding(Severity.CRITICAL)], []) == "Critical"

    def test_high_finding_or_failure(self):
        assert overall_risk_level([finding(Severity.HIGH)], []) == "High"
        assert overall_risk_level([], [requirement(ComplianceStatus.FAILED)]) == "High"

    def test_many_failures_are_critical(self):
        failed = [requirement(ComplianceStatus.FAILED)] * 3
        assert overall_risk_level([], failed) == "Critical"

    def test_medium(self):
        assert overall_risk_level([finding(Severity.MEDIUM)], []) == "Medium"
        warnings = [requirement(ComplianceStatus.WARNING)] * 4
        assert overall_risk_level([], warnings) == "Medium"

    def test_only_vulnerabilities_count(self):
        best_practice = finding(Severity.HIGH, FindingType.BEST_PRACTICE)
        assert overall_risk_level([best_practice], []) == "Low"


class TestSecurityReport:
    def test_report_sections(self):
        findings = [finding(Severity.CRITICAL), finding(Severity.LOW, FindingType.COMPLIANCE)]
        requirements = [
            requirement(ComplianceStatus.FAILED),
            requirement(ComplianceStatus.PASSED),
        ]

        report = generate_security_report(
            findings, requirements, generated_at=datetime(2024, 5, 1, 9, 30)
        )

        assert report.startswith("# Security Assessment Report\n\n")
        assert "Report generated on: 2024-05-01 09:30:00" in report
        assert "- Critical: 1\n" in report
        assert "- Compliance Issues: 1\n" in report
        assert "**Overall Risk Level: Critical**" in report
        assert "### Critical Vulnerabilities" in report
        assert "### Failed Requirements" in report
        assert "### Passed Requirements" in report
        assert "### Immediate Actions\n\n- Fix the critical issue.\n" in report
        assert "### High Priority Actions\n\n- r\n" in report

    def test_empty_report(self):
        report = generate_security_report([], [])
        assert "**Overall Risk Level: Low**" in report
        assert "## Detailed Findings" not in report
        assert "## Compliance Requirements" not in report
        assert "### General Recommendations" in report
