"""Security and compliance heuristics.

Each check is a pattern / mitigation pair over a code blob: the check
fires when the pattern is present and the mitigation is absent. This is
keyword matching, not static analysis.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from .models import (
    ComplianceRequirement,
    ComplianceStatus,
    FindingType,
    SecurityFinding,
    Severity,
)


@dataclass(frozen=True)
class ScanRule:
    """Fires when ``pattern`` matches and ``mitigation`` (if any) does not."""

    pattern: str
    mitigation: str | None
    type: FindingType
    severity: Severity
    description: str
    recommendation: str
    code_location: str
    # Additional pattern that must also match
    also_requires: str | None = None
    case_sensitive: bool = False

    def fires(self, code: str) -> bool:
        flags = 0 if self.case_sensitive else re.IGNORECASE
        if not re.search(self.pattern, code, flags):
            return False
        if self.also_requires and not re.search(self.also_requires, code):
            return False
        if self.mitigation and re.search(self.mitigation, code, re.IGNORECASE):
            return False
        return True


SCAN_RULES: tuple[ScanRule, ...] = (
    ScanRule(
        pattern=r"SELECT .* FROM .* WHERE .* = .*\$",
        mitigation=r"parameterized|prepared statement",
        type=FindingType.VULNERABILITY,
        severity=Severity.HIGH,
        description="Potential SQL Injection vulnerability detected.",
        recommendation=(
            "Use parameterized queries or prepared statements instead of string concatenation."
        ),
        code_location="SQL query using string concatenation",
    ),
    ScanRule(
        pattern=r"innerHTML|dangerouslySetInnerHTML",
        mitigation=r"sanitize|DOMPurify",
        type=FindingType.VULNERABILITY,
        severity=Severity.MEDIUM,
        description="Potential Cross-Site Scripting (XSS) vulnerability detected.",
        recommendation=(
            "Sanitize user input before inserting into the DOM. "
            "Consider using libraries like DOMPurify."
        ),
        code_location="DOM manipulation using innerHTML or dangerouslySetInnerHTML",
    ),
    ScanRule(
        pattern=r"password|apiKey|secret|token|key|credential",
        also_requires=r"(\"|')([a-zA-Z0-9_\-$%^&*!@#]{8,})(\"|')",
        mitigation=None,
        type=FindingType.VULNERABILITY,
        severity=Severity.CRITICAL,
        description="Potential hardcoded credentials detected.",
        recommendation=(
            "Use environment variables or a secure secrets management solution "
            "instead of hardcoding sensitive values."
        ),
        code_location="Hardcoded credential in code",
    ),
    ScanRule(
        pattern=r"params.id|req.params|request.params|userId|user_id",
        mitigation=r"authorize|authentication|permission|access control",
        type=FindingType.VULNERABILITY,
        severity=Severity.MEDIUM,
        description="Potential Insecure Direct Object Reference (IDOR) vulnerability detected.",
        recommendation=(
            "Implement proper authorization checks before accessing resources "
            "based on user input IDs."
        ),
        code_location="Resource access using parameters without authorization checks",
    ),
    ScanRule(
        pattern=r"md5|sha1|createCipher",
        mitigation=None,
        type=FindingType.VULNERABILITY,
        severity=Severity.HIGH,
        description="Use of weak cryptographic algorithms detected.",
        recommendation=(
            "Use modern cryptographic algorithms (SHA256, SHA3) and libraries like "
            "bcrypt for password hashing."
        ),
        code_location="Weak cryptographic algorithm usage",
    ),
    ScanRule(
        pattern=r"console\.error\(err\)|console\.log\(error\)|res\.status\(500\)\.send\(error\)",
        mitigation=None,
        type=FindingType.BEST_PRACTICE,
        severity=Severity.MEDIUM,
        description="Potentially sensitive error details may be exposed to users.",
        recommendation=(
            "Implement proper error handling and logging that doesn't expose sensitive "
            "information to end users."
        ),
        code_location="Error message disclosure",
    ),
    ScanRule(
        pattern=r"req\.body|request\.body|event\.body|params",
        mitigation=r"validate|sanitize|schema|zod|yup|joi",
        type=FindingType.BEST_PRACTICE,
        severity=Severity.MEDIUM,
        description="Missing input validation for user-supplied data.",
        recommendation="Implement input validation using libraries like Zod, Yup, or Joi.",
        code_location="User input without validation",
    ),
    ScanRule(
        pattern=r"form|post|put|delete",
        mitigation=r"csrf|csrfToken|X-CSRF-Token",
        type=FindingType.BEST_PRACTICE,
        severity=Severity.MEDIUM,
        description="Potential missing CSRF protection for state-changing operations.",
        recommendation="Implement CSRF tokens for all state-changing operations.",
        code_location="Form or state-changing request without CSRF protection",
    ),
    ScanRule(
        pattern=r"<script>|script src|fetch|axios|XMLHttpRequest",
        mitigation=r"Content-Security-Policy|CSP",
        type=FindingType.BEST_PRACTICE,
        severity=Severity.LOW,
        description="No Content Security Policy detected.",
        recommendation=(
            "Implement a Content Security Policy to protect against XSS and data "
            "injection attacks."
        ),
        code_location="Client-side code without CSP",
    ),
    ScanRule(
        pattern=r"<img",
        mitigation=r"alt=",
        type=FindingType.COMPLIANCE,
        severity=Severity.LOW,
        description="Image elements without alt attributes may not be WCAG compliant.",
        recommendation="Add descriptive alt attributes to all image elements for accessibility.",
        code_location="Image without alt attribute",
    ),
    ScanRule(
        pattern=r"cookie|localStorage|sessionStorage|indexedDB",
        mitigation=r"consent|gdpr|privacy",
        type=FindingType.COMPLIANCE,
        severity=Severity.MEDIUM,
        description="Data storage without explicit user consent may violate GDPR.",
        recommendation="Implement proper consent mechanisms before storing user data.",
        code_location="Data storage without consent mechanism",
    ),
)


def perform_security_scan(code: str) -> list[SecurityFinding]:
    """Run every scan rule over a code blob, in table order.

    Finding ids are numbered per scan: ``sec-1``, ``sec-2``, ...
    """
    fired = [rule for rule in SCAN_RULES if rule.fires(code)]
    return [
        SecurityFinding(
            id=f"sec-{n}",
            type=rule.type,
            severity=rule.severity,
            description=rule.description,
            recommendation=rule.recommendation,
            code_location=rule.code_location,
        )
        for n, rule in enumerate(fired, start=1)
    ]


@dataclass(frozen=True)
class ComplianceCheck:
    """Passed if ``passes`` matches; else ``failure_status`` if ``risk`` matches.

    With no ``risk`` pattern the check is a warning whenever ``passes`` is absent.
    """

    key: str
    name: str
    description: str
    passes: str
    risk: str | None
    failure_status: ComplianceStatus
    recommendation: str

    def evaluate(self, code: str) -> ComplianceStatus:
        if re.search(self.passes, code, re.IGNORECASE):
            return ComplianceStatus.PASSED
        if self.risk is None:
            return ComplianceStatus.WARNING
        if re.search(self.risk, code, re.IGNORECASE):
            return self.failure_status
        return ComplianceStatus.PASSED


COMPLIANCE_CHECKS: dict[str, tuple[ComplianceCheck, ...]] = {
    "owasp": (
        ComplianceCheck(
            "1",
            "Injection Prevention",
            "Prevent injection flaws (SQL, NoSQL, LDAP, etc.)",
            passes=r"parameterized|prepared statement|sanitize",
            risk=r"SELECT|INSERT|UPDATE|DELETE|exec|eval",
            failure_status=ComplianceStatus.FAILED,
            recommendation="Use parameterized queries, ORM libraries, or input sanitization.",
        ),
        ComplianceCheck(
            "2",
            "Authentication Security",
            "Implement secure authentication practices",
            passes=r"password.{0,10}hash|bcrypt|argon2|pbkdf2",
            risk=r"password|login|auth",
            failure_status=ComplianceStatus.WARNING,
            recommendation=(
                "Use secure password hashing (bcrypt), implement MFA, and session management."
            ),
        ),
        ComplianceCheck(
            "3",
            "Data Protection",
            "Protect sensitive data in transit and at rest",
            passes=r"https|TLS|encrypt|hash",
            risk=r"password|credit|card|ssn|personal",
            failure_status=ComplianceStatus.WARNING,
            recommendation="Use encryption for sensitive data, HTTPS for all communications.",
        ),
        ComplianceCheck(
            "5",
            "Access Control",
            "Implement proper access controls",
            passes=r"authorize|authentication|permission|rbac|acl",
            risk=r"admin|role|permission|restricted",
            failure_status=ComplianceStatus.WARNING,
            recommendation="Implement role-based access control and verify user permissions.",
        ),
        ComplianceCheck(
            "6",
            "Secure Configuration",
            "Use secure configuration practices",
            passes=r"helmet|Content-Security-Policy|X-Frame-Options|X-XSS-Protection",
            risk=None,
            failure_status=ComplianceStatus.WARNING,
            recommendation=(
                "Use security headers, disable directory listings, and remove default accounts."
            ),
        ),
        ComplianceCheck(
            "7",
            "XSS Prevention",
            "Prevent cross-site scripting attacks",
            passes=r"DOMPurify|sanitize|escape|encodeURI",
            risk=r"innerHTML|dangerouslySetInnerHTML",
            failure_status=ComplianceStatus.FAILED,
            recommendation="Use context-aware output encoding and input sanitization.",
        ),
    ),
    "gdpr": (
        ComplianceCheck(
            "1",
            "User Consent",
            "Obtain explicit consent before processing personal data",
            passes=r"consent|gdpr|opt-in|checkbox.{0,20}checked|accept.{0,20}terms",
            risk=r"personal|data|email|name|address|phone|collect",
            failure_status=ComplianceStatus.WARNING,
            recommendation=(
                "Implement clear consent mechanisms before collecting any personal data."
            ),
        ),
        ComplianceCheck(
            "2",
            "Data Access Rights",
            "Allow users to access their personal data",
            passes=r"download.{0,20}data|export.{0,20}data|access.{0,20}data",
            risk=None,
            failure_status=ComplianceStatus.WARNING,
            recommendation="Implement functionality allowing users to export their personal data.",
        ),
        ComplianceCheck(
            "3",
            "Data Deletion Rights",
            "Allow users to request deletion of their data",
            passes=r"delete.{0,20}account|remove.{0,20}data|forget.{0,20}me",
            risk=None,
            failure_status=ComplianceStatus.WARNING,
            recommendation=(
                "Implement functionality allowing users to delete their accounts and data."
            ),
        ),
        ComplianceCheck(
            "4",
            "Breach Notification",
            "Capability to notify users of data breaches",
            passes=r"notification|alert|email.{0,20}users|notify",
            risk=None,
            failure_status=ComplianceStatus.WARNING,
            recommendation=(
                "Implement systems to detect and notify users of potential data breaches."
            ),
        ),
    ),
}

SUPPORTED_STANDARDS = tuple(COMPLIANCE_CHECKS)


def perform_compliance_check(code: str, standard: str = "owasp") -> list[ComplianceRequirement]:
    """Evaluate a named standard's checks. Unknown standards yield no requirements."""
    checks = COMPLIANCE_CHECKS.get(standard.lower(), ())
    return [
        ComplianceRequirement(
            id=f"comp-{standard.lower()}-{check.key}",
            name=check.name,
            description=check.description,
            status=check.evaluate(code),
            recommendation=check.recommendation,
        )
        for check in checks
    ]


def overall_risk_level(
    findings: Sequence[SecurityFinding],
    requirements: Sequence[ComplianceRequirement],
) -> str:
    """Critical, High, Medium or Low."""
    vulns = [f for f in findings if f.type is FindingType.VULNERABILITY]
    critical = sum(1 for f in vulns if f.severity is Severity.CRITICAL)
    high = sum(1 for f in vulns if f.severity is Severity.HIGH)
    medium = sum(1 for f in vulns if f.severity is Severity.MEDIUM)
    failed = sum(1 for r in requirements if r.status is ComplianceStatus.FAILED)
    warnings = sum(1 for r in requirements if r.status is ComplianceStatus.WARNING)

    if critical > 0 or failed > 2 or high > 2:
        return "Critical"
    if high > 0 or failed > 0 or medium > 3:
        return "High"
    if medium > 0 or warnings > 3:
        return "Medium"
    return "Low"


def _finding_details(findings: Sequence[SecurityFinding]) -> list[str]:
    lines: list[str] = []
    for finding in findings:
        lines.append(f"#### {finding.description}\n\n")
        lines.append(f"- **Location:** {finding.code_location}\n")
        lines.append(f"- **Recommendation:** {finding.recommendation}\n\n")
    return lines


def generate_security_report(
    findings: Sequence[SecurityFinding],
    requirements: Sequence[ComplianceRequirement],
    generated_at: datetime | None = None,
) -> str:
    """Markdown security assessment from scan findings and compliance results."""
    generated_at = generated_at or datetime.now()
    report = ["# Security Assessment Report\n\n"]
    report.append(f"Report generated on: {generated_at:%Y-%m-%d %H:%M:%S}\n\n")

    vulns_by_severity = {
        severity: [
            f for f in findings if f.type is FindingType.VULNERABILITY and f.severity is severity
        ]
        for severity in Severity
    }
    best_practice = [f for f in findings if f.type is FindingType.BEST_PRACTICE]
    compliance = [f for f in findings if f.type is FindingType.COMPLIANCE]
    by_status = {
        status: [r for r in requirements if r.status is status] for status in ComplianceStatus
    }

    report.append("## Summary\n\n")
    report.append("### Vulnerabilities\n\n")
    for severity in Severity:
        report.append(f"- {severity.value.capitalize()}: {len(vulns_by_severity[severity])}\n")
    report.append("\n")
    report.append(f"- Best Practice Issues: {len(best_practice)}\n")
    report.append(f"- Compliance Issues: {len(compliance)}\n\n")

    report.append("### Compliance Status\n\n")
    for status in ComplianceStatus:
        report.append(f"- {status.value.capitalize()}: {len(by_status[status])}\n")
    report.append("\n")

    report.append(f"**Overall Risk Level: {overall_risk_level(findings, requirements)}**\n\n")

    if findings:
        report.append("## Detailed Findings\n\n")
        for severity in Severity:
            if vulns_by_severity[severity]:
                report.append(f"### {severity.value.capitalize()} Vulnerabilities\n\n")
                report.extend(_finding_details(vulns_by_severity[severity]))
        if best_practice:
            report.append("### Best Practice Issues\n\n")
            report.extend(_finding_details(best_practice))
        if compliance:
            report.append("### Compliance Issues\n\n")
            report.extend(_finding_details(compliance))

    if requirements:
        report.append("## Compliance Requirements\n\n")
        for status, heading in (
            (ComplianceStatus.FAILED, "Failed Requirements"),
            (ComplianceStatus.WARNING, "Warning Requirements"),
        ):
            if by_status[status]:
                report.append(f"### {heading}\n\n")
                for req in by_status[status]:
                    report.append(f"#### {req.name}\n\n")
                    report.append(f"- **Description:** {req.description}\n")
                    report.append(f"- **Recommendation:** {req.recommendation}\n\n")
        if by_status[ComplianceStatus.PASSED]:
            report.append("### Passed Requirements\n\n")
            for req in by_status[ComplianceStatus.PASSED]:
                report.append(f"- **{req.name}:** {req.description}\n")
            report.append("\n")

    report.append("## Recommendations\n\n")
    report.append("Based on the findings, we recommend the following actions:\n\n")

    if vulns_by_severity[Severity.CRITICAL]:
        report.append("### Immediate Actions\n\n")
        for finding in vulns_by_severity[Severity.CRITICAL]:
            report.append(f"- {finding.recommendation}\n")
        report.append("\n")

    if vulns_by_severity[Severity.HIGH] or by_status[ComplianceStatus.FAILED]:
        report.append("### High Priority Actions\n\n")
        for finding in findings:
            if finding.severity is Severity.HIGH:
                report.append(f"- {finding.recommendation}\n")
        for req in by_status[ComplianceStatus.FAILED]:
            report.append(f"- {req.recommendation}\n")
        report.append("\n")

    report.append("### General Recommendations\n\n")
    report.append("- Implement regular security reviews as part of the development process.\n")
    report.append("- Conduct security training for developers.\n")
    report.append("- Integrate automated security scanning into the CI/CD pipeline.\n")
    report.append("- Establish a security incident response process.\n\n")

    return "".join(report)


SECURITY_GUIDANCE = """\
## Security Review Checkpoints

1. **Design review** - threat-model checkout, payment and account flows before implementation
2. **Code review** - run the security scan on every change touching authentication, payments or user data
3. **Pre-release** - check OWASP and GDPR compliance and resolve every failed requirement
4. **Post-release** - monitor dependencies for new vulnerabilities and rotate credentials regularly

Share code with me and I can run a security scan and compliance check against OWASP or GDPR."""
