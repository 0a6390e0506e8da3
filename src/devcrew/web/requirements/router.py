"""Requirements document and security scan routes."""

from __future__ import annotations

from fastapi import APIRouter

from ...manager.security import SUPPORTED_STANDARDS
from ..deps import Manager
from .models import (
    RequirementsSummary,
    RequirementsUpload,
    SecurityScanRequest,
    SecurityScanResponse,
)

router = APIRouter(prefix="/api", tags=["requirements"])


@router.post("/requirements", response_model=RequirementsSummary)
async def upload_requirements(body: RequirementsUpload, manager: Manager):
    summary = manager.process_markdown(body.markdown)
    return RequirementsSummary(summary=summary, task_count=len(manager.project.parsed_tasks))


@router.get("/requirements/assignments")
async def get_assignments(manager: Manager) -> dict[str, list[str]]:
    return {
        category.value: [task.title for task in tasks]
        for category, tasks in manager.project.assigned_tasks.items()
    }


@router.get("/requirements/tasks")
async def get_tasks(manager: Manager) -> list[dict]:
    return [task.to_dict() for task in manager.project.parsed_tasks]


@router.post("/security/scan", response_model=SecurityScanResponse)
async def security_scan(body: SecurityScanRequest, manager: Manager):
    standard = (body.standard or manager.reports.compliance_standard).lower()
    if standard not in SUPPORTED_STANDARDS:
        raise ValueError(f"Unknown compliance standard: {standard}")

    findings = manager.perform_security_scan(body.code)
    requirements = manager.perform_compliance_check(body.code, standard)
    return SecurityScanResponse(
        findings=[f.to_dict() for f in findings],
        requirements=[r.to_dict() for r in requirements],
        report=manager.generate_security_report(findings, requirements),
    )
