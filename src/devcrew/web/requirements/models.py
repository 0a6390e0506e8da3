"""Requirements and security Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RequirementsUpload(BaseModel):
    markdown: str = Field(min_length=1)


class RequirementsSummary(BaseModel):
    summary: str
    task_count: int


class SecurityScanRequest(BaseModel):
    code: str
    standard: str | None = None  # owasp or gdpr; configured default when omitted


class FindingResponse(BaseModel):
    id: str
    type: str
    severity: str
    description: str
    recommendation: str
    code_location: str


class RequirementResponse(BaseModel):
    id: str
    name: str
    description: str
    status: str
    recommendation: str


class SecurityScanResponse(BaseModel):
    findings: list[FindingResponse]
    requirements: list[RequirementResponse]
    report: str
