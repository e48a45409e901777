"""
violation.py - Pydantic schemas for violation records and API payloads.

Wire and storage field names are camelCase (responsibleOrganization,
reportedAt, hasMore, ...). Inbound report bodies keep the snake_case field
names AI agents already send (responsible_organization, offending_content).
"""

from pydantic import BaseModel, Field

from mcpolice.models.statute import Severity, StatuteInfo


class ViolationDetails(BaseModel):
    """Snapshot of the statute metadata taken at report time."""

    description: str = Field(..., description="Statute description")
    severity: Severity = Field(..., description="LOW | MEDIUM | HIGH | CRITICAL")
    jurisdiction: list[str] = Field(..., description="Jurisdictions of the statute")


class ViolationMetadata(BaseModel):
    reported_at: str = Field(..., alias="reportedAt", description="ISO 8601 report time")
    protocol_version: str = Field(
        ..., alias="protocolVersion", description="Report format version"
    )
    detected_by: str = Field(..., alias="detectedBy", description="Detecting system")

    class Config:
        populate_by_name = True


class ViolationReport(BaseModel):
    """
    Immutable violation record.

    Created exactly once on a successful submission and never modified.
    Removed only by the bulk administrative clear.
    """

    id: str = Field(..., description="Violation identifier")
    timestamp: str = Field(..., description="ISO 8601 creation timestamp")
    statute: str = Field(..., description="Statute article (registry key)")
    responsible_organization: str = Field(
        ..., alias="responsibleOrganization", description="Reporting organization"
    )
    offending_content: str = Field(
        ..., alias="offendingContent", description="Summary of the offending content"
    )
    violation: ViolationDetails
    metadata: ViolationMetadata

    class Config:
        populate_by_name = True


class ReportViolationRequest(BaseModel):
    """
    Inbound violation report.

    Fields are optional at the schema level so that missing values reach
    the service and are reported as a 400 with the list of required fields.
    """

    statute: str | None = Field(None, description="Statute article")
    responsible_organization: str | None = Field(
        None, description="AI system or organization reporting the violation"
    )
    offending_content: str | None = Field(
        None, description="Summary of the offending request or content"
    )


class ReportViolationResponse(BaseModel):
    success: bool = Field(True)
    violation_id: str = Field(..., alias="violationId")
    severity: Severity
    organization: str = Field(..., description="Organization owning the statute")
    message: str

    class Config:
        populate_by_name = True


class ViolationPage(BaseModel):
    """Paginated violation list response."""

    violations: list[ViolationReport] = Field(..., description="Violation records")
    total: int = Field(..., description="Total matching violations")
    has_more: bool = Field(..., alias="hasMore", description="More pages available")

    class Config:
        populate_by_name = True


class ViolationStats(BaseModel):
    """Aggregate counts over all stored violations."""

    total: int
    by_severity: dict[str, int] = Field(default_factory=dict, alias="bySeverity")
    by_jurisdiction: dict[str, int] = Field(default_factory=dict, alias="byJurisdiction")
    by_organization: dict[str, int] = Field(default_factory=dict, alias="byOrganization")
    recent_24h: int = Field(0, alias="recent24h")

    class Config:
        populate_by_name = True


class StatuteRead(BaseModel):
    article: str
    organization: str
    description: str
    severity: Severity
    jurisdiction: list[str]

    @classmethod
    def from_info(cls, info: StatuteInfo) -> "StatuteRead":
        return cls(
            article=info.article,
            organization=info.organization,
            description=info.description,
            severity=info.severity,
            jurisdiction=list(info.jurisdiction),
        )


class StatuteList(BaseModel):
    statutes: list[StatuteRead]


class ClearDataResponse(BaseModel):
    success: bool = True
    message: str
