"""
violations.py - Violation API endpoints.

RESPONSE CODES:
- 200 OK: report accepted / records returned
- 400 Bad Request: missing fields, unknown statute, malformed body or query
- 404 Not Found: no violation under the id
- 500 Internal Server Error: storage backend failure
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mcpolice.api.deps import get_violation_service
from mcpolice.config import settings
from mcpolice.errors import NotFoundError, UnknownStatuteError, ValidationError
from mcpolice.models.statute import Severity, get_statute_info
from mcpolice.schemas.violation import (
    ReportViolationRequest,
    ReportViolationResponse,
    ViolationPage,
    ViolationReport,
)
from mcpolice.services.violations import ViolationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/report",
    response_model=ReportViolationResponse,
    summary="Report a violation",
)
def report_violation(
    request: ReportViolationRequest,
    service: ViolationService = Depends(get_violation_service),
) -> ReportViolationResponse:
    """
    Submit a violation report.

    The statute must be an exact registry article. The stored record carries
    a snapshot of the statute's description, severity and jurisdiction.
    """
    try:
        record = service.submit(
            statute=request.statute,
            responsible_organization=request.responsible_organization,
            offending_content=request.offending_content,
        )
    except ValidationError as e:
        logger.warning("Report rejected: %s", e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UnknownStatuteError as e:
        logger.warning("Report rejected: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{e.message}. Please use a valid international law statute.",
        )

    statute_info = get_statute_info(record.statute)
    return ReportViolationResponse(
        success=True,
        violation_id=record.id,
        severity=record.violation.severity,
        organization=statute_info.organization,
        message="Violation report received and processed",
    )


@router.get(
    "",
    response_model=ViolationPage,
    summary="List violations with pagination and filters",
)
def list_violations(
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Max results"
    ),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    severity: Severity | None = Query(None, description="Filter by severity"),
    jurisdiction: str | None = Query(None, description="Filter by jurisdiction"),
    service: ViolationService = Depends(get_violation_service),
) -> ViolationPage:
    """Most-recent-first. `total` counts all matches before pagination."""
    result = service.query(
        severity=severity, jurisdiction=jurisdiction, limit=limit, offset=offset
    )
    return ViolationPage(
        violations=result.violations,
        total=result.total,
        has_more=result.has_more,
    )


@router.get(
    "/{violation_id}",
    response_model=ViolationReport,
    summary="Get a single violation",
)
def get_violation(
    violation_id: str,
    service: ViolationService = Depends(get_violation_service),
) -> ViolationReport:
    try:
        return service.get(violation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
