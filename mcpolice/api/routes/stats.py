from fastapi import APIRouter, Depends

from mcpolice.api.deps import get_violation_service
from mcpolice.schemas.violation import ViolationStats
from mcpolice.services.violations import ViolationService

router = APIRouter()


@router.get("", response_model=ViolationStats, summary="Aggregate violation statistics")
def get_stats(service: ViolationService = Depends(get_violation_service)) -> ViolationStats:
    """Counts by severity, jurisdiction and organization, plus the last 24 hours."""
    return service.stats()
