"""
admin.py - Administrative endpoints.

clear-data is the only way violations are ever removed.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from mcpolice.api.deps import get_violation_service
from mcpolice.errors import StoreError
from mcpolice.schemas.violation import ClearDataResponse
from mcpolice.services.violations import ViolationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete(
    "/clear-data",
    response_model=ClearDataResponse,
    summary="Delete every stored violation",
)
def clear_data(service: ViolationService = Depends(get_violation_service)) -> ClearDataResponse:
    """
    Delete all records and the index.

    A backend failure part-way leaves some records deleted; nothing is
    rolled back.
    """
    try:
        count = service.clear()
    except StoreError:
        logger.exception("Clear-data failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to clear data",
        )

    return ClearDataResponse(
        success=True, message=f"Cleared {count} violations from database"
    )
