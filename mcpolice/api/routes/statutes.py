from fastapi import APIRouter, Depends

from mcpolice.api.deps import get_violation_service
from mcpolice.schemas.violation import StatuteList, StatuteRead
from mcpolice.services.violations import ViolationService

router = APIRouter()


@router.get("", response_model=StatuteList, summary="List reportable statutes")
def list_statutes(service: ViolationService = Depends(get_violation_service)) -> StatuteList:
    return StatuteList(
        statutes=[StatuteRead.from_info(s) for s in service.list_statutes()]
    )
