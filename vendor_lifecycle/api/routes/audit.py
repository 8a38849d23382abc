from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from vendor_lifecycle.api.error import raise_for_error
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.audit import AuditEventsResponse, GetAuditEventsUseCase
from vendor_lifecycle.depends import get_current_principal, get_unit_of_work
from vendor_lifecycle.domain.entities import Principal

router = APIRouter(prefix="/companies", tags=["Audit"])


@router.get(
    "/{company_id}/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    company_id: UUID,
    limit: int = Query(50, ge=1, le=200),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Company Audit Trail (admin)

    Raises:
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: NOT_FOUND
    """
    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(principal, company_id, limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
