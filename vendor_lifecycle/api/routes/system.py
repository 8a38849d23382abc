"""
System API Routes - Scheduled/internal jobs

Authentication is via system API key, not user JWTs. Calls here act with
the system actor role.
"""

from fastapi import APIRouter, Depends, status

from vendor_lifecycle.api.error import raise_for_error
from vendor_lifecycle.api.utils.system_auth import verify_system_api_key
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.invitations import (
    ExpireInvitationsResponse,
    ExpireInvitationsUseCase,
)
from vendor_lifecycle.depends import get_unit_of_work

router = APIRouter(prefix="/system", tags=["System"])


@router.post(
    "/invitations/expire",
    status_code=status.HTTP_200_OK,
    response_model=ExpireInvitationsResponse,
    dependencies=[Depends(verify_system_api_key)],
)
async def expire_invitations(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Expire Invitations

    Rejects profile_pending companies whose invitations all expired unused.

    Requires: X-System-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid system API key
    """
    use_case = ExpireInvitationsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
