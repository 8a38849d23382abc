from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from vendor_lifecycle.api.error import raise_for_error
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.companies import CompanyCommand
from vendor_lifecycle.app.use_cases.invitations import (
    InspectInvitationResponse,
    InspectInvitationUseCase,
    IssueInvitationResponse,
    IssueInvitationUseCase,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from vendor_lifecycle.depends import get_current_principal, get_unit_of_work
from vendor_lifecycle.domain.entities import Principal

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class IssueInvitationRequest(BaseModel):
    """
    Issue invitation HTTP request payload

    Either vendor_company_id of an existing company, or company details
    for a new one.
    """

    invited_email: EmailStr = Field(..., description="Contact receiving the invitation")
    vendor_company_id: Optional[UUID] = None
    company: Optional[CompanyCommand] = None


class TokenRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Invitation token")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=IssueInvitationResponse,
)
async def issue_invitation(
    request: IssueInvitationRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue Invitation

    Creates a single-use invitation valid for INVITATION_TTL_DAYS.
    The token in the response is shown once and must be delivered by the
    email sender.

    Raises:
        - 400 Bad Request: INVALID_REQUEST
        - 403 Forbidden: UNAUTHORIZED (not an admin)
        - 404 Not Found: NOT_FOUND (unknown company)
        - 409 Conflict: DUPLICATE_COMPANY
    """
    use_case = IssueInvitationUseCase(
        uow,
        ttl=timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS),
        link_base=ApplicationConfig.INVITATION_LINK_BASE or None,
    )
    result = await use_case.execute(
        principal,
        request.invited_email,
        vendor_company_id=request.vendor_company_id,
        company=request.company,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/inspect",
    status_code=status.HTTP_200_OK,
    response_model=InspectInvitationResponse,
)
async def inspect_invitation(
    request: TokenRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Inspect Invitation

    Reports pending / consumed / expired without consuming the token.

    Raises:
        - 404 Not Found: NOT_FOUND
    """
    use_case = InspectInvitationUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/redeem",
    status_code=status.HTTP_200_OK,
    response_model=RedeemInvitationResponse,
)
async def redeem_invitation(
    request: TokenRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Redeem Invitation

    Called from the authentication callback. Burns the token and links the
    principal to the invited company in one transaction.

    Raises:
        - 403 Forbidden: UNAUTHORIZED (not a vendor)
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CONSUMED_TOKEN, ALREADY_LINKED
        - 410 Gone: EXPIRED_TOKEN
    """
    use_case = RedeemInvitationUseCase(uow)
    result = await use_case.execute(request.token, principal)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
