from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from vendor_lifecycle.api.error import raise_for_error
from vendor_lifecycle.app.services.lifecycle_state_machine import TransitionResult
from vendor_lifecycle.app.services.retry import run_with_conflict_retry
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.companies import (
    CompanyCommand,
    CompanyDetailResponse,
    CompanyListResponse,
    CreateCompanyUseCase,
    GetCompanyUseCase,
    ListCompaniesUseCase,
    TransitionStatusUseCase,
)
from vendor_lifecycle.depends import get_current_principal, get_unit_of_work
from vendor_lifecycle.domain.entities import Principal

router = APIRouter(prefix="/companies", tags=["Companies"])


class TransitionRequest(BaseModel):
    """
    Transition status HTTP request payload

    document_completion is the percentage of required documents accepted,
    as reported by the document service.
    """

    target_status: str = Field(..., description="Status to move the company to")
    reason: Optional[str] = Field(None, max_length=500)
    document_completion: Optional[int] = Field(None, ge=0, le=100)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyDetailResponse,
)
async def create_company(
    request: CompanyCommand,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Vendor Company (admin)

    Raises:
        - 403 Forbidden: UNAUTHORIZED
        - 409 Conflict: DUPLICATE_COMPANY
    """
    use_case = CreateCompanyUseCase(uow)
    result = await use_case.execute(principal, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CompanyListResponse,
)
async def list_companies(
    status_filter: Optional[str] = Query(None, alias="status"),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Vendor Companies (admin)

    Raises:
        - 400 Bad Request: INVALID_REQUEST (unknown status)
        - 403 Forbidden: UNAUTHORIZED
    """
    use_case = ListCompaniesUseCase(uow)
    result = await use_case.execute(principal, status_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{company_id}",
    status_code=status.HTTP_200_OK,
    response_model=CompanyDetailResponse,
)
async def get_company(
    company_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Vendor Company Detail (admin)

    Includes status timestamps and the lifecycle timeline.

    Raises:
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: NOT_FOUND
    """
    use_case = GetCompanyUseCase(uow)
    result = await use_case.execute(principal, company_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{company_id}/transitions",
    status_code=status.HTTP_200_OK,
    response_model=TransitionResult,
)
async def transition_status(
    company_id: UUID,
    request: TransitionRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Transition Vendor Status (admin)

    CONFLICT outcomes are retried up to CONFLICT_RETRY_ATTEMPTS times.

    Raises:
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION, CONFLICT
    """
    use_case = TransitionStatusUseCase(uow)
    result = await run_with_conflict_retry(
        lambda: use_case.execute(
            principal,
            company_id,
            request.target_status,
            reason=request.reason,
            document_completion=request.document_completion,
        ),
        attempts=ApplicationConfig.CONFLICT_RETRY_ATTEMPTS,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
