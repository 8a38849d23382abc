from fastapi import APIRouter, Depends, status

from vendor_lifecycle.api.error import raise_for_error
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.companies import (
    BeginOnboardingResponse,
    BeginOnboardingUseCase,
    CompanyCommand,
    SubmitProfileResponse,
    SubmitProfileUseCase,
)
from vendor_lifecycle.depends import get_current_principal, get_unit_of_work
from vendor_lifecycle.domain.entities import Principal

router = APIRouter(prefix="/vendor", tags=["Vendor"])


@router.post(
    "/profile",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmitProfileResponse,
)
async def submit_profile(
    request: CompanyCommand,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Vendor Profile (self-service)

    Creates the company in profile_pending and links the caller to it.

    Raises:
        - 403 Forbidden: UNAUTHORIZED (not a vendor)
        - 409 Conflict: ALREADY_LINKED, DUPLICATE_COMPANY
    """
    use_case = SubmitProfileUseCase(uow)
    result = await use_case.execute(principal, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/onboarding/start",
    status_code=status.HTTP_200_OK,
    response_model=BeginOnboardingResponse,
)
async def begin_onboarding(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Begin Onboarding

    First call after profile approval moves the company to
    onboarding_in_progress; later calls report the current status.

    Raises:
        - 403 Forbidden: UNAUTHORIZED (status does not allow onboarding)
        - 404 Not Found: NOT_FOUND (no linked company)
        - 409 Conflict: CONFLICT
    """
    use_case = BeginOnboardingUseCase(uow)
    result = await use_case.execute(principal)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
