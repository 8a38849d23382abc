from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from vendor_lifecycle.api.error import raise_for_error
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.access import (
    AccessContextResponse,
    AuthorizeResponse,
    AuthorizeUseCase,
    LoadAccessContextUseCase,
)
from vendor_lifecycle.depends import get_current_principal, get_unit_of_work
from vendor_lifecycle.domain.entities import Principal

router = APIRouter(prefix="/me", tags=["Access"])


class AuthorizeRequest(BaseModel):
    capability: str = Field(..., description="Capability name, e.g. upload_document")


@router.get(
    "/access",
    status_code=status.HTTP_200_OK,
    response_model=AccessContextResponse,
)
async def get_access_context(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current role, linked company status and granted capabilities"""
    use_case = LoadAccessContextUseCase(uow)
    result = await use_case.execute(principal)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/authorize",
    status_code=status.HTTP_200_OK,
    response_model=AuthorizeResponse,
)
async def authorize_capability(
    request: AuthorizeRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Authorize

    Always 200: a denial is reported as allowed=false with a reason.
    """
    use_case = AuthorizeUseCase(uow)
    return await use_case.execute(principal, request.capability)
