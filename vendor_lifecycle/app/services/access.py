"""
Helpers that put the access gate in front of a use case.

Status is always read through the caller's unit of work, so a mutating use
case authorizes against the same transaction it writes in.
"""

from typing import Optional, Tuple

from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.access_gate import authorize
from vendor_lifecycle.domain.entities import (
    Capability,
    Principal,
    PrincipalCompanyLink,
    VendorCompany,
    VendorStatus,
)
from vendor_lifecycle.libs.result import Error


async def load_linked_company(
    uow: UnitOfWork, principal: Principal
) -> Tuple[Optional[PrincipalCompanyLink], Optional[VendorCompany]]:
    link = await uow.links.get_by_principal_id(principal.id)
    if link is None:
        return None, None
    company = await uow.companies.get_by_id(link.vendor_company_id)
    return link, company


def require_capability(
    principal: Principal,
    capability: Capability,
    company_status: Optional[VendorStatus] = None,
) -> Optional[Error]:
    """None when allowed, otherwise an UNAUTHORIZED error carrying the deny reason"""
    decision = authorize(principal, capability, company_status)
    if decision.allowed:
        return None
    return Error(errors.UNAUTHORIZED, decision.reason)
