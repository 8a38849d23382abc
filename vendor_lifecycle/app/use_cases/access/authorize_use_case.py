"""
Authorize Use Case

Boundary entry to the access gate: resolves the principal's company status
from its link, then asks the gate.
"""

from typing import Union

from vendor_lifecycle.app.services.access import load_linked_company
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain.access_gate import AccessDecision, authorize
from vendor_lifecycle.domain.entities import Capability, Principal, PrincipalRole

from .dtos import AuthorizeResponse


class AuthorizeUseCase:
    """
    Use case for evaluating one capability request.

    Business Rules:
    - Admin decisions do not depend on any company
    - Vendor decisions use the status of the linked company read here
    - Never fails: a missing link or company is simply a Deny

    The status read here is fine for display decisions; mutating use cases
    re-check the gate inside their own transaction.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, capability: Union[Capability, str]
    ) -> AuthorizeResponse:
        if principal.role == PrincipalRole.admin:
            decision = authorize(principal, capability, None)
            return _to_response(decision)

        async with self.uow:
            link, company = await load_linked_company(self.uow, principal)

            if link is not None and company is None:
                return AuthorizeResponse(
                    capability=str(getattr(capability, "value", capability)),
                    allowed=False,
                    reason="Linked vendor company not found",
                )

            status = company.status if company is not None else None
            return _to_response(authorize(principal, capability, status))


def _to_response(decision: AccessDecision) -> AuthorizeResponse:
    return AuthorizeResponse(
        capability=decision.capability,
        allowed=decision.allowed,
        reason=decision.reason or None,
    )
