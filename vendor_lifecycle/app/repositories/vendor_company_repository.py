from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from vendor_lifecycle.domain.entities import VendorCompany, VendorStatus


class IVendorCompanyRepository(ABC):
    """VendorCompany repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, company_id: UUID) -> Optional[VendorCompany]:
        """Get company by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, company_email: str) -> Optional[VendorCompany]:
        """Get company by its unique contact email"""
        pass

    @abstractmethod
    async def list(self, status: Optional[VendorStatus] = None) -> List[VendorCompany]:
        """List companies, optionally filtered by status"""
        pass

    @abstractmethod
    async def create(self, company: VendorCompany) -> Optional[VendorCompany]:
        """Create a new company, None if company_email is already registered"""
        pass

    @abstractmethod
    async def compare_and_set_status(
        self,
        company_id: UUID,
        expected: VendorStatus,
        target: VendorStatus,
        status_timestamps: Dict[str, str],
        rejection_reason: Optional[str] = None,
    ) -> bool:
        """
        Move company to ``target`` only if it is still in ``expected``.

        Returns False when another writer changed the status first.
        """
        pass
