from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from vendor_lifecycle.app.repositories.vendor_company_repository import (
    IVendorCompanyRepository,
)
from vendor_lifecycle.domain.entities import VendorCompany, VendorStatus


class VendorCompanyRepository(IVendorCompanyRepository):
    """VendorCompany repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: UUID) -> Optional[VendorCompany]:
        """Get company by ID"""
        stmt = select(VendorCompany).where(VendorCompany.id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, company_email: str) -> Optional[VendorCompany]:
        """Get company by its unique contact email"""
        stmt = select(VendorCompany).where(VendorCompany.company_email == company_email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self, status: Optional[VendorStatus] = None) -> List[VendorCompany]:
        """List companies, optionally filtered by status"""
        stmt = select(VendorCompany)
        if status is not None:
            stmt = stmt.where(VendorCompany.status == status)
        stmt = stmt.order_by(VendorCompany.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, company: VendorCompany) -> Optional[VendorCompany]:
        """Create a new company, None if company_email is already registered"""
        self.session.add(company)
        try:
            await self.session.flush()
        except IntegrityError:
            # unique company_email rejected a concurrent registration
            return None
        await self.session.refresh(company)
        return company

    async def compare_and_set_status(
        self,
        company_id: UUID,
        expected: VendorStatus,
        target: VendorStatus,
        status_timestamps: Dict[str, str],
        rejection_reason: Optional[str] = None,
    ) -> bool:
        """Conditional status update guarded by the status the caller read"""
        values = {"status": target, "status_timestamps": status_timestamps}
        if rejection_reason is not None:
            values["rejection_reason"] = rejection_reason
        stmt = (
            update(VendorCompany)
            .where(VendorCompany.id == company_id, VendorCompany.status == expected)
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
