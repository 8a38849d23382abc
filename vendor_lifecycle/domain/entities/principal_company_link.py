"""
PrincipalCompanyLink Entity

Binds an authenticated principal to the vendor company it represents.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from vendor_lifecycle.domain.base import utcnow


class PrincipalCompanyLink(SQLModel, table=True):
    """
    PrincipalCompanyLink entity - one principal, one vendor company.

    Business Rules:
    - principal_id is unique: a vendor employee represents one organization
    - Created by invitation redemption (invitation_id set) or by
      self-service profile submission (invitation_id null)
    """

    __tablename__ = "principal_company_links"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    principal_id: UUID = Field(nullable=False)
    vendor_company_id: UUID = Field(foreign_key="vendor_companies.id", index=True)
    invitation_id: Optional[UUID] = Field(default=None, foreign_key="invitations.id")

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_link_principal", "principal_id", unique=True),
    )
