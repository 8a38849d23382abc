"""
Principal

Authenticated actor handed to the core by the identity directory.
Not persisted here.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .enums import PrincipalRole


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    role: PrincipalRole
    email: Optional[str] = None
