from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from vendor_lifecycle.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from vendor_lifecycle.api.utils.jwt import principal_from_claims, verify_jwt
from vendor_lifecycle.domain.entities import Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> Principal:
    """
    Dependency to extract and verify the principal from the Authorization header.

    Raises:
        HTTPException: 401 if token is invalid, expired or carries bad claims
    """
    payload = verify_jwt(credentials.credentials)
    principal = principal_from_claims(payload) if payload is not None else None

    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return principal
