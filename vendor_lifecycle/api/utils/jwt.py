"""
Identity directory adapter.

Principals authenticate elsewhere; this service only verifies the signed
bearer token and reads principal_id, role and email from it.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig
from vendor_lifecycle.domain.entities import Principal, PrincipalRole


def create_access_token(
    principal_id: UUID,
    role: str,
    email: Optional[str] = None,
    expires_delta: timedelta = timedelta(minutes=15),
) -> str:
    """
    Create JWT access token

    Args:
        principal_id: Principal UUID
        role: admin or vendor
        email: Principal email (optional)
        expires_delta: Token expiration duration

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "principal_id": str(principal_id),
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    if email:
        payload["email"] = email
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        return jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
    except JWTError:
        return None


def principal_from_claims(payload: dict) -> Optional[Principal]:
    """Build a Principal from verified claims, None if they are malformed"""
    try:
        return Principal(
            id=UUID(payload["principal_id"]),
            role=PrincipalRole(payload["role"]),
            email=payload.get("email"),
        )
    except (KeyError, ValueError, TypeError):
        return None
