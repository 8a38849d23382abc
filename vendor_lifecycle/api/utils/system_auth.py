"""
System API Key Authentication

Validates the API key used by schedulers and other internal callers that act
as the system (e.g. the invitation expiry sweep).
"""

import secrets

from fastapi import Header, status

from config import ApplicationConfig
from vendor_lifecycle.api.error import ClientError
from vendor_lifecycle.domain import errors
from vendor_lifecycle.libs.result import Error


async def verify_system_api_key(x_system_api_key: str = Header(None)):
    """
    Verify system API key from X-System-API-Key header.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_system_api_key:
        raise ClientError(
            Error(errors.UNAUTHORIZED, "System API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not secrets.compare_digest(x_system_api_key, ApplicationConfig.SYSTEM_API_KEY):
        raise ClientError(
            Error(errors.UNAUTHORIZED, "Invalid system API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
