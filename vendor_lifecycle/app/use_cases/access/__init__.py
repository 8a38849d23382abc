"""
Access Use Cases

Capability checks and the current principal's access context.
"""

from .authorize_use_case import AuthorizeUseCase
from .dtos import AccessContextResponse, AuthorizeResponse
from .load_access_context_use_case import LoadAccessContextUseCase

__all__ = [
    "AuthorizeUseCase",
    "LoadAccessContextUseCase",
    "AccessContextResponse",
    "AuthorizeResponse",
]
