"""
Vendor Company Use Cases

Creation, self-service submission, lifecycle transitions and lookups.
"""

from .begin_onboarding_use_case import BeginOnboardingUseCase
from .create_company_use_case import CreateCompanyUseCase
from .dtos import (
    BeginOnboardingResponse,
    CompanyCommand,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanySummary,
    SubmitProfileResponse,
)
from .get_company_use_case import GetCompanyUseCase, ListCompaniesUseCase
from .submit_profile_use_case import SubmitProfileUseCase
from .transition_status_use_case import TransitionStatusUseCase

__all__ = [
    "BeginOnboardingUseCase",
    "CreateCompanyUseCase",
    "GetCompanyUseCase",
    "ListCompaniesUseCase",
    "SubmitProfileUseCase",
    "TransitionStatusUseCase",
    "BeginOnboardingResponse",
    "CompanyCommand",
    "CompanyDetailResponse",
    "CompanyListResponse",
    "CompanySummary",
    "SubmitProfileResponse",
]
