"""
Error codes returned by use cases.

Every code is a recoverable, typed outcome. CONFLICT is the only one a caller
retries automatically.
"""

INVALID_TRANSITION = "INVALID_TRANSITION"
UNAUTHORIZED = "UNAUTHORIZED"
CONSUMED_TOKEN = "CONSUMED_TOKEN"
EXPIRED_TOKEN = "EXPIRED_TOKEN"
ALREADY_LINKED = "ALREADY_LINKED"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"
DUPLICATE_COMPANY = "DUPLICATE_COMPANY"
INVALID_REQUEST = "INVALID_REQUEST"

INVITATION_NO_LONGER_VALID = "This invitation is no longer valid"

RETRYABLE = frozenset({CONFLICT})
