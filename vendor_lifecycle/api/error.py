from fastapi import status

from vendor_lifecycle.domain import errors
from vendor_lifecycle.libs.result import Error

# Business error code -> HTTP status for the client
ERROR_STATUS = {
    errors.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    errors.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    errors.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    errors.CONSUMED_TOKEN: status.HTTP_409_CONFLICT,
    errors.ALREADY_LINKED: status.HTTP_409_CONFLICT,
    errors.CONFLICT: status.HTTP_409_CONFLICT,
    errors.DUPLICATE_COMPANY: status.HTTP_409_CONFLICT,
    errors.EXPIRED_TOKEN: status.HTTP_410_GONE,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Turn a use case error into the exception the app handlers render"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
