# cinelog/core/exceptions.py

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_detail(self) -> Any:
        return self.message


class ValidationFailed(ServiceError):
    status_code = 400


class ConflictError(ServiceError):
    """Uniqueness violation (email, list name, movie already in list)"""

    status_code = 400


class AuthenticationFailed(ServiceError):
    status_code = 401


class PermissionDenied(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class UpstreamError(ServiceError):
    """TMDB call failed. Carries the upstream status when there was a response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        tmdb_status_code: Optional[int] = None,
    ):
        super().__init__(message, status_code or 500)
        self.tmdb_status_code = tmdb_status_code

    def to_detail(self) -> Dict[str, Any]:
        detail: Dict[str, Any] = {"message": self.message}
        if self.tmdb_status_code is not None:
            detail["tmdb_status_code"] = self.tmdb_status_code
        return detail
