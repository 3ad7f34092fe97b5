"""Portal exceptions with clear error boundaries

This module defines the exceptions used throughout the controller.
Each exception maps to one failure class with its own user-facing treatment:

- LocalValidationError: input rejected before any network call
- ApplicationError: backend answered but reported failure
- TransportError: no usable response from the backend
"""

from typing import Any, Dict, Optional


class PortalException(Exception):
    """Base exception with error details"""
    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class LocalValidationError(PortalException):
    """Input validation errors caught before submission"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message, {"field": field})


class ApplicationError(PortalException):
    """Backend responded with a failure status"""
    def __init__(
        self,
        message: str,
        status_code: int,
        payload: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.payload = payload or {}
        super().__init__(message, {"status_code": status_code})


class SystemException(PortalException):
    """System technical errors"""
    def __init__(
        self,
        message: str,
        code: str,
        service: str,
        action: str
    ):
        self.code = code
        details = {
            "code": code,
            "service": service,
            "action": action
        }
        super().__init__(message, details)


class TransportError(SystemException):
    """No usable response: connection failure or unreadable body"""
    pass


class ConfigurationException(SystemException):
    """Invalid controller wiring"""
    pass
