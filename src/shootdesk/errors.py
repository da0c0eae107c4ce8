"""
Application errors

Every failure in a request ends up as one of these exceptions and is turned
into a JSON envelope ``{"error": ..., "details": ...}`` by the handler
registered in ``shootdesk.main``.
"""

from typing import Any, Optional


class ShootDeskError(Exception):
    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(ShootDeskError):
    status_code = 500


class MalformedRequest(ShootDeskError):
    status_code = 400


class ProviderError(ShootDeskError):
    status_code = 502


class ImageProcessingError(ShootDeskError):
    status_code = 500

    def __init__(self, message: str = "Image processing failed", details: Any = None):
        super().__init__(message, details=details)


class UnexpectedError(ShootDeskError):
    status_code = 500

    def __init__(self, message: str = "Server error", details: Any = None):
        super().__init__(message, details=details)
