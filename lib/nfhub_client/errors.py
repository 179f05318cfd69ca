from __future__ import annotations


class NfhubClientError(Exception):
    """Base client error."""


class NetworkError(NfhubClientError):
    """Transport/network layer error."""


class ConfigurationError(NfhubClientError):
    """Client is not configured well enough to build a request."""


class ValidationError(NfhubClientError, ValueError):
    """Required input missing, detected before any request is sent."""


class ApiError(NfhubClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ApiMessageError(ApiError):
    """API answered with a `message` field."""


class ApiErrorsListError(ApiError):
    """API answered non-200 with an `errors` list."""


class ApiUnclassifiedError(ApiError):
    """Non-200 answer matching no known error shape."""
