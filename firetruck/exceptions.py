"""
Custom exceptions for the FireTruck API client
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response import ApiResponse


class FireTruckError(Exception):
    """Base exception for all FireTruck client errors"""

    pass


class InvalidArgument(FireTruckError, ValueError):
    """
    Raised when the client is called with an invalid argument.

    This includes:
    - Unsupported HTTP methods
    - Wrongly typed values passed to the configuration setters
    """

    pass


class ResponseException(FireTruckError):
    """
    Raised when the FireTruck API answers with a status code other than 200.

    The normalized response is kept so callers can inspect the status code
    and the decoded error body.
    """

    def __init__(self, response: "ApiResponse"):
        self.response = response
        super().__init__(f"FireTruck API returned HTTP {response.status_code}")

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def body(self):
        return self.response.body


class TransportError(FireTruckError):
    """
    Network level failure wrapped for the result API.

    Only produced by ``Client.try_request``; the raising API lets the
    underlying requests exception through untouched.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigurationError(FireTruckError):
    """
    Raised when required configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
