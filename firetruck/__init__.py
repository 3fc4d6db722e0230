"""FireTruck API v1 client for Python."""

from .client import Client
from .config import ClientConfig, Config
from .exceptions import (
    ConfigurationError,
    FireTruckError,
    InvalidArgument,
    ResponseException,
    TransportError,
)
from .http_client import HttpClient
from .request_builder import HttpMethod, RequestSpec, build_request, merge_options
from .response import ApiResponse, normalize_response
from .result import Err, Ok, Result

__version__ = "1.0.0"

__all__ = [
    "ApiResponse",
    "Client",
    "ClientConfig",
    "Config",
    "ConfigurationError",
    "Err",
    "FireTruckError",
    "HttpClient",
    "HttpMethod",
    "InvalidArgument",
    "Ok",
    "RequestSpec",
    "ResponseException",
    "Result",
    "TransportError",
    "build_request",
    "merge_options",
    "normalize_response",
]
